import tempfile
import unittest
from datetime import date
from pathlib import Path
from fastapi.testclient import TestClient
from mealplan.api.api_run import create_app
from mealplan.infra.Plan_Repository import PlanRepository


class TestMealPlanAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.storage = Path(self._tmp.name)
        self.client = TestClient(create_app(self.storage, date(2023, 1, 2)))

    def tearDown(self):
        self._tmp.cleanup()

    def _add(self, **overrides):
        body = {"meal_type": "dinner", "day": "Monday", "cook": "John", "description": "Pasta"}
        body.update(overrides)
        return self.client.post("/api/meals", json=body)

    def test_empty_plan(self):
        resp = self.client.get("/api/plan")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["week_start_date"], "2023-01-02")
        self.assertEqual(data["total_meals"], 0)

    def test_add_and_summary(self):
        resp = self._add()
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["meal"]["meal_type"], "Dinner")
        data = self.client.get("/api/plan").json()
        self.assertEqual(data["total_meals"], 1)
        self.assertEqual(data["days"][0]["day"], "Monday")
        self.assertEqual(len(PlanRepository(self.storage).load()), 1)

    def test_add_duplicate(self):
        self._add()
        resp = self._add(description="Pizza")
        self.assertEqual(resp.status_code, 409)
        resp = self.client.post("/api/meals?replace=true",
                                json={"meal_type": "Dinner", "day": "monday", "cook": "Jane", "description": "Pizza"})
        self.assertEqual(resp.status_code, 200)
        plan = PlanRepository(self.storage).load()
        self.assertEqual([m.description for m in plan], ["Pizza"])

    def test_invalid_input(self):
        self.assertEqual(self._add(meal_type="Brunch").status_code, 400)
        self.assertEqual(self._add(day="Someday").status_code, 400)

    def test_update(self):
        self._add()
        resp = self.client.put("/api/meals/Dinner/Monday", json={"cook": "Alice"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["meal"], {
            "meal_type": "Dinner", "day": {"Weekday": "Mon"}, "cook": "Alice", "description": "Pasta"})
        self.assertEqual(self.client.put("/api/meals/Lunch/Monday", json={}).status_code, 404)

    def test_delete_last_needs_confirm(self):
        self._add()
        self.assertEqual(self.client.delete("/api/meals/Dinner/Monday").status_code, 409)
        resp = self.client.delete("/api/meals/Dinner/Monday?confirm=true")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["remaining"], 0)
        self.assertEqual(self.client.delete("/api/meals/Dinner/Monday").status_code, 404)

    def test_corrupt_plan_left_untouched(self):
        plan_path = self.storage / "meal_plan.json"
        plan_path.write_text("{broken", encoding="utf-8")
        self.assertEqual(self.client.get("/api/plan").status_code, 500)
        self.assertEqual(self._add().status_code, 500)
        self.assertEqual(plan_path.read_text(encoding="utf-8"), "{broken")

    def test_exports(self):
        self._add()
        ics = self.client.get("/api/export/ical")
        self.assertEqual(ics.status_code, 200)
        self.assertIn("SUMMARY:Dinner: Pasta", ics.text)
        md = self.client.get("/api/export/markdown")
        self.assertIn("## Monday", md.text)
        js = self.client.get("/api/export/json")
        self.assertEqual(js.json()["meals"][0]["cook"], "John")
        pdf = self.client.get("/api/export/pdf")
        self.assertEqual(pdf.headers["content-type"], "application/pdf")
        self.assertTrue(pdf.content.startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
