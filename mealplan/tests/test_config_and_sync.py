import json
import tempfile
import unittest
from datetime import date
from pathlib import Path
from mealplan.domain.Config import Config
from mealplan.domain.Day import Day
from mealplan.domain.Meal import Meal
from mealplan.domain.MealType import MealType
from mealplan.domain.Plan import MealPlan
from mealplan.domain.errors import StorageReadError, UnsupportedOperation
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.utilities.export_import import sync_plan


class TestConfig(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_save_and_load(self):
        config = Config(storage_path=self.dir / "plans", current_week_start_date=date(2023, 1, 2))
        path = config.save(self.dir / "config.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        self.assertEqual(data["meal_plan_storage_path"], str(self.dir / "plans"))
        self.assertEqual(data["current_week_start_date"], "2023-01-02")
        self.assertEqual(Config.load(path), config)

    def test_default(self):
        config = Config.default(self.dir)
        self.assertEqual(config.storage_path, self.dir)
        self.assertEqual(config.current_week_start_date, date.today())

    def test_load_errors(self):
        with self.assertRaises(StorageReadError):
            Config.load(self.dir / "missing.json")
        bad = self.dir / "bad.json"
        bad.write_text('{"current_week_start_date": "yesterday"}', encoding="utf-8")
        with self.assertRaises(StorageReadError):
            Config.load(bad)


class TestSync(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.storage = Path(self._tmp.name)
        self.repo = PlanRepository(self.storage)

    def tearDown(self):
        self._tmp.cleanup()

    def _save_plan(self):
        plan = MealPlan(date(2023, 1, 2))
        plan.add(Meal(MealType.DINNER, Day.weekday(0), "John", "Pasta"))
        self.repo.save(plan)

    def test_sync_from_json(self):
        self._save_plan()
        for source in ("json", "auto"):
            path = sync_plan(self.storage, source)
            content = path.read_text(encoding="utf-8")
            self.assertIn("# Meal Plan", content)
            self.assertIn("## Monday", content)
            self.assertIn("### Dinner", content)
            self.assertIn("- Cook: John", content)
            self.assertIn("- Description: Pasta", content)

    def test_sync_from_markdown_unsupported(self):
        self._save_plan()
        sync_plan(self.storage, "json")
        with self.assertRaises(UnsupportedOperation):
            sync_plan(self.storage, "markdown")

    def test_auto_with_only_markdown(self):
        self.repo.markdown_path.write_text("# Meal Plan\n", encoding="utf-8")
        with self.assertRaises(UnsupportedOperation):
            sync_plan(self.storage, "auto")

    def test_no_files(self):
        with self.assertRaises(StorageReadError):
            sync_plan(self.storage, "auto")
        with self.assertRaises(UnsupportedOperation):
            sync_plan(self.storage, "markdown")

    def test_unknown_source(self):
        with self.assertRaises(ValueError):
            sync_plan(self.storage, "yaml")


if __name__ == '__main__':
    unittest.main()
