import unittest
from datetime import date, timedelta
from mealplan.domain.Day import Day
from mealplan.domain.errors import InvalidDayFormat
from mealplan.logic.planning.day_resolver import parse_day, resolve_to_date
from mealplan.utilities.constants import WEEKDAY_NAMES


class TestParseDay(unittest.TestCase):

    def test_iso_date(self):
        day = parse_day("2023-05-01")
        self.assertTrue(day.is_date)
        self.assertEqual(day.calendar_date, date(2023, 5, 1))

    def test_weekday_name_any_case(self):
        self.assertEqual(parse_day("Monday"), Day.weekday(0))
        self.assertEqual(parse_day("sUNDAY"), Day.weekday(6))
        self.assertEqual(parse_day("  friday "), Day.weekday(4))

    def test_invalid_text(self):
        for text in ("Someday", "", "Mon", "2023-5-1", "2023-02-30", "01-05-2023"):
            with self.assertRaises(InvalidDayFormat, msg=text):
                parse_day(text)

    def test_error_names_both_forms(self):
        with self.assertRaises(InvalidDayFormat) as ctx:
            parse_day("Someday")
        self.assertIn("YYYY-MM-DD", str(ctx.exception))
        self.assertIn("day name", str(ctx.exception))


class TestResolveToDate(unittest.TestCase):

    def test_concrete_date_unchanged(self):
        d = date(2023, 1, 10)
        self.assertEqual(resolve_to_date(Day.on(d), date(2023, 1, 2)), d)

    def test_weekday_from_monday_start(self):
        start = date(2023, 1, 2)  # Monday
        self.assertEqual(resolve_to_date(Day.weekday(0), start), start)
        self.assertEqual(resolve_to_date(Day.weekday(2), start), date(2023, 1, 4))
        self.assertEqual(resolve_to_date(Day.weekday(6), start), date(2023, 1, 8))

    def test_weekday_never_goes_backwards(self):
        start = date(2023, 1, 4)  # Wednesday
        self.assertEqual(resolve_to_date(Day.weekday(0), start), date(2023, 1, 9))
        self.assertEqual(resolve_to_date(Day.weekday(1), start), date(2023, 1, 10))
        self.assertEqual(resolve_to_date(Day.weekday(2), start), start)

    def test_every_weekday_lands_in_week(self):
        for offset in range(7):
            start = date(2024, 2, 26) + timedelta(days=offset)
            for index, name in enumerate(WEEKDAY_NAMES):
                resolved = resolve_to_date(Day.weekday(index), start)
                self.assertTrue(start <= resolved <= start + timedelta(days=6))
                self.assertEqual(resolved.strftime("%A"), name)


class TestDayValue(unittest.TestCase):

    def test_weekday_never_equals_date(self):
        monday = date(2023, 1, 2)
        self.assertNotEqual(Day.weekday(0), Day.on(monday))
        self.assertEqual(len({Day.weekday(0), Day.on(monday), Day.weekday(0)}), 2)

    def test_display(self):
        self.assertEqual(str(Day.weekday(0)), "Monday")
        self.assertEqual(str(Day.on(date(2023, 1, 3))), "2023-01-03")

    def test_rejects_bad_index(self):
        with self.assertRaises(ValueError):
            Day.weekday(7)


if __name__ == '__main__':
    unittest.main()
