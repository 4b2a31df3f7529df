from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# ISO ordering: index 0 = Monday .. 6 = Sunday
WEEKDAY_NAMES: Final[list[str]] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEKDAY_ABBREVIATIONS: Final[list[str]] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# Calendar start times (hour, minute) in UTC, one hour per meal
MEAL_START_TIMES: Final[dict[str, tuple[int, int]]] = {
    "Breakfast": (8, 0),
    "Lunch": (12, 0),
    "Dinner": (18, 0),
    "Snack": (15, 0),
}
MEAL_DURATION_HOURS: Final[int] = 1

PLAN_FILENAME: Final[str] = "meal_plan.json"
MARKDOWN_FILENAME: Final[str] = "meal_plan.md"
CONFIG_FILENAME: Final[str] = "config.json"

ICAL_PRODID: Final[str] = "-//mealplan//Meal Plan Export//EN"
UID_DOMAIN: Final[str] = "mealplan"
