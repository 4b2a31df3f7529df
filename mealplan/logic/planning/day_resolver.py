"""Turn day text into a Day and place Days on the calendar of a plan's week."""
import re
from datetime import date, timedelta
from mealplan.domain.Day import Day
from mealplan.domain.errors import InvalidDayFormat
from mealplan.utilities.constants import WEEKDAY_NAMES

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_day(text: str) -> Day:
    """Parse "YYYY-MM-DD" into a concrete date, otherwise a weekday name (any case).

    Raises InvalidDayFormat when the text is neither.
    """
    if not isinstance(text, str):
        raise InvalidDayFormat(repr(text))
    candidate = text.strip()
    if ISO_DATE_PATTERN.match(candidate):
        try:
            return Day.on(date.fromisoformat(candidate))
        except ValueError:
            pass  # e.g. 2023-02-30, fall through to the weekday names
    lowered = candidate.lower()
    for index, name in enumerate(WEEKDAY_NAMES):
        if name.lower() == lowered:
            return Day.weekday(index)
    raise InvalidDayFormat(text)


def resolve_to_date(day: Day, week_start_date: date) -> date:
    """Concrete date of `day` inside the week beginning at `week_start_date`.

    Weekday symbols move forward only: the result is always within
    [week_start_date, week_start_date + 6 days].
    """
    if day.is_date:
        return day.calendar_date
    offset = (day.weekday_index - week_start_date.weekday()) % 7
    return week_start_date + timedelta(days=offset)
