"""iCalendar rendering of a meal plan: one timed event per meal (export only)."""
import logging
from datetime import datetime, time, timedelta, timezone
from typing import Optional
from icalendar import Calendar, Event
from mealplan.domain.Meal import Meal
from mealplan.domain.Plan import MealPlan
from mealplan.logic.planning.day_resolver import resolve_to_date
from mealplan.utilities.constants import ICAL_PRODID, MEAL_DURATION_HOURS, MEAL_START_TIMES, UID_DOMAIN

logger = logging.getLogger(__name__)


def event_uid(meal: Meal, on_date, created: datetime) -> str:
    """meal-<type>-<YYYYMMDD>-<epoch seconds>@mealplan

    Two meals of the same type on the same date exported within the same second
    share a UID.
    """
    return f"meal-{meal.meal_type.value.lower()}-{on_date.strftime('%Y%m%d')}-{int(created.timestamp())}@{UID_DOMAIN}"


def build_event(meal: Meal, week_start_date, created: datetime) -> Event:
    on_date = resolve_to_date(meal.day, week_start_date)
    hour, minute = MEAL_START_TIMES[meal.meal_type.value]
    start = datetime.combine(on_date, time(hour, minute), tzinfo=timezone.utc)

    event = Event()
    event.add("uid", event_uid(meal, on_date, created))
    event.add("dtstamp", created)
    event.add("dtstart", start)
    event.add("dtend", start + timedelta(hours=MEAL_DURATION_HOURS))
    event.add("summary", f"{meal.meal_type}: {meal.description}")
    event.add("description", f"Cook: {meal.cook}")
    return event


def build_calendar(plan: MealPlan, now: Optional[datetime] = None) -> Calendar:
    created = now or datetime.now(timezone.utc)
    cal = Calendar()
    cal.add("prodid", ICAL_PRODID)
    cal.add("version", "2.0")
    for meal in plan.meals:
        cal.add_component(build_event(meal, plan.week_start_date, created))
    logger.debug(f"Built calendar with {len(plan)} events for week of {plan.week_start_date}")
    return cal


def render_ical(plan: MealPlan, now: Optional[datetime] = None) -> str:
    return build_calendar(plan, now).to_ical().decode("utf-8")
