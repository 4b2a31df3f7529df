"""Markdown rendering of a meal plan (export only)."""
from datetime import timezone
from pathlib import Path
from mealplan.domain.Plan import MealPlan
from mealplan.domain.errors import UnsupportedOperation
from mealplan.utilities.constants import DATE_FORMAT, TIMESTAMP_FORMAT


def render_markdown(plan: MealPlan) -> str:
    """Render the plan grouped by day.

    Layout:
      # Meal Plan for Week of <week start>
      ## <day>            (dates first, then Monday..Sunday)
      ### <meal type>
      - Cook: ...
      - Description: ...
      *Last modified: ...*
    """
    lines = [f"# Meal Plan for Week of {plan.week_start_date.strftime(DATE_FORMAT)}", ""]
    for day, meals in plan.meals_by_day():
        lines.append(f"## {day}")
        lines.append("")
        for meal in meals:
            lines.append(f"### {meal.meal_type}")
            lines.append(f"- Cook: {meal.cook}")
            lines.append(f"- Description: {meal.description}")
            lines.append("")
    lines.append("")
    lines.append(f"*Last modified: {plan.last_modified.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)}*")
    return "\n".join(lines) + "\n"


def load_from_markdown(path) -> MealPlan:
    """Markdown is an export format only; this always raises UnsupportedOperation."""
    raise UnsupportedOperation(
        f"Loading from Markdown ({Path(path).name}) is not supported. Please use the JSON format.")
