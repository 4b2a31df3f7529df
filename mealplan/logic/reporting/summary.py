from datetime import timezone
from typing import Dict, List
from mealplan.domain.Plan import MealPlan
from mealplan.logic.planning.day_resolver import resolve_to_date
from mealplan.utilities.constants import DATE_FORMAT, TIMESTAMP_FORMAT


def summarize_plan(plan: MealPlan) -> Dict:
    """Plan overview: week start, totals and meals per day (same order as the Markdown export)."""
    days: List[Dict] = []
    for day, meals in plan.meals_by_day():
        days.append({
            "day": str(day),
            "date": resolve_to_date(day, plan.week_start_date).strftime(DATE_FORMAT),
            "meals": [
                {
                    "meal_type": meal.meal_type.value,
                    "cook": meal.cook,
                    "description": meal.description,
                }
                for meal in meals
            ],
        })
    return {
        "week_start_date": plan.week_start_date.strftime(DATE_FORMAT),
        "total_meals": len(plan),
        "last_modified": plan.last_modified.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT),
        "days": days,
    }


def format_summary(summary: Dict) -> str:
    lines = [
        "Current Meal Plan Summary:",
        f"Week starting: {summary['week_start_date']}",
        f"Total meals: {summary['total_meals']}",
        f"Last modified: {summary['last_modified']}",
    ]
    for entry in summary["days"]:
        lines.append("")
        lines.append(f"{entry['day']}:")
        for meal in entry["meals"]:
            lines.append(f"  {meal['meal_type']}: {meal['description']} (Cook: {meal['cook']})")
    return "\n".join(lines)
