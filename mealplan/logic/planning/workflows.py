"""Add / edit / remove policy on top of the MealPlan store.

Interactive decisions go through two injected callables so the policy can run
without a terminal:
  confirm(message) -> bool            yes/no question (overwrite, remove last meal)
  prompt(field, current) -> str|None  ask for a new field value; None/"" keeps current
"""
import logging
from typing import Callable, Optional, Union
from mealplan.domain.Day import Day
from mealplan.domain.Meal import Meal
from mealplan.domain.MealType import MealType
from mealplan.domain.Plan import MealPlan
from mealplan.domain.errors import MealAlreadyExists, MealNotFound, UserCancelled
from mealplan.logic.planning.day_resolver import parse_day

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]
Prompt = Callable[[str, str], Optional[str]]


def _meal_type(value: Union[str, MealType]) -> MealType:
    return value if isinstance(value, MealType) else MealType.parse(value)


def _day(value: Union[str, Day]) -> Day:
    return value if isinstance(value, Day) else parse_day(value)


def add_meal(plan: MealPlan, meal_type, day, cook: str, description: str,
             confirm: Optional[Confirm] = None) -> Meal:
    """Add a meal; an existing meal for the same (type, day) is only replaced after confirmation.

    Without a confirm callable an existing entry raises MealAlreadyExists.
    Declining raises UserCancelled and leaves the plan untouched.
    """
    new_meal = Meal(_meal_type(meal_type), _day(day), cook, description)
    if plan.find(new_meal.meal_type, new_meal.day) is not None:
        if confirm is None:
            raise MealAlreadyExists(new_meal.meal_type, new_meal.day)
        if not confirm("A meal of this type already exists for this day. Do you want to replace it?"):
            raise UserCancelled("Meal not added due to user cancellation.")
        plan.replace(new_meal)
        logger.info(f"Replaced {new_meal.meal_type} on {new_meal.day}")
    else:
        plan.add(new_meal)
        logger.info(f"Added {new_meal.meal_type} on {new_meal.day}")
    return new_meal


def edit_meal(plan: MealPlan, meal_type, day, cook: Optional[str] = None,
              description: Optional[str] = None, prompt: Optional[Prompt] = None) -> Meal:
    """Update cook and/or description of an existing meal.

    Values not passed are asked through `prompt` (when given); an empty answer keeps
    the current value. The replacement is built first and swapped in one step.
    """
    mt, d = _meal_type(meal_type), _day(day)
    current = plan.find(mt, d)
    if current is None:
        raise MealNotFound(mt, d)

    if cook is None and prompt is not None:
        cook = prompt("cook", current.cook)
    if description is None and prompt is not None:
        description = prompt("description", current.description)

    updated = Meal(mt, d,
                   cook=cook if cook else current.cook,
                   description=description if description else current.description)
    plan.replace(updated)
    logger.info(f"Edited {mt} on {d}")
    return updated


def remove_meal(plan: MealPlan, meal_type, day, confirm: Optional[Confirm] = None) -> Meal:
    """Remove a meal. Removing the last meal of the plan needs confirmation.

    Declining (or having no confirm callable) raises UserCancelled and leaves the plan as is.
    """
    mt, d = _meal_type(meal_type), _day(day)
    if plan.find(mt, d) is None:
        raise MealNotFound(mt, d)
    if len(plan) == 1:
        question = "This is the last meal in your plan. Are you sure you want to remove it?"
        if confirm is None or not confirm(question):
            raise UserCancelled("Meal removal cancelled by user.")
    removed = plan.remove(mt, d)
    logger.info(f"Removed {mt} on {d}")
    return removed
