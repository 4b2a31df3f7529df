"""MealType domain value: the four meal slots of a day."""
from enum import Enum
from mealplan.domain.errors import InvalidMealType


class MealType(Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "MealType":
        '''Case-insensitive lookup of a meal type name (breakfast, lunch, dinner, snack).'''
        key = text.strip().lower() if isinstance(text, str) else ""
        for member in cls:
            if member.value.lower() == key:
                return member
        raise InvalidMealType(text)


def parse_meal_type(text: str) -> MealType:
    return MealType.parse(text)
