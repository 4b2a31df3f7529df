"""Meal domain entity: meal type, day, cook and description. (meal_type, day) is the key within a plan."""
from mealplan.domain.Day import Day
from mealplan.domain.MealType import MealType


class Meal:
    def __init__(self, meal_type: MealType, day: Day, cook: str = "", description: str = ""):
        self.meal_type = meal_type
        self.day = day
        self.cook = cook
        self.description = description

    @property
    def key(self):
        return (self.meal_type, self.day)

    def matches(self, meal_type: MealType, day: Day) -> bool:
        return self.meal_type == meal_type and self.day == day

    def __eq__(self, other) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return (self.meal_type, self.day, self.cook, self.description) == \
               (other.meal_type, other.day, other.cook, other.description)

    __hash__ = None

    def __str__(self) -> str:
        return f"{self.meal_type}: {self.description} (Cook: {self.cook})"

    def __repr__(self) -> str:
        return f"Meal({self.meal_type}, {self.day}, cook={self.cook!r}, description={self.description!r})"

    @staticmethod
    def from_dict(data):
        '''Creates a Meal from its JSON dictionary. A missing or null cook or description is read as "".'''
        return Meal(
            meal_type=MealType(data["meal_type"]),
            day=Day.from_dict(data["day"]),
            cook=data.get("cook") or "",
            description=data.get("description") or "",
        )

    def to_dict(self):
        return {
            "meal_type": self.meal_type.value,
            "day": self.day.to_dict(),
            "cook": self.cook,
            "description": self.description,
        }
