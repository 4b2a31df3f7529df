"""
Input validation schemas using Pydantic for the HTTP API.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from mealplan.domain.MealType import MealType
from mealplan.logic.planning.day_resolver import parse_day


class MealInput(BaseModel):
    """Schema for adding a meal."""
    meal_type: str = Field(..., min_length=1, max_length=20)
    day: str = Field(..., min_length=1, max_length=20)
    cook: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=500)

    @field_validator('cook', 'description')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('meal_type')
    @classmethod
    def validate_meal_type(cls, v):
        """Normalize to the display name (Breakfast, Lunch, Dinner, Snack)."""
        return MealType.parse(v).value

    @field_validator('day')
    @classmethod
    def validate_day(cls, v):
        """Accept YYYY-MM-DD or a weekday name."""
        return str(parse_day(v))


class MealUpdateInput(BaseModel):
    """Schema for editing a meal; omitted fields keep their current value."""
    cook: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=500)

    @field_validator('cook', 'description')
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v
