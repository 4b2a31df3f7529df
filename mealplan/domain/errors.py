"""Error types raised by the meal plan core.

Every error derives from MealPlanError so the CLI and the HTTP API can map the
whole family to a message and an exit status / response code in one place.
"""


class MealPlanError(Exception):
    """Base class for all recoverable meal plan errors."""


class InvalidMealType(MealPlanError, ValueError):
    def __init__(self, text: str = ""):
        self.text = text
        super().__init__("Invalid meal type. Must be breakfast, lunch, dinner, or snack.")


class InvalidDayFormat(MealPlanError, ValueError):
    def __init__(self, text: str = ""):
        self.text = text
        super().__init__("Invalid day format. Use YYYY-MM-DD or day name.")


class MealNotFound(MealPlanError):
    def __init__(self, meal_type, day):
        self.meal_type = meal_type
        self.day = day
        super().__init__(f"No {meal_type} meal found for {day}.")


class MealAlreadyExists(MealPlanError):
    def __init__(self, meal_type, day):
        self.meal_type = meal_type
        self.day = day
        super().__init__(f"A {meal_type} meal already exists for {day}.")


class UserCancelled(MealPlanError):
    pass


class StorageReadError(MealPlanError):
    pass


class PlanNotFound(StorageReadError):
    pass


class StorageWriteError(MealPlanError):
    pass


class UnsupportedOperation(MealPlanError):
    pass


class ConfigurationError(MealPlanError):
    pass


__all__ = [
    'MealPlanError', 'InvalidMealType', 'InvalidDayFormat', 'MealNotFound',
    'MealAlreadyExists', 'UserCancelled', 'StorageReadError', 'PlanNotFound',
    'StorageWriteError', 'UnsupportedOperation', 'ConfigurationError',
]
