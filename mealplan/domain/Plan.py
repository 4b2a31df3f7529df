"""Plan domain entity: one week of meals, anchored at a week start date, with a last-modified stamp."""
from datetime import date, datetime, timezone
from typing import Iterator, List, Optional
from mealplan.domain.Day import Day
from mealplan.domain.Meal import Meal
from mealplan.domain.MealType import MealType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MealPlan:
    def __init__(self, week_start_date: date, meals: Optional[List[Meal]] = None,
                 last_modified: Optional[datetime] = None):
        self.meals: List[Meal] = meals[:] if meals else []
        self.week_start_date = week_start_date
        self.last_modified = last_modified or _utcnow()

    def _touch(self):
        self.last_modified = _utcnow()

    def __len__(self) -> int:
        return len(self.meals)

    def __iter__(self) -> Iterator[Meal]:
        return iter(self.meals)

    @property
    def is_empty(self) -> bool:
        return not self.meals

    def __eq__(self, other) -> bool:
        if not isinstance(other, MealPlan):
            return NotImplemented
        return (self.meals == other.meals
                and self.week_start_date == other.week_start_date
                and self.last_modified == other.last_modified)

    __hash__ = None

    def __repr__(self) -> str:
        return f"MealPlan(week_start_date={self.week_start_date}, meals={len(self.meals)}, last_modified={self.last_modified.isoformat()})"

    # --- store operations -------------------------------------------------
    def add(self, meal: Meal) -> None:
        '''Appends a meal. Uniqueness per (meal_type, day) is the caller's job (see replace).'''
        self.meals.append(meal)
        self._touch()

    def _index_of(self, meal_type: MealType, day: Day) -> Optional[int]:
        for i, meal in enumerate(self.meals):
            if meal.matches(meal_type, day):
                return i
        return None

    def find(self, meal_type: MealType, day: Day) -> Optional[Meal]:
        index = self._index_of(meal_type, day)
        return self.meals[index] if index is not None else None

    def remove(self, meal_type: MealType, day: Day) -> Optional[Meal]:
        index = self._index_of(meal_type, day)
        if index is None:
            return None
        removed = self.meals.pop(index)
        self._touch()
        return removed

    def replace(self, meal: Meal) -> Optional[Meal]:
        '''Swaps the meal with the same (meal_type, day) in place and returns the previous one.

        When no meal has that key the new one is appended. Either way the list ends up
        holding exactly one entry for the key.
        '''
        index = self._index_of(meal.meal_type, meal.day)
        if index is None:
            self.add(meal)
            return None
        previous = self.meals[index]
        self.meals[index] = meal
        self._touch()
        return previous

    def meals_by_day(self):
        '''Group meals by Day identity, ordered by Day.sort_key; insertion order within a day.'''
        groups = {}
        for meal in self.meals:
            groups.setdefault(meal.day, []).append(meal)
        return [(day, groups[day]) for day in sorted(groups, key=lambda d: d.sort_key())]

    # --- persistence ------------------------------------------------------
    @staticmethod
    def from_dict(data):
        '''Builds a plan from its JSON dictionary. last_modified may be ISO-8601 or epoch seconds.'''
        raw_ts = data["last_modified"]
        if isinstance(raw_ts, (int, float)) and not isinstance(raw_ts, bool):
            last_modified = datetime.fromtimestamp(raw_ts, tz=timezone.utc)
        else:
            last_modified = datetime.fromisoformat(raw_ts)
            if last_modified.tzinfo is None:
                last_modified = last_modified.replace(tzinfo=timezone.utc)
        return MealPlan(
            week_start_date=date.fromisoformat(data["week_start_date"]),
            meals=[Meal.from_dict(m) for m in data.get("meals", [])],
            last_modified=last_modified,
        )

    def to_dict(self):
        return {
            "meals": [meal.to_dict() for meal in self.meals],
            "week_start_date": self.week_start_date.isoformat(),
            "last_modified": self.last_modified.isoformat(),
        }
