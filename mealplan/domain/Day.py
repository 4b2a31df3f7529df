"""Day domain value: either a weekday symbol (Monday..Sunday) or a concrete calendar date."""
from datetime import date
from typing import Optional
from mealplan.utilities.constants import DATE_FORMAT, WEEKDAY_NAMES, WEEKDAY_ABBREVIATIONS

WEEKDAY = "Weekday"
DATE = "Date"


class Day:
    __slots__ = ("kind", "value")

    def __init__(self, kind: str, value):
        if kind == WEEKDAY:
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 6:
                raise ValueError(f"Weekday index must be 0..6, got {value!r}")
        elif kind == DATE:
            if not isinstance(value, date):
                raise ValueError(f"Date day needs a datetime.date, got {value!r}")
        else:
            raise ValueError(f"Unknown day kind: {kind!r}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Day is immutable")

    # --- constructors ---------------------------------------------------
    @classmethod
    def weekday(cls, index: int) -> "Day":
        '''Weekday symbol; 0 = Monday .. 6 = Sunday.'''
        return cls(WEEKDAY, index)

    @classmethod
    def on(cls, value: date) -> "Day":
        '''Concrete calendar date.'''
        return cls(DATE, value)

    # --- accessors -------------------------------------------------------
    @property
    def is_weekday(self) -> bool:
        return self.kind == WEEKDAY

    @property
    def is_date(self) -> bool:
        return self.kind == DATE

    @property
    def weekday_index(self) -> Optional[int]:
        return self.value if self.kind == WEEKDAY else None

    @property
    def calendar_date(self) -> Optional[date]:
        return self.value if self.kind == DATE else None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        if self.kind == WEEKDAY:
            return WEEKDAY_NAMES[self.value]
        return self.value.strftime(DATE_FORMAT)

    def __repr__(self) -> str:
        return f"Day({self.kind}, {self})"

    def sort_key(self):
        '''Concrete dates first (chronological), then weekday symbols Monday..Sunday.'''
        if self.kind == DATE:
            return (0, self.value.toordinal())
        return (1, self.value)

    def to_dict(self):
        if self.kind == WEEKDAY:
            return {WEEKDAY: WEEKDAY_ABBREVIATIONS[self.value]}
        return {DATE: self.value.strftime(DATE_FORMAT)}

    @staticmethod
    def from_dict(data) -> "Day":
        '''Decode {"Weekday": "Mon"} or {"Date": "2023-01-03"}.'''
        if not isinstance(data, dict) or len(data) != 1:
            raise ValueError(f"Day must be a single-key object, got {data!r}")
        kind, raw = next(iter(data.items()))
        if kind == WEEKDAY:
            for names in (WEEKDAY_ABBREVIATIONS, WEEKDAY_NAMES):
                if raw in names:
                    return Day.weekday(names.index(raw))
            raise ValueError(f"Unknown weekday: {raw!r}")
        if kind == DATE:
            return Day.on(date.fromisoformat(raw))
        raise ValueError(f"Unknown day kind: {kind!r}")
