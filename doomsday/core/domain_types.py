"""Domain Types — calendar primitives that replace bare integers across the codebase.

Invariants:
    - Month codes are 1–12, WeekDay codes are 0–6 with Sunday = 0
    - WeekDay arithmetic always normalizes with a floor modulo (never negative)
    - Year is a value type: ordered by its number, leap rule is proleptic Gregorian
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - IntEnum for Month and WeekDay: codes double as raw values in equations
    - WeekDay overrides + and - so that WeekDay + int stays a WeekDay
    - str Enums for Granularity and Ordering: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

from doomsday.core.errors import RangeParseError


# ─── Month ───────────────────────────────────────────────────────

_COMMON_MONTH_LENGTHS: tuple[int, ...] = (
    31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
)


class Month(IntEnum):
    """Months of the Gregorian year, January = 1."""
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def previous(self) -> "Month | None":
        """Month before this one, None before January."""
        if self is Month.JANUARY:
            return None
        return Month(self.value - 1)

    def next(self) -> "Month | None":
        """Month after this one, None after December."""
        if self is Month.DECEMBER:
            return None
        return Month(self.value + 1)

    def __str__(self) -> str:
        return self.name.capitalize()


def days_in_month(month: Month, is_leap: bool = False) -> int:
    """How many days are in the month, when it is (not) a leap year."""
    if month is Month.FEBRUARY and is_leap:
        return 29
    return _COMMON_MONTH_LENGTHS[month.value - 1]


# ─── Year ────────────────────────────────────────────────────────

@dataclass(frozen=True, order=True)
class Year:
    """A Gregorian year number. Ordered by number."""
    number: int

    def is_leap(self) -> bool:
        div4 = self.number % 4 == 0
        div100 = self.number % 100 == 0
        div400 = self.number % 400 == 0
        return div4 and (not div100 or div400)

    def century_start(self) -> "Year":
        """First year of the (0-indexed) century, e.g. 2023 -> 2000."""
        return Year((self.number // 100) * 100)

    def month_length(self, month: Month) -> int:
        return days_in_month(month, self.is_leap())

    def __str__(self) -> str:
        return str(self.number)


FIRST_GREGORIAN_YEAR = Year(1583)


# ─── WeekDay ─────────────────────────────────────────────────────

class WeekDay(IntEnum):
    """Days of the week counted from Sunday. Integers modulo 7 under + and -."""
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_days_since_sunday(cls, days: int) -> "WeekDay":
        """The weekday `days` days after a Sunday (any integer, negative too)."""
        return cls(days % 7)

    @classmethod
    def zero(cls) -> "WeekDay":
        """Additive identity."""
        return cls.SUNDAY

    def __add__(self, other: int) -> "WeekDay":
        if not isinstance(other, int):
            return NotImplemented
        return WeekDay.from_days_since_sunday(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other: int) -> "WeekDay":
        if not isinstance(other, int):
            return NotImplemented
        return WeekDay.from_days_since_sunday(int(self) - int(other))

    def __rsub__(self, other: int) -> "WeekDay":
        if not isinstance(other, int):
            return NotImplemented
        return WeekDay.from_days_since_sunday(int(other) - int(self))

    def __str__(self) -> str:
        return self.name.capitalize()


# ─── Enums ───────────────────────────────────────────────────────

class Granularity(str, Enum):
    """How far a random date may wander from its reference date."""
    MONTH = "month"
    YEAR = "year"
    CENTURY = "century"
    ANY = "any"

    @classmethod
    def from_letter(cls, letter: str) -> "Granularity":
        """Parse the trainer's range letter: M, Y, C or A."""
        try:
            return _GRANULARITY_LETTERS[letter.strip().upper()]
        except KeyError:
            raise RangeParseError(letter) from None


_GRANULARITY_LETTERS: dict[str, Granularity] = {
    "M": Granularity.MONTH,
    "Y": Granularity.YEAR,
    "C": Granularity.CENTURY,
    "A": Granularity.ANY,
}


class Ordering(str, Enum):
    """Chronological position of one date relative to another."""
    BEFORE = "before"
    SAME = "same"
    AFTER = "after"
