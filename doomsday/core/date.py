"""Date — day/month/year triple with validity checks, random neighbours and doomsday search.

Invariants:
    - Date is immutable; ordering is chronological (year, month, day)
    - No validation on construction: every triple is accepted and computed on
    - nearest_doomsday_distance stays within self.year; days > 0 means the anchor is earlier
    - Ties between the two search directions go to the earlier (downward) anchor
    - random_within_granularity draws only from the injected random.Random

Design Decisions:
    - Two validity predicates: is_valid_legacy keeps the historical exclusive
      upper bound (rejects the last day of every month), is_calendar_date is inclusive
    - DateDistance keeps a per-month breakdown only for explanations; days is derived from it
    - Search walks month by month (at most 12 steps), no day-of-year tables
"""

import datetime
import random
from collections.abc import Mapping
from dataclasses import dataclass
from functools import total_ordering
from types import MappingProxyType

from doomsday.core.domain_types import (
    FIRST_GREGORIAN_YEAR, Granularity, Month, Ordering, Year,
)
from doomsday.core.errors import EmptyMnemonicError
from doomsday.core.mnemonics import Mnemonic

# Year span for Granularity.ANY: two full 400-year Gregorian cycles
ANY_YEAR_SPAN: tuple[int, int] = (1600, 2399)


@total_ordering
@dataclass(frozen=True)
class Date:
    day: int
    month: Month
    year: Year

    # ─── Presentation ────────────────────────────────────────────

    def pretty(self) -> str:
        return f"{self.day} {self.month!s} {self.year!s}"

    def iso(self) -> str:
        return f"{self.year.number:04d}-{self.month.value:02d}-{self.day:02d}"

    @classmethod
    def from_python_date(cls, value: datetime.date) -> "Date":
        return cls(value.day, Month(value.month), Year(value.year))

    def to_python_date(self) -> datetime.date:
        """Raises ValueError for triples that are not calendar dates."""
        return datetime.date(self.year.number, self.month.value, self.day)

    # ─── Ordering ────────────────────────────────────────────────

    def _key(self) -> tuple[int, int, int]:
        return (self.year.number, self.month.value, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def compare(self, other: "Date") -> Ordering:
        """Where self lies relative to other (for "was / is / will be")."""
        if self._key() < other._key():
            return Ordering.BEFORE
        if self._key() == other._key():
            return Ordering.SAME
        return Ordering.AFTER

    # ─── Validity ────────────────────────────────────────────────

    def is_valid_legacy(self) -> bool:
        """Historical check: the day must be positive and strictly below the month length.

        This rejects the last day of every month (31 January, 30 April, ...).
        Kept as-is; use is_calendar_date for the inclusive check.
        """
        return (
            self.year > FIRST_GREGORIAN_YEAR
            and 1 <= self.day < self.year.month_length(self.month)
        )

    def is_calendar_date(self) -> bool:
        return (
            self.year > FIRST_GREGORIAN_YEAR
            and 1 <= self.day <= self.year.month_length(self.month)
        )

    # ─── Random date ─────────────────────────────────────────────

    def random_within_granularity(
        self, level: Granularity, rng: random.Random,
    ) -> "Date":
        """Random date in the same month, year or century as self, or any year."""
        year = self.year
        month = self.month
        if level is Granularity.ANY:
            year = Year(rng.randint(*ANY_YEAR_SPAN))
        elif level is Granularity.CENTURY:
            start = year.century_start().number
            year = Year(rng.randint(start, start + 99))
        if level is not Granularity.MONTH:
            month = rng.choice(list(Month))
        day = rng.randint(1, year.month_length(month))
        return Date(day, month, year)

    # ─── Distances ───────────────────────────────────────────────

    def nearest_doomsday_distance(self, mnemonic: Mnemonic) -> "DateDistance":
        """Closest mnemonic date within self.year.

        Raises EmptyMnemonicError when there is nothing to measure against.
        """
        if not mnemonic:
            raise EmptyMnemonicError()
        down = self._search_down(mnemonic)
        up = self._search_up(mnemonic)
        if up is None:
            return down
        if down is None:
            return up
        return down if abs(down.days) <= abs(up.days) else up

    def _search_down(self, mnemonic: Mnemonic) -> "DateDistance | None":
        entry = mnemonic.get(self.month)
        if entry is not None and entry <= self.day:
            return DateDistance.between(
                self._anchor(entry, self.month), False,
                {self.month: self.day - entry},
            )
        breakdown = {self.month: self.day}
        month = self.month.previous()
        while month is not None:
            entry = mnemonic.get(month)
            if entry is not None:
                breakdown[month] = self.year.month_length(month) - entry
                return DateDistance.between(
                    self._anchor(entry, month), False, breakdown,
                )
            breakdown[month] = self.year.month_length(month)
            month = month.previous()
        return None

    def _search_up(self, mnemonic: Mnemonic) -> "DateDistance | None":
        entry = mnemonic.get(self.month)
        if entry is not None and entry >= self.day:
            return DateDistance.between(
                self._anchor(entry, self.month), True,
                {self.month: entry - self.day},
            )
        breakdown = {self.month: self.year.month_length(self.month) - self.day}
        month = self.month.next()
        while month is not None:
            entry = mnemonic.get(month)
            if entry is not None:
                breakdown[month] = entry
                return DateDistance.between(
                    self._anchor(entry, month), True, breakdown,
                )
            breakdown[month] = self.year.month_length(month)
            month = month.next()
        return None

    def _anchor(self, day: int, month: Month) -> "Date":
        return Date(day, month, self.year)


@dataclass(frozen=True)
class DateDistance:
    """Result of the nearest-doomsday search.

    forward is True when the anchor was reached by scanning forward
    (the anchor is later in the year than the date).
    """
    found: Date
    forward: bool
    month_distances: Mapping[Month, int]

    @classmethod
    def between(
        cls, found: Date, forward: bool, month_distances: dict[Month, int],
    ) -> "DateDistance":
        return cls(found, forward, MappingProxyType(dict(month_distances)))

    @property
    def days(self) -> int:
        """Signed days from the anchor to the date (negative if the anchor is later)."""
        total = sum(self.month_distances.values())
        return -total if self.forward else total
