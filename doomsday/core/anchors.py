"""Anchors — century and year doomsday weekdays, each with its derivation.

Invariants:
    - Both computations are total over every integer year (no error paths)
    - Century anchors cycle Tuesday, Sunday, Friday, Wednesday every 400 years
    - increment_raw of the year anchor is NOT reduced mod 7 before the WeekDay addition
    - Each anchor is a frozen value, recomputed on every call (no caching)

Design Decisions:
    - Pure functions returning frozen dataclasses: the result embeds everything
      needed to render its own explanation
    - Years before 1583 are extrapolated, not rejected
"""

from dataclasses import dataclass

from doomsday.core.domain_types import WeekDay, Year
from doomsday.core.explanation import (
    Explanation, answer, congruent, given, math, step,
)

# Every 400 years the century anchor is Tuesday again
CYCLE_ANCHOR: WeekDay = WeekDay.TUESDAY
# Each following century retards the anchor by two days (same as advancing by five)
CENTURY_SHIFT: int = 5


@dataclass(frozen=True)
class CenturyAnchor:
    year: Year
    century: int
    cycle_index: int
    increment: WeekDay
    result: WeekDay
    explanation: Explanation


@dataclass(frozen=True)
class YearAnchor:
    year: Year
    year_in_century: int
    century_anchor: CenturyAnchor
    increment_raw: int
    increment: WeekDay
    result: WeekDay
    explanation: Explanation


def find_century_anchor(year: Year) -> CenturyAnchor:
    """Doomsday weekday of the first year of the year's (0-indexed) century."""
    century = year.number // 100
    cycle_index = century % 4
    increment = WeekDay.from_days_since_sunday(cycle_index * CENTURY_SHIFT)
    result = CYCLE_ANCHOR + increment

    explanation = Explanation(
        title="Find the century anchor.",
        intro=step("Starting with year", given(str(year))),
        steps=(
            step("take the century", math(f"C = {century}"),
                 "(indexed from 0 as all things should be)"),
            step("which has index", math(f"F = {century} % 4 = {cycle_index}"),
                 "in a four century cycle"),
            step("the resulting increment",
                 math(f"I = (F * -2) ≡ (F * 5) = "
                      f"{congruent(cycle_index * CENTURY_SHIFT, increment)}")),
            step(f"add {CYCLE_ANCHOR!s} and get the result",
                 math(f"({CYCLE_ANCHOR!s} + I) = "
                      f"{int(CYCLE_ANCHOR) + int(increment)} ≡ {int(result)} ≡"),
                 answer(str(result))),
        ),
    )
    return CenturyAnchor(
        year=year, century=century, cycle_index=cycle_index,
        increment=increment, result=result, explanation=explanation,
    )


def find_year_anchor(year: Year) -> YearAnchor:
    """Doomsday weekday of the given year."""
    year_in_century = year.number % 100
    century_anchor = find_century_anchor(year)
    increment_raw = year_in_century + year_in_century // 4
    increment = WeekDay.from_days_since_sunday(increment_raw)
    result = century_anchor.result + increment_raw

    explanation = Explanation(
        title="Find the year anchor.",
        intro=step("Starting with year", given(str(year))),
        steps=(
            step("note the century anchor", math(f"A = {century_anchor.result!s}")),
            step("take the last two digits", math(f"Y = {year_in_century}")),
            step("so the increment is",
                 math(f"I = (Y + Y/4) = {congruent(increment_raw, increment)}")),
            step("adding the anchor we get",
                 math(f"(A + I) = {int(century_anchor.result) + int(increment)}"
                      f" ≡ {int(result)} ≡"),
                 answer(str(result))),
        ),
    )
    return YearAnchor(
        year=year, year_in_century=year_in_century,
        century_anchor=century_anchor, increment_raw=increment_raw,
        increment=increment, result=result, explanation=explanation,
    )
