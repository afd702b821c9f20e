"""Weekday Finder — day of the week for a date via the year anchor and the nearest doomsday.

Invariants:
    - result == year_anchor.result + distance.days (mod 7)
    - Default mnemonic follows date.year.is_leap(); an explicit one is used as given
    - No date validation: nonsense dates yield an extrapolated weekday, never an error
      (the only failure is an empty mnemonic)
"""

from dataclasses import dataclass

from doomsday.core.anchors import YearAnchor, find_year_anchor
from doomsday.core.date import Date, DateDistance
from doomsday.core.domain_types import WeekDay
from doomsday.core.explanation import (
    Explanation, Step, answer, congruent, given, math, step,
)
from doomsday.core.mnemonics import Mnemonic, default_mnemonic


@dataclass(frozen=True)
class WeekdayResult:
    date: Date
    mnemonic: Mnemonic
    year_anchor: YearAnchor
    distance: DateDistance
    increment: WeekDay
    result: WeekDay
    explanation: Explanation


def find_weekday(date: Date, mnemonic: Mnemonic | None = None) -> WeekdayResult:
    """Find the day of the week for the date."""
    if mnemonic is None:
        mnemonic = default_mnemonic(date.year.is_leap())
    year_anchor = find_year_anchor(date.year)
    distance = date.nearest_doomsday_distance(mnemonic)
    increment = WeekDay.from_days_since_sunday(distance.days)
    result = year_anchor.result + increment

    return WeekdayResult(
        date=date, mnemonic=mnemonic, year_anchor=year_anchor,
        distance=distance, increment=increment, result=result,
        explanation=_explain(date, year_anchor, distance, increment, result),
    )


def _explain(
    date: Date,
    year_anchor: YearAnchor,
    distance: DateDistance,
    increment: WeekDay,
    result: WeekDay,
) -> Explanation:
    steps: list[Step] = [
        step("note the year anchor", math(f"A = {year_anchor.result!s}")),
        step("find the nearest doomsday", math(f"D = {distance.found.pretty()}")),
        step("the date is", math(str(distance.days)), "days from doomsday"),
    ]
    if len(distance.month_distances) > 1:
        steps.append(_month_breakdown_step(distance))
    steps += [
        step("so the increment is",
             math(f"I = {congruent(distance.days, increment)}")),
        step("adding it to the year anchor we get",
             math(f"(A + I) = {int(year_anchor.result) + int(increment)}"
                  f" ≡ {int(result)} ≡"),
             answer(str(result))),
    ]
    return Explanation(
        title="Find the weekday.",
        intro=step("Starting with date", given(date.pretty())),
        steps=tuple(steps),
    )


def _month_breakdown_step(distance: DateDistance) -> Step:
    """Per-month day counts, in the order the search walked them."""
    terms = " + ".join(
        f"{days} ({month!s})" for month, days in distance.month_distances.items()
    )
    direction = "forward" if distance.forward else "back"
    return step(f"counting {direction} month by month", math(terms))
