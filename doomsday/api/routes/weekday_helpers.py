"""Weekday Helpers — map core values onto response schemas, check guesses.

Invariants:
    - Pure conversions: no IO, no logging, no settings
    - check_guess mirrors the terminal trainer's handling of one input line

Design Decisions:
    - Extracted from weekday.py so routes stay thin
    - Pure match-case dispatch over trainer commands
"""

from doomsday.core.anchors import CenturyAnchor, YearAnchor
from doomsday.core.date import Date, DateDistance
from doomsday.core.domain_types import WeekDay
from doomsday.core.explanation import Explanation
from doomsday.core.render_explanation import (
    explanations_for_level, render_explanation,
)
from doomsday.core.trainer_input import (
    TRAINER_HELP, Empty, Guess, Help, Quit, Reveal, Unparseable,
    parse_trainer_input,
)
from doomsday.core.weekday_finder import WeekdayResult
from doomsday.schemas.weekday import (
    CenturyAnchorOut, DateOut, DistanceOut, ExplanationOut, FragmentOut,
    GuessResponse, WeekDayOut, WeekdayResponse, YearAnchorOut,
)


def weekday_out(weekday: WeekDay) -> WeekDayOut:
    return WeekDayOut(code=int(weekday), name=str(weekday))


def date_out(date: Date) -> DateOut:
    return DateOut(
        day=date.day, month=date.month.value, year=date.year.number,
        pretty=date.pretty(), iso=date.iso(),
    )


def explanation_out(explanation: Explanation) -> ExplanationOut:
    return ExplanationOut(
        title=explanation.title,
        intro=[FragmentOut(tag=f.tag, text=f.text) for f in explanation.intro],
        steps=[
            [FragmentOut(tag=f.tag, text=f.text) for f in s]
            for s in explanation.steps
        ],
        text=render_explanation(explanation),
    )


def century_anchor_out(anchor: CenturyAnchor) -> CenturyAnchorOut:
    return CenturyAnchorOut(
        year=anchor.year.number,
        century=anchor.century,
        cycle_index=anchor.cycle_index,
        increment=weekday_out(anchor.increment),
        result=weekday_out(anchor.result),
        explanation=explanation_out(anchor.explanation),
    )


def year_anchor_out(anchor: YearAnchor) -> YearAnchorOut:
    return YearAnchorOut(
        year=anchor.year.number,
        year_in_century=anchor.year_in_century,
        increment_raw=anchor.increment_raw,
        increment=weekday_out(anchor.increment),
        result=weekday_out(anchor.result),
        century_anchor=century_anchor_out(anchor.century_anchor),
        explanation=explanation_out(anchor.explanation),
    )


def distance_out(distance: DateDistance) -> DistanceOut:
    return DistanceOut(
        found=date_out(distance.found),
        forward=distance.forward,
        days=distance.days,
        month_distances={
            str(month): days for month, days in distance.month_distances.items()
        },
    )


def weekday_response(found: WeekdayResult, detail: int) -> WeekdayResponse:
    return WeekdayResponse(
        date=date_out(found.date),
        result=weekday_out(found.result),
        increment=weekday_out(found.increment),
        distance=distance_out(found.distance),
        year_anchor=year_anchor_out(found.year_anchor),
        detail=detail,
        explanations=[
            explanation_out(e) for e in explanations_for_level(found, detail)
        ],
    )


def check_guess(found: WeekdayResult, line: str) -> GuessResponse:
    """Answer one trainer line for the date behind `found`."""
    match parse_trainer_input(line):
        case Empty():
            return GuessResponse(
                outcome="empty", message="Please input a weekday number 0-6",
            )
        case Quit():
            return GuessResponse(outcome="quit", message="Nothing to quit over HTTP")
        case Help():
            return GuessResponse(outcome="help", message=TRAINER_HELP)
        case Reveal(level=level):
            return GuessResponse(
                outcome="reveal",
                message=f"The weekday is {found.result!s}.",
                answer=weekday_out(found.result),
                explanations=[
                    explanation_out(e)
                    for e in explanations_for_level(found, level)
                ],
            )
        case Guess(weekday=weekday) if weekday == found.result:
            return GuessResponse(
                outcome="correct", message="Correct!",
                guess=weekday_out(weekday), answer=weekday_out(found.result),
            )
        case Guess(weekday=weekday):
            return GuessResponse(
                outcome="wrong", message=f"{weekday!s} is wrong. Try again.",
                guess=weekday_out(weekday),
            )
        case Unparseable():
            return GuessResponse(
                outcome="unparseable",
                message="Could not parse input! Please input a weekday number 0-6",
            )
