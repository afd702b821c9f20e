"""Weekday Routes — weekday lookup, anchors, random dates and guess checking.

Invariants:
    - Every endpoint is a pure computation over query/body values (no state kept)
    - detail follows the trainer's "?" levels (1–4)
    - strict=true rejects dates that are not in the Gregorian calendar after 1583;
      otherwise nonsense dates get an extrapolated weekday
    - Random dates are reproducible when a seed is supplied

Design Decisions:
    - Reference date for random dates defaults to today in UTC: the core never reads a clock
"""

import logging
import random
from datetime import datetime, timezone

from fastapi import APIRouter, Query

from doomsday.core.anchors import find_year_anchor
from doomsday.core.date import Date
from doomsday.core.domain_types import Granularity, Month, Year
from doomsday.core.errors import InvalidDateError
from doomsday.core.render_explanation import MAX_REVEAL_LEVEL
from doomsday.core.weekday_finder import find_weekday
from doomsday.schemas.weekday import (
    AnchorsResponse, GuessRequest, GuessResponse, RandomDateResponse,
    WeekdayResponse,
)
from doomsday.api.routes.weekday_helpers import (
    century_anchor_out, check_guess, date_out, weekday_response,
    year_anchor_out,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["weekday"])


@router.get("/weekday", response_model=WeekdayResponse)
async def get_weekday(
    day: int = Query(ge=1, le=31),
    month: int = Query(ge=1, le=12),
    year: int = Query(),
    detail: int = Query(MAX_REVEAL_LEVEL, ge=1, le=MAX_REVEAL_LEVEL),
    strict: bool = Query(False),
):
    """Day of the week for a date, with the explanations for `detail`."""
    date = Date(day, Month(month), Year(year))
    if strict and not date.is_calendar_date():
        raise InvalidDateError(date.iso())
    found = find_weekday(date)
    logger.info(
        f"Weekday for {date.iso()} is {found.result!s}",
        extra={"date": date.iso(), "detail": detail},
    )
    return weekday_response(found, detail)


@router.get("/anchors/{year}", response_model=AnchorsResponse)
async def get_anchors(year: int):
    """Century and year anchors for a year."""
    year_anchor = find_year_anchor(Year(year))
    return AnchorsResponse(
        century_anchor=century_anchor_out(year_anchor.century_anchor),
        year_anchor=year_anchor_out(year_anchor),
    )


@router.get("/dates/random", response_model=RandomDateResponse)
async def get_random_date(
    granularity: str = Query("Y", max_length=8),
    day: int | None = Query(None, ge=1, le=31),
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None),
    seed: int | None = Query(None),
):
    """Random date near a reference date (today when not given).

    granularity accepts the trainer letters (M, Y, C, A) or the full names.
    """
    level = _parse_granularity(granularity)
    reference = _reference_date(day, month, year)
    picked = reference.random_within_granularity(level, random.Random(seed))
    logger.info(
        f"Random date {picked.iso()} around {reference.iso()}",
        extra={"date": picked.iso(), "granularity": level.value},
    )
    return RandomDateResponse(
        reference=date_out(reference),
        granularity=level.value,
        date=date_out(picked),
    )


@router.post("/weekday/guess", response_model=GuessResponse)
async def post_guess(body: GuessRequest):
    """Check one trainer input line (guess, reveal, help) against a date."""
    date = Date(body.day, Month(body.month), Year(body.year))
    response = check_guess(find_weekday(date), body.line)
    logger.info(
        f"Guess '{body.line}' for {date.iso()}: {response.outcome}",
        extra={"date": date.iso()},
    )
    return response


def _parse_granularity(text: str) -> Granularity:
    try:
        return Granularity(text.strip().lower())
    except ValueError:
        return Granularity.from_letter(text)


def _reference_date(day: int | None, month: int | None, year: int | None) -> Date:
    today = Date.from_python_date(datetime.now(timezone.utc).date())
    return Date(
        day if day is not None else today.day,
        Month(month) if month is not None else today.month,
        Year(year) if year is not None else today.year,
    )
