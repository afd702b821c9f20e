"""Weekday Schemas — Pydantic models for weekday, anchor, random-date and guess endpoints.

Invariants:
    - Weekdays always carry both the code (Sunday = 0) and the name
    - Explanations keep their fragment tags; `text` is the plain rendering
    - GuessRequest bounds day 1–31 and month 1–12; month-length checks are
      left to the core (or to strict mode)

Design Decisions:
    - FragmentTag reused from core/: single source of truth for tag names
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from doomsday.core.explanation import FragmentTag


class WeekDayOut(BaseModel):
    code: int = Field(ge=0, le=6)
    name: str


class DateOut(BaseModel):
    day: int
    month: int
    year: int
    pretty: str
    iso: str


class FragmentOut(BaseModel):
    tag: FragmentTag
    text: str


class ExplanationOut(BaseModel):
    """Tagged explanation plus its plain-text rendering."""
    title: str
    intro: list[FragmentOut]
    steps: list[list[FragmentOut]]
    text: str


class CenturyAnchorOut(BaseModel):
    year: int
    century: int
    cycle_index: int
    increment: WeekDayOut
    result: WeekDayOut
    explanation: ExplanationOut


class YearAnchorOut(BaseModel):
    year: int
    year_in_century: int
    increment_raw: int
    increment: WeekDayOut
    result: WeekDayOut
    century_anchor: CenturyAnchorOut
    explanation: ExplanationOut


class DistanceOut(BaseModel):
    """Nearest doomsday; days > 0 means the doomsday is earlier than the date."""
    found: DateOut
    forward: bool
    days: int
    month_distances: dict[str, int]


class WeekdayResponse(BaseModel):
    date: DateOut
    result: WeekDayOut
    increment: WeekDayOut
    distance: DistanceOut
    year_anchor: YearAnchorOut
    detail: int
    explanations: list[ExplanationOut]


class AnchorsResponse(BaseModel):
    century_anchor: CenturyAnchorOut
    year_anchor: YearAnchorOut


class RandomDateResponse(BaseModel):
    reference: DateOut
    granularity: str
    date: DateOut


# --- Guess checking (trainer over HTTP) ---------------------------------------

class GuessRequest(BaseModel):
    """One trainer prompt line answered for a date."""
    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int
    line: str = Field(max_length=32)

    @field_validator("line")
    @classmethod
    def strip_line(cls, v: str) -> str:
        return v.strip()


class GuessResponse(BaseModel):
    outcome: Literal[
        "correct", "wrong", "reveal", "help", "empty", "quit", "unparseable",
    ]
    message: str
    guess: WeekDayOut | None = None
    answer: WeekDayOut | None = None
    explanations: list[ExplanationOut] = []
