"""Domain Types — calendar primitives.

Tests:
    - Month lengths (leap and common) agree with the calendar module
    - Leap rule, including the century exceptions
    - WeekDay normalization and modular arithmetic
    - Granularity letters parse, unknown letters raise RangeParseError
"""

import calendar

import pytest

from doomsday.core.domain_types import (
    FIRST_GREGORIAN_YEAR, Granularity, Month, WeekDay, Year, days_in_month,
)
from doomsday.core.errors import RangeParseError


# ─── Month ───────────────────────────────────────────────────────

def test_february_has_29_days_in_leap_year():
    assert days_in_month(Month.FEBRUARY, is_leap=True) == 29
    assert days_in_month(Month.FEBRUARY, is_leap=False) == 28


def test_year_has_365_or_366_days():
    assert sum(days_in_month(m) for m in Month) == 365
    assert sum(days_in_month(m, is_leap=True) for m in Month) == 366


def test_month_lengths_match_calendar_module():
    for month in Month:
        assert days_in_month(month) == calendar.monthrange(2023, month.value)[1]
        assert Year(2024).month_length(month) == calendar.monthrange(2024, month.value)[1]


def test_month_navigation_stops_at_year_edges():
    assert Month.JANUARY.previous() is None
    assert Month.DECEMBER.next() is None
    assert Month.MARCH.previous() is Month.FEBRUARY
    assert Month.MARCH.next() is Month.APRIL


def test_month_is_ordered_and_built_from_code():
    assert Month(1) is Month.JANUARY
    assert Month.JANUARY < Month.DECEMBER
    with pytest.raises(ValueError):
        Month(13)


def test_month_str_is_capitalized_name():
    assert str(Month.SEPTEMBER) == "September"


# ─── Year ────────────────────────────────────────────────────────

@pytest.mark.parametrize("number, leap", [
    (2024, True), (2023, False), (2000, True), (1900, False), (2100, False), (1600, True),
])
def test_leap_years(number, leap):
    assert Year(number).is_leap() is leap


def test_leap_rule_matches_calendar_module():
    for number in range(1583, 2501):
        assert Year(number).is_leap() == calendar.isleap(number), number


def test_year_ordering_and_century_start():
    assert Year(1999) < Year(2000)
    assert FIRST_GREGORIAN_YEAR == Year(1583)
    assert Year(2023).century_start() == Year(2000)
    assert Year(1999).century_start() == Year(1900)
    assert str(Year(2023)) == "2023"


# ─── WeekDay ─────────────────────────────────────────────────────

def test_from_days_since_sunday_is_periodic():
    for n in range(-60, 60):
        for k in (-1000, -3, -1, 1, 2, 10**6):
            assert (
                WeekDay.from_days_since_sunday(n)
                == WeekDay.from_days_since_sunday(n + 7 * k)
            )


def test_from_days_since_sunday_never_negative():
    assert WeekDay.from_days_since_sunday(-1) is WeekDay.SATURDAY
    assert WeekDay.from_days_since_sunday(-7) is WeekDay.SUNDAY
    assert WeekDay.from_days_since_sunday(-8) is WeekDay.SATURDAY
    assert WeekDay.from_days_since_sunday(10**12 + 3) is WeekDay(int((10**12 + 3) % 7))


def test_weekday_addition_wraps():
    assert WeekDay.SATURDAY + WeekDay.MONDAY is WeekDay.SUNDAY
    assert WeekDay.TUESDAY + 5 is WeekDay.SUNDAY
    assert 3 + WeekDay.MONDAY is WeekDay.THURSDAY
    assert WeekDay.SUNDAY - 1 is WeekDay.SATURDAY
    assert WeekDay.MONDAY - WeekDay.WEDNESDAY is WeekDay.FRIDAY
    assert 1 - WeekDay.TUESDAY is WeekDay.SATURDAY


def test_weekday_group_laws():
    days = list(WeekDay)
    for a in days:
        assert a + WeekDay.zero() is a
        assert a - a is WeekDay.SUNDAY
        for b in days:
            assert a + b is b + a
            for c in days:
                assert (a + b) + c is a + (b + c)


def test_weekday_str_is_capitalized_name():
    assert str(WeekDay.TUESDAY) == "Tuesday"
    assert int(WeekDay.SATURDAY) == 6


# ─── Granularity ─────────────────────────────────────────────────

@pytest.mark.parametrize("letter, level", [
    ("M", Granularity.MONTH), ("y", Granularity.YEAR),
    (" C ", Granularity.CENTURY), ("A", Granularity.ANY),
])
def test_granularity_from_letter(letter, level):
    assert Granularity.from_letter(letter) is level


def test_granularity_unknown_letter_raises():
    with pytest.raises(RangeParseError) as exc_info:
        Granularity.from_letter("Z")
    assert exc_info.value.code == "RANGE_PARSE_ERROR"
    assert exc_info.value.http_status == 400
