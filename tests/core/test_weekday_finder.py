"""Weekday Finder — full Doomsday rule against datetime ground truth.

Tests cover:
    - 1 January 2000 was a Saturday
    - Every day of 2020–2023, plus a seeded sample across 1584–2999
    - Result does not depend on which consistent mnemonic is used
    - Invalid dates extrapolate instead of failing
    - Explanation: date as INPUT, month breakdown when crossing months
"""

import datetime
import random

import pytest

from doomsday.core.date import Date
from doomsday.core.domain_types import Month, WeekDay, Year
from doomsday.core.errors import EmptyMnemonicError
from doomsday.core.explanation import FragmentTag
from doomsday.core.mnemonics import (
    COMMON_MNEMONIC, EVEN_MONTHS, LEAP_MNEMONIC, MARCH_ZERO, SEVEN_ELEVEN,
    merge_mnemonics,
)
from doomsday.core.weekday_finder import find_weekday


def _reference(day: datetime.date) -> WeekDay:
    return WeekDay(day.isoweekday() % 7)


def test_first_of_january_2000_was_saturday():
    found = find_weekday(Date(1, Month.JANUARY, Year(2000)))
    assert found.result is WeekDay.SATURDAY
    assert found.year_anchor.result is WeekDay.TUESDAY
    assert found.increment is WeekDay.from_days_since_sunday(-3)


def test_every_day_2020_to_2023():
    day = datetime.date(2020, 1, 1)
    while day.year < 2024:
        found = find_weekday(Date.from_python_date(day))
        assert found.result is _reference(day), day.isoformat()
        day += datetime.timedelta(days=1)


def test_seeded_sample_across_gregorian_years():
    rng = random.Random(1583)
    for _ in range(2000):
        day = datetime.date(rng.randint(1584, 2999), rng.randint(1, 12), rng.randint(1, 28))
        assert find_weekday(Date.from_python_date(day)).result is _reference(day), day


def test_default_mnemonic_follows_leapness():
    assert find_weekday(Date(1, Month.MAY, Year(2024))).mnemonic is LEAP_MNEMONIC
    assert find_weekday(Date(1, Month.MAY, Year(2023))).mnemonic is COMMON_MNEMONIC


@pytest.mark.parametrize("number, table", [
    (2024, LEAP_MNEMONIC),
    (2024, EVEN_MONTHS),
    (2024, merge_mnemonics(SEVEN_ELEVEN, MARCH_ZERO)),
    (2023, COMMON_MNEMONIC),
    (2023, merge_mnemonics(EVEN_MONTHS, MARCH_ZERO)),
])
def test_result_independent_of_consistent_mnemonic(number, table):
    day = datetime.date(number, 1, 1)
    while day.year == number:
        date = Date.from_python_date(day)
        assert find_weekday(date, table).result is find_weekday(date).result, date.iso()
        day += datetime.timedelta(days=1)


def test_explicit_mnemonic_is_kept_on_result():
    found = find_weekday(Date(4, Month.APRIL, Year(2023)), EVEN_MONTHS)
    assert found.mnemonic is EVEN_MONTHS
    assert found.distance.days == 0


def test_invalid_date_extrapolates_without_error():
    # 31 April 2023 behaves like 1 May 2023, a Monday
    found = find_weekday(Date(31, Month.APRIL, Year(2023)))
    assert found.result is WeekDay.MONDAY


def test_empty_mnemonic_raises():
    with pytest.raises(EmptyMnemonicError):
        find_weekday(Date(1, Month.JANUARY, Year(2000)), {})


# ─── Explanation ─────────────────────────────────────────────────

def test_explanation_names_date_and_answer():
    found = find_weekday(Date(1, Month.JANUARY, Year(2000)))
    explanation = found.explanation
    assert explanation.title == "Find the weekday."
    assert explanation.intro[-1].tag is FragmentTag.INPUT
    assert explanation.intro[-1].text == "1 January 2000"
    assert explanation.answer == "Saturday"
    maths = [f.text for s in explanation.steps for f in s if f.tag is FragmentTag.MATH]
    assert "D = 4 January 2000" in maths
    assert "-3" in maths
    assert "I = -3 ≡ 4 ≡ Thursday" in maths
    assert "(A + I) = 6 ≡ 6 ≡" in maths


def test_explanation_has_no_breakdown_within_one_month():
    found = find_weekday(Date(1, Month.JANUARY, Year(2000)))
    assert len(found.explanation.steps) == 5


def test_explanation_breaks_down_months_when_crossing():
    found = find_weekday(Date(1, Month.MARCH, Year(2023)))
    assert len(found.explanation.steps) == 6
    breakdown = found.explanation.steps[3]
    assert breakdown[0].text == "counting back month by month"
    assert breakdown[1].text == "1 (March) + 0 (February)"
