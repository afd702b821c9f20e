"""Anchors — century and year doomsday weekdays.

Tests cover:
    - Known century anchors and the 400-year cycle
    - increment via *5 equals increment via *-2 (mod 7)
    - Year anchor equals the weekday of the last day of February, 1900–2100
    - Explanations: subject tagged INPUT, answer only on the final step
"""

import datetime

import pytest

from doomsday.core.anchors import find_century_anchor, find_year_anchor
from doomsday.core.domain_types import WeekDay, Year
from doomsday.core.explanation import FragmentTag


def _last_day_of_february(number: int) -> WeekDay:
    day = datetime.date(number, 3, 1) - datetime.timedelta(days=1)
    return WeekDay(day.isoweekday() % 7)


# ─── Century anchor ──────────────────────────────────────────────

@pytest.mark.parametrize("number, weekday", [
    (2000, WeekDay.TUESDAY), (1900, WeekDay.WEDNESDAY), (2100, WeekDay.SUNDAY),
    (2200, WeekDay.FRIDAY), (1600, WeekDay.TUESDAY), (2023, WeekDay.TUESDAY),
])
def test_known_century_anchors(number, weekday):
    assert find_century_anchor(Year(number)).result is weekday


def test_century_anchor_repeats_every_400_years():
    for number in range(-800, 3000, 37):
        assert (
            find_century_anchor(Year(number)).result
            is find_century_anchor(Year(number + 400)).result
        )


def test_century_increment_five_equals_minus_two():
    for number in range(0, 4000, 100):
        anchor = find_century_anchor(Year(number))
        assert int(anchor.increment) == (anchor.cycle_index * 5) % 7
        assert int(anchor.increment) == (anchor.cycle_index * -2) % 7


def test_century_anchor_fields_for_2023():
    anchor = find_century_anchor(Year(2023))
    assert anchor.century == 20
    assert anchor.cycle_index == 0
    assert anchor.increment is WeekDay.SUNDAY


def test_century_anchor_is_total_for_any_year():
    assert find_century_anchor(Year(-1)).result in set(WeekDay)
    assert find_century_anchor(Year(0)).result is WeekDay.TUESDAY


# ─── Year anchor ─────────────────────────────────────────────────

@pytest.mark.parametrize("number, weekday", [
    (1900, WeekDay.WEDNESDAY), (2000, WeekDay.TUESDAY), (2023, WeekDay.TUESDAY),
    (2024, WeekDay.THURSDAY),
])
def test_known_year_anchors(number, weekday):
    assert find_year_anchor(Year(number)).result is weekday


def test_year_anchor_matches_last_day_of_february():
    for number in range(1900, 2101):
        assert find_year_anchor(Year(number)).result is _last_day_of_february(number), number


def test_year_anchor_increment_is_not_reduced():
    anchor = find_year_anchor(Year(2099))
    assert anchor.year_in_century == 99
    assert anchor.increment_raw == 123
    assert anchor.increment is WeekDay.from_days_since_sunday(123)
    assert anchor.century_anchor.result is WeekDay.TUESDAY


# ─── Explanations ────────────────────────────────────────────────

def test_century_explanation_structure():
    explanation = find_century_anchor(Year(2000)).explanation
    assert explanation.title == "Find the century anchor."
    assert [f.tag for f in explanation.intro] == [FragmentTag.TEXT, FragmentTag.INPUT]
    assert explanation.intro[1].text == "2000"
    assert len(explanation.steps) == 4
    assert explanation.answer == "Tuesday"


def test_year_explanation_answer_only_on_last_step():
    anchor = find_year_anchor(Year(2023))
    steps = anchor.explanation.steps
    for s in steps[:-1]:
        assert FragmentTag.ANSWER not in {f.tag for f in s}
    assert steps[-1][-1].tag is FragmentTag.ANSWER
    assert steps[-1][-1].text == str(anchor.result)


def test_year_explanation_shows_increment_equation():
    steps = find_year_anchor(Year(2023)).explanation.steps
    maths = [f.text for s in steps for f in s if f.tag is FragmentTag.MATH]
    assert "Y = 23" in maths
    assert "I = (Y + Y/4) = 28 ≡ 0 ≡ Sunday" in maths
