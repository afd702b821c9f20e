"""Render Explanation — turn tagged explanations into prose, pick what to reveal.

Invariants:
    - Rendering is deterministic: same Explanation + style -> same text
    - Layout: "{title} {intro}:" then one " - {step}" line per step
    - Fragments inside a line are joined by a single space
    - explanations_for_level orders century, year, weekday (broadest first)

Design Decisions:
    - Style is a plain callable (Fragment -> str): the CLI passes rich markup,
      the API passes nothing, the core never knows either vocabulary
"""

from collections.abc import Callable, Iterable

from doomsday.core.date import Date
from doomsday.core.domain_types import Ordering
from doomsday.core.explanation import Explanation, Fragment
from doomsday.core.weekday_finder import WeekdayResult

Style = Callable[[Fragment], str]

MAX_REVEAL_LEVEL = 4


def plain(fragment: Fragment) -> str:
    return fragment.text


def render_line(fragments: Iterable[Fragment], style: Style = plain) -> str:
    return " ".join(style(f) for f in fragments)


def render_explanation(explanation: Explanation, style: Style = plain) -> str:
    lines = [f"{explanation.title} {render_line(explanation.intro, style)}:"]
    lines += [f" - {render_line(s, style)}" for s in explanation.steps]
    return "\n".join(lines)


def explanations_for_level(result: WeekdayResult, level: int) -> list[Explanation]:
    """Explanations revealed for a run of `level` question marks.

    1 reveals only the answer, 2 adds the weekday derivation,
    3 the year anchor, 4 (or more) the century anchor.
    """
    level = min(level, MAX_REVEAL_LEVEL)
    revealed: list[Explanation] = []
    if level >= 4:
        revealed.append(result.year_anchor.century_anchor.explanation)
    if level >= 3:
        revealed.append(result.year_anchor.explanation)
    if level >= 2:
        revealed.append(result.explanation)
    return revealed


_TENSES: dict[Ordering, str] = {
    Ordering.BEFORE: "was",
    Ordering.SAME: "is",
    Ordering.AFTER: "will be",
}


def tense_of(date: Date, today: Date) -> str:
    """Verb for the date as seen from today: was, is or will be."""
    return _TENSES[date.compare(today)]
