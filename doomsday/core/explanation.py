"""Explanation — structured, tagged trace of a multi-step derivation.

Invariants:
    - An Explanation is built once alongside its computation and never mutated
    - Every fragment carries exactly one FragmentTag; the core never styles text
    - Only the final step of a derivation contains an ANSWER fragment

Design Decisions:
    - Closed str Enum of tags: renderers match exhaustively and the JSON form is free
    - Steps are tuples of fragments, not strings, so a renderer can style each part
"""

from dataclasses import dataclass
from enum import Enum

from doomsday.core.domain_types import WeekDay


class FragmentTag(str, Enum):
    """What a piece of explanation text represents."""
    TEXT = "text"
    INPUT = "input"
    MATH = "math"
    ANSWER = "answer"


@dataclass(frozen=True)
class Fragment:
    tag: FragmentTag
    text: str


Step = tuple[Fragment, ...]


@dataclass(frozen=True)
class Explanation:
    title: str
    intro: Step
    steps: tuple[Step, ...]

    @property
    def answer(self) -> str | None:
        """Text of the ANSWER fragment, if the derivation has one."""
        for step in reversed(self.steps):
            for fragment in step:
                if fragment.tag is FragmentTag.ANSWER:
                    return fragment.text
        return None


# ─── Fragment constructors ───────────────────────────────────────

def text(value: str) -> Fragment:
    return Fragment(FragmentTag.TEXT, value)


def given(value: str) -> Fragment:
    return Fragment(FragmentTag.INPUT, value)


def math(value: str) -> Fragment:
    return Fragment(FragmentTag.MATH, value)


def answer(value: str) -> Fragment:
    return Fragment(FragmentTag.ANSWER, value)


def step(*parts: str | Fragment) -> Step:
    """Build a step; bare strings become TEXT fragments."""
    return tuple(p if isinstance(p, Fragment) else text(p) for p in parts)


def congruent(raw: int, weekday: WeekDay) -> str:
    """Equation tail `raw ≡ code ≡ Name` used by every derivation."""
    return f"{raw} ≡ {int(weekday)} ≡ {weekday!s}"
