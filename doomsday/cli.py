"""Doomsday Trainer — interactive terminal drill for the Doomsday rule.

Invariants:
    - Each round asks for one random date and loops until it is answered or revealed
    - Quits cleanly on "q"/"quit", EOF or Ctrl+C with exit status 0
    - Colors are applied here only; the core emits tagged fragments

Design Decisions:
    - argparse for the handful of options (range letter, seed, color switch)
    - rich markup per fragment tag; the Console decides whether the terminal
      gets styles at all (no color system when off or not a TTY)
    - Input, console and "today" are injected so a session can be replayed in tests
"""

import argparse
import datetime
import logging
import random
import sys
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from doomsday.config import get_settings
from doomsday.core.date import Date
from doomsday.core.domain_types import Granularity
from doomsday.core.errors import RangeParseError
from doomsday.core.explanation import Explanation, Fragment, FragmentTag
from doomsday.core.render_explanation import (
    explanations_for_level, render_explanation, tense_of,
)
from doomsday.core.trainer_input import (
    TRAINER_HELP, Empty, Guess, Help, Quit, Reveal, Unparseable,
    parse_trainer_input,
)
from doomsday.core.weekday_finder import WeekdayResult, find_weekday
from doomsday.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

PROMPT = "> "
STOP_BANNER = "=== Doomsday CLI stopped ==="

# ─── Styles ──────────────────────────────────────────────────────

TAG_STYLES: dict[FragmentTag, str] = {
    FragmentTag.TEXT: "",
    FragmentTag.MATH: "italic",
    FragmentTag.INPUT: "blue",
    FragmentTag.ANSWER: "italic yellow",
}


def styled(text: str, style: str) -> str:
    """rich markup for text in style; the text itself is escaped."""
    return f"[{style}]{escape(text)}[/]" if style else escape(text)


def tag_markup(fragment: Fragment) -> str:
    return styled(fragment.text, TAG_STYLES[fragment.tag])


def dimmed_explanation(explanation: Explanation) -> Text:
    """Explanation prose with dim as the base style under each fragment style."""
    return Text.from_markup(
        render_explanation(explanation, tag_markup), style="dim", emoji=False,
    )


def make_console(color: bool, **kwargs) -> Console:
    """Console for the trainer: no wrapping, no auto-highlighting of numbers."""
    return Console(
        color_system="auto" if color else None,
        highlight=False,
        soft_wrap=True,
        emoji=False,
        **kwargs,
    )


class Trainer:
    """One interactive session."""

    def __init__(
        self,
        level: Granularity,
        rng: random.Random,
        today: Callable[[], Date],
        console: Console | None = None,
        read: Callable[[str], str] | None = None,
    ):
        self.level = level
        self.rng = rng
        self.today = today
        self.console = console if console is not None else make_console(True)
        self.read = read if read is not None else input

    def say(self, markup: str = "") -> None:
        self.console.print(markup)

    def run(self) -> int:
        try:
            while self.ask(self.today().random_within_granularity(self.level, self.rng)):
                self.say()
        except (EOFError, KeyboardInterrupt):
            pass
        self.say()
        self.say(STOP_BANNER)
        return 0

    def ask(self, date: Date) -> bool:
        """Ask about one date. False when the player wants to stop."""
        found = find_weekday(date)
        logger.debug(
            f"Asking for {date.iso()}",
            extra={"date": date.iso(), "granularity": self.level.value},
        )
        tense = tense_of(date, self.today())
        self.say(f"Which day of the week {tense}: {styled(date.pretty(), 'blue')}")
        while True:
            outcome = self.handle(self.read(PROMPT), found, tense)
            if outcome is not None:
                return outcome

    def handle(self, line: str, found: WeekdayResult, tense: str) -> bool | None:
        """React to one line: None keeps asking, True moves on, False stops."""
        match parse_trainer_input(line):
            case Empty():
                self.say(styled("Please input a weekday number 0-6", "dim"))
            case Quit():
                return False
            case Help():
                self.console.print(TRAINER_HELP, markup=False)
            case Reveal(level=level):
                self.reveal(found, level, tense)
                return True
            case Guess(weekday=weekday) if weekday == found.result:
                self.say(
                    f"{styled('Correct!', 'green')} The weekday {tense} "
                    f"{styled(str(weekday), 'green')}."
                )
                return True
            case Guess(weekday=weekday):
                self.say(f"{styled(str(weekday), 'red')} is wrong. Try again.")
            case Unparseable():
                self.say("Could not parse input! Please input a weekday number 0-6")
        return None

    def reveal(self, found: WeekdayResult, level: int, tense: str) -> None:
        for explanation in explanations_for_level(found, level):
            self.console.print(dimmed_explanation(explanation))
            self.say()
        self.say(f"The weekday {tense} {styled(str(found.result), 'yellow')}.")


def _today() -> Date:
    return Date.from_python_date(datetime.date.today())


def _range_letter(text: str) -> Granularity:
    try:
        return Granularity.from_letter(text)
    except RangeParseError as exc:
        raise argparse.ArgumentTypeError(exc.message) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doomsday",
        description="Doomsday algorithm command line trainer.",
        epilog=TRAINER_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r", "--range", dest="level", type=_range_letter, default=None,
        help="The range of random dates [M|Y|C|A] - this month/year/century or any.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the random dates (repeatable sessions).",
    )
    parser.add_argument(
        "--no-color", dest="color", action="store_false", default=None,
        help="Plain output without ANSI colors.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    args = build_parser().parse_args(argv)

    level = args.level
    if level is None:
        try:
            level = Granularity.from_letter(settings.default_range)
        except RangeParseError as exc:
            logger.error(exc.message, extra={"error_code": exc.code})
            return 2
    color = settings.color if args.color is None else args.color

    trainer = Trainer(
        level=level,
        rng=random.Random(args.seed),
        today=_today,
        console=make_console(color),
    )
    return trainer.run()


if __name__ == "__main__":
    sys.exit(main())
