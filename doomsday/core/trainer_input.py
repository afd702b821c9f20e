"""Trainer Input — pure parser for one line typed at the trainer prompt.

Invariants:
    - Input is stripped before matching; matching is case-sensitive like the prompt help
    - A guess is an integer 0–7; 7 means Sunday (players may count Monday = 1 .. Sunday = 7)
    - A run of "?" reveals the answer; its length is the detail level
    - Never raises: anything unrecognized becomes Unparseable
"""

from dataclasses import dataclass

from doomsday.core.domain_types import WeekDay

QUIT_WORDS = frozenset({"q", "quit"})
HELP_WORDS = frozenset({"h", "help"})


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Reveal:
    level: int


@dataclass(frozen=True)
class Guess:
    weekday: WeekDay


@dataclass(frozen=True)
class Unparseable:
    text: str


TrainerCommand = Empty | Quit | Help | Reveal | Guess | Unparseable


def parse_trainer_input(line: str) -> TrainerCommand:
    line = line.strip()
    if not line:
        return Empty()
    if line in QUIT_WORDS:
        return Quit()
    if line in HELP_WORDS:
        return Help()
    if set(line) == {"?"}:
        return Reveal(len(line))
    return _parse_guess(line)


def _parse_guess(line: str) -> Guess | Unparseable:
    if not (line.isascii() and line.isdigit()):
        return Unparseable(line)
    number = int(line)
    if number > 7:
        return Unparseable(line)
    # 7 is Sunday for players counting from Monday; not a general modulo
    return Guess(WeekDay(0 if number == 7 else number))


TRAINER_HELP = """\
You will be prompted to calculate the day of the week for a given date.

Input your guess as a number 0 to 6 (Sunday to Saturday) and hit Enter.
You can also use 1 to 7 (Monday to Sunday).

If you would like to know the answer press '?' and hit Enter.
For more detailed step by step answer use "??", "???" and "????".

You can quit at any time using Ctrl+C, EOF (Ctrl+D) or "q"/"quit".

To see this message again type 'h' and hit Enter. GL, HF!"""
