"""Mnemonics — easy-to-remember (month, day) pairs that share the year's doomsday weekday.

Invariants:
    - Every table is a read-only Month -> day mapping
    - Within one year, all dates of the matching table fall on the same weekday
    - COMMON_MNEMONIC and LEAP_MNEMONIC are built once at import time

Design Decisions:
    - MappingProxyType over dict: tables are shared module state, so they must not mutate
    - MARCH_ZERO ("last day of February") is kept out of the default tables;
      day 0 reads poorly in explanations but is valid for custom tables
"""

from collections.abc import Mapping
from types import MappingProxyType

from doomsday.core.domain_types import Month

Mnemonic = Mapping[Month, int]


def _freeze(pairs: dict[Month, int]) -> Mnemonic:
    return MappingProxyType(dict(pairs))


EVEN_MONTHS: Mnemonic = _freeze({
    Month.APRIL: 4,
    Month.JUNE: 6,
    Month.AUGUST: 8,
    Month.OCTOBER: 10,
    Month.DECEMBER: 12,
})

NINE_TO_FIVE: Mnemonic = _freeze({
    Month.MAY: 9,
    Month.SEPTEMBER: 5,
})

SEVEN_ELEVEN: Mnemonic = _freeze({
    Month.JULY: 11,
    Month.NOVEMBER: 7,
})

COMMON_WINTER: Mnemonic = _freeze({
    Month.JANUARY: 3,
    Month.FEBRUARY: 28,
})

LEAP_WINTER: Mnemonic = _freeze({
    Month.JANUARY: 4,
    Month.FEBRUARY: 29,
})

MARCH_ZERO: Mnemonic = _freeze({
    Month.MARCH: 0,
})


def merge_mnemonics(*tables: Mnemonic) -> Mnemonic:
    """Merge tables left to right; later tables win on the same month."""
    merged: dict[Month, int] = {}
    for table in tables:
        merged.update(table)
    return _freeze(merged)


COMMON_MNEMONIC: Mnemonic = merge_mnemonics(
    EVEN_MONTHS, NINE_TO_FIVE, SEVEN_ELEVEN, COMMON_WINTER,
)
LEAP_MNEMONIC: Mnemonic = merge_mnemonics(
    EVEN_MONTHS, NINE_TO_FIVE, SEVEN_ELEVEN, LEAP_WINTER,
)


def default_mnemonic(is_leap: bool) -> Mnemonic:
    """The canonical table for a leap or common year."""
    return LEAP_MNEMONIC if is_leap else COMMON_MNEMONIC
