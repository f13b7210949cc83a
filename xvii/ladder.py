"""
The symbol table shared by the decoder and the encoder, and the range policy.

Both directions read the same ``LADDER``; the decoder's digit and pair lookups
are derived from it rather than written out a second time.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Rung:
    symbol: str
    value: int
    # Longest legal run of this symbol; None means uncapped.
    repeat: Optional[int] = 1


# Descending by value; greedy decomposition depends on this order.
LADDER: Tuple[Rung, ...] = (
    Rung("M", 1000, None),
    Rung("CM", 900),
    Rung("D", 500),
    Rung("CD", 400),
    Rung("C", 100, 3),
    Rung("XC", 90),
    Rung("L", 50),
    Rung("XL", 40),
    Rung("X", 10, 3),
    Rung("IX", 9),
    Rung("V", 5),
    Rung("IV", 4),
    Rung("I", 1, 3),
)


def _digits() -> Dict[str, Rung]:
    digits: Dict[str, Rung] = {}
    for rung in LADDER:
        if len(rung.symbol) == 1:
            digits[rung.symbol] = rung
            digits[rung.symbol.lower()] = rung
    return digits


def _pairs() -> Dict[Tuple[str, str], Rung]:
    return {
        (rung.symbol[0], rung.symbol[1]): rung
        for rung in LADDER
        if len(rung.symbol) == 2
    }


# The seven letters, accepted in either case.
DIGITS = _digits()

# Legal subtractive pairs, keyed by (unit, larger) uppercase letters.
PAIRS = _pairs()


MIN_VALUE = 1


@dataclass(frozen=True)
class Ceiling:
    """A named upper bound on the values a numeral may carry."""

    name: str
    max_value: int

    def __post_init__(self) -> None:
        if self.max_value < MIN_VALUE:
            raise ValueError(
                f"Ceiling {self.name!r} must be at least {MIN_VALUE}, got {self.max_value}"
            )


STANDARD = Ceiling("standard", 3999)
EXTENDED = Ceiling("extended", 4999)

CEILING = EXTENDED

MAX_VALUE = CEILING.max_value
