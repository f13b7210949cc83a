"""Greedy conversion of integers into Roman numeral symbols."""

import enum
import operator
from typing import Iterator, SupportsIndex, TextIO

from .ladder import LADDER


class Case(enum.Enum):
    UPPER = "upper"
    LOWER = "lower"


def symbols(value: SupportsIndex, case: Case = Case.UPPER) -> Iterator[str]:
    """
    Yield the symbols of ``value`` one at a time, largest first.

    Nothing is yielded for values below one. Values past the ceiling keep
    repeating "M" for as long as needed.
    """
    remaining = operator.index(value)
    lower = case is Case.LOWER

    for rung in LADDER:
        while remaining >= rung.value:
            remaining -= rung.value
            yield rung.symbol.lower() if lower else rung.symbol


def to_roman(value: SupportsIndex, case: Case = Case.UPPER) -> str:
    return "".join(symbols(value, case))


class RomanFormatter:
    """Lazily formats a value; no symbols are produced until it is consumed."""

    __slots__ = ("value", "case")

    def __init__(self, value: SupportsIndex, case: Case = Case.UPPER) -> None:
        self.value = operator.index(value)
        self.case = case

    def __iter__(self) -> Iterator[str]:
        return symbols(self.value, self.case)

    def __str__(self) -> str:
        return "".join(self)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"RomanFormatter({self.value!r}, {self.case})"

    def write(self, sink: TextIO) -> int:
        """Stream the symbols into ``sink``, returning the number of characters written."""
        written = 0
        for symbol in self:
            sink.write(symbol)
            written += len(symbol)
        return written
