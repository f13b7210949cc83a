"""
Parsing and formatting for Roman numerals.

    >>> from xvii import Roman
    >>> Roman.parse("XVII").value
    17
    >>> str(Roman(17))
    'XVII'
"""

from .decoder import decode
from .encoder import Case, RomanFormatter, to_roman
from .errors import (
    EmptyInput,
    InvalidCharacter,
    InvalidOrder,
    OutOfRange,
    ParseError,
    RangeError,
    RepeatedSymbol,
    RomanError,
)
from .ladder import CEILING, EXTENDED, MAX_VALUE, MIN_VALUE, STANDARD, Ceiling
from .roman import Roman, parse

__version__ = "0.1.0"

__all__ = [
    "CEILING",
    "EXTENDED",
    "MAX_VALUE",
    "MIN_VALUE",
    "STANDARD",
    "Case",
    "Ceiling",
    "EmptyInput",
    "InvalidCharacter",
    "InvalidOrder",
    "OutOfRange",
    "ParseError",
    "RangeError",
    "RepeatedSymbol",
    "Roman",
    "RomanError",
    "RomanFormatter",
    "decode",
    "parse",
    "to_roman",
]
