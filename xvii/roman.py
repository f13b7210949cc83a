import functools
import operator
from typing import Any, SupportsIndex, Tuple

from .decoder import decode
from .encoder import Case, RomanFormatter, to_roman
from .errors import RangeError
from .ladder import CEILING, MAX_VALUE, MIN_VALUE, Ceiling


@functools.total_ordering
class Roman:
    """
    An integer that can be written as a Roman numeral.

    ``Roman(n)`` and ``Roman.try_new(n)`` refuse anything outside
    ``MIN_VALUE..MAX_VALUE``. ``Roman.new_unchecked(n)`` does not check;
    such values still format without raising: anything below one formats as
    an empty string, and anything above the ceiling as a longer run of "M"
    than the canonical form allows.
    """

    __slots__ = ("_value",)

    _value: int

    def __init__(self, value: SupportsIndex) -> None:
        value = operator.index(value)
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise RangeError(value, MIN_VALUE, MAX_VALUE)
        object.__setattr__(self, "_value", value)

    @classmethod
    def try_new(cls, value: SupportsIndex) -> "Roman":
        return cls(value)

    @classmethod
    def new_unchecked(cls, value: SupportsIndex) -> "Roman":
        roman = cls.__new__(cls)
        object.__setattr__(roman, "_value", operator.index(value))
        return roman

    @classmethod
    def parse(cls, text: str, ceiling: Ceiling = CEILING) -> "Roman":
        return cls(decode(text, ceiling))

    @property
    def value(self) -> int:
        return self._value

    def format(self, case: Case = Case.UPPER) -> RomanFormatter:
        return RomanFormatter(self._value, case)

    def to_uppercase(self) -> str:
        return to_roman(self._value, Case.UPPER)

    def to_lowercase(self) -> str:
        return to_roman(self._value, Case.LOWER)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Tuple[Any, Tuple[int]]:
        return (_restore, (self._value,))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roman):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Roman):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.to_uppercase()

    def __repr__(self) -> str:
        return f"Roman({self._value})"


def _restore(value: int) -> Roman:
    return Roman.new_unchecked(value)


def parse(text: str, ceiling: Ceiling = CEILING) -> Roman:
    return Roman.parse(text, ceiling)
