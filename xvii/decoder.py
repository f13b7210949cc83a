"""
Strict Roman numeral decoder.

A numeral is read once, left to right, by a small state machine. Each
character moves the machine from one state to the next; an illegal character,
ordering or repetition raises a ParseError subclass, which serves as the
machine's error state. Only the canonical spelling of a value is accepted:
"IIII", "VX", "IXI" and "DCD" are all rejected.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import (
    EmptyInput,
    InvalidCharacter,
    InvalidOrder,
    OutOfRange,
    ParseError,
    RepeatedSymbol,
)
from .ladder import CEILING, DIGITS, MIN_VALUE, PAIRS, Ceiling, Rung

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Start:
    """Nothing has been consumed yet."""


@dataclass(frozen=True)
class AfterWeight:
    """
    A run of identical digits is open.

    ``total`` excludes the newest digit: it stays pending so that a larger
    digit arriving next can fold it into a subtractive pair.
    """

    total: int
    digit: Rung
    run: int
    # Weight of whatever came before the run, if anything.
    previous: Optional[int]


@dataclass(frozen=True)
class AfterPair:
    """A subtractive pair was just closed. The next digit must be below ``unit``."""

    total: int
    unit: Rung


@dataclass(frozen=True)
class Done:
    value: int


State = Union[Start, AfterWeight, AfterPair, Done]


def step(state: State, text: str, position: int) -> State:
    """Consume ``text[position]`` and return the next state."""
    digit = DIGITS.get(text[position])
    if digit is None:
        raise InvalidCharacter(text, position)

    if isinstance(state, Start):
        return AfterWeight(0, digit, 1, None)

    if isinstance(state, AfterPair):
        if digit.value >= state.unit.value:
            raise InvalidOrder(text, position)
        return AfterWeight(state.total, digit, 1, state.unit.value)

    if isinstance(state, AfterWeight):
        last = state.digit

        if digit.value == last.value:
            run = state.run + 1
            if last.repeat is not None and run > last.repeat:
                raise RepeatedSymbol(text, position, last.repeat)
            return AfterWeight(state.total + last.value, digit, run, state.previous)

        if digit.value < last.value:
            return AfterWeight(state.total + last.value, digit, 1, last.value)

        # A larger digit is only legal as the second half of IV, IX, XL, XC, CD or CM,
        # and only when whatever came before is worth at least ten of the unit.
        pair = PAIRS.get((last.symbol, digit.symbol))
        if pair is None or state.run > 1:
            raise InvalidOrder(text, position)
        if state.previous is not None and state.previous < 10 * last.value:
            raise InvalidOrder(text, position)
        return AfterPair(state.total + pair.value, last)

    raise TypeError(f"Cannot step from terminal state {state!r}")


def finish(state: State, text: str, ceiling: Ceiling = CEILING) -> Done:
    """Close the scan and apply the range check."""
    if isinstance(state, Start):
        raise EmptyInput(text)

    if isinstance(state, AfterWeight):
        value = state.total + state.digit.value
    elif isinstance(state, AfterPair):
        value = state.total
    else:
        return state

    if not MIN_VALUE <= value <= ceiling.max_value:
        raise OutOfRange(text, value, ceiling.max_value)
    return Done(value)


def decode(text: str, ceiling: Ceiling = CEILING) -> int:
    """
    Converts a Roman numeral string to an integer, strictly enforcing
    validity rules (run limits, legal subtractive pairs, descending order)
    and the range allowed by ``ceiling``. Upper and lower case are both
    accepted.
    """
    state: State = Start()
    try:
        for position in range(len(text)):
            state = step(state, text, position)
        return finish(state, text, ceiling).value
    except ParseError as e:
        logger.debug("Rejected numeral: %s", e)
        raise
