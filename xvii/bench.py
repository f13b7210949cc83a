"""Rough timings for parsing and formatting: python -m xvii.bench [number]"""

import logging
import sys
import timeit
from typing import Dict, List

from .encoder import to_roman
from .roman import Roman

logger = logging.getLogger(__name__)

VALUES = range(100, 501)


def _parse_all(numerals: List[str]) -> None:
    for numeral in numerals:
        Roman.parse(numeral)


def _format_all() -> None:
    for value in VALUES:
        str(Roman.new_unchecked(value))


def run(number: int = 100) -> Dict[str, float]:
    """Return seconds per pass over 100..500 for each conversion direction."""
    numerals = [to_roman(value) for value in VALUES]
    timings = {
        "parse": timeit.timeit(lambda: _parse_all(numerals), number=number) / number,
        "format": timeit.timeit(_format_all, number=number) / number,
    }
    for name, seconds in timings.items():
        logger.info("%s: %.1f us per pass", name, seconds * 1e6)
    return timings


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    number = int(sys.argv[1]) if len(sys.argv) > 1 else 100
    run(number)


if __name__ == "__main__":
    main()
