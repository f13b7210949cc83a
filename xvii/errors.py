class RomanError(ValueError):
    """Base class for everything this package raises on bad input."""


class ParseError(RomanError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"'{text}' is not a valid Roman numeral string ({reason}).")
        self.text = text


class EmptyInput(ParseError):
    def __init__(self, text: str = "") -> None:
        super().__init__(text, "empty input")


class InvalidCharacter(ParseError):
    def __init__(self, text: str, position: int) -> None:
        self.position = position
        self.character = text[position]
        super().__init__(
            text, f"invalid character {self.character!r} at position {position}"
        )


class InvalidOrder(ParseError):
    def __init__(self, text: str, position: int) -> None:
        self.position = position
        self.character = text[position]
        super().__init__(
            text, f"{self.character!r} at position {position} is out of order"
        )


class RepeatedSymbol(ParseError):
    def __init__(self, text: str, position: int, limit: int) -> None:
        self.position = position
        self.character = text[position]
        self.limit = limit
        times = "once" if limit == 1 else f"{limit} times"
        super().__init__(
            text,
            f"{self.character!r} at position {position} repeats more than {times}",
        )


class OutOfRange(ParseError):
    def __init__(self, text: str, value: int, max_value: int) -> None:
        self.value = value
        self.max_value = max_value
        super().__init__(text, f"value {value} is outside 1..{max_value}")


class RangeError(RomanError):
    def __init__(self, value: int, min_value: int, max_value: int) -> None:
        super().__init__(
            f"{value} cannot be written as a Roman numeral "
            f"(expected {min_value}..{max_value})."
        )
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
