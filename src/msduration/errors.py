"""Errors raised while parsing duration strings.

ValueError
 +- DurationParseError
     +- InvalidColonDuration
     +- UnknownUnit
     +- IncompleteParse
     +- InvalidNumber
"""

_PREFIX = "parse_duration_ms"


class DurationParseError(ValueError):
    """Base class for duration parsing failures.

    ``input`` is always the original, untrimmed string passed by the caller.
    """

    def __init__(self, message: str, input: str) -> None:
        super().__init__(f"{_PREFIX}: {message}")
        self.input = input


class InvalidColonDuration(DurationParseError):
    """Malformed ``H:M`` / ``H:M:S`` value (segment count, pattern or range)."""

    def __init__(self, input: str) -> None:
        super().__init__(f'invalid ":" duration "{input}"', input)


class UnknownUnit(DurationParseError):
    """A token's unit is not in the unit table."""

    def __init__(self, unit: str, input: str) -> None:
        super().__init__(f'unknown unit "{unit}" in "{input}"', input)
        self.unit = unit


class IncompleteParse(DurationParseError):
    """No tokens were found, or text was left over after removing them."""

    def __init__(self, input: str) -> None:
        super().__init__(f'could not fully parse "{input}"', input)


class InvalidNumber(DurationParseError):
    """A number, or the sum of a token list, overflows to a non-finite float."""

    def __init__(self, token: str | None, input: str) -> None:
        if token is None:
            message = f'invalid number "{input}"'
        else:
            message = f'invalid number "{token}" in "{input}"'
        super().__init__(message, input)
        self.token = token
