"""Core types for msduration."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

# Accepted unit spellings (case-insensitive when scanning; canonical form is lowercase)
DurationUnit = Literal[
    "d", "day", "days",
    "h", "hr", "hrs", "hour", "hours",
    "m", "min", "mins", "minute", "minutes",
    "s", "sec", "secs", "second", "seconds",
    "ms", "msec", "msecs", "millisecond", "milliseconds",
]  # fmt: skip


class InputKind(Enum):
    """Which notation a trimmed duration string is written in."""

    EMPTY = "empty"
    COLON = "colon"
    UNITLESS = "unitless"
    TOKENS = "tokens"


@dataclass(frozen=True, slots=True)
class Token:
    """A single ``<number><unit>`` occurrence found while scanning."""

    value: float
    unit: str  # as scanned, original case
    start: int
    end: int
    text: str  # numeric text as scanned


@dataclass(frozen=True, slots=True)
class ClockTime:
    """A parsed ``H:M`` / ``H:M:S[.frac]`` value."""

    sign: int  # +1 or -1, carried by the hours segment
    hours: int
    minutes: int
    seconds: float = 0.0

    @property
    def total_ms(self) -> float:
        """Unrounded signed total in milliseconds."""
        magnitude = float(self.hours) * 3_600_000 + self.minutes * 60_000 + self.seconds * 1000
        return self.sign * magnitude


# Duration type alias
Duration = str | int  # "1h 30m", "01:30", "1500" or milliseconds
