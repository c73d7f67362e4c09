"""Duration parsing entry points."""

import math
import re

from msduration.clock import parse_colon_duration
from msduration.errors import InvalidNumber
from msduration.rounding import round_half_up
from msduration.tokens import scan_tokens
from msduration.types import Duration, InputKind

_UNITLESS_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")


def classify(value: str) -> InputKind:
    """Decide which notation an already-trimmed string is written in.

    Checked in priority order, so a colon anywhere means clock notation even
    when unit letters follow (``"1:30h"``).
    """
    if not value:
        return InputKind.EMPTY
    if ":" in value:
        return InputKind.COLON
    if _UNITLESS_PATTERN.fullmatch(value):
        return InputKind.UNITLESS
    return InputKind.TOKENS


def parse_duration_ms(input: str) -> int:
    """
    Parse a duration string to milliseconds.

    Supported:
        Tokens:   "23 h 30 min", "1.5h", "10 seconds", "500ms", "1h -30m"
        Colon:    "01:30" (H:M), "01:30:15.250" (H:M:S[.frac])
        Unitless: "1500" (milliseconds)

    Empty or whitespace-only input is 0. Fractional results are rounded once,
    at the end, with ties going toward positive infinity.

    Raises:
        DurationParseError: If the input can't be interpreted. The message
            always contains the original, untrimmed input.
    """
    raw = str(input)
    trimmed = raw.strip()

    kind = classify(trimmed)
    if kind is InputKind.EMPTY:
        return 0
    if kind is InputKind.COLON:
        return parse_colon_duration(trimmed, raw)
    if kind is InputKind.UNITLESS:
        value = float(trimmed)
        if not math.isfinite(value):
            raise InvalidNumber(None, raw)
        return round_half_up(value)
    return scan_tokens(trimmed, raw)


def parse_duration(duration: Duration) -> int:
    """Parse duration to milliseconds. Passthrough if already int."""
    if isinstance(duration, bool):
        raise TypeError(f"Expected str or int duration, got {type(duration)}")
    if isinstance(duration, int):
        return duration
    return parse_duration_ms(duration)
