"""Clock notation: ``H:M`` and ``H:M:S[.frac]``."""

import math
import re

from msduration.errors import InvalidColonDuration
from msduration.rounding import round_half_up
from msduration.types import ClockTime

_HOURS_PATTERN = re.compile(r"[+-]?[0-9]+")
_MINUTES_PATTERN = re.compile(r"[0-9]+")
_SECONDS_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def parse_clock_time(value: str) -> ClockTime | None:
    """Parse a colon-delimited string into its parts. None if malformed.

    Hours may carry a sign, which applies to the whole value. Minutes must be
    in [0, 59] and seconds in [0, 60); neither may be signed.
    """
    parts = [part.strip() for part in value.split(":")]
    if len(parts) not in (2, 3):
        return None

    hours_str, minutes_str = parts[0], parts[1]
    seconds_str = parts[2] if len(parts) == 3 else None

    if not _HOURS_PATTERN.fullmatch(hours_str):
        return None
    if not _MINUTES_PATTERN.fullmatch(minutes_str):
        return None
    if seconds_str is not None and not _SECONDS_PATTERN.fullmatch(seconds_str):
        return None

    # Parsed as float so huge values overflow to inf instead of raising
    hours_value = float(hours_str)
    minutes_value = float(minutes_str)
    seconds = float(seconds_str) if seconds_str is not None else 0.0

    if not math.isfinite(hours_value):
        return None
    if not 0 <= minutes_value < 60:
        return None
    if not 0 <= seconds < 60:
        return None

    sign = -1 if hours_str.startswith("-") else 1
    hours = int(abs(hours_value))
    minutes = int(minutes_value)
    clock = ClockTime(sign=sign, hours=hours, minutes=minutes, seconds=seconds)
    if not math.isfinite(clock.total_ms):
        return None
    return clock


def parse_colon_duration(value: str, original: str) -> int:
    """Parse clock notation to milliseconds, rounding once at the end."""
    clock = parse_clock_time(value)
    if clock is None:
        raise InvalidColonDuration(original)
    return round_half_up(clock.total_ms)
