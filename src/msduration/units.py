"""Unit table and unit lookups."""

from collections.abc import Mapping
from types import MappingProxyType

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60_000
MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000

UNIT_MS: Mapping[str, int] = MappingProxyType(
    {
        # milliseconds
        "ms": 1,
        "msec": 1,
        "msecs": 1,
        "millisecond": 1,
        "milliseconds": 1,
        # seconds
        "s": MS_PER_SECOND,
        "sec": MS_PER_SECOND,
        "secs": MS_PER_SECOND,
        "second": MS_PER_SECOND,
        "seconds": MS_PER_SECOND,
        # minutes
        "m": MS_PER_MINUTE,
        "min": MS_PER_MINUTE,
        "mins": MS_PER_MINUTE,
        "minute": MS_PER_MINUTE,
        "minutes": MS_PER_MINUTE,
        # hours
        "h": MS_PER_HOUR,
        "hr": MS_PER_HOUR,
        "hrs": MS_PER_HOUR,
        "hour": MS_PER_HOUR,
        "hours": MS_PER_HOUR,
        # days
        "d": MS_PER_DAY,
        "day": MS_PER_DAY,
        "days": MS_PER_DAY,
    }
)


def is_duration_unit(value: str) -> bool:
    """Check if value is exactly one of the canonical (lowercase) unit spellings.

    Case-sensitive and untrimmed: ``"ms"`` is a unit, ``"MS"`` and ``" ms"`` are not.
    """
    return isinstance(value, str) and value in UNIT_MS


def unit_multiplier(unit: str) -> int | None:
    """Milliseconds per unit for a scanned unit, ignoring case. None if unknown."""
    return UNIT_MS.get(unit.lower())
