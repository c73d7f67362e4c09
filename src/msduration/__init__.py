"""msduration - Parse human-written durations to milliseconds."""

# Duration parsing
from msduration.duration import parse_duration, parse_duration_ms

# Errors
from msduration.errors import (
    DurationParseError,
    IncompleteParse,
    InvalidColonDuration,
    InvalidNumber,
    UnknownUnit,
)

# Core types
from msduration.types import Duration, DurationUnit

# Units
from msduration.units import UNIT_MS, is_duration_unit

__version__ = "0.1.0"

__all__ = [
    "UNIT_MS",
    "Duration",
    "DurationParseError",
    "DurationUnit",
    "IncompleteParse",
    "InvalidColonDuration",
    "InvalidNumber",
    "UnknownUnit",
    "is_duration_unit",
    "parse_duration",
    "parse_duration_ms",
]
