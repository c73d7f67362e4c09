"""Token list notation: ``"1h 30m"``, ``"23 h 30 min"``, ``"1.5h"``."""

import math
import re
from collections.abc import Iterator

from msduration.errors import IncompleteParse, InvalidNumber, UnknownUnit
from msduration.rounding import round_half_up
from msduration.types import Token
from msduration.units import unit_multiplier

TOKEN_PATTERN = re.compile(r"([+-]?[0-9]+(?:\.[0-9]+)?)\s*([a-zA-Z]+)")


def iter_tokens(value: str) -> Iterator[Token]:
    """Yield each leftmost, non-overlapping ``<number><unit>`` match in order.

    Every call starts a fresh scan of ``value``.
    """
    for match in TOKEN_PATTERN.finditer(value):
        number, unit = match.groups()
        yield Token(
            value=float(number),
            unit=unit,
            start=match.start(),
            end=match.end(),
            text=number,
        )


def _remainder(value: str, tokens: list[Token]) -> str:
    """Text of value with every token span removed."""
    pieces: list[str] = []
    pos = 0
    for token in tokens:
        pieces.append(value[pos : token.start])
        pos = token.end
    pieces.append(value[pos:])
    return "".join(pieces)


def scan_tokens(value: str, original: str) -> int:
    """Sum a token list to milliseconds.

    Tokens are validated and summed left to right, each with its own sign, and
    the total is rounded once. Raises UnknownUnit for the first token whose
    unit is not in the table, and IncompleteParse if nothing matched or
    anything other than whitespace is left between the tokens.
    """
    total = 0.0
    tokens: list[Token] = []
    for token in iter_tokens(value):
        tokens.append(token)
        # float() overflows to inf past ~309 digits
        if not math.isfinite(token.value):
            raise InvalidNumber(token.text, original)
        multiplier = unit_multiplier(token.unit)
        if multiplier is None:
            raise UnknownUnit(token.unit, original)
        total += token.value * multiplier

    if not tokens or _remainder(value, tokens).strip():
        raise IncompleteParse(original)
    if not math.isfinite(total):
        raise InvalidNumber(None, original)

    return round_half_up(total)
