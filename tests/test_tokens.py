"""Tests for token list scanning."""

import pytest

from msduration import IncompleteParse, InvalidNumber, UnknownUnit
from msduration.tokens import iter_tokens, scan_tokens
from msduration.types import Token


class TestIterTokens:
    """Tests for iter_tokens function."""

    def test_spans_and_values(self) -> None:
        """Test token values, units and spans."""
        tokens = list(iter_tokens("1h -30 min"))
        assert tokens == [
            Token(value=1.0, unit="h", start=0, end=2, text="1"),
            Token(value=-30.0, unit="min", start=3, end=10, text="-30"),
        ]

    def test_keeps_unit_case(self) -> None:
        """Test that units keep their scanned case."""
        (token,) = iter_tokens("2HrS")
        assert token.unit == "HrS"

    def test_is_lazy(self) -> None:
        """Test that tokens are produced one at a time."""
        tokens = iter_tokens("1h 2m")
        assert next(tokens).unit == "h"
        assert next(tokens).unit == "m"
        with pytest.raises(StopIteration):
            next(tokens)

    def test_is_restartable(self) -> None:
        """Test that each call scans from the start."""
        assert list(iter_tokens("1h 2m")) == list(iter_tokens("1h 2m"))

    def test_skips_text_without_digits(self) -> None:
        """Test that text without a number is not a token."""
        assert list(iter_tokens("abc")) == []
        assert [t.text for t in iter_tokens("1..5h")] == ["5"]


class TestScanTokens:
    """Tests for scan_tokens function."""

    def test_sums_before_rounding(self) -> None:
        """Test that rounding happens once on the total."""
        assert scan_tokens("0.25ms 0.25ms", "0.25ms 0.25ms") == 1

    def test_per_token_sign(self) -> None:
        """Test that each token carries its own sign."""
        assert scan_tokens("1h -30m", "1h -30m") == 1_800_000
        assert scan_tokens("-1h 30m", "-1h 30m") == -1_800_000

    def test_no_separator_needed(self) -> None:
        """Test tokens written back to back."""
        assert scan_tokens("1d2h3m4s5ms", "1d2h3m4s5ms") == 93_784_005

    def test_no_tokens(self) -> None:
        """Test that text without tokens is rejected."""
        with pytest.raises(IncompleteParse):
            scan_tokens("hello", "hello")

    def test_leftover(self) -> None:
        """Test that junk between tokens is rejected."""
        with pytest.raises(IncompleteParse, match='could not fully parse " 1h, 2m"'):
            scan_tokens("1h, 2m", " 1h, 2m")

    def test_unknown_unit_names_scanned_text(self) -> None:
        """Test that unknown units are reported as scanned."""
        with pytest.raises(UnknownUnit) as exc_info:
            scan_tokens("1h 5Weeks", "1h 5Weeks")
        assert exc_info.value.unit == "Weeks"
        assert str(exc_info.value) == 'parse_duration_ms: unknown unit "Weeks" in "1h 5Weeks"'


class TestInvalidNumber:
    """Tests for numbers that overflow a float."""

    def test_overflowing_token(self) -> None:
        """Test that a token too large for a float is an invalid number."""
        digits = "1" * 400
        value = f"1h {digits}m"
        with pytest.raises(InvalidNumber) as exc_info:
            scan_tokens(value, value)
        assert exc_info.value.token == digits
        assert str(exc_info.value) == f'parse_duration_ms: invalid number "{digits}" in "{value}"'

    def test_overflowing_total(self) -> None:
        """Test that a sum too large for a float is an invalid number."""
        value = "9" * 305 + "h"
        with pytest.raises(InvalidNumber) as exc_info:
            scan_tokens(value, value)
        assert exc_info.value.token is None
        assert str(exc_info.value) == f'parse_duration_ms: invalid number "{value}"'

    def test_opposite_overflows(self) -> None:
        """Test that +inf and -inf totals are rejected, not summed to nan."""
        big = "9" * 305
        value = f"{big}h -{big}h"
        with pytest.raises(InvalidNumber):
            scan_tokens(value, value)

    def test_message_without_token(self) -> None:
        """Test the message form used for whole inputs."""
        error = InvalidNumber(None, " 1e999 ")
        assert str(error) == 'parse_duration_ms: invalid number " 1e999 "'
        assert error.input == " 1e999 "
