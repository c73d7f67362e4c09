"""Tests for rounding policy."""

import pytest

from msduration.rounding import round_half_up


class TestRoundHalfUp:
    """Tests for round_half_up function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, 0),
            (0.4, 0),
            (0.5, 1),
            (2.5, 3),
            (-2.5, -2),
            (-0.5, 0),
            (-0.4, 0),
            (-0.6, -1),
            (1500.4, 1500),
            (-1500.5, -1500),
            (0.49999999999999994, 0),
            (9007199254740991.0, 9007199254740991),
        ],
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        """Test that ties round toward positive infinity."""
        assert round_half_up(value) == expected

    def test_returns_int(self) -> None:
        """Test that results are plain ints."""
        assert type(round_half_up(1.5)) is int
        assert type(round_half_up(-0.0)) is int
