"""Tests for coverage percentage arithmetic."""

import pytest

from gostats.core.percent import percent


class TestPercent:
    @pytest.mark.parametrize(
        ("covered", "total", "expected"),
        [
            (0, 10, 0.0),
            (10, 10, 100.0),
            (1, 2, 50.0),
            (1, 3, 33.3),
            (2, 3, 66.7),
            # 6.25 rounds half away from zero
            (1, 16, 6.3),
            (5, 8, 62.5),
            (1, 7, 14.3),
            # exact halves that binary floats would round down
            (201, 400, 50.3),
            (1001, 2000, 50.1),
            (3, 400, 0.8),
        ],
    )
    def test_rounds_to_one_decimal(self, covered: int, total: int, expected: float) -> None:
        assert percent(covered, total) == expected

    @pytest.mark.parametrize("total", [0, -5])
    def test_non_positive_total_is_zero(self, total: int) -> None:
        assert percent(3, total) == 0.0

    def test_clamped_to_bounds(self) -> None:
        assert percent(11, 10) == 100.0
        assert percent(-1, 10) == 0.0
