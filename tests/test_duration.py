"""Tests for the duration formatter."""

import math

import pytest

from gauge.analyzers.duration import (
    DAY,
    DURATION_TABLE,
    HOUR,
    YEAR,
    format_duration,
    format_value,
)


@pytest.mark.parametrize("seconds", [0, -5, 0.5, 0.999, math.inf, -math.inf, math.nan])
def test_below_one_second_or_non_finite(seconds):
    assert format_duration(seconds) == "<1 sec"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (1, "1 sec"),
        (5.5, "5.5 sec"),
        (12.5, "13 sec"),
        (59, "59 sec"),
        (61, "1.0 min"),
        (90, "1.5 min"),
        (600, "10 min"),
        (HOUR, "1 hr"),
        (HOUR * 2.5, "2.5 hr"),
        (DAY, "1 day"),
        (DAY * 3, "3 day"),
        (YEAR, "1 year"),
        (YEAR * 250, "250 year"),
    ],
)
def test_unit_bands(seconds, expected):
    assert format_duration(seconds) == expected


def test_table_is_ascending_and_open_ended():
    thresholds = [row.threshold for row in DURATION_TABLE]
    assert thresholds == sorted(thresholds)
    assert thresholds[-1] == math.inf
    assert [row.unit for row in DURATION_TABLE] == ["sec", "min", "hr", "day", "year"]


class TestFormatValue:
    """Numeric rule shared by every unit."""

    def test_fractional_below_ten_keeps_one_decimal(self):
        assert format_value(1.02) == "1.0"
        assert format_value(9.46) == "9.5"

    def test_whole_below_ten_is_integer(self):
        assert format_value(3.0) == "3"

    def test_ten_and_above_rounds_half_up(self):
        assert format_value(10.5) == "11"
        assert format_value(42.4) == "42"

    def test_huge_values_use_exponent_form(self):
        assert format_value(1e21) == "1e+21"
        assert format_value(2.5e22) == "2.5e+22"
        assert format_value(1e20) == "100000000000000000000"
