"""
Duration Formatter
===================

Turns a raw number of seconds into a compact human string such as
``"59 sec"``, ``"1.0 min"`` or ``"3 year"``.

Units are chosen from an ordered table of ``(threshold, divisor, unit)``
rows consulted in ascending order; the first row whose threshold exceeds
the value wins. A year is the Julian year (365.25 days).

Numeric rule, identical for every unit: a value below 10 with a
fractional part keeps one decimal place, anything else is rounded half
up to an integer.
"""

from __future__ import annotations

import math
from typing import NamedTuple

MINUTE = 60
HOUR = 3_600
DAY = 86_400
YEAR = 31_557_600

BELOW_ONE_SECOND = "<1 sec"

# Integers from here on are shown in exponent form ("1e+21")
_EXPONENT_FROM = 1e21


class DurationUnit(NamedTuple):
    threshold: float
    divisor: int
    unit: str


DURATION_TABLE: tuple[DurationUnit, ...] = (
    DurationUnit(MINUTE, 1, "sec"),
    DurationUnit(HOUR, MINUTE, "min"),
    DurationUnit(DAY, HOUR, "hr"),
    DurationUnit(YEAR, DAY, "day"),
    DurationUnit(math.inf, YEAR, "year"),
)


def format_value(value: float) -> str:
    """Render *value* with one decimal below 10 (when fractional), else as an integer."""
    if value < 10 and value % 1 != 0:
        return f"{value:.1f}"
    rounded = math.floor(value + 0.5)
    if rounded >= _EXPONENT_FROM:
        return repr(float(rounded))
    return str(rounded)


def format_duration(seconds: float) -> str:
    """Format *seconds* as ``"<value> <unit>"``.

    Non-finite values and anything below one second render as
    ``"<1 sec"``.

    Examples::

        >>> format_duration(0.5)
        '<1 sec'
        >>> format_duration(61)
        '1.0 min'
        >>> format_duration(31_557_600)
        '1 year'
    """
    if not math.isfinite(seconds) or seconds < 1:
        return BELOW_ONE_SECOND

    row = next(r for r in DURATION_TABLE if seconds < r.threshold)
    return f"{format_value(seconds / row.divisor)} {row.unit}"
