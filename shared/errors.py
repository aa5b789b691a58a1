"""
PassGauge Exceptions
=====================

Exception hierarchy shared by the PassGauge modules. Strength evaluation
itself never raises; these cover configuration and caller misuse.
"""


class GaugeError(Exception):
    """Base exception for PassGauge."""

    pass


class GaugeConfigError(GaugeError, ValueError):
    """Raised when configuration values are missing, malformed or out of range."""

    pass
