"""
PassGauge Shared Module
=======================

Configuration, logging, console and exception utilities shared across
the PassGauge packages.
"""

from shared.config import GaugeConfig, get_config
from shared.errors import GaugeConfigError, GaugeError

__all__ = ["GaugeConfig", "GaugeConfigError", "GaugeError", "get_config"]
