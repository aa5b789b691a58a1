"""
Gauge Output
=============

Console renderers for the PassGauge CLI.
"""

from gauge.output.console import GaugeConsoleOutput

__all__ = ["GaugeConsoleOutput"]
