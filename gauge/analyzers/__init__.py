"""
Gauge Analyzers
================

Individual components of the PassGauge strength engine. Each analyzer
is pure and side-effect free.
"""

from gauge.analyzers.crack_time import CrackTimeEstimator
from gauge.analyzers.duration import format_duration
from gauge.analyzers.generator import PasswordGenerator
from gauge.analyzers.patterns import CommonPatternDetector
from gauge.analyzers.requirements import RequirementChecker
from gauge.analyzers.scorer import PasswordScorer

__all__ = [
    "CommonPatternDetector",
    "CrackTimeEstimator",
    "PasswordGenerator",
    "PasswordScorer",
    "RequirementChecker",
    "format_duration",
]
