"""
Gauge Core Module
==================

Contains the strength engine facade and data models.
"""

from gauge.core.engine import StrengthEngine
from gauge.core.models import (
    CompositionProfile,
    CrackTimeEstimate,
    EvaluationResult,
    StrengthBand,
    SubmissionStatus,
    SubmissionVerdict,
)

__all__ = [
    "CompositionProfile",
    "CrackTimeEstimate",
    "EvaluationResult",
    "StrengthBand",
    "StrengthEngine",
    "SubmissionStatus",
    "SubmissionVerdict",
]
