"""
PassGauge -- Password Strength & Crack-Time Estimator
======================================================

Evaluates password strength as a 0-100 score with qualitative feedback,
estimates the expected brute-force crack time, checks composition
requirements and generates random passwords that satisfy them.

Modules:
    - gauge.core.engine: Strength engine facade
    - gauge.core.models: Pydantic data models
    - gauge.analyzers: Individual engine components
    - gauge.output: Console output
    - gauge.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

__version__ = "1.0.0"
__tool_name__ = "gauge"

from gauge.core.engine import (
    StrengthEngine,
    check_all_requirements,
    estimate_crack_time,
    evaluate_password,
    generate_password,
    review_submission,
    update_requirements,
)

__all__ = [
    "StrengthEngine",
    "check_all_requirements",
    "estimate_crack_time",
    "evaluate_password",
    "generate_password",
    "review_submission",
    "update_requirements",
]
