"""
Password Scorer
================

Heuristic 0-100 strength score with qualitative feedback.

Scoring breakdown:
- Length: 5 points below 8 characters, 15 for 8-11, 30 for 12-15,
  40 for 16 and above.
- Variety: 10 points for each of uppercase, lowercase, digit and
  special character present (0-40).
- Common pattern: -25 points when a known-weak substring is found; the
  feedback then warns about common passwords regardless of the score.
- Bonus: +15 for 20+ characters drawn from at least 3 classes.

The total is clamped to [0, 100]. Without a pattern hit the feedback is
chosen by band: below 30 weak, below 60 moderate, below 80 strong,
otherwise excellent.
"""

from __future__ import annotations

from typing import Optional

from gauge.analyzers.crack_time import CrackTimeEstimator
from gauge.analyzers.patterns import CommonPatternDetector
from gauge.analyzers.requirements import (
    has_digit,
    has_lower,
    has_special,
    has_upper,
)
from gauge.core.models import EvaluationResult, StrengthBand

# (minimum length, points), longest first
LENGTH_POINTS: tuple[tuple[int, int], ...] = (
    (16, 40),
    (12, 30),
    (8, 15),
    (0, 5),
)
VARIETY_POINTS = 10
COMMON_PATTERN_PENALTY = 25
LONG_PASSWORD_LENGTH = 20
LONG_PASSWORD_VARIETY = 3
LONG_PASSWORD_BONUS = 15

COMMON_PATTERN_FEEDBACK = "Avoid common passwords or dictionary words."

BAND_FEEDBACK: dict[StrengthBand, str] = {
    StrengthBand.WEAK: "Weak password. Add more characters and symbols.",
    StrengthBand.MODERATE: "Moderate password. Try adding variety and length.",
    StrengthBand.STRONG: "Strong password. Could be improved further.",
    StrengthBand.EXCELLENT: "Excellent! Your password is strong.",
}


def length_points(length: int) -> int:
    for minimum, points in LENGTH_POINTS:
        if length >= minimum:
            return points
    return 0


class PasswordScorer:
    """Combines length, variety and the common-pattern penalty into a score.

    Usage::

        scorer = PasswordScorer()
        result = scorer.evaluate("correct-Horse-battery-9")
        print(result.score, result.feedback_msg, result.time_to_crack)

    Args:
        detector: Common-pattern detector; defaults to the built-in list.
        estimator: Crack-time estimator; defaults to 10^10 guesses/second.
    """

    def __init__(
        self,
        detector: Optional[CommonPatternDetector] = None,
        estimator: Optional[CrackTimeEstimator] = None,
    ) -> None:
        self.detector = detector or CommonPatternDetector()
        self.estimator = estimator or CrackTimeEstimator()

    def evaluate(self, password: str) -> EvaluationResult:
        """Score *password*.

        An empty password returns the zero sentinel
        (score 0, empty feedback, empty crack time).
        """
        if not password:
            return EvaluationResult()

        length = len(password)
        score = length_points(length)

        variety = sum((
            has_upper(password),
            has_lower(password),
            has_digit(password),
            has_special(password),
        ))
        score += variety * VARIETY_POINTS

        feedback = ""
        common = self.detector.matches(password)
        if common:
            score -= COMMON_PATTERN_PENALTY
            feedback = COMMON_PATTERN_FEEDBACK

        if length >= LONG_PASSWORD_LENGTH and variety >= LONG_PASSWORD_VARIETY:
            score += LONG_PASSWORD_BONUS

        score = max(0, min(score, 100))

        if not feedback:
            feedback = BAND_FEEDBACK[StrengthBand.from_score(score)]

        return EvaluationResult(
            score=score,
            feedback_msg=feedback,
            time_to_crack=self.estimator.estimate(password),
            common_pattern=common,
        )
