"""
Gauge Core Data Models
=======================

Pydantic models for the PassGauge strength engine: the composition
profile behind the live requirement indicators, the evaluation result
handed to renderers, the intermediate values of the crack-time model,
and the verdict of the submission gate.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and any other hosting UI.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.config import DEFAULT_GUESS_RATE


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthBand(str, enum.Enum):
    """Qualitative band of a 0-100 strength score.

    Band boundaries are 30, 60 and 80.
    """

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    EXCELLENT = "excellent"

    @classmethod
    def from_score(cls, score: int) -> StrengthBand:
        if score < 30:
            return cls.WEAK
        if score < 60:
            return cls.MODERATE
        if score < 80:
            return cls.STRONG
        return cls.EXCELLENT


class SubmissionStatus(str, enum.Enum):
    """Outcome of the submission gate."""

    EMPTY = "empty"
    REQUIREMENTS_UNMET = "requirements_unmet"
    COMMON_PASSWORD = "common_password"
    ACCEPTED = "accepted"


# ===================================================================== #
#  Requirement Models
# ===================================================================== #


class CompositionProfile(BaseModel):
    """Composition predicates of a single password.

    Attributes:
        has_min_length: Length meets the configured minimum (8 by default).
        has_upper: Contains at least one ``A-Z``.
        has_lower: Contains at least one ``a-z``.
        has_digit: Contains at least one ``0-9``.
        has_special: Contains at least one character outside ``A-Za-z0-9``.
    """

    model_config = ConfigDict(frozen=True)

    has_min_length: bool = False
    has_upper: bool = False
    has_lower: bool = False
    has_digit: bool = False
    has_special: bool = False

    @property
    def variety(self) -> int:
        """Number of character classes present (0-4)."""
        return sum(
            (self.has_upper, self.has_lower, self.has_digit, self.has_special)
        )

    @property
    def all_met(self) -> bool:
        """True when every requirement, including length, is satisfied."""
        return self.has_min_length and self.variety == 4


# ===================================================================== #
#  Crack Time Models
# ===================================================================== #


class CrackTimeEstimate(BaseModel):
    """Brute-force crack time estimate for one password.

    Attributes:
        pool_size: Alphabet size credited from the character classes present.
        entropy_bits: ``length * log2(pool_size)``.
        expected_guesses: ``2 ** (entropy_bits - 1)``, half the keyspace.
        guesses_per_second: Assumed attacker throughput.
        seconds: Expected time to crack in seconds.
        display: Human-readable duration, empty for an empty password.
    """

    pool_size: int = 0
    entropy_bits: float = 0.0
    expected_guesses: float = 0.0
    guesses_per_second: float = DEFAULT_GUESS_RATE
    seconds: float = 0.0
    display: str = ""


# ===================================================================== #
#  Evaluation Models
# ===================================================================== #


class EvaluationResult(BaseModel):
    """Result of scoring one password.

    Attributes:
        score: Strength score clamped to [0, 100].
        feedback_msg: Qualitative feedback, empty for an empty password.
        time_to_crack: Human-readable crack time, empty for an empty password.
        common_pattern: Whether a known-weak substring was found.
    """

    score: int = Field(default=0, ge=0, le=100)
    feedback_msg: str = ""
    time_to_crack: str = ""
    common_pattern: bool = False

    @property
    def band(self) -> StrengthBand:
        """Qualitative band of :attr:`score`."""
        return StrengthBand.from_score(self.score)


class SubmissionVerdict(BaseModel):
    """Verdict of the submission gate.

    Attributes:
        status: Why the submission was accepted or rejected.
        profile: Composition of the stripped password.
        result: Full evaluation, present only when accepted.
    """

    status: SubmissionStatus
    profile: CompositionProfile = Field(default_factory=CompositionProfile)
    result: Optional[EvaluationResult] = None

    @property
    def accepted(self) -> bool:
        return self.status is SubmissionStatus.ACCEPTED
