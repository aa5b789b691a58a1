"""
Gauge Strength Engine
======================

Central facade of the PassGauge strength engine. :class:`StrengthEngine`
wires the requirement checker, common-pattern detector, scorer,
crack-time estimator and generator together from one
:class:`~shared.config.GaugeConfig`, and exposes the operations a
hosting UI needs:

- ``check_all_requirements`` -- submission gate predicate.
- ``update_requirements`` -- profile for per-requirement indicators.
- ``evaluate_password`` -- score, feedback and crack time.
- ``generate_password`` -- random password meeting every requirement.
- ``review_submission`` -- full submission gate with a reason.

Every operation is synchronous and runs to completion. The engine holds
no mutable state, so one instance can serve every evaluation, including
one per keystroke.

Module-level functions of the same names delegate to a lazily created
default engine.
"""

from __future__ import annotations

import random
from typing import Optional

from shared.config import DEFAULT_GENERATED_LENGTH, GaugeConfig, get_config
from shared.logger import GaugeLogger

from gauge.analyzers.crack_time import CrackTimeEstimator
from gauge.analyzers.generator import PasswordGenerator
from gauge.analyzers.patterns import CommonPatternDetector
from gauge.analyzers.requirements import RequirementChecker
from gauge.analyzers.scorer import PasswordScorer
from gauge.core.models import (
    CompositionProfile,
    CrackTimeEstimate,
    EvaluationResult,
    SubmissionStatus,
    SubmissionVerdict,
)


class StrengthEngine:
    """Orchestrates all password strength operations.

    Usage::

        engine = StrengthEngine()
        engine.update_requirements("abc").has_lower      # True
        engine.evaluate_password("password").score      # 0
        engine.generate_password(16)

    Attributes:
        config: Validated configuration instance.
        logger: Logger for the engine. Never receives passwords.
    """

    def __init__(
        self,
        config: Optional[GaugeConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        logger: Optional[GaugeLogger] = None,
    ) -> None:
        self.config = (config or GaugeConfig()).validate()
        self.logger = logger or GaugeLogger.from_config("engine", self.config)

        settings = self.config.gauge
        self._checker = RequirementChecker(min_length=settings.min_length)
        self._detector = CommonPatternDetector(settings.common_patterns)
        self._estimator = CrackTimeEstimator(
            settings.guess_rate,
            lower_pool=settings.lower_pool,
            upper_pool=settings.upper_pool,
            digit_pool=settings.digit_pool,
            special_pool=settings.special_pool,
        )
        self._scorer = PasswordScorer(self._detector, self._estimator)
        self._generator = PasswordGenerator(rng)

    # ------------------------------------------------------------------ #
    #  Requirements
    # ------------------------------------------------------------------ #

    def update_requirements(self, password: str) -> CompositionProfile:
        """Composition profile of *password* for live requirement indicators."""
        return self._checker.profile(password)

    def check_all_requirements(self, password: str) -> bool:
        """True iff *password* meets the length and all four class requirements."""
        return self._checker.all_met(password)

    # ------------------------------------------------------------------ #
    #  Evaluation
    # ------------------------------------------------------------------ #

    def evaluate_password(self, password: str) -> EvaluationResult:
        """Score *password* and estimate its crack time.

        Returns:
            EvaluationResult; the zero sentinel for an empty password.
        """
        with self.logger.operation("evaluate"):
            result = self._scorer.evaluate(password)
            self.logger.debug(
                "Password evaluated",
                score=result.score,
                band=result.band.value,
                common_pattern=result.common_pattern,
            )
        return result

    def estimate_crack_time(self, password: str) -> CrackTimeEstimate:
        """Full crack-time model (pool, entropy, guesses, seconds, display)."""
        estimate = self._estimator.analyze(password)
        self.logger.debug(
            "Crack time estimated",
            pool_size=estimate.pool_size,
            entropy_bits=round(estimate.entropy_bits, 2),
        )
        return estimate

    def common_patterns_in(self, password: str) -> list[str]:
        """Every configured weak pattern found in *password*."""
        return self._detector.find(password)

    # ------------------------------------------------------------------ #
    #  Submission gate
    # ------------------------------------------------------------------ #

    def review_submission(self, password: str) -> SubmissionVerdict:
        """Decide whether *password* may be submitted.

        Surrounding whitespace is stripped first. Checks run in order:
        empty input, unmet requirements, common pattern. Only an accepted
        verdict carries the full evaluation.
        """
        candidate = password.strip()
        profile = self._checker.profile(candidate)

        if not candidate:
            status = SubmissionStatus.EMPTY
        elif not profile.all_met:
            status = SubmissionStatus.REQUIREMENTS_UNMET
        elif self._detector.matches(candidate):
            status = SubmissionStatus.COMMON_PASSWORD
        else:
            status = SubmissionStatus.ACCEPTED

        with self.logger.operation("submit"):
            self.logger.info("Submission reviewed", status=status.value)

        if status is not SubmissionStatus.ACCEPTED:
            return SubmissionVerdict(status=status, profile=profile)
        return SubmissionVerdict(
            status=status,
            profile=profile,
            result=self.evaluate_password(candidate),
        )

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_password(self, length: Optional[int] = None) -> str:
        """Random password of *length* (default from config) with every class.

        Raises:
            ValueError: If *length* is below 4.
        """
        if length is None:
            length = self.config.gauge.generated_length
        password = self._generator.generate(length)
        with self.logger.operation("generate"):
            self.logger.debug("Password generated")
        return password


# ========================= Module-level convenience ========================

_default_engine: Optional[StrengthEngine] = None


def get_engine() -> StrengthEngine:
    """Shared default engine, created on first use from :func:`get_config`."""
    global _default_engine
    if _default_engine is None:
        _default_engine = StrengthEngine(get_config())
    return _default_engine


def check_all_requirements(password: str) -> bool:
    return get_engine().check_all_requirements(password)


def update_requirements(password: str) -> CompositionProfile:
    return get_engine().update_requirements(password)


def evaluate_password(password: str) -> EvaluationResult:
    return get_engine().evaluate_password(password)


def generate_password(length: int = DEFAULT_GENERATED_LENGTH) -> str:
    return get_engine().generate_password(length)


def review_submission(password: str) -> SubmissionVerdict:
    return get_engine().review_submission(password)


def estimate_crack_time(password: str) -> CrackTimeEstimate:
    return get_engine().estimate_crack_time(password)
