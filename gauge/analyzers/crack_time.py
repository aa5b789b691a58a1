"""
Crack-Time Estimator
=====================

Deliberately simple brute-force model of how long an offline attacker
needs to guess a password.

1. The alphabet pool is the sum of the sizes of the character classes
   present (lowercase 26, uppercase 26, digits 10, symbols 32).
2. Entropy is ``length * log2(pool)`` bits.
3. On average the attacker searches half the keyspace, i.e.
   ``2 ** (entropy - 1)`` guesses.
4. Dividing by the guess rate (10^10 guesses/second by default) gives
   the expected time in seconds, which is then formatted for display.

No dictionary or Markov modelling is applied; the scorer's
common-pattern penalty covers the most obvious weak passwords.

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import math
import sys

from gauge.analyzers.duration import format_duration
from gauge.analyzers.requirements import (
    has_digit,
    has_lower,
    has_special,
    has_upper,
)
from gauge.core.models import CrackTimeEstimate
from shared.config import (
    DEFAULT_DIGIT_POOL,
    DEFAULT_GUESS_RATE,
    DEFAULT_LOWER_POOL,
    DEFAULT_SPECIAL_POOL,
    DEFAULT_UPPER_POOL,
)

# Pool used when no class is detected; unreachable for non-empty input.
_FALLBACK_POOL = DEFAULT_LOWER_POOL


class CrackTimeEstimator:
    """Estimates brute-force crack time from character-class entropy.

    Usage::

        estimator = CrackTimeEstimator()
        estimator.estimate("Tr0ub4dor&3")       # roughly "8000 year"
        estimator.analyze("abc").entropy_bits   # 14.1

    Args:
        guess_rate: Assumed attacker throughput in guesses per second.
        lower_pool: Alphabet size credited for lowercase letters.
        upper_pool: Alphabet size credited for uppercase letters.
        digit_pool: Alphabet size credited for digits.
        special_pool: Alphabet size credited for any other character.
    """

    def __init__(
        self,
        guess_rate: float = DEFAULT_GUESS_RATE,
        *,
        lower_pool: int = DEFAULT_LOWER_POOL,
        upper_pool: int = DEFAULT_UPPER_POOL,
        digit_pool: int = DEFAULT_DIGIT_POOL,
        special_pool: int = DEFAULT_SPECIAL_POOL,
    ) -> None:
        if guess_rate <= 0:
            raise ValueError(f"guess_rate must be positive, got {guess_rate!r}")
        self.guess_rate = float(guess_rate)
        self.lower_pool = lower_pool
        self.upper_pool = upper_pool
        self.digit_pool = digit_pool
        self.special_pool = special_pool

    def pool_size(self, password: str) -> int:
        """Sum of the class sizes present in *password*."""
        pool = 0
        if has_lower(password):
            pool += self.lower_pool
        if has_upper(password):
            pool += self.upper_pool
        if has_digit(password):
            pool += self.digit_pool
        if has_special(password):
            pool += self.special_pool
        return pool or _FALLBACK_POOL

    def analyze(self, password: str) -> CrackTimeEstimate:
        """Run the full model and return every intermediate value.

        An empty password yields a zeroed estimate with an empty display.
        """
        if not password:
            return CrackTimeEstimate(guesses_per_second=self.guess_rate)

        pool = self.pool_size(password)
        entropy = len(password) * math.log2(pool)
        guesses = self._expected_guesses(entropy)
        seconds = guesses / self.guess_rate

        return CrackTimeEstimate(
            pool_size=pool,
            entropy_bits=entropy,
            expected_guesses=guesses,
            guesses_per_second=self.guess_rate,
            seconds=seconds,
            display=format_duration(seconds),
        )

    def estimate(self, password: str) -> str:
        """Human-readable expected crack time; ``""`` for an empty password."""
        return self.analyze(password).display

    @staticmethod
    def _expected_guesses(entropy_bits: float) -> float:
        """``2 ** (entropy_bits - 1)``, saturating at the largest finite float."""
        try:
            return 2.0 ** (entropy_bits - 1)
        except OverflowError:
            return sys.float_info.max
