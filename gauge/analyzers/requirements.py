"""
Requirement Checker
====================

Composition predicates used for the live requirement indicators and for
submission gating. Only ASCII letters and digits count as letters and
digits; every other code point (punctuation, whitespace, accented or
non-Latin characters, emoji) counts as a special character.
"""

from __future__ import annotations

import string

from gauge.core.models import CompositionProfile
from shared.config import DEFAULT_MIN_LENGTH

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGITS = frozenset(string.digits)
_ALNUM = _UPPER | _LOWER | _DIGITS


def has_upper(password: str) -> bool:
    return any(c in _UPPER for c in password)


def has_lower(password: str) -> bool:
    return any(c in _LOWER for c in password)


def has_digit(password: str) -> bool:
    return any(c in _DIGITS for c in password)


def has_special(password: str) -> bool:
    return any(c not in _ALNUM for c in password)


class RequirementChecker:
    """Evaluates the five composition requirements of a password.

    Usage::

        checker = RequirementChecker()
        checker.profile("Tr0ub4dor&3").all_met   # True
        checker.all_met("short")                 # False

    Args:
        min_length: Minimum number of characters required.
    """

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        self.min_length = min_length

    def profile(self, password: str) -> CompositionProfile:
        """Compute the :class:`CompositionProfile` of *password*.

        The empty string yields a profile with every predicate false.
        """
        return CompositionProfile(
            has_min_length=len(password) >= self.min_length,
            has_upper=has_upper(password),
            has_lower=has_lower(password),
            has_digit=has_digit(password),
            has_special=has_special(password),
        )

    def all_met(self, password: str) -> bool:
        """True iff the length requirement and all four class predicates hold."""
        return self.profile(password).all_met
