"""
Common-Pattern Detector
========================

Flags passwords that contain a known-weak substring such as
``password`` or ``123456``. Matching is case-insensitive and
substring-based: ``"MyPassword!9"`` matches ``password``. There is no
fuzzy or edit-distance matching.
"""

from __future__ import annotations

from typing import Iterable

from shared.config import DEFAULT_COMMON_PATTERNS


class CommonPatternDetector:
    """Case-insensitive substring matcher over a fixed pattern list.

    The list is normalised to lowercase once at construction and stored
    as a tuple, so a detector can be shared freely between callers.

    Args:
        patterns: Known-weak substrings. Defaults to the built-in list.
    """

    def __init__(self, patterns: Iterable[str] | None = None) -> None:
        source = DEFAULT_COMMON_PATTERNS if patterns is None else patterns
        # dict.fromkeys keeps first-seen order while dropping duplicates
        self._patterns: tuple[str, ...] = tuple(
            dict.fromkeys(p.lower() for p in source if p)
        )

    @property
    def patterns(self) -> tuple[str, ...]:
        return self._patterns

    def matches(self, password: str) -> bool:
        """True if the lowercased *password* contains any listed pattern."""
        lowered = password.lower()
        return any(p in lowered for p in self._patterns)

    def find(self, password: str) -> list[str]:
        """Return every listed pattern contained in *password*, in list order."""
        lowered = password.lower()
        return [p for p in self._patterns if p in lowered]
