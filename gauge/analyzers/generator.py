"""
Password Generator
===================

Random passwords that always satisfy the composition requirements: at
least one lowercase letter, one uppercase letter, one digit and one
symbol, with the remaining positions drawn uniformly from all four
classes.

Randomness comes from :class:`random.SystemRandom` (the OS CSPRNG). The
guaranteed characters are placed first and the whole string is then
permuted with a Fisher-Yates shuffle so they do not sit at fixed offsets.
"""

from __future__ import annotations

import random
import string
from typing import Optional

from shared.config import DEFAULT_GENERATED_LENGTH

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = string.punctuation  # 32 printable ASCII symbols

CHARACTER_CLASSES: tuple[str, ...] = (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS)
ALL_CHARACTERS = "".join(CHARACTER_CLASSES)

MIN_LENGTH = len(CHARACTER_CLASSES)
DEFAULT_LENGTH = DEFAULT_GENERATED_LENGTH


class PasswordGenerator:
    """Generates passwords containing every character class.

    Usage::

        gen = PasswordGenerator()
        gen.generate(16)

    Args:
        rng: Source of randomness. Defaults to :class:`random.SystemRandom`;
            pass a seeded :class:`random.Random` for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.SystemRandom()

    def generate(self, length: int = DEFAULT_LENGTH) -> str:
        """Return a random password of exactly *length* characters.

        Raises:
            ValueError: If *length* is not an integer of at least 4.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"length must be an integer, got {length!r}")
        if length < MIN_LENGTH:
            raise ValueError(
                f"length must be at least {MIN_LENGTH} to fit every character class, "
                f"got {length}"
            )

        chars = [self._rng.choice(cls) for cls in CHARACTER_CLASSES]
        chars.extend(
            self._rng.choice(ALL_CHARACTERS) for _ in range(length - MIN_LENGTH)
        )
        self._shuffle(chars)
        return "".join(chars)

    def _shuffle(self, chars: list[str]) -> None:
        """In-place Fisher-Yates shuffle."""
        for i in range(len(chars) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            chars[i], chars[j] = chars[j], chars[i]
