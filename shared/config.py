"""
PassGauge Configuration Management
===================================

Centralized configuration for the PassGauge toolkit using Python
dataclasses and TOML-based persistence.

Every policy constant of the strength engine (attacker guess rate,
character-class pool sizes, the common-pattern list, the minimum length
requirement) lives here so it can be overridden without touching code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from shared.errors import GaugeConfigError


# ---------------------------------------------------------------------------
# Default configuration file path relative to the PassGauge root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

# Attacker throughput in guesses per second (offline, fast hash).
DEFAULT_GUESS_RATE: float = 1e10

# Alphabet sizes credited per character class present.
DEFAULT_LOWER_POOL = 26
DEFAULT_UPPER_POOL = 26
DEFAULT_DIGIT_POOL = 10
DEFAULT_SPECIAL_POOL = 32

DEFAULT_MIN_LENGTH = 8
DEFAULT_GENERATED_LENGTH = 12

# Known-weak substrings, matched case-insensitively anywhere in a password.
DEFAULT_COMMON_PATTERNS: tuple[str, ...] = (
    "password", "123456", "12345", "12345678", "qwerty", "abc123",
    "letmein", "admin", "welcome", "monkey", "login", "dragon",
    "iloveyou", "111111", "user",
)


# ========================== Tool-Specific Config ===========================


@dataclass(frozen=False, slots=True)
class StrengthConfig:
    """Configuration for the strength engine.

    ``guess_rate`` is the assumed offline attacker throughput in guesses
    per second. The ``*_pool`` values are the alphabet sizes credited for
    each character class present in a password.

    Reference:
        NIST SP 800-63B (2017). Digital Identity Guidelines.
    """

    # Crack-time model
    guess_rate: float = DEFAULT_GUESS_RATE
    lower_pool: int = DEFAULT_LOWER_POOL
    upper_pool: int = DEFAULT_UPPER_POOL
    digit_pool: int = DEFAULT_DIGIT_POOL
    special_pool: int = DEFAULT_SPECIAL_POOL

    # Composition policy
    min_length: int = DEFAULT_MIN_LENGTH
    common_patterns: list[str] = field(
        default_factory=lambda: list(DEFAULT_COMMON_PATTERNS)
    )

    # Generator / front-end
    generated_length: int = DEFAULT_GENERATED_LENGTH
    clipboard: bool = True


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and general flags."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


def _is_int(value: Any) -> bool:
    # TOML booleans load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class GaugeConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = GaugeConfig.load()                  # from default path
        >>> config = GaugeConfig.load("custom.toml")     # from custom path
        >>> print(config.gauge.guess_rate)
        10000000000.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    gauge: StrengthConfig = field(default_factory=StrengthConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> GaugeConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated and validated :class:`GaugeConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            GaugeConfigError: If the file is not valid TOML or a value
                is out of range.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            # Fall back to pure defaults when the default file is absent.
            return cls()

        try:
            with open(config_path, "rb") as fh:
                raw: dict[str, Any] = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise GaugeConfigError(
                f"Invalid TOML in {config_path}: {exc}"
            ) from exc

        config = cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            gauge=cls._build_section(StrengthConfig, raw.get("gauge", {})),
        )
        config.validate()
        return config

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def validate(self) -> GaugeConfig:
        """Check value ranges, raising :class:`GaugeConfigError` on the first problem.

        Returns:
            ``self`` for fluent chaining.
        """
        g = self.gauge
        if (
            isinstance(g.guess_rate, bool)
            or not isinstance(g.guess_rate, (int, float))
            or g.guess_rate <= 0
        ):
            raise GaugeConfigError(
                f"guess_rate must be a positive number, got {g.guess_rate!r}"
            )
        for name in ("lower_pool", "upper_pool", "digit_pool", "special_pool"):
            value = getattr(g, name)
            if not _is_int(value) or value <= 0:
                raise GaugeConfigError(
                    f"{name} must be a positive integer, got {value!r}"
                )
        if not _is_int(g.min_length) or g.min_length < 1:
            raise GaugeConfigError(
                f"min_length must be a positive integer, got {g.min_length!r}"
            )
        if not _is_int(g.generated_length) or g.generated_length < 4:
            raise GaugeConfigError(
                f"generated_length must be an integer >= 4, got {g.generated_length!r}"
            )
        if g.generated_length < g.min_length:
            raise GaugeConfigError(
                f"generated_length ({g.generated_length}) must not be shorter "
                f"than min_length ({g.min_length})"
            )
        if not g.common_patterns or not all(
            isinstance(p, str) and p for p in g.common_patterns
        ):
            raise GaugeConfigError(
                "common_patterns must be a non-empty list of non-empty strings"
            )
        return self

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> GaugeConfig:
    """Module-level convenience wrapper around :meth:`GaugeConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = GaugeConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
