"""Shared fixtures for the PassGauge test suite."""

import random

import pytest

from shared.config import GaugeConfig, get_config
from shared.logger import GaugeLogger
from gauge.core.engine import StrengthEngine


@pytest.fixture
def quiet_logger():
    """Logger with no handlers attached to the console."""
    return GaugeLogger("test", console_output=False)


@pytest.fixture
def config():
    return GaugeConfig()


@pytest.fixture
def engine(config, quiet_logger):
    """Engine with a seeded generator so generated passwords are reproducible."""
    return StrengthEngine(config, rng=random.Random(1234), logger=quiet_logger)


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path, monkeypatch):
    """Point the default config.toml lookup at an empty temp directory.

    Also drops the cached config and default engine so no test sees
    settings loaded by another.
    """
    path = tmp_path / "default-root" / "config.toml"
    monkeypatch.setattr("shared.config._DEFAULT_CONFIG_PATH", path)
    monkeypatch.setattr("gauge.core.engine._default_engine", None)
    _drop_cached_config()
    yield path
    _drop_cached_config()


def _drop_cached_config():
    if hasattr(get_config, "_cached"):
        del get_config._cached
