"""Tests for TOML configuration loading and validation."""

import inspect

import pytest

import gauge
from gauge.analyzers.crack_time import CrackTimeEstimator
from gauge.analyzers.generator import DEFAULT_LENGTH
from gauge.analyzers.requirements import RequirementChecker
from gauge.core.models import CrackTimeEstimate
from gauge.output.console import GaugeConsoleOutput
from shared.config import (
    DEFAULT_COMMON_PATTERNS,
    GaugeConfig,
    StrengthConfig,
    get_config,
)
from shared.console import GaugeConsole
from shared.errors import GaugeConfigError, GaugeError


def test_defaults():
    config = GaugeConfig()
    assert config.gauge.guess_rate == 1e10
    assert config.gauge.special_pool == 32
    assert config.gauge.min_length == 8
    assert config.gauge.generated_length == 12
    assert config.gauge.common_patterns == list(DEFAULT_COMMON_PATTERNS)
    assert config.validate() is config


def test_default_lists_are_not_shared():
    a, b = StrengthConfig(), StrengthConfig()
    a.common_patterns.append("extra")
    assert "extra" not in b.common_patterns


def test_load_from_toml(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text(
        '[global]\n'
        'log_level = "DEBUG"\n'
        'unknown_key = 1\n'
        '\n'
        '[gauge]\n'
        'guess_rate = 1e12\n'
        'common_patterns = ["hunter2", "trustno1"]\n'
        'not_a_setting = "ignored"\n',
        encoding="utf-8",
    )
    config = GaugeConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.gauge.guess_rate == 1e12
    assert config.gauge.common_patterns == ["hunter2", "trustno1"]
    assert config.gauge.min_length == 8


def test_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        GaugeConfig.load(tmp_path / "absent.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[gauge\nguess_rate = ", encoding="utf-8")
    with pytest.raises(GaugeConfigError):
        GaugeConfig.load(path)


@pytest.mark.parametrize(
    "body",
    [
        "guess_rate = -1",
        "special_pool = 0",
        "min_length = 0",
        "generated_length = 3",
        "guess_rate = true",
        "special_pool = true",
        "min_length = true",
        "min_length = 14",
        "common_patterns = []",
        'common_patterns = ["ok", ""]',
    ],
)
def test_out_of_range_values(tmp_path, body):
    path = tmp_path / "bad.toml"
    path.write_text(f"[gauge]\n{body}\n", encoding="utf-8")
    with pytest.raises(GaugeConfigError):
        GaugeConfig.load(path)


def test_config_error_hierarchy():
    assert issubclass(GaugeConfigError, GaugeError)
    assert issubclass(GaugeConfigError, ValueError)


def test_get_config_caches(tmp_path):
    path = tmp_path / "gauge.toml"
    path.write_text("[gauge]\nmin_length = 10\n", encoding="utf-8")
    loaded = get_config(path)
    assert loaded.gauge.min_length == 10
    assert get_config() is loaded


def test_to_dict():
    data = GaugeConfig().to_dict()
    assert data["gauge"]["guess_rate"] == 1e10
    assert "log_level" in data["global_settings"]


def test_generated_length_may_equal_min_length():
    config = GaugeConfig(gauge=StrengthConfig(min_length=16, generated_length=16))
    assert config.validate() is config


def test_default_file_is_picked_up(isolated_default_config):
    isolated_default_config.parent.mkdir()
    isolated_default_config.write_text("[gauge]\nspecial_pool = 33\n", encoding="utf-8")
    assert GaugeConfig.load().gauge.special_pool == 33


def test_analyzer_defaults_follow_config_defaults():
    defaults = StrengthConfig()
    estimator = CrackTimeEstimator()
    assert estimator.guess_rate == defaults.guess_rate
    assert CrackTimeEstimate().guesses_per_second == defaults.guess_rate
    assert (
        estimator.lower_pool,
        estimator.upper_pool,
        estimator.digit_pool,
        estimator.special_pool,
    ) == (
        defaults.lower_pool,
        defaults.upper_pool,
        defaults.digit_pool,
        defaults.special_pool,
    )
    assert RequirementChecker().min_length == defaults.min_length
    assert GaugeConsoleOutput(GaugeConsole(quiet=True)).min_length == defaults.min_length
    assert DEFAULT_LENGTH == defaults.generated_length
    facade_default = inspect.signature(gauge.generate_password).parameters["length"].default
    assert facade_default == defaults.generated_length
