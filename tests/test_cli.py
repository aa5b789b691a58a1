"""Tests for the Click front-end."""

import json

import pyperclip
import pytest
from click.testing import CliRunner

from gauge.cli import SUBMISSION_MESSAGES, cli
from gauge.core.models import SubmissionStatus


@pytest.fixture
def runner():
    return CliRunner()


def _last_json(output):
    return json.loads(output.strip().splitlines()[-1])


class TestEvaluate:

    def test_console_output(self, runner):
        result = runner.invoke(cli, ["-q", "evaluate", "password"], obj={})
        assert result.exit_code == 0, result.output
        assert "Avoid common passwords" in result.output
        assert "WEAK" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["-o", "json", "evaluate", "Tr0ub4dor&3"], obj={})
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["evaluation"]["score"] == 55
        assert payload["band"] == "moderate"
        assert payload["all_requirements_met"] is True
        assert "crack_time" not in payload

    def test_details(self, runner):
        result = runner.invoke(
            cli, ["-o", "json", "evaluate", "--details", "MyAdminPass1!"], obj={}
        )
        payload = json.loads(result.output)
        assert payload["crack_time"]["pool_size"] == 94
        assert payload["common_patterns"] == ["admin"]

    def test_details_console(self, runner):
        result = runner.invoke(cli, ["-q", "evaluate", "-d", "Tr0ub4dor&3"], obj={})
        assert result.exit_code == 0, result.output
        assert "Crack Time Model" in result.output

    def test_prompted_input(self, runner):
        result = runner.invoke(
            cli, ["-o", "json", "evaluate"], input="Zq8!mK2#vR5$\n", obj={}
        )
        assert result.exit_code == 0, result.output
        assert _last_json(result.output)["evaluation"]["score"] == 70

    def test_empty_password(self, runner):
        result = runner.invoke(cli, ["-o", "json", "evaluate", ""], obj={})
        payload = json.loads(result.output)
        assert payload["evaluation"] == {
            "score": 0,
            "feedback_msg": "",
            "time_to_crack": "",
            "common_pattern": False,
        }


class TestCheck:

    def test_accepted(self, runner):
        result = runner.invoke(cli, ["-o", "json", "check", "Zq8!mK2#vR5$"], obj={})
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["status"] == "accepted"
        assert payload["evaluation"]["score"] == 70

    @pytest.mark.parametrize(
        "password, status",
        [
            ("   ", SubmissionStatus.EMPTY),
            ("short", SubmissionStatus.REQUIREMENTS_UNMET),
            ("Password1!", SubmissionStatus.COMMON_PASSWORD),
        ],
    )
    def test_rejected(self, runner, password, status):
        result = runner.invoke(cli, ["-o", "json", "check", password], obj={})
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["status"] == status.value
        assert payload["accepted"] is False
        assert payload["message"] == SUBMISSION_MESSAGES[status]
        assert payload["evaluation"] is None

    def test_console_rejection_message(self, runner):
        result = runner.invoke(cli, ["-q", "check", "Password1!"], obj={})
        assert result.exit_code == 1
        assert "This is a common password" in result.output


class TestGenerate:

    def test_json_length(self, runner):
        result = runner.invoke(cli, ["-o", "json", "generate", "--length", "16"], obj={})
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert len(payload["password"]) == 16
        assert payload["copied"] is None
        assert payload["evaluation"]["score"] >= 80

    def test_default_length(self, runner):
        result = runner.invoke(cli, ["-o", "json", "generate"], obj={})
        assert len(json.loads(result.output)["password"]) == 12

    def test_length_below_minimum(self, runner):
        result = runner.invoke(cli, ["generate", "--length", "3"], obj={})
        assert result.exit_code == 2

    def test_copy_success(self, runner, monkeypatch):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)
        result = runner.invoke(cli, ["-q", "generate", "--copy"], obj={})
        assert result.exit_code == 0, result.output
        assert "Copied!" in result.output
        assert len(copied) == 1 and len(copied[0]) == 12

    def test_copy_failure(self, runner, monkeypatch):
        def _fail(text):
            raise pyperclip.PyperclipException("no clipboard")

        monkeypatch.setattr(pyperclip, "copy", _fail)
        result = runner.invoke(cli, ["-o", "json", "generate", "--copy"], obj={})
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["copied"] is False

    def test_copy_disabled_by_config(self, runner, tmp_path, monkeypatch):
        monkeypatch.setattr(pyperclip, "copy", lambda text: pytest.fail("copied"))
        path = tmp_path / "gauge.toml"
        path.write_text("[gauge]\nclipboard = false\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["-c", str(path), "-q", "generate", "--copy"], obj={}
        )
        assert result.exit_code == 0, result.output
        assert "disabled" in result.output


class TestWatch:

    def test_json_lines_until_blank(self, runner):
        result = runner.invoke(
            cli,
            ["-o", "json", "watch"],
            input="password\nZq8!mK2#vR5$\n\nignored\n",
            obj={},
        )
        assert result.exit_code == 0, result.output
        lines = [json.loads(line) for line in result.output.splitlines() if line]
        assert [line["score"] for line in lines] == [0, 70]

    def test_console_stops_at_eof(self, runner):
        result = runner.invoke(cli, ["-q", "watch"], input="Tr0ub4dor&3\n", obj={})
        assert result.exit_code == 0, result.output
        assert "Moderate password" in result.output


class TestConfigOption:

    def test_invalid_config_value(self, runner, tmp_path):
        path = tmp_path / "gauge.toml"
        path.write_text("[gauge]\nguess_rate = 0\n", encoding="utf-8")
        result = runner.invoke(cli, ["-c", str(path), "evaluate", "x"], obj={})
        assert result.exit_code == 1
        assert "guess_rate" in result.output

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["-c", str(tmp_path / "absent.toml"), "evaluate", "x"], obj={}
        )
        assert result.exit_code == 2

    def test_default_config_file_is_read(self, runner, isolated_default_config):
        isolated_default_config.parent.mkdir()
        isolated_default_config.write_text(
            "[gauge]\nmin_length = 14\ngenerated_length = 16\n", encoding="utf-8"
        )
        result = runner.invoke(cli, ["-o", "json", "check", "Zq8!mK2#vR5$"], obj={})
        assert result.exit_code == 1
        assert json.loads(result.output)["status"] == "requirements_unmet"

    def test_invalid_default_config_file(self, runner, isolated_default_config):
        isolated_default_config.parent.mkdir()
        isolated_default_config.write_text("[gauge]\nmin_length = 14\n", encoding="utf-8")
        result = runner.invoke(cli, ["evaluate", "x"], obj={})
        assert result.exit_code == 1
        assert "generated_length" in result.output

    def test_custom_min_length(self, runner, tmp_path):
        path = tmp_path / "gauge.toml"
        path.write_text(
            "[gauge]\nmin_length = 14\ngenerated_length = 16\n", encoding="utf-8"
        )
        result = runner.invoke(
            cli, ["-c", str(path), "-o", "json", "check", "Zq8!mK2#vR5$"], obj={}
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["status"] == "requirements_unmet"


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output
