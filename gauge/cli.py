"""
Gauge CLI
==========

Click-based command-line front-end for the PassGauge strength engine.
The CLI is the engine's hosting application: it captures input, chooses
the user-facing wording and renders results. The engine itself never
prints.

Usage::

    python -m gauge evaluate "Tr0ub4dor&3"
    python -m gauge evaluate --details          # prompts with hidden input
    python -m gauge check "MyNewPassw0rd!"
    python -m gauge generate --length 16 --copy
    python -m gauge watch                       # re-evaluates every line typed
    python -m gauge -o json evaluate "hunter2"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Optional

import click
import pyperclip

from shared.config import GaugeConfig
from shared.console import GaugeConsole
from shared.errors import GaugeConfigError
from shared.logger import GaugeLogger

from gauge import __version__
from gauge.core.engine import StrengthEngine
from gauge.core.models import SubmissionStatus
from gauge.output.console import GaugeConsoleOutput

SUBMISSION_MESSAGES: dict[SubmissionStatus, str] = {
    SubmissionStatus.EMPTY: "Please enter a password before submitting.",
    SubmissionStatus.REQUIREMENTS_UNMET: (
        "Please meet all password requirements before submitting."
    ),
    SubmissionStatus.COMMON_PASSWORD: (
        "This is a common password. Do not use such passwords."
    ),
    SubmissionStatus.ACCEPTED: "Successfully submitted! (Not stored or sent)",
}


# ===================================================================== #
#  Helpers
# ===================================================================== #

def copy_to_clipboard(text: str, logger: Optional[GaugeLogger] = None) -> bool:
    """Place *text* on the system clipboard, returning whether it worked."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        if logger is not None:
            logger.info("Clipboard unavailable", reason=str(exc))
        return False
    return True


def _read_password(password: Optional[str]) -> str:
    if password is not None:
        return password
    return click.prompt(
        "Password", default="", show_default=False, hide_input=True
    )


def _emit_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, default=str))


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a PassGauge configuration file (TOML). Defaults to config.toml in the project root when present.",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.version_option(__version__, prog_name="passgauge")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """PassGauge -- password strength and crack-time estimator.

    Score passwords, check composition requirements, estimate brute-force
    crack time and generate strong random passwords.
    """
    ctx.ensure_object(dict)

    try:
        gauge_config = GaugeConfig.load(config)
        engine = StrengthEngine(gauge_config)
    except GaugeConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    console = GaugeConsole(quiet=output == "json")
    ctx.obj["config"] = gauge_config
    ctx.obj["output_format"] = output
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = GaugeConsoleOutput(
        console, min_length=gauge_config.gauge.min_length
    )

    if not quiet and output == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--details", "-d",
    is_flag=True,
    default=False,
    help="Also show the crack-time model and matched patterns.",
)
@click.pass_context
def evaluate(ctx: click.Context, password: Optional[str], details: bool) -> None:
    """Score a password and estimate its crack time.

    Prompts with hidden input when PASSWORD is omitted.
    """
    engine: StrengthEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]

    password = _read_password(password)
    result = engine.evaluate_password(password)
    profile = engine.update_requirements(password)

    if ctx.obj["output_format"] == "json":
        payload: dict[str, Any] = {
            "evaluation": result.model_dump(mode="json"),
            "band": result.band.value,
            "requirements": profile.model_dump(mode="json"),
            "all_requirements_met": profile.all_met,
        }
        if details:
            payload["crack_time"] = engine.estimate_crack_time(password).model_dump(mode="json")
            payload["common_patterns"] = engine.common_patterns_in(password)
        _emit_json(payload)
        return

    display.display_evaluation(result, profile)
    if details:
        display.display_crack_model(
            engine.estimate_crack_time(password),
            engine.common_patterns_in(password),
        )


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def check(ctx: click.Context, password: Optional[str]) -> None:
    """Run the submission gate on a password.

    Exits with status 1 when the password is rejected.
    """
    engine: StrengthEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]
    console: GaugeConsole = ctx.obj["console"]

    verdict = engine.review_submission(_read_password(password))
    message = SUBMISSION_MESSAGES[verdict.status]

    if ctx.obj["output_format"] == "json":
        _emit_json({
            "status": verdict.status.value,
            "accepted": verdict.accepted,
            "message": message,
            "requirements": verdict.profile.model_dump(mode="json"),
            "evaluation": (
                verdict.result.model_dump(mode="json") if verdict.result else None
            ),
        })
    elif verdict.accepted and verdict.result is not None:
        console.success(f"{message} {verdict.result.feedback_msg}")
        display.display_evaluation(verdict.result, verdict.profile)
    else:
        console.error(message)
        if verdict.status is SubmissionStatus.REQUIREMENTS_UNMET:
            display.display_requirements(verdict.profile)

    if not verdict.accepted:
        ctx.exit(1)


@cli.command()
@click.option(
    "--length", "-l",
    type=click.IntRange(min=4),
    default=None,
    help="Password length (default from configuration, 12).",
)
@click.option(
    "--copy/--no-copy",
    default=False,
    help="Copy the generated password to the clipboard.",
)
@click.pass_context
def generate(ctx: click.Context, length: Optional[int], copy: bool) -> None:
    """Generate a random password containing every character class."""
    engine: StrengthEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]
    console: GaugeConsole = ctx.obj["console"]
    config: GaugeConfig = ctx.obj["config"]

    password = engine.generate_password(length)
    copied: Optional[bool] = None
    if copy and config.gauge.clipboard:
        copied = copy_to_clipboard(password, engine.logger)

    if ctx.obj["output_format"] == "json":
        _emit_json({
            "password": password,
            "copied": copied,
            "evaluation": engine.evaluate_password(password).model_dump(mode="json"),
        })
        return

    display.display_generated(password)
    if copied is True:
        console.success("Copied!")
    elif copied is False:
        console.warning("Failed! Could not access the clipboard.")
    elif copy:
        console.info("Clipboard support is disabled in the configuration.")
    display.display_evaluation(
        engine.evaluate_password(password),
        engine.update_requirements(password),
    )


@cli.command()
@click.pass_context
def watch(ctx: click.Context) -> None:
    """Re-evaluate every line typed until an empty line or EOF.

    Each line is evaluated independently, the way a form re-scores the
    password on every keystroke.
    """
    engine: StrengthEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]
    console: GaugeConsole = ctx.obj["console"]
    as_json = ctx.obj["output_format"] == "json"

    if not as_json:
        console.info("Type a password and press Enter; an empty line quits.")

    for line in click.get_text_stream("stdin"):
        password = line.rstrip("\r\n")
        if not password:
            break
        result = engine.evaluate_password(password)
        if as_json:
            _emit_json(result.model_dump(mode="json"))
            continue
        console.print(display.strength_meter(result))
        console.print(
            f"  {result.feedback_msg}  |  crack time: {result.time_to_crack}",
            markup=False,
        )


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassGauge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
