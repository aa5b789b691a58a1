"""
Gauge Console Output
=====================

Rich-based renderers for the PassGauge CLI: the strength meter, the
requirement checklist, the crack-time model table and generated
passwords.

Uses the shared :class:`~shared.console.GaugeConsole` for consistent
styling.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.config import DEFAULT_MIN_LENGTH
from shared.console import GaugeConsole
from gauge.core.models import (
    CompositionProfile,
    CrackTimeEstimate,
    EvaluationResult,
    StrengthBand,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

BAND_COLOURS: dict[StrengthBand, str] = {
    StrengthBand.WEAK: "#ef4444",
    StrengthBand.MODERATE: "#f59e0b",
    StrengthBand.STRONG: "#3b82f6",
    StrengthBand.EXCELLENT: "#22c55e",
}

REQUIREMENT_LABELS: tuple[tuple[str, str], ...] = (
    ("has_min_length", "At least {min_length} characters"),
    ("has_upper", "Uppercase letter (A-Z)"),
    ("has_lower", "Lowercase letter (a-z)"),
    ("has_digit", "Number (0-9)"),
    ("has_special", "Special character (!@#...)"),
)

_NO_ESTIMATE = "n/a"


class GaugeConsoleOutput:
    """Renders engine results to the terminal.

    Args:
        console: Shared console; a fresh one is created when omitted.
        min_length: Length requirement shown in the checklist label.
    """

    def __init__(
        self,
        console: Optional[GaugeConsole] = None,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self.console = console or GaugeConsole()
        self._rich = self.console.rich
        self.min_length = min_length

    # ------------------------------------------------------------------ #
    #  Strength meter
    # ------------------------------------------------------------------ #

    def strength_meter(self, result: EvaluationResult, width: int = 40) -> Text:
        """Bar filled to ``score%`` of *width*, coloured by band."""
        colour = BAND_COLOURS[result.band]
        filled = max(0, min(width, round(result.score / 100 * width)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score:>3}/100  ")
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (width - filled), style="dim")
        meter.append("]", style="dim")
        meter.append(f"  {result.band.value.upper()}", style=f"bold {colour}")
        return meter

    def display_evaluation(
        self,
        result: EvaluationResult,
        profile: CompositionProfile,
    ) -> None:
        """Strength meter, feedback, crack time and requirement checklist."""
        self.console.section("Password Strength")
        self._rich.print(
            Panel(self.strength_meter(result), title="Strength Meter", border_style="cyan")
        )

        feedback_style = "bold yellow" if result.common_pattern else "bold"
        if result.feedback_msg:
            self._rich.print(Text(result.feedback_msg, style=feedback_style))
        self._rich.print(
            Text.assemble(
                ("Estimated time to crack: ", "bold"),
                result.time_to_crack or _NO_ESTIMATE,
            )
        )
        self.console.blank()
        self.display_requirements(profile)

    # ------------------------------------------------------------------ #
    #  Requirements
    # ------------------------------------------------------------------ #

    def display_requirements(self, profile: CompositionProfile) -> None:
        tbl = Table(
            title="Requirements",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_header=False,
        )
        tbl.add_column("Met", justify="center", width=3)
        tbl.add_column("Requirement")

        for attr, label in REQUIREMENT_LABELS:
            met = getattr(profile, attr)
            mark = Text("✔", style="#22c55e") if met else Text("✘", style="#ef4444")
            tbl.add_row(mark, label.format(min_length=self.min_length))

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Details
    # ------------------------------------------------------------------ #

    def display_crack_model(
        self,
        estimate: CrackTimeEstimate,
        patterns: Sequence[str] = (),
    ) -> None:
        """Intermediate values of the crack-time model and matched patterns."""
        tbl = Table(
            title="Crack Time Model",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value", justify="right")

        tbl.add_row("Alphabet pool", str(estimate.pool_size))
        tbl.add_row("Entropy", f"{estimate.entropy_bits:.2f} bits")
        tbl.add_row("Expected guesses", f"{estimate.expected_guesses:.3e}")
        tbl.add_row("Guess rate", f"{estimate.guesses_per_second:.0e} g/s")
        tbl.add_row("Expected time", estimate.display or _NO_ESTIMATE)
        self._rich.print(tbl)

        if patterns:
            self._rich.print()
            self._rich.print("[bold]Common patterns found:[/bold]")
            for pattern in patterns:
                self._rich.print(Text.assemble(("  ⚠ ", "yellow"), f"'{pattern}'"))

    # ------------------------------------------------------------------ #
    #  Generator
    # ------------------------------------------------------------------ #

    def display_generated(self, password: str) -> None:
        self.console.section("Generated Password")
        self._rich.print(
            Panel(Text(password, style="bold bright_white"), border_style="green")
        )
