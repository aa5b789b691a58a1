"""
PassGauge Console Interface
============================

Rich-powered console abstraction giving every PassGauge front-end the
same look: banner, section headers and status-coloured messages.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

_GAUGE_THEME = Theme(
    {
        "gauge.banner": "bold bright_cyan",
        "gauge.section": "bold bright_magenta",
        "gauge.success": "bold green",
        "gauge.warning": "bold yellow",
        "gauge.error": "bold red",
        "gauge.info": "bold bright_blue",
        "gauge.dim": "dim white",
        "gauge.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___               ___
 | _ \__ _ ______  / __|__ _ _  _ __ _ ___
 |  _/ _` (_-<_-< | (_ / _` | || / _` / -_)
 |_| \__,_/__/__/  \___\__,_|\_,_\__, \___|
                                 |___/
[/bright_cyan]"""

_TAGLINE = "Password strength & crack-time estimator"


class GaugeConsole:
    """Unified console interface for PassGauge front-ends.

    Usage::

        con = GaugeConsole()
        con.banner()
        con.section("Evaluation")
        con.success("Password accepted")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
        """
        self._console = Console(
            theme=_GAUGE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassGauge banner with *version* underneath."""
        subtitle = (
            f"[gauge.highlight]{_TAGLINE}[/gauge.highlight]\n"
            f"[gauge.dim]Version: {version}[/gauge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="gauge.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[gauge.success][✔] SUCCESS:[/gauge.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[gauge.warning][⚠] WARNING:[/gauge.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[gauge.error][✘] ERROR:[/gauge.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[gauge.info][ℹ] INFO:[/gauge.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
