"""
PassForge Console Interface
============================

Rich-powered console abstraction providing a consistent presentation
layer for PassForge: banner, section headers, severity-coloured status
messages, tables and a status spinner.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_FORGE_THEME = Theme(
    {
        "forge.banner": "bold bright_cyan",
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.warning": "bold yellow",
        "forge.error": "bold red",
        "forge.info": "bold bright_blue",
        "forge.dim": "dim white",
        "forge.highlight": "bold bright_white",
    }
)

_TAGLINE = "Rule-driven password generation and strength analysis"


class ForgeConsole:
    """Unified console interface for PassForge output.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Generated Passwords")
        con.success("3 passwords generated")

    Args:
        quiet:  Suppress all output.
        record: Enable Rich recording, so output can be exported as text.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassForge banner panel."""
        title = Text("PassForge", style="forge.banner")
        body = Text.assemble(
            title,
            "\n",
            (_TAGLINE, "forge.dim"),
            "\n",
            (f"Version: {version}", "forge.dim"),
            justify="center",
        )
        self._console.print(Panel(body, border_style="bright_cyan", padding=(0, 2)))

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="forge.section")

    # ------------------------------------------------------------------ #
    #  Status messages
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[forge.success][✔] SUCCESS:[/forge.success] {escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[forge.warning][⚠] WARNING:[/forge.warning] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[forge.error][✘] ERROR:[/forge.error] {escape(message)}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str | None,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled table; every cell is stringified.

        Cells are printed as plain text, never as Rich markup, so that
        passwords containing ``[`` are shown verbatim.
        """
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, column in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(column, style=style)
        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))
        self._console.print(tbl)

    @contextmanager
    def status(self, message: str = "Working...") -> Iterator[Any]:
        """Show a spinner with *message* while the block runs."""
        with self._console.status(
            f"[forge.info]{message}[/forge.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def export_text(self) -> str:
        """Return recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
