"""
Forge Console Output
=====================

Rich formatters for generated passwords, strength analyses and the
entropy self-test.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from forge.core.models import (
    AnalysisResult,
    PasswordRules,
    StrengthLabel,
    UniformitySuiteResult,
)

_STRENGTH_COLOURS: dict[StrengthLabel, str] = {
    StrengthLabel.VERY_WEAK: "bold red",
    StrengthLabel.WEAK: "red",
    StrengthLabel.MEDIUM: "yellow",
    StrengthLabel.STRONG: "green",
    StrengthLabel.VERY_STRONG: "bold bright_green",
}

_METER_COLOURS: tuple[str, ...] = ("red", "red", "yellow", "green", "bright_green")


def mask_password(password: str) -> str:
    """Show the first and last character, asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class ForgeConsoleOutput:
    """Console output formatters for PassForge results.

    Usage::

        output = ForgeConsoleOutput(ForgeConsole())
        output.display_passwords(passwords, rules)
        output.display_analysis(analysis, password)
    """

    def __init__(self, console: Optional[ForgeConsole] = None) -> None:
        self.console = console or ForgeConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generation Display
    # ------------------------------------------------------------------ #

    def display_passwords(
        self, passwords: Sequence[str], rules: Optional[PasswordRules] = None
    ) -> None:
        """List generated passwords, numbered from 1."""
        self.console.section(f"Generated {len(passwords)} password(s)")
        self.console.table(
            None,
            ["#", "Password"],
            [(idx, pw) for idx, pw in enumerate(passwords, start=1)],
            styles=["dim", "bold bright_white"],
        )
        if rules is not None:
            self._rich.print(Text(self._describe_rules(rules), style="dim"))

    @staticmethod
    def _describe_rules(rules: PasswordRules) -> str:
        parts = [f"length {rules.length}"]
        if rules.custom_charset is not None:
            parts.append(f"custom charset of {len(rules.custom_charset)}")
        else:
            included = [
                name
                for name, flag in (
                    ("upper", rules.include_uppercase),
                    ("lower", rules.include_lowercase),
                    ("digits", rules.include_digits),
                    ("special", rules.include_special),
                )
                if flag
            ]
            parts.append("+".join(included) or "no categories")
        for name, minimum in (
            ("upper", rules.min_uppercase),
            ("lower", rules.min_lowercase),
            ("digits", rules.min_digits),
            ("special", rules.min_special),
        ):
            if minimum is not None:
                parts.append(f"min {name} {minimum}")
        for name, flag in (
            ("no repeats", rules.avoid_repeated),
            ("no sequences", rules.avoid_sequential),
            ("no dictionary words", rules.avoid_dictionary_words),
        ):
            if flag:
                parts.append(name)
        return "Rules: " + ", ".join(parts)

    # ------------------------------------------------------------------ #
    #  Analysis Display
    # ------------------------------------------------------------------ #

    def display_analysis(
        self, result: AnalysisResult, password: str, *, show: bool = False
    ) -> None:
        """Display a strength analysis with a five-segment meter."""
        self.console.section("Password Analysis")

        colour = _STRENGTH_COLOURS[result.strength]
        meter = Text()
        meter.append(f"Score: {result.score}/5  ", style="bold")
        meter.append("[", style="dim")
        for i in range(5):
            if i < result.score:
                meter.append("██", style=_METER_COLOURS[result.score - 1])
            else:
                meter.append("░░", style="dim")
        meter.append("]  ", style="dim")
        meter.append(result.strength.display.upper(), style=colour)
        self._rich.print(Panel(meter, title="Strength", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Password", Text(password if show else mask_password(password)))
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Character Pool", str(result.pool_size))
        tbl.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
        tbl.add_row("Estimated Crack Time", result.crack_time)
        self._rich.print(tbl)

        if result.suggestions:
            self._rich.print("[bold]Suggestions for improvement:[/bold]")
            for idx, suggestion in enumerate(result.suggestions, start=1):
                self._rich.print(f"  [bright_cyan]{idx}.[/bright_cyan] ", Text(suggestion))
        else:
            self._rich.print("[green]No suggestions for improvement.[/green]")

    # ------------------------------------------------------------------ #
    #  Self-Test Display
    # ------------------------------------------------------------------ #

    def display_self_test(self, result: UniformitySuiteResult) -> None:
        """Display chi-squared results for each uniformity test."""
        self.console.section("Entropy Source Self-Test")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Test", style="bold")
        tbl.add_column("Categories", justify="right")
        tbl.add_column("Samples", justify="right")
        tbl.add_column("Chi-squared", justify="right")
        tbl.add_column("p-value", justify="right")
        tbl.add_column("Result", justify="center")

        for test in result.tests:
            verdict = "[green]PASS[/green]" if test.passed else "[bold red]FAIL[/bold red]"
            tbl.add_row(
                test.test_name,
                str(test.categories),
                str(test.samples),
                f"{test.chi_squared:.2f}",
                f"{test.p_value:.4f}",
                verdict,
            )
        self._rich.print(tbl)

        if result.overall_pass:
            self.console.success(
                f"All tests passed at significance {result.significance}"
            )
        else:
            self.console.warning(
                f"One or more tests failed at significance {result.significance}; "
                f"re-run to rule out chance"
            )
