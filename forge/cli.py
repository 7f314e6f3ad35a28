"""
Forge CLI
==========

Click-based command-line interface for PassForge. Provides subcommands
for rule-driven password generation, password strength analysis and the
entropy source self-test.

Usage::

    python -m forge generate --strength strong --count 3
    python -m forge generate --strength custom --length 16 --min-digits 4
    python -m forge analyze "MyP@ssw0rd!"
    python -m forge selftest --samples 50000

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Optional

import click
from pydantic import BaseModel

from shared.config import ForgeConfig
from shared.console import ForgeConsole

from forge import __version__
from forge.core.engine import ForgeEngine
from forge.core.errors import ForgeError
from forge.core.models import StrengthPreset
from forge.output.console import ForgeConsoleOutput


def _fail(ctx: click.Context, message: str) -> None:
    """Report *message* through the console and exit with status 1."""
    console: ForgeConsole = ctx.obj["console"]
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"error": message}), err=True)
    else:
        console.error(message)
    ctx.exit(1)


def _echo_json(payload: Any) -> None:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json")
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a PassForge configuration file (TOML).",
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
    help="Suppress the banner (results and errors still print).",
)
@click.version_option(__version__, prog_name="forge")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """PassForge -- rule-driven password generation and strength analysis."""
    ctx.ensure_object(dict)

    forge_config = ForgeConfig.load(config)
    console = ForgeConsole(quiet=output == "json")

    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output
    ctx.obj["console"] = console
    ctx.obj["engine"] = ForgeEngine(forge_config)
    ctx.obj["display"] = ForgeConsoleOutput(console)

    if not quiet and output == "console":
        console.banner(version=forge_config.global_settings.version)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option(
    "--strength", "-s",
    type=click.Choice([p.value for p in StrengthPreset], case_sensitive=False),
    default=None,
    help="Strength preset (default from config: medium).",
)
@click.option("--count", "-n", type=click.IntRange(min=1), default=None,
              help="Number of passwords to generate.")
@click.option("--length", "-l", type=click.IntRange(min=1), default=None,
              help="Password length; applies to any preset.")
@click.option("--min-upper", type=click.IntRange(min=0), default=None,
              help="Minimum uppercase letters (custom preset only).")
@click.option("--min-lower", type=click.IntRange(min=0), default=None,
              help="Minimum lowercase letters (custom preset only).")
@click.option("--min-digits", type=click.IntRange(min=0), default=None,
              help="Minimum digits (custom preset only).")
@click.option("--min-special", type=click.IntRange(min=0), default=None,
              help="Minimum special characters (custom preset only).")
@click.option("--charset", default=None,
              help="Custom alphabet replacing all categories (custom preset only).")
@click.option("--no-upper", is_flag=True, default=False,
              help="Exclude uppercase letters (custom preset only).")
@click.option("--no-lower", is_flag=True, default=False,
              help="Exclude lowercase letters (custom preset only).")
@click.option("--no-digits", is_flag=True, default=False,
              help="Exclude digits (custom preset only).")
@click.option("--no-special", is_flag=True, default=False,
              help="Exclude special characters (custom preset only).")
@click.option("--exclude-similar", is_flag=True, default=False,
              help="Drop look-alike characters such as l, 1 and O (custom preset only).")
@click.option("--exclude-ambiguous", is_flag=True, default=False,
              help="Drop brackets, quotes and punctuation (custom preset only).")
@click.option("--avoid-repeated", is_flag=True, default=False,
              help="Reject three identical characters in a row (custom preset only).")
@click.option("--avoid-sequential", is_flag=True, default=False,
              help="Reject runs such as abc or 321 (custom preset only).")
@click.option("--avoid-dictionary", is_flag=True, default=False,
              help="Reject common dictionary words (custom preset only).")
@click.option("--analyze/--no-analyze", "analyze_first", default=True,
              help="Analyse the first generated password.")
@click.pass_context
def generate(
    ctx: click.Context,
    strength: Optional[str],
    count: Optional[int],
    length: Optional[int],
    min_upper: Optional[int],
    min_lower: Optional[int],
    min_digits: Optional[int],
    min_special: Optional[int],
    charset: Optional[str],
    no_upper: bool,
    no_lower: bool,
    no_digits: bool,
    no_special: bool,
    exclude_similar: bool,
    exclude_ambiguous: bool,
    avoid_repeated: bool,
    avoid_sequential: bool,
    avoid_dictionary: bool,
    analyze_first: bool,
) -> None:
    """Generate passwords that satisfy a strength preset.

    Rule options other than --length require --strength custom.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    display: ForgeConsoleOutput = ctx.obj["display"]
    count = count or ctx.obj["config"].generator.default_count

    overrides = {
        "min_uppercase": min_upper,
        "min_lowercase": min_lower,
        "min_digits": min_digits,
        "min_special": min_special,
        "custom_charset": charset,
        "include_uppercase": False if no_upper else None,
        "include_lowercase": False if no_lower else None,
        "include_digits": False if no_digits else None,
        "include_special": False if no_special else None,
        "exclude_similar": exclude_similar or None,
        "exclude_ambiguous": exclude_ambiguous or None,
        "avoid_repeated": avoid_repeated or None,
        "avoid_sequential": avoid_sequential or None,
        "avoid_dictionary_words": avoid_dictionary or None,
    }

    try:
        rules = engine.resolve_rules(
            strength.lower() if strength else None, length=length, **overrides
        )
        passwords = engine.generate(rules, count)
    except (ForgeError, ValueError) as exc:
        _fail(ctx, f"Password generation failed: {exc}")
        return

    analysis = engine.analyze(passwords[0]) if analyze_first else None

    if ctx.obj["output_format"] == "json":
        _echo_json({
            "rules": rules.model_dump(mode="json"),
            "passwords": passwords,
            "analysis": analysis.model_dump(mode="json") if analysis else None,
        })
        return

    display.display_passwords(passwords, rules)
    if analysis is not None:
        display.display_analysis(analysis, passwords[0], show=True)


@cli.command()
@click.argument("password")
@click.option("--show", is_flag=True, default=False,
              help="Print the password unmasked.")
@click.pass_context
def analyze(ctx: click.Context, password: str, show: bool) -> None:
    """Analyse password strength: entropy, crack time, score, suggestions."""
    engine: ForgeEngine = ctx.obj["engine"]
    result = engine.analyze(password)

    if ctx.obj["output_format"] == "json":
        _echo_json(result)
        return
    ctx.obj["display"].display_analysis(result, password, show=show)


@cli.command()
@click.option("--samples", type=click.IntRange(min=100), default=None,
              help="Draws per test (default from config).")
@click.option("--bound", type=click.IntRange(min=2, max=65536), default=None,
              help="Upper bound for uniform(bound) (default from config).")
@click.pass_context
def selftest(ctx: click.Context, samples: Optional[int], bound: Optional[int]) -> None:
    """Chi-squared uniformity test of the secure random source.

    Exits with status 1 when any test falls below the significance level.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    console: ForgeConsole = ctx.obj["console"]

    with console.status("Sampling the entropy source..."):
        result = engine.self_test(samples=samples, bound=bound)

    if ctx.obj["output_format"] == "json":
        _echo_json(result)
    else:
        ctx.obj["display"].display_self_test(result)

    if not result.overall_pass:
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Forge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
