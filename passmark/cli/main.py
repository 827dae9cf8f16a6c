"""Command-line interface for Passmark."""

import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from passmark import __version__
from passmark.core.config import configure_logging, get_config
from passmark.core.exceptions import ConfigurationError, ValidationError
from passmark.core.models import DEFAULT_CONFIG
from passmark.engines import FIELD_NAME_CATALOG, AssessmentProcessor
from passmark.parsers import parse_processing_config

console = Console()


def _parse_row(pairs: Tuple[str, ...]) -> dict:
    row = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"expected FIELD=VALUE, got '{pair}'")
        field, value = pair.split("=", 1)
        row[field] = value
    return row


@click.group()
@click.version_option(version=__version__, prog_name="passmark")
@click.option("--log-level", default=None, help="Override PASSMARK_LOG_LEVEL.")
def cli(log_level: Optional[str]) -> None:
    """Passmark - assessment status classification for imported rows."""
    configure_logging(log_level)


@cli.command()
@click.argument("config_path", type=click.Path(exists=True))
def validate(config_path: str) -> None:
    """Validate a processing config YAML file.

    Example:
        passmark validate configs/lms_import.yaml
    """
    console.print(f"[cyan]Validating config: {config_path}[/cyan]")
    try:
        config = parse_processing_config(config_path)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]✗ Validation failed: {e}[/red]")
        sys.exit(1)

    console.print("[green]✓ Config is valid[/green]")
    console.print(f"  Default to PASS: {config.default_to_pass_on_missing}")
    console.print(f"  Grade conversion: {config.allow_grade_conversion}")
    console.print(f"  Strict columns: {config.strict_column_matching}")
    console.print(f"  Grade mappings: {len(config.grade_mapping or {})}")
    console.print(
        f"  Custom fields: {', '.join(config.custom_field_mappings or []) or '-'}"
    )


@cli.command()
@click.argument("pairs", nargs=-1, required=True, metavar="FIELD=VALUE...")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Processing config YAML (defaults to PASSMARK_CONFIG_PATH).",
)
@click.option("--strict-columns", is_flag=True, help="Disable fuzzy column matching.")
@click.option(
    "--default-pending", is_flag=True, help="Default unclear rows to PENDING, not PASS."
)
def classify(
    pairs: Tuple[str, ...],
    config_path: Optional[str],
    strict_columns: bool,
    default_pending: bool,
) -> None:
    """Classify one row given as FIELD=VALUE pairs.

    Example:
        passmark classify "Learner=Ada" "Final Grade=B+"
    """
    row = _parse_row(pairs)

    overrides = {}
    if strict_columns:
        overrides["strict_column_matching"] = True
    if default_pending:
        overrides["default_to_pass_on_missing"] = False

    try:
        path = config_path or get_config().config_path
        config = parse_processing_config(path) if path else DEFAULT_CONFIG
        result = AssessmentProcessor(config.with_overrides(overrides)).process_row(row)
    except (ConfigurationError, ValidationError) as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    color = {"PASS": "green", "FAIL": "red", "PENDING": "yellow"}[result.status.value]
    console.print(f"[{color}]{result.status.value}[/{color}] ({result.confidence.value})")
    console.print(f"  Field: {result.detected_field_name or '-'}")
    console.print(f"  Value: {result.original_value or '-'}")
    if result.was_defaulted:
        console.print("  [yellow]Status was defaulted[/yellow]")

    if result.warnings:
        table = Table(title="Warnings")
        table.add_column("Type")
        table.add_column("Severity")
        table.add_column("Message")
        table.add_column("Suggestion")
        for warning in result.warnings:
            table.add_row(
                warning.type.value,
                warning.severity.value,
                warning.message,
                warning.suggestion or "",
            )
        console.print(table)


@cli.command()
def patterns() -> None:
    """List recognized column names in priority order."""
    for priority, name in enumerate(FIELD_NAME_CATALOG, 1):
        console.print(f"{priority:>3}. {name}")


@cli.command()
def version() -> None:
    """Show Passmark version."""
    console.print(f"Passmark version {__version__}")


if __name__ == "__main__":
    cli()
