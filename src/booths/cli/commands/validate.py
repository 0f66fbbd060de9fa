"""Validate command for checking booth configuration files.

This module provides the `validate` command that checks a JSON booth
configuration for schema errors and for components that cannot be
placed on the configured floor.
"""

from pathlib import Path
from typing import Annotated

import typer

from booths.application.config import (
    ConfigError,
    config_to_layout,
    load_config,
)


def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON booth configuration to validate"),
    ],
) -> None:
    """Validate a booth configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown catalog indices, etc.)
    - Components that fall outside the floor, collide or have no wall slot

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but some components were rejected

    Example:
        booths validate my-booth.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    layout, warnings = config_to_layout(config)

    if warnings:
        display_warnings(warnings)
        typer.echo(
            f"Validation passed with {len(warnings)} warning(s); "
            f"{len(layout.components)} component(s) placed"
        )
        raise typer.Exit(code=2)

    typer.echo(
        f"Validation passed. {len(layout.components)} component(s) placed."
    )


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def display_warnings(warnings: list[str]) -> None:
    typer.echo("Warnings:", err=True)
    for warning in warnings:
        typer.echo(f"  {warning}", err=True)
    typer.echo(err=True)


# Standalone command function for direct registration
def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON booth configuration to validate"),
    ],
) -> None:
    """Validate a booth configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but some components were rejected

    Example:
        booths validate my-booth.json
    """
    validate(config_file)
