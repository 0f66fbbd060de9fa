"""Typer CLI for booth packing lists and quotes."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from booths.application import GenerateQuoteCommand, ListSlotsCommand, QuoteOutput
from booths.application.config import BoothConfiguration, ConfigError, load_config
from booths.cli.commands import (
    catalog_command,
    display_load_error,
    display_warnings,
    validate_command,
)
from booths.domain import ComponentKind, UnknownCatalogIndexError
from booths.infrastructure import (
    JsonExporter,
    PackingListFormatter,
    QuoteFormatter,
    WallPlanFormatter,
    slot_to_dict,
)

app = typer.Typer(
    name="booths",
    help="Configure trade-show booths: packing lists, quotes and legal slots.",
)

# Register validate and catalog commands
app.command(name="validate")(validate_command)
app.command(name="catalog")(catalog_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log placement decisions (DEBUG)"),
    ] = False,
) -> None:
    """Configure trade-show booths from JSON configuration files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(config_file: Path) -> BoothConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _write_or_echo(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.write_text(content, encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


def _finish(result: QuoteOutput) -> None:
    """Exit with code 2 when components were rejected."""
    if result.warnings:
        display_warnings(result.warnings)
        raise typer.Exit(code=2)


@app.command()
def quote(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON booth configuration")
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file"),
    ] = None,
) -> None:
    """Show the quote (material, labor, fees and markup) for a booth."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    config = _load(config_file)
    result = GenerateQuoteCommand().execute_config(config)

    if output_format == "json":
        _write_or_echo(JsonExporter().export(result), output_file)
    else:
        _write_or_echo(QuoteFormatter().format(result.price), output_file)
    _finish(result)


@app.command()
def bom(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON booth configuration")
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    accessories: Annotated[
        bool,
        typer.Option(
            "--accessories/--no-accessories",
            help="Append the fixed BM Acc tool list",
        ),
    ] = True,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file"),
    ] = None,
) -> None:
    """Show the packing list (bill of materials) for a booth."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}", err=True)
        raise typer.Exit(code=1)

    config = _load(config_file)
    result = GenerateQuoteCommand().execute_config(config)

    if output_format == "json":
        content = json.dumps(result.bom.to_dict(), indent=2, ensure_ascii=False)
    else:
        content = PackingListFormatter(include_accessories=accessories).format(
            result.bom
        )
    _write_or_echo(content, output_file)
    _finish(result)


@app.command()
def walls(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON booth configuration")
    ],
) -> None:
    """Show wall runs, modules and the BeMatrix frame plan."""
    config = _load(config_file)
    result = GenerateQuoteCommand().execute_config(config)
    typer.echo(WallPlanFormatter().format(result.wall_runs, result.frame_plan))
    if result.fixtures:
        typer.echo()
        typer.echo(
            f"Light fixtures: {len(result.fixtures)} rendered, "
            f"{result.bom.count('SAM-led')} billed"
        )
    _finish(result)


@app.command()
def slots(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON booth configuration")
    ],
    kind: Annotated[
        ComponentKind,
        typer.Option("--kind", "-k", help="Component kind to place"),
    ],
    index: Annotated[
        int,
        typer.Option("--index", "-i", help="Catalog index of the component"),
    ] = 0,
    rotation: Annotated[
        float,
        typer.Option("--rotation", "-r", help="Rotation in degrees"),
    ] = 0.0,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
) -> None:
    """List legal placement slots for one more component of a kind."""
    config = _load(config_file)
    try:
        result = ListSlotsCommand().execute(config, kind, index, rotation)
    except UnknownCatalogIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().export_slots(result))
        return

    typer.echo(f"{len(result.slots)} legal {result.kind} slot(s)")
    for slot in result.slots:
        data = slot_to_dict(slot)
        if "wall" in data:
            typer.echo(f"  {data['wall']:<6} slot {data['slot']}  {data['tier']}")
        else:
            typer.echo(f"  x={data['x']:+.2f}  z={data['z']:+.2f}")


if __name__ == "__main__":
    app()
