"""Catalog command for listing selectable components and sizes.

Every component in a booth configuration refers to a row of one of
these tables by its zero-based index.
"""

from typing import Annotated, Callable

import typer

from booths.domain import catalog


def _floors() -> list[str]:
    return [
        f"{s.label:<8} {s.width:g} x {s.depth:g} m  ({s.area:g} m²)"
        for s in catalog.FLOOR_SIZES
    ]


def _counters() -> list[str]:
    return [f"{c.label:<32} {c.width:g} m  {c.shape}" for c in catalog.COUNTERS]


def _storage() -> list[str]:
    return [f"{s.label:<8} {s.width:g} x {s.depth:g} m" for s in catalog.STORAGE_TYPES]


def _tvs() -> list[str]:
    return [
        f"{t.label:<6} {t.width:.2f} x {t.height:.2f} m  {t.price} kr"
        for t in catalog.TV_SIZES
    ]


def _plants() -> list[str]:
    return [
        f"{p.label:<14} {p.width:g} x {p.depth:g} m  {p.price} kr"
        for p in catalog.PLANT_TYPES
    ]


def _furniture() -> list[str]:
    return [
        f"{f.label:<14} {f.width:g} x {f.depth:g} m  {f.price} kr"
        for f in catalog.FURNITURE_TYPES
    ]


def _truss() -> list[str]:
    lines = []
    for t in catalog.TRUSS_TYPES:
        price = f"{t.price_per_meter} kr/m" if t.width is None else f"{t.price} kr"
        lines.append(f"{t.truss_type.value:<16} {t.label:<24} {price}")
    return lines


def _carpets() -> list[str]:
    return [
        f"{c.label:<22} {catalog.CARPET_PRICE_PER_SQM[c.family]} kr/m²"
        for c in catalog.CARPETS
    ]


def _walls() -> list[str]:
    return [
        f"{w.height:g} m  wall {w.price_per_meter} kr/m  forex {w.forex_per_meter} kr/m"
        for w in catalog.WALL_HEIGHTS
    ]


TABLES: dict[str, Callable[[], list[str]]] = {
    "floors": _floors,
    "counters": _counters,
    "storage": _storage,
    "tvs": _tvs,
    "plants": _plants,
    "furniture": _furniture,
    "truss": _truss,
    "carpets": _carpets,
    "walls": _walls,
}


def catalog_command(
    table: Annotated[
        str | None,
        typer.Argument(help=f"Table to list: {', '.join(TABLES)} (default: all)"),
    ] = None,
) -> None:
    """List catalog tables with their selection indices.

    Example:
        booths catalog tvs
    """
    if table is not None and table not in TABLES:
        typer.echo(f"Unknown catalog table: {table}", err=True)
        typer.echo(f"Available tables: {', '.join(TABLES)}", err=True)
        raise typer.Exit(code=1)

    names = [table] if table is not None else list(TABLES)
    for name in names:
        typer.echo(name.upper())
        for index, line in enumerate(TABLES[name]()):
            typer.echo(f"  [{index}] {line}")
        typer.echo()
