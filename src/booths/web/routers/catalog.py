"""Catalog endpoints."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, HTTPException

from booths.domain import catalog

router = APIRouter(prefix="/catalog", tags=["catalog"])

# Tables addressable by selection index, in listing order
CATALOG_TABLES: dict[str, tuple[Any, ...]] = {
    "floors": catalog.FLOOR_SIZES,
    "walls": catalog.WALL_HEIGHTS,
    "counters": catalog.COUNTERS,
    "storage": catalog.STORAGE_TYPES,
    "tvs": catalog.TV_SIZES,
    "plants": catalog.PLANT_TYPES,
    "furniture": catalog.FURNITURE_TYPES,
    "truss": catalog.TRUSS_TYPES,
    "carpets": catalog.CARPETS,
}


def _rows(table: tuple[Any, ...]) -> list[dict[str, Any]]:
    return [{"index": i, **asdict(row)} for i, row in enumerate(table)]


@router.get("")
async def list_catalog() -> dict[str, list[dict[str, Any]]]:
    """Return every catalog table with selection indices."""
    return {name: _rows(table) for name, table in CATALOG_TABLES.items()}


@router.get("/{table}")
async def get_catalog_table(table: str) -> list[dict[str, Any]]:
    """Return one catalog table.

    Raises:
        HTTPException: If the table does not exist.
    """
    if table not in CATALOG_TABLES:
        raise HTTPException(
            status_code=404,
            detail={
                "error": f"Unknown catalog table: {table}",
                "error_type": "not_found",
                "available": list(CATALOG_TABLES),
            },
        )
    return _rows(CATALOG_TABLES[table])
