"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LaborSchema(BaseModel):
    """Crew and hours for build and teardown."""

    crew: int = Field(..., description="Crew size")
    build_hours: int = Field(..., description="Build hours")
    demolition_hours: int = Field(..., description="Teardown hours")
    tier_area: float = Field(..., description="Floor area used for the labor tier")


class PriceBreakdownSchema(BaseModel):
    """Quote amounts in whole SEK."""

    material_cost: int
    build_cost: int
    demolition_cost: int
    consumables: int
    admin_fee: int
    subtotal: int
    markup: int
    total: int
    labor: LaborSchema
    material_lines: dict[str, int] = Field(
        default_factory=dict, description="Material cost per quote line"
    )


class WallRunSchema(BaseModel):
    """Segmented wall run."""

    side: str = Field(..., description="back, left or right")
    length: float = Field(..., description="Run length in meters")
    modules: list[float] = Field(..., description="Module lengths in meters")


class QuoteResponseSchema(BaseModel):
    """Response for a booth quote."""

    bom: dict[str, int | str] = Field(..., description="Packing list by label")
    price: PriceBreakdownSchema
    walls: list[WallRunSchema] = Field(default_factory=list)
    components: list[dict[str, Any]] = Field(
        default_factory=list, description="Placed components after correction"
    )
    rendered_fixtures: int = Field(
        default=0, description="Light fixtures to render (may be below the billed count)"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Components that were not placed"
    )


class BomResponseSchema(BaseModel):
    """Response for a packing list."""

    bom: dict[str, int | str] = Field(..., description="Packing list by label")
    categories: dict[str, list[tuple[str, int | str]]] = Field(
        default_factory=dict, description="Packing list grouped by section"
    )
    warnings: list[str] = Field(default_factory=list)


class SlotSchema(BaseModel):
    """Legal slot: floor coordinates or a wall slot."""

    x: float | None = None
    z: float | None = None
    rotation: float | None = None
    wall: str | None = None
    slot: int | None = None
    tier: str | None = None


class SlotsResponseSchema(BaseModel):
    """Response with legal slots for a component kind."""

    kind: str
    catalog_index: int
    slots: list[SlotSchema] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
