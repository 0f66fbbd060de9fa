"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from booths.domain.value_objects import ComponentKind, WallShape


class QuoteRequest(BaseModel):
    """Request for a quote or packing list from a booth configuration."""

    config: dict[str, Any] = Field(..., description="Booth configuration JSON")


class SlotsRequest(BaseModel):
    """Request for the legal slots of one more component."""

    config: dict[str, Any] = Field(..., description="Booth configuration JSON")
    kind: ComponentKind = Field(..., description="Component kind to place")
    catalog_index: int = Field(default=0, description="Catalog row of the component")
    rotation: float = Field(default=0.0, description="Rotation in degrees")
    wall_shape: WallShape | None = Field(
        default=None,
        description="Wall shape for wall slots (defaults to the configured shape)",
    )
