"""Placed component configuration schemas.

Components form a discriminated union on the `type` field. Floor kinds
give a center position in meters relative to the floor center; storage
units and truss snap to fixed anchors; TVs and shelves hang on a wall
module slot.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booths.application.config.schemas.base import (
    OrientationConfig,
    TrussTypeConfig,
    WallSideConfig,
    check_catalog_index,
)
from booths.domain import catalog

HeightTierConfig = Literal["high", "mid", "low"]


class _FloorComponentConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    z: float = 0.0
    rotation: float = 0.0


class CounterConfig(_FloorComponentConfig):
    """Counter (disk) at a floor position."""

    type: Literal["counter"]
    index: int = Field(..., ge=0)

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.COUNTERS, "counter")


class PlantConfig(_FloorComponentConfig):
    """Plant at a floor position."""

    type: Literal["plant"]
    index: int = Field(..., ge=0)

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.PLANT_TYPES, "plant")


class FurnitureConfig(_FloorComponentConfig):
    """Furniture item at a floor position."""

    type: Literal["furniture"]
    index: int = Field(..., ge=0)

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.FURNITURE_TYPES, "furniture")


class SpeakerConfig(_FloorComponentConfig):
    """Speaker on a stand at a floor position."""

    type: Literal["speaker"]


class StorageConfig(BaseModel):
    """Storage unit snapped to one of the two front corners.

    Attributes:
        index: Index into the catalog storage types.
        corner: Front corner, left (-x) or right (+x).
        rotation: Rotation in degrees.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["storage"]
    index: int = Field(..., ge=0)
    corner: Literal["left", "right"] = "left"
    rotation: float = 0.0

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.STORAGE_TYPES, "storage")


class TrussConfig(BaseModel):
    """Truss rig; position follows from the truss type."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["truss"]
    truss_type: TrussTypeConfig


class TvConfig(BaseModel):
    """TV on a wall module slot.

    The slot and tier are a request: the TV is moved to the nearest slot
    and lower tier where it fits the wall.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["tv"]
    index: int = Field(..., ge=0)
    wall: WallSideConfig = WallSideConfig.BACK
    slot: int = Field(default=0, ge=0)
    tier: HeightTierConfig = "mid"
    orientation: OrientationConfig = OrientationConfig.LANDSCAPE

    @field_validator("index")
    @classmethod
    def validate_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.TV_SIZES, "tv")


class ShelfConfig(BaseModel):
    """Wall shelf on a wall module slot."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["shelf"]
    wall: WallSideConfig = WallSideConfig.BACK
    slot: int = Field(default=0, ge=0)
    tier: HeightTierConfig = "mid"


ComponentConfig = Annotated[
    Union[
        CounterConfig,
        StorageConfig,
        TvConfig,
        PlantConfig,
        FurnitureConfig,
        ShelfConfig,
        SpeakerConfig,
        TrussConfig,
    ],
    Field(discriminator="type"),
]
