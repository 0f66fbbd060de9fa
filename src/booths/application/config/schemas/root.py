"""Root configuration schema.

This module contains the root BoothConfiguration model which represents
a complete booth configuration file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from booths.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    check_catalog_index,
)
from booths.application.config.schemas.booth_schema import (
    FloorConfig,
    GraphicsConfig,
    OptionsConfig,
    WallsConfig,
)
from booths.application.config.schemas.component_schema import ComponentConfig
from booths.domain import catalog


class BoothConfiguration(BaseModel):
    """Root configuration model for a booth.

    Components are placed in list order; a component that does not fit
    is skipped with a warning, so later components see only the ones
    that were actually placed.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        floor: Floor size
        walls: Wall shape and height
        carpet_index: Index into the carpet catalog (0 = no carpet)
        graphics: Wall and storage graphics
        options: Extras toggles
        components: Components to place, in order

    Example:
        >>> config = BoothConfiguration(
        ...     schema_version="1.0",
        ...     floor=FloorConfig(size_index=2),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    floor: FloorConfig
    walls: WallsConfig = Field(default_factory=WallsConfig)
    carpet_index: int = Field(default=0, ge=0)
    graphics: GraphicsConfig = Field(default_factory=GraphicsConfig)
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    components: list[ComponentConfig] = Field(default_factory=list, max_length=200)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("carpet_index")
    @classmethod
    def validate_carpet_index(cls, v: int) -> int:
        return check_catalog_index(v, catalog.CARPETS, "carpet")
