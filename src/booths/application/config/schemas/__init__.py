"""Configuration schema models for booth specifications.

The schemas are organized into the following modules:
- base.py: Enums, versions and shared helpers
- booth_schema.py: Floor, walls, graphics and extras
- component_schema.py: Placed components (discriminated on `type`)
- root.py: Root configuration model
"""

from booths.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    WALL_HEIGHTS as WALL_HEIGHTS,
    GraphicTypeConfig as GraphicTypeConfig,
    OrientationConfig as OrientationConfig,
    TrussTypeConfig as TrussTypeConfig,
    WallShapeConfig as WallShapeConfig,
    WallSideConfig as WallSideConfig,
)
from booths.application.config.schemas.booth_schema import (
    FloorConfig as FloorConfig,
    GraphicsConfig as GraphicsConfig,
    OptionsConfig as OptionsConfig,
    WallsConfig as WallsConfig,
)
from booths.application.config.schemas.component_schema import (
    ComponentConfig as ComponentConfig,
    CounterConfig as CounterConfig,
    FurnitureConfig as FurnitureConfig,
    HeightTierConfig as HeightTierConfig,
    PlantConfig as PlantConfig,
    ShelfConfig as ShelfConfig,
    SpeakerConfig as SpeakerConfig,
    StorageConfig as StorageConfig,
    TrussConfig as TrussConfig,
    TvConfig as TvConfig,
)
from booths.application.config.schemas.root import (
    BoothConfiguration as BoothConfiguration,
)
