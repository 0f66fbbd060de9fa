"""Adapter to convert BoothConfiguration into domain objects.

This module turns a validated BoothConfiguration into a FloorPlan,
BoothOptions and a populated BoothLayout. Components are placed through
the LayoutEditor in configuration order, so every placement is checked
exactly as an interactive placement would be. Components that do not
fit are skipped and reported as warnings instead of failing the whole
configuration.
"""

import logging

from booths.application.config.schemas import (
    BoothConfiguration,
    ComponentConfig,
    CounterConfig,
    FurnitureConfig,
    PlantConfig,
    ShelfConfig,
    SpeakerConfig,
    StorageConfig,
    TrussConfig,
    TvConfig,
)
from booths.domain import catalog
from booths.domain.entities import BoothLayout, BoothOptions, PlacedComponent
from booths.domain.services import LayoutEditor, MarkerGenerator
from booths.domain.value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    WallPosition,
)

logger = logging.getLogger(__name__)

_FLOOR_KINDS: dict[type, ComponentKind] = {
    CounterConfig: ComponentKind.COUNTER,
    PlantConfig: ComponentKind.PLANT,
    FurnitureConfig: ComponentKind.FURNITURE,
    SpeakerConfig: ComponentKind.SPEAKER,
}


def config_to_floor(config: BoothConfiguration) -> FloorPlan:
    """Build the FloorPlan from the floor and walls sections."""
    width, depth = config.floor.dimensions()
    return FloorPlan(
        width=width,
        depth=depth,
        wall_shape=config.walls.shape,
        wall_height=config.walls.height,
    )


def config_to_options(config: BoothConfiguration) -> BoothOptions:
    """Build BoothOptions from the options section."""
    options = config.options
    return BoothOptions(
        lights=options.lights,
        clothes_rack=options.clothes_rack,
        espresso_machine=options.espresso_machine,
        flower_vase=options.flower_vase,
        candy_bowl=options.candy_bowl,
        power_outlet=options.power_outlet,
    )


def config_to_layout(
    config: BoothConfiguration,
    editor: LayoutEditor | None = None,
) -> tuple[BoothLayout, list[str]]:
    """Convert a BoothConfiguration into a populated BoothLayout.

    Args:
        config: A validated BoothConfiguration instance
        editor: Layout editor used to place components. A default editor
            is created when omitted.

    Returns:
        Tuple of (layout, warnings). Warnings describe components that
        were rejected (outside the floor, colliding or without a free
        wall slot) and therefore left out of the layout.

    Example:
        >>> config = load_config(Path("booth.json"))
        >>> layout, warnings = config_to_layout(config)
        >>> for warning in warnings:
        ...     print(warning)
    """
    editor = editor or LayoutEditor()
    layout = BoothLayout(
        floor=config_to_floor(config),
        carpet_index=config.carpet_index,
        wall_graphic=config.graphics.wall,
        storage_graphic=config.graphics.storage,
        options=config_to_options(config),
    )
    markers = MarkerGenerator(editor.validator)

    warnings: list[str] = []
    for i, component_config in enumerate(config.components):
        placed = _place_component(layout, editor, markers, component_config)
        if placed is None:
            message = (
                f"components[{i}] ({component_config.type}): "
                f"{_describe_target(component_config)} rejected"
            )
            logger.debug(message)
            warnings.append(message)
    return layout, warnings


def _place_component(
    layout: BoothLayout,
    editor: LayoutEditor,
    markers: MarkerGenerator,
    component_config: ComponentConfig,
) -> PlacedComponent | None:
    floor = layout.floor

    if isinstance(component_config, TvConfig):
        return editor.place_tv(
            layout,
            component_config.index,
            component_config.wall,
            component_config.slot,
            component_config.tier,
            component_config.orientation,
        )

    if isinstance(component_config, ShelfConfig):
        return editor.place(
            layout,
            ComponentKind.SHELF,
            0,
            WallPosition(
                wall=component_config.wall,
                slot_index=component_config.slot,
                height_tier=component_config.tier,
            ),
        )

    if isinstance(component_config, StorageConfig):
        left, right = markers.storage_corners(
            floor, component_config.index, component_config.rotation
        )
        x, z = left if component_config.corner == "left" else right
        return editor.place(
            layout,
            ComponentKind.STORAGE,
            component_config.index,
            FloorPosition(x=x, z=z),
            component_config.rotation,
        )

    if isinstance(component_config, TrussConfig):
        index = catalog.truss_index(component_config.truss_type)
        x, z = markers.truss_anchor(floor, index)[0]
        return editor.place(
            layout, ComponentKind.TRUSS, index, FloorPosition(x=x, z=z)
        )

    kind = _FLOOR_KINDS[type(component_config)]
    index = getattr(component_config, "index", 0)
    return editor.place(
        layout,
        kind,
        index,
        FloorPosition(x=component_config.x, z=component_config.z),
        component_config.rotation,
    )


def _describe_target(component_config: ComponentConfig) -> str:
    if isinstance(component_config, (TvConfig, ShelfConfig)):
        return (
            f"{component_config.wall.value} wall slot {component_config.slot} "
            f"({component_config.tier})"
        )
    if isinstance(component_config, StorageConfig):
        return f"{component_config.corner} front corner"
    if isinstance(component_config, TrussConfig):
        return component_config.truss_type.value
    return f"position ({component_config.x}, {component_config.z})"
