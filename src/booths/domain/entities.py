"""Domain entities for booth layouts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    GraphicType,
    Orientation,
    WallPosition,
)

__all__ = ["BoothLayout", "BoothOptions", "PlacedComponent"]


@dataclass(frozen=True)
class PlacedComponent:
    """A component placed in the booth.

    Floor-standing kinds carry a FloorPosition; TVs and shelves carry a
    WallPosition. Placed components are immutable: rotating or moving one
    produces a new value that the layout swaps in.

    Attributes:
        id: Unique id, assigned monotonically per kind ("counter-1", ...).
        kind: Component kind.
        catalog_index: Index into the catalog table for the kind.
        position: Floor or wall position.
        rotation: Rotation around the vertical axis in degrees.
        orientation: TV orientation; ignored for other kinds.
    """

    id: str
    kind: ComponentKind
    catalog_index: int
    position: FloorPosition | WallPosition
    rotation: float = 0.0
    orientation: Orientation = Orientation.LANDSCAPE

    def __post_init__(self) -> None:
        if self.kind.is_wall_mounted and not isinstance(self.position, WallPosition):
            raise ValueError(f"{self.kind.value} components need a WallPosition")
        if not self.kind.is_wall_mounted and not isinstance(
            self.position, FloorPosition
        ):
            raise ValueError(f"{self.kind.value} components need a FloorPosition")

    @property
    def floor_position(self) -> FloorPosition:
        if not isinstance(self.position, FloorPosition):
            raise TypeError(f"{self.id} is wall mounted")
        return self.position

    @property
    def wall_position(self) -> WallPosition:
        if not isinstance(self.position, WallPosition):
            raise TypeError(f"{self.id} stands on the floor")
        return self.position

    def with_rotation(self, rotation: float) -> "PlacedComponent":
        return replace(self, rotation=rotation % 360)

    def with_position(
        self, position: FloorPosition | WallPosition
    ) -> "PlacedComponent":
        return replace(self, position=position)

    def with_orientation(self, orientation: Orientation) -> "PlacedComponent":
        return replace(self, orientation=orientation)


@dataclass(frozen=True)
class BoothOptions:
    """On/off extras selected for the booth."""

    lights: bool = False
    clothes_rack: bool = False
    espresso_machine: bool = False
    flower_vase: bool = False
    candy_bowl: bool = False
    power_outlet: bool = False


@dataclass
class BoothLayout:
    """Caller-owned booth state: floor, global selections and components.

    The layout itself does not validate placements; use LayoutEditor to
    place, rotate and move components so every mutation is checked
    against the floor and the other components first.

    Attributes:
        floor: Floor plan with wall shape and height.
        carpet_index: Index into catalog.CARPETS.
        wall_graphic: Graphic option for wall runs.
        storage_graphic: Graphic option for storage units.
        options: Extras toggles.
        components: Placed components in insertion order.
    """

    floor: FloorPlan
    carpet_index: int = 0
    wall_graphic: GraphicType = GraphicType.NONE
    storage_graphic: GraphicType = GraphicType.NONE
    options: BoothOptions = field(default_factory=BoothOptions)
    components: list[PlacedComponent] = field(default_factory=list)
    _id_counters: dict[ComponentKind, int] = field(
        default_factory=dict, init=False, repr=False
    )

    def next_id(self, kind: ComponentKind) -> str:
        """Reserve the next id for a kind. Ids are never reused."""
        value = self._id_counters.get(kind, 0) + 1
        self._id_counters[kind] = value
        return f"{kind.value}-{value}"

    def add(self, component: PlacedComponent) -> None:
        if self.get(component.id) is not None:
            raise ValueError(f"Duplicate component id: {component.id}")
        self.components.append(component)

    def get(self, component_id: str) -> PlacedComponent | None:
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def replace(self, component: PlacedComponent) -> None:
        """Swap in an updated version of an existing component."""
        for i, existing in enumerate(self.components):
            if existing.id == component.id:
                self.components[i] = component
                return
        raise KeyError(component.id)

    def remove(self, component_id: str) -> bool:
        """Remove a component by id. Returns False if it was not present."""
        for i, existing in enumerate(self.components):
            if existing.id == component_id:
                del self.components[i]
                return True
        return False

    def of_kind(self, *kinds: ComponentKind) -> list[PlacedComponent]:
        return [c for c in self.components if c.kind in kinds]

    def others(self, component_id: str) -> list[PlacedComponent]:
        return [c for c in self.components if c.id != component_id]
