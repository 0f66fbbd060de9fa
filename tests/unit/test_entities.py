"""Unit tests for domain entities.

These tests verify:
- PlacedComponent position validation and immutable updates
- BoothLayout id assignment and component bookkeeping
"""

import pytest

from booths.domain.entities import BoothLayout, BoothOptions, PlacedComponent
from booths.domain.value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    Orientation,
    WallPosition,
    WallSide,
)


def _counter(component_id: str = "counter-1") -> PlacedComponent:
    return PlacedComponent(
        id=component_id,
        kind=ComponentKind.COUNTER,
        catalog_index=0,
        position=FloorPosition(x=0.0, z=0.0),
    )


class TestPlacedComponent:
    """Tests for PlacedComponent."""

    def test_floor_kind_needs_floor_position(self) -> None:
        with pytest.raises(ValueError, match="FloorPosition"):
            PlacedComponent(
                id="plant-1",
                kind=ComponentKind.PLANT,
                catalog_index=0,
                position=WallPosition(wall=WallSide.BACK, slot_index=0),
            )

    def test_wall_kind_needs_wall_position(self) -> None:
        with pytest.raises(ValueError, match="WallPosition"):
            PlacedComponent(
                id="tv-1",
                kind=ComponentKind.TV,
                catalog_index=0,
                position=FloorPosition(x=0.0, z=0.0),
            )

    def test_is_frozen(self) -> None:
        component = _counter()
        with pytest.raises(AttributeError):
            component.rotation = 90.0  # type: ignore

    def test_with_rotation_normalizes(self) -> None:
        component = _counter()
        rotated = component.with_rotation(450.0)
        assert rotated.rotation == 90.0
        assert component.rotation == 0.0

    def test_with_position(self) -> None:
        moved = _counter().with_position(FloorPosition(x=1.0, z=0.5))
        assert moved.floor_position == FloorPosition(x=1.0, z=0.5)

    def test_with_orientation(self) -> None:
        tv = PlacedComponent(
            id="tv-1",
            kind=ComponentKind.TV,
            catalog_index=0,
            position=WallPosition(wall=WallSide.BACK, slot_index=1),
        )
        assert tv.with_orientation(Orientation.PORTRAIT).orientation is Orientation.PORTRAIT

    def test_position_accessors(self) -> None:
        component = _counter()
        with pytest.raises(TypeError):
            component.wall_position


class TestBoothLayout:
    """Tests for BoothLayout."""

    @pytest.fixture
    def layout(self) -> BoothLayout:
        return BoothLayout(floor=FloorPlan(width=3.0, depth=3.0))

    def test_defaults(self, layout: BoothLayout) -> None:
        assert layout.carpet_index == 0
        assert layout.options == BoothOptions()
        assert layout.components == []

    def test_next_id_per_kind(self, layout: BoothLayout) -> None:
        assert layout.next_id(ComponentKind.COUNTER) == "counter-1"
        assert layout.next_id(ComponentKind.COUNTER) == "counter-2"
        assert layout.next_id(ComponentKind.PLANT) == "plant-1"

    def test_add_and_get(self, layout: BoothLayout) -> None:
        component = _counter()
        layout.add(component)
        assert layout.get("counter-1") is component
        assert layout.get("counter-2") is None

    def test_duplicate_id_rejected(self, layout: BoothLayout) -> None:
        layout.add(_counter())
        with pytest.raises(ValueError, match="Duplicate"):
            layout.add(_counter())

    def test_replace(self, layout: BoothLayout) -> None:
        component = _counter()
        layout.add(component)
        layout.replace(component.with_rotation(90.0))
        assert layout.get("counter-1").rotation == 90.0
        with pytest.raises(KeyError):
            layout.replace(_counter("counter-7"))

    def test_remove(self, layout: BoothLayout) -> None:
        layout.add(_counter())
        assert layout.remove("counter-1")
        assert not layout.remove("counter-1")

    def test_of_kind_and_others(self, layout: BoothLayout) -> None:
        layout.add(_counter("counter-1"))
        layout.add(_counter("counter-2"))
        assert [c.id for c in layout.of_kind(ComponentKind.COUNTER)] == [
            "counter-1",
            "counter-2",
        ]
        assert layout.of_kind(ComponentKind.PLANT) == []
        assert [c.id for c in layout.others("counter-1")] == ["counter-2"]
