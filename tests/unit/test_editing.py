"""Unit tests for LayoutEditor.

These tests verify:
- Ids are assigned per kind and never reused
- Rejected placements, moves and rotations leave the layout unchanged
- TVs are routed through the repositioner
"""

import pytest

from booths.domain import BoothLayout, LayoutEditor
from booths.domain.entities import PlacedComponent
from booths.domain.services import run_for_side, tvs_overlap
from booths.domain.value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    Orientation,
    WallPosition,
    WallShape,
    WallSide,
)


class TestPlace:
    """Tests for LayoutEditor.place."""

    def test_ids_per_kind(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        first = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, -1.0))
        second = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 1.0))
        plant = editor.place(open_layout, ComponentKind.PLANT, 0, FloorPosition(1.1, 0.0))
        assert first is not None and first.id == "counter-1"
        assert second is not None and second.id == "counter-2"
        assert plant is not None and plant.id == "plant-1"

    def test_ids_not_reused_after_remove(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, -1.0))
        second = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 1.0))
        assert second is not None
        assert editor.remove(open_layout, second.id)
        third = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 1.0))
        assert third is not None and third.id == "counter-3"

    def test_rejected_placement_returns_none(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        placed = editor.place(open_layout, ComponentKind.COUNTER, 2, FloorPosition(1.0, 0.0))
        assert placed is None
        assert open_layout.components == []

    def test_rotation_normalized(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        placed = editor.place(
            open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0), rotation=-90.0
        )
        assert placed is not None
        assert placed.rotation == 270.0

    def test_tv_routed_through_repositioner(
        self, editor: LayoutEditor, straight_layout: BoothLayout
    ) -> None:
        placed = editor.place(
            straight_layout,
            ComponentKind.TV,
            5,
            WallPosition(wall=WallSide.BACK, slot_index=0, height_tier="mid"),
        )
        assert placed is not None
        assert placed.wall_position.slot_index == 1

    def test_tv_needs_wall_position(
        self, editor: LayoutEditor, straight_layout: BoothLayout
    ) -> None:
        with pytest.raises(ValueError):
            editor.place(straight_layout, ComponentKind.TV, 0, FloorPosition(0.0, 0.0))

    def test_tv_on_open_floor_rejected(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        assert editor.place_tv(open_layout, 3, WallSide.BACK, 0) is None

    def test_tv_slot_out_of_range_rejected(
        self, editor: LayoutEditor, straight_layout: BoothLayout
    ) -> None:
        assert editor.place_tv(straight_layout, 3, WallSide.BACK, 7) is None


class TestToggleOrientation:
    """Tests for LayoutEditor.toggle_tv_orientation."""

    def test_portrait_steps_down_tiers(
        self, editor: LayoutEditor, straight_layout: BoothLayout
    ) -> None:
        tv = editor.place_tv(straight_layout, 5, WallSide.BACK, 1, "high")
        assert tv is not None
        updated = editor.toggle_tv_orientation(straight_layout, tv.id)
        assert updated is not None
        assert updated.orientation is Orientation.PORTRAIT
        assert updated.wall_position.height_tier == "low"
        assert straight_layout.get(tv.id) == updated

    def test_non_tv_ignored(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        counter = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0))
        assert counter is not None
        assert editor.toggle_tv_orientation(open_layout, counter.id) is None
        assert editor.toggle_tv_orientation(open_layout, "tv-9") is None


class TestRotate:
    """Tests for LayoutEditor.rotate."""

    def test_rotation_leaving_floor_rejected(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        storage = editor.place(
            open_layout, ComponentKind.STORAGE, 1, FloorPosition(-0.5, 1.0)
        )
        assert storage is not None
        assert not editor.rotate(open_layout, storage.id, 90.0)
        assert open_layout.get(storage.id).rotation == 0.0

    def test_rotation_accepted(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        counter = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0))
        assert counter is not None
        assert editor.rotate(open_layout, counter.id, 90.0)
        assert open_layout.get(counter.id).rotation == 90.0

    def test_wall_mounted_not_rotated(
        self, editor: LayoutEditor, straight_layout: BoothLayout
    ) -> None:
        tv = editor.place_tv(straight_layout, 3, WallSide.BACK, 1)
        assert tv is not None
        assert not editor.rotate(straight_layout, tv.id, 90.0)


class TestMoveAndRemove:
    """Tests for LayoutEditor.move and remove."""

    def test_colliding_move_rejected(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        counter = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0))
        editor.place(open_layout, ComponentKind.PLANT, 0, FloorPosition(1.0, 1.0))
        assert counter is not None
        assert not editor.move(open_layout, counter.id, FloorPosition(1.0, 1.0))
        assert open_layout.get(counter.id).floor_position == FloorPosition(0.0, 0.0)

    def test_move_accepted(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        counter = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0))
        assert counter is not None
        assert editor.move(open_layout, counter.id, FloorPosition(0.0, -1.0))
        assert open_layout.get(counter.id).floor_position == FloorPosition(0.0, -1.0)

    def test_move_to_wrong_position_type(
        self, editor: LayoutEditor, open_layout: BoothLayout
    ) -> None:
        counter = editor.place(open_layout, ComponentKind.COUNTER, 0, FloorPosition(0.0, 0.0))
        assert counter is not None
        target = WallPosition(wall=WallSide.BACK, slot_index=0)
        assert not editor.move(open_layout, counter.id, target)

    def test_unknown_ids(self, editor: LayoutEditor, open_layout: BoothLayout) -> None:
        assert not editor.move(open_layout, "counter-9", FloorPosition(0.0, 0.0))
        assert not editor.rotate(open_layout, "counter-9", 90.0)
        assert not editor.remove(open_layout, "counter-9")


class TestTvSpans:
    """TVs on the same wall never overlap, whichever slot was asked for."""

    @pytest.fixture
    def wide_layout(self) -> BoothLayout:
        return BoothLayout(
            floor=FloorPlan(width=5.0, depth=3.0, wall_shape=WallShape.STRAIGHT)
        )

    def test_fitting_slot_next_to_tv_is_moved(
        self, editor: LayoutEditor, wide_layout: BoothLayout
    ) -> None:
        first = editor.place_tv(wide_layout, 5, WallSide.BACK, 1)
        second = editor.place_tv(wide_layout, 5, WallSide.BACK, 2)
        assert first is not None and second is not None
        assert first.wall_position.slot_index == 1
        assert second.wall_position.slot_index == 3
        run = run_for_side(wide_layout.floor, WallSide.BACK)
        assert not tvs_overlap(run, first, second)

    def test_overlapping_span_rejected_by_validator(
        self, editor: LayoutEditor, wide_layout: BoothLayout
    ) -> None:
        editor.place_tv(wide_layout, 5, WallSide.BACK, 1)

        def candidate(slot: int) -> PlacedComponent:
            return PlacedComponent(
                id="tv-9",
                kind=ComponentKind.TV,
                catalog_index=5,
                position=WallPosition(wall=WallSide.BACK, slot_index=slot),
            )

        validator = editor.validator
        floor, components = wide_layout.floor, wide_layout.components
        assert not validator.can_place(floor, components, candidate(2))
        assert validator.can_place(floor, components, candidate(3))

    def test_move_onto_tv_span_rejected(
        self, editor: LayoutEditor, wide_layout: BoothLayout
    ) -> None:
        editor.place_tv(wide_layout, 5, WallSide.BACK, 1)
        second = editor.place_tv(wide_layout, 5, WallSide.BACK, 3)
        assert second is not None
        target = WallPosition(wall=WallSide.BACK, slot_index=2)
        assert not editor.move(wide_layout, second.id, target)
        assert wide_layout.get(second.id).wall_position.slot_index == 3

    def test_small_tvs_stack_on_separate_tiers(
        self, editor: LayoutEditor, wide_layout: BoothLayout
    ) -> None:
        upper = editor.place_tv(wide_layout, 0, WallSide.BACK, 1, "high")
        lower = editor.place_tv(wide_layout, 0, WallSide.BACK, 1, "low")
        assert upper is not None and lower is not None
        assert lower.wall_position == WallPosition(
            wall=WallSide.BACK, slot_index=1, height_tier="low"
        )
