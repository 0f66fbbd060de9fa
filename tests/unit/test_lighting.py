"""Unit tests for billed and rendered SAM-led lighting."""

import pytest

from booths.domain.entities import PlacedComponent
from booths.domain.services import billed_led_count, rendered_fixtures
from booths.domain.value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    WallShape,
    WallSide,
)


def _storage_at(x: float, z: float) -> PlacedComponent:
    return PlacedComponent(
        id="storage-1",
        kind=ComponentKind.STORAGE,
        catalog_index=0,
        position=FloorPosition(x=x, z=z),
    )


class TestBilledCount:
    """Tests for billed_led_count."""

    def test_one_per_meter_of_wall(self, straight_floor: FloorPlan) -> None:
        assert billed_led_count(straight_floor, True) == 3

    def test_lights_off(self, straight_floor: FloorPlan) -> None:
        assert billed_led_count(straight_floor, False) == 0

    def test_all_runs_counted(self) -> None:
        floor = FloorPlan(width=5.0, depth=4.0, wall_shape=WallShape.U)
        assert billed_led_count(floor, True) == 13

    def test_half_meters_round_up(self) -> None:
        floor = FloorPlan(width=3.5, depth=3.0, wall_shape=WallShape.STRAIGHT)
        assert billed_led_count(floor, True) == 4

    def test_open_booth(self, open_floor: FloorPlan) -> None:
        assert billed_led_count(open_floor, True) == 0


class TestRenderedFixtures:
    """Tests for rendered_fixtures."""

    def test_one_fixture_per_module(self, straight_floor: FloorPlan) -> None:
        fixtures = rendered_fixtures(straight_floor, [])
        assert [(f.x, f.z) for f in fixtures] == [
            pytest.approx((-1.0, -1.5)),
            pytest.approx((0.0, -1.5)),
            pytest.approx((1.0, -1.5)),
        ]
        assert all(f.wall is WallSide.BACK for f in fixtures)

    def test_fixture_near_storage_suppressed(self, u_floor: FloorPlan) -> None:
        storage = _storage_at(-1.0, 1.0)
        fixtures = rendered_fixtures(u_floor, [storage])
        assert len(fixtures) == 8
        assert (WallSide.LEFT, 2) not in [(f.wall, f.module_index) for f in fixtures]

    def test_rendered_never_exceeds_billed(self, u_floor: FloorPlan) -> None:
        storage = _storage_at(-1.0, 1.0)
        rendered = len(rendered_fixtures(u_floor, [storage]))
        assert rendered <= billed_led_count(u_floor, True)
        assert billed_led_count(u_floor, True) == 9
