"""Unit tests for bill of materials aggregation.

These tests verify:
- Counter recipes (straight, wide and L-shaped) with matching graphics
- Non-counter components and extras
- Truss decomposition
- SAM-led lighting, carpet and graphics entries
- Idempotence and order independence
"""

import pytest

from booths.domain import catalog
from booths.domain.entities import BoothOptions, PlacedComponent
from booths.domain.services import (
    BomAggregator,
    counter_recipe,
    front_truss_segments,
    truss_recipe,
)
from booths.domain.value_objects import (
    ComponentKind,
    FloorPlan,
    FloorPosition,
    GraphicType,
    TrussType,
    WallPosition,
    WallShape,
    WallSide,
)


@pytest.fixture
def aggregator() -> BomAggregator:
    return BomAggregator()


def _floor_component(
    component_id: str, kind: ComponentKind, index: int, x: float = 0.0, z: float = 0.0
) -> PlacedComponent:
    return PlacedComponent(
        id=component_id,
        kind=kind,
        catalog_index=index,
        position=FloorPosition(x=x, z=z),
    )


def _wall_component(
    component_id: str, kind: ComponentKind, index: int, slot: int, tier: str = "mid"
) -> PlacedComponent:
    return PlacedComponent(
        id=component_id,
        kind=kind,
        catalog_index=index,
        position=WallPosition(wall=WallSide.BACK, slot_index=slot, height_tier=tier),
    )


class TestCounterRecipe:
    """Tests for counter_recipe."""

    def test_two_meter_counter(
        self, aggregator: BomAggregator, open_floor: FloorPlan
    ) -> None:
        """A single 2m disk expands to exactly its recipe and graphics."""
        counter = _floor_component("counter-1", ComponentKind.COUNTER, 2)
        bom = aggregator.aggregate(open_floor, [counter])
        assert bom == {
            "Bematrix ram 0,5x2": 2,
            "Bematrix ram 2x1": 1,
            "Barskiva 2x0,5": 1,
            "Lister forex": 4,
            "Corners": 2,
            "M8pin": 6,
            "Special connector": 2,
            "disk innehylla": 2,
            "Grafik 0,5x2": 2,
            "Grafik 2x1": 1,
        }

    def test_half_meter_width_label(self) -> None:
        parts = counter_recipe(catalog.COUNTERS[1])
        assert parts["Bematrix ram 1,5x1"] == 1
        assert parts["Barskiva 1,5x0,5"] == 1

    @pytest.mark.parametrize(
        "index,extra_frame", [(5, "Bematrix ram 0,5x1"), (6, "Bematrix ram 1x1")]
    )
    def test_wide_counters_need_extra_frame(self, index: int, extra_frame: str) -> None:
        parts = counter_recipe(catalog.COUNTERS[index])
        assert parts["Bematrix ram 3x1"] == 1
        assert parts[extra_frame] == 1
        assert parts["Connectors"] == 2

    def test_three_meter_counter_fits_one_frame(self) -> None:
        parts = counter_recipe(catalog.COUNTERS[4])
        assert parts["Bematrix ram 3x1"] == 1
        assert "Connectors" not in parts

    def test_every_frame_has_matching_graphic(self) -> None:
        for counter in catalog.COUNTERS:
            parts = counter_recipe(counter)
            frames = {
                label.removeprefix("Bematrix ram "): count
                for label, count in parts.items()
                if label.startswith("Bematrix ram ")
            }
            graphics = {
                label.removeprefix("Grafik "): count
                for label, count in parts.items()
                if label.startswith("Grafik ")
            }
            assert frames == graphics
            assert parts["disk innehylla"] == 2

    def test_l_counter_recipe_ignores_mirroring(self) -> None:
        l_parts = counter_recipe(catalog.COUNTERS[7])
        assert l_parts == counter_recipe(catalog.COUNTERS[8])
        assert l_parts["Bematrix ram 0,5x2"] == 4
        assert l_parts["Bematrix ram 1x1"] == 1
        assert l_parts["Bematrix ram 1,5x1"] == 1
        assert l_parts["Barskiva 1,5x0,5"] == 1
        assert l_parts["Barskiva 1x0,5"] == 1


class TestTruss:
    """Tests for truss decomposition."""

    @pytest.mark.parametrize(
        "width,expected", [(5.0, (2, 1)), (4.0, (2, 0)), (3.0, (1, 1)), (2.0, (1, 0))]
    )
    def test_front_truss_segments(self, width: float, expected: tuple[int, int]) -> None:
        assert front_truss_segments(width) == expected

    def test_front_truss_recipe(self) -> None:
        parts = truss_recipe(TrussType.FRONT_STRAIGHT, 5.0)
        assert parts["Truss 2m"] == 2
        assert parts["Truss 1m"] == 1
        assert parts["Vajer upphängning"] == 4
        assert parts["Trusslampa"] == 5

    def test_hanging_recipes(self) -> None:
        assert truss_recipe(TrussType.HANGING_SQUARE, 3.0) == {
            "Truss 2m": 4,
            "Vajer upphängning": 4,
            "Trusslampa": 4,
        }
        assert truss_recipe(TrussType.HANGING_ROUND, 3.0)["Trusslampa"] == 6

    def test_even_width_has_no_one_meter_truss(self, aggregator: BomAggregator) -> None:
        floor = FloorPlan(width=4.0, depth=4.0)
        index = catalog.truss_index(TrussType.FRONT_STRAIGHT)
        truss = _floor_component("truss-1", ComponentKind.TRUSS, index, z=1.85)
        bom = aggregator.aggregate(floor, [truss])
        assert bom["Truss 2m"] == 2
        assert "Truss 1m" not in bom


class TestOtherComponents:
    """Tests for non-counter components and extras."""

    def test_shelf_and_speaker(
        self, aggregator: BomAggregator, straight_floor: FloorPlan
    ) -> None:
        shelf = _wall_component("shelf-1", ComponentKind.SHELF, 0, 0)
        speaker = _floor_component("speaker-1", ComponentKind.SPEAKER, 0)
        bom = aggregator.aggregate(straight_floor, [shelf, speaker])
        assert bom["Hyllplan"] == 1
        assert bom["Hyllbracket"] == 2
        assert bom["Högtalare"] == 1
        assert bom["Högtalarstativ"] == 1

    def test_tvs_plants_furniture_by_label(
        self, aggregator: BomAggregator, straight_floor: FloorPlan
    ) -> None:
        components = [
            _wall_component("tv-1", ComponentKind.TV, 3, 0),
            _wall_component("tv-2", ComponentKind.TV, 3, 1),
            _floor_component("plant-1", ComponentKind.PLANT, 0),
            _floor_component("plant-2", ComponentKind.PLANT, 0, x=1.0),
            _floor_component("furniture-1", ComponentKind.FURNITURE, 3),
        ]
        bom = aggregator.aggregate(straight_floor, components)
        assert bom['TV 55"'] == 2
        assert bom["Monstera"] == 2
        assert bom["Barstol"] == 1

    def test_storage_by_size(self, aggregator: BomAggregator, open_floor: FloorPlan) -> None:
        storage = _floor_component("storage-1", ComponentKind.STORAGE, 1, -0.5, 1.0)
        assert aggregator.aggregate(open_floor, [storage])["Förråd 2x1"] == 1

    def test_clothes_rack_is_one_regardless_of_storage(
        self, aggregator: BomAggregator, open_floor: FloorPlan
    ) -> None:
        storages = [
            _floor_component("storage-1", ComponentKind.STORAGE, 0, -1.0, 1.0),
            _floor_component("storage-2", ComponentKind.STORAGE, 0, 1.0, 1.0),
        ]
        options = BoothOptions(clothes_rack=True, espresso_machine=True, candy_bowl=True)
        bom = aggregator.aggregate(open_floor, storages, options=options)
        assert bom["Klädhängare"] == 1
        assert bom["Espressomaskin"] == 1
        assert bom["Godiskål"] == 1
        assert "Blomma" not in bom


class TestLightingAndDescriptions:
    """Tests for SAM-led, carpet and graphics entries."""

    def test_sam_led_for_straight_3x3(
        self, aggregator: BomAggregator, straight_floor: FloorPlan
    ) -> None:
        bom = aggregator.aggregate(straight_floor, [], options=BoothOptions(lights=True))
        assert bom["SAM-led"] == 3

    def test_no_sam_led_without_lights(
        self, aggregator: BomAggregator, straight_floor: FloorPlan
    ) -> None:
        assert "SAM-led" not in aggregator.aggregate(straight_floor, [])

    def test_walls_add_frames(
        self, aggregator: BomAggregator, straight_floor: FloorPlan
    ) -> None:
        bom = aggregator.aggregate(straight_floor, [])
        assert bom["2,5x1"] == 3
        assert bom["Baseplate"] == 1

    def test_carpet_description(self, aggregator: BomAggregator, open_floor: FloorPlan) -> None:
        bom = aggregator.aggregate(open_floor, [], carpet_index=1)
        assert bom["Matta"] == "3×3 Grå matta"

    def test_no_carpet(self, aggregator: BomAggregator, open_floor: FloorPlan) -> None:
        assert "Matta" not in aggregator.aggregate(open_floor, [], carpet_index=0)

    @pytest.mark.parametrize(
        "graphic,label,text",
        [
            (GraphicType.HYR, "Hyrgrafik", "7,5 m² hyrgrafik"),
            (GraphicType.VEPA, "Vepa", "7,5 m² vepa"),
            (GraphicType.FOREX, "Forex", "3 lm forex (2,5 m)"),
        ],
    )
    def test_wall_graphics(
        self,
        aggregator: BomAggregator,
        straight_floor: FloorPlan,
        graphic: GraphicType,
        label: str,
        text: str,
    ) -> None:
        bom = aggregator.aggregate(straight_floor, [], wall_graphic=graphic)
        assert bom[label] == text

    def test_wall_graphics_need_walls(
        self, aggregator: BomAggregator, open_floor: FloorPlan
    ) -> None:
        bom = aggregator.aggregate(open_floor, [], wall_graphic=GraphicType.HYR)
        assert "Hyrgrafik" not in bom

    def test_storage_graphics(self, aggregator: BomAggregator, open_floor: FloorPlan) -> None:
        storage = _floor_component("storage-1", ComponentKind.STORAGE, 0, -1.0, 1.0)
        bom = aggregator.aggregate(
            open_floor, [storage], storage_graphic=GraphicType.VEPA
        )
        assert bom["Förrådsgrafik"] == "7,5 m² vepa"


class TestAggregationProperties:
    """Tests for idempotence and order independence."""

    def _components(self) -> list[PlacedComponent]:
        return [
            _floor_component("counter-1", ComponentKind.COUNTER, 2, 0.0, 0.0),
            _floor_component("counter-2", ComponentKind.COUNTER, 7, 0.0, -1.0),
            _floor_component("storage-1", ComponentKind.STORAGE, 0, 2.0, 1.5),
            _floor_component("plant-1", ComponentKind.PLANT, 2, -2.0, 1.5),
            _wall_component("tv-1", ComponentKind.TV, 1, 0),
            _wall_component("shelf-1", ComponentKind.SHELF, 0, 1),
            _floor_component("speaker-1", ComponentKind.SPEAKER, 0, 2.0, -1.5),
        ]

    def test_idempotent(self, aggregator: BomAggregator) -> None:
        floor = FloorPlan(width=5.0, depth=4.0, wall_shape=WallShape.U)
        options = BoothOptions(lights=True, flower_vase=True)
        first = aggregator.aggregate(floor, self._components(), 5, options=options)
        second = aggregator.aggregate(floor, self._components(), 5, options=options)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_order_independent(self, aggregator: BomAggregator) -> None:
        floor = FloorPlan(width=5.0, depth=4.0, wall_shape=WallShape.U)
        components = self._components()
        forward = aggregator.aggregate(floor, components, storage_graphic=GraphicType.HYR)
        backward = aggregator.aggregate(
            floor, list(reversed(components)), storage_graphic=GraphicType.HYR
        )
        assert forward == backward
        assert list(forward) == list(backward)

    def test_layout_shortcut(self, aggregator: BomAggregator, straight_layout) -> None:
        straight_layout.options = BoothOptions(lights=True)
        assert aggregator.aggregate_layout(straight_layout)["SAM-led"] == 3
