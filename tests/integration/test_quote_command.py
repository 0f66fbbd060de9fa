"""Integration tests for the quote and slot commands.

These tests run whole configurations through GenerateQuoteCommand and
ListSlotsCommand and check the combined packing list, quote and slots.
"""

from pathlib import Path

import pytest

from booths.application import GenerateQuoteCommand, ListSlotsCommand
from booths.application.config import load_config
from booths.domain import UnknownCatalogIndexError
from booths.domain.value_objects import ComponentKind, WallShape


@pytest.fixture
def command() -> GenerateQuoteCommand:
    return GenerateQuoteCommand()


class TestGenerateQuoteCommand:
    """End-to-end quotes from configuration files."""

    def test_straight_booth_with_lights(
        self, command: GenerateQuoteCommand, fixtures_path: Path
    ) -> None:
        result = command.execute_config(load_config(fixtures_path / "straight_3x3_lights.json"))
        assert result.warnings == []
        assert result.price.total == 22869
        assert result.bom.count("SAM-led") == 3
        assert len(result.fixtures) == 3
        assert [run.side.value for run in result.wall_runs] == ["back"]

    def test_counter_booth(self, command: GenerateQuoteCommand, fixtures_path: Path) -> None:
        result = command.execute_config(load_config(fixtures_path / "counter_2m.json"))
        assert result.price.material_lines == {"counters": 5020}
        assert result.bom["Bematrix ram 2x1"] == 1
        assert result.wall_runs == []
        assert result.fixtures == []

    def test_full_booth(self, command: GenerateQuoteCommand, fixtures_path: Path) -> None:
        result = command.execute_config(load_config(fixtures_path / "full_booth.json"))
        assert result.warnings == []
        assert len(result.layout.components) == 8

        labor = result.price.labor
        assert labor.crew == 2
        assert labor.build_hours == 17
        assert labor.demolition_hours == 13

        lines = result.price.material_lines
        for line in (
            "walls",
            "carpet",
            "wall_graphics",
            "storage_graphics",
            "lighting",
            "counters",
            "storage",
            "tvs",
            "plants",
            "furniture",
            "shelves",
            "speakers",
            "truss",
            "clothes_rack",
        ):
            assert lines[line] > 0, line
        assert result.price.total == result.price.subtotal + result.price.markup
        assert result.bom["Matta"] == "5×4 Grå matta"
        assert len(result.fixtures) <= result.bom.count("SAM-led")

    def test_rejected_components_reported(
        self, command: GenerateQuoteCommand, fixtures_path: Path
    ) -> None:
        result = command.execute_config(load_config(fixtures_path / "rejected_components.json"))
        assert result.has_warnings
        assert [c.id for c in result.layout.components] == ["plant-1"]
        assert "counters" not in result.price.material_lines

    def test_quote_is_repeatable(
        self, command: GenerateQuoteCommand, fixtures_path: Path
    ) -> None:
        config = load_config(fixtures_path / "full_booth.json")
        first = command.execute_config(config)
        second = command.execute_config(config)
        assert first.bom == second.bom
        assert first.price == second.price


class TestListSlotsCommand:
    """Slot listing from configuration files."""

    def test_plant_slots_on_open_floor(self, fixtures_path: Path) -> None:
        result = ListSlotsCommand().execute(
            load_config(fixtures_path / "open_3x3.json"), ComponentKind.PLANT
        )
        assert result.kind == "plant"
        assert len(result.slots) == 9

    def test_tv_slots_with_wall_override(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "straight_3x3_lights.json")
        command = ListSlotsCommand()
        assert len(command.execute(config, ComponentKind.TV, 0).slots) == 9
        u_slots = command.execute(config, ComponentKind.TV, 0, wall_shape=WallShape.U)
        assert len(u_slots.slots) == 27

    def test_unknown_index(self, fixtures_path: Path) -> None:
        with pytest.raises(UnknownCatalogIndexError):
            ListSlotsCommand().execute(
                load_config(fixtures_path / "open_3x3.json"), ComponentKind.COUNTER, 42
            )
