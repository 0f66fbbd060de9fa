"""Pytest configuration and shared fixtures for booth tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from booths.domain import (
    BoothLayout,
    FloorPlan,
    LayoutEditor,
    PlacementValidator,
    WallShape,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Floors and layouts
# =============================================================================


@pytest.fixture
def open_floor() -> FloorPlan:
    """3x3 m floor without walls."""
    return FloorPlan(width=3.0, depth=3.0)


@pytest.fixture
def straight_floor() -> FloorPlan:
    """3x3 m floor with a 2.5 m back wall."""
    return FloorPlan(width=3.0, depth=3.0, wall_shape=WallShape.STRAIGHT)


@pytest.fixture
def u_floor() -> FloorPlan:
    """3x3 m floor with back and both side walls."""
    return FloorPlan(width=3.0, depth=3.0, wall_shape=WallShape.U)


@pytest.fixture
def validator() -> PlacementValidator:
    return PlacementValidator()


@pytest.fixture
def editor(validator: PlacementValidator) -> LayoutEditor:
    return LayoutEditor(validator)


@pytest.fixture
def open_layout(open_floor: FloorPlan) -> BoothLayout:
    return BoothLayout(floor=open_floor)


@pytest.fixture
def straight_layout(straight_floor: FloorPlan) -> BoothLayout:
    return BoothLayout(floor=straight_floor)


# =============================================================================
# Configuration data
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def minimal_config_data() -> dict[str, Any]:
    """Smallest valid booth configuration: a 3x3 catalog floor."""
    return {"schema_version": "1.0", "floor": {"size_index": 2}}


@pytest.fixture
def straight_config_data() -> dict[str, Any]:
    """3x3 booth with a straight 2.5 m wall and lights on."""
    return {
        "schema_version": "1.0",
        "floor": {"size_index": 2},
        "walls": {"shape": "straight", "height": 2.5},
        "options": {"lights": True},
    }
