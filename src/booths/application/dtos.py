"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from booths.domain import BillOfMaterials, BoothLayout, PriceBreakdown
from booths.domain.services import LightFixture, WallFramePlan
from booths.domain.value_objects import Slot, WallRun


@dataclass
class QuoteOutput:
    """Output DTO with everything the document generator needs.

    Attributes:
        layout: The booth layout that was quoted.
        bom: Aggregated packing list.
        price: Quote breakdown.
        wall_runs: Segmented wall runs, back first.
        frame_plan: BeMatrix wall frame plan (empty without walls).
        fixtures: Light fixtures to render; may be fewer than the billed
            SAM-led count.
        warnings: Components that were skipped while building the layout.
    """

    layout: BoothLayout
    bom: BillOfMaterials
    price: PriceBreakdown
    wall_runs: list[WallRun] = field(default_factory=list)
    frame_plan: WallFramePlan = field(default_factory=WallFramePlan)
    fixtures: list[LightFixture] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


@dataclass
class SlotsOutput:
    """Legal placement slots for one component kind."""

    kind: str
    catalog_index: int
    slots: list[Slot] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
