"""Derived result value objects: slots, TV placements, BOM and price breakdown."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Union

from ._booth import WallPosition
from ._core_geometry import FloorPosition

BomValue = Union[int, str]


@dataclass(frozen=True)
class Slot:
    """A legal placement candidate offered to the user.

    Exactly one of floor_position or wall_position is set, depending on
    whether the component stands on the floor or hangs on a wall.
    """

    rotation: float = 0.0
    floor_position: FloorPosition | None = None
    wall_position: WallPosition | None = None

    def __post_init__(self) -> None:
        if (self.floor_position is None) == (self.wall_position is None):
            raise ValueError("Slot needs exactly one of floor_position or wall_position")


@dataclass(frozen=True)
class TvPlacement:
    """Corrected TV placement returned by the TV repositioner.

    Attributes:
        slot_index: Final module slot on the wall.
        height_tier: Final height tier name.
        overhang: Total horizontal overhang beyond the wall run, 0 if it fits.
    """

    slot_index: int
    height_tier: str
    overhang: float = 0.0

    @property
    def fits(self) -> bool:
        return self.overhang <= 1e-6


class BillOfMaterials(Mapping[str, BomValue]):
    """Aggregated packing list: part label to count or descriptive string.

    Counts merge additively. Descriptive entries (carpet, graphics) are
    strings and are replaced rather than merged. Iteration is sorted by
    label so two aggregations of the same components compare and print
    identically regardless of insertion order.
    """

    def __init__(self, entries: Mapping[str, BomValue] | None = None) -> None:
        self._entries: dict[str, BomValue] = {}
        if entries:
            for label, value in entries.items():
                if isinstance(value, str):
                    self.describe(label, value)
                else:
                    self.add(label, value)

    def add(self, label: str, count: int = 1) -> None:
        """Add a counted part. Non-positive counts are ignored."""
        if count <= 0:
            return
        current = self._entries.get(label, 0)
        if isinstance(current, str):
            raise ValueError(f"BOM entry {label!r} is descriptive, not a count")
        self._entries[label] = current + count

    def describe(self, label: str, text: str) -> None:
        """Set a descriptive (non-count) entry."""
        self._entries[label] = text

    def merge(self, other: Mapping[str, BomValue]) -> None:
        for label, value in other.items():
            if isinstance(value, str):
                self.describe(label, value)
            else:
                self.add(label, value)

    def count(self, label: str) -> int:
        """Numeric count for a label, 0 when absent or descriptive."""
        value = self._entries.get(label, 0)
        return value if isinstance(value, int) else 0

    def __getitem__(self, label: str) -> BomValue:
        return self._entries[label]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BillOfMaterials):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"BillOfMaterials({self.to_dict()!r})"

    def to_dict(self) -> dict[str, BomValue]:
        return {label: self._entries[label] for label in self}


@dataclass(frozen=True)
class LaborEstimate:
    """Crew and hours for building and tearing down a booth.

    Attributes:
        crew: Number of people in the crew.
        build_hours: Hours to build, including TV and truss additions.
        demolition_hours: Hours to tear down.
        tier_area: Floor area used to select the labor tier.
    """

    crew: int
    build_hours: int
    demolition_hours: int
    tier_area: float


@dataclass(frozen=True)
class PriceBreakdown:
    """Quote for a booth in whole currency units (SEK)."""

    material_cost: int
    build_cost: int
    demolition_cost: int
    consumables: int
    admin_fee: int
    subtotal: int
    markup: int
    total: int
    labor: LaborEstimate
    material_lines: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        amounts = (
            self.material_cost,
            self.build_cost,
            self.demolition_cost,
            self.consumables,
            self.admin_fee,
            self.subtotal,
            self.markup,
            self.total,
        )
        if any(a < 0 for a in amounts):
            raise ValueError("Price amounts must be non-negative")
        expected_subtotal = (
            self.material_cost
            + self.build_cost
            + self.demolition_cost
            + self.consumables
            + self.admin_fee
        )
        if self.subtotal != expected_subtotal:
            raise ValueError("subtotal must equal the sum of its parts")
        if self.total != self.subtotal + self.markup:
            raise ValueError("total must equal subtotal + markup")
