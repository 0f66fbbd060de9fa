"""Output formatters and exporters for booth packing lists and quotes."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

from booths.application.dtos import QuoteOutput, SlotsOutput
from booths.domain import PlacedComponent, PriceBreakdown
from booths.domain.services import WallFramePlan
from booths.domain.value_objects import BomValue, Slot, WallRun

# Packing list sections in print order
CATEGORY_TV = "TV & Skärmar"
CATEGORY_COUNTER = "Disk"
CATEGORY_FURNITURE = "Möbler & Växter"
CATEGORY_TECH = "Teknik & Belysning"
CATEGORY_PRINT = "Tryck & Grafik"
CATEGORY_OTHER = "Övrigt"
CATEGORY_BEMATRIX = "BeMatrix"
CATEGORY_ACCESSORIES = "BM Acc"

CATEGORY_ORDER: tuple[str, ...] = (
    CATEGORY_TV,
    CATEGORY_COUNTER,
    CATEGORY_FURNITURE,
    CATEGORY_TECH,
    CATEGORY_PRINT,
    CATEGORY_OTHER,
    CATEGORY_BEMATRIX,
)

# Tools and consumables packed with every booth
BM_ACC_ITEMS: tuple[tuple[str, str], ...] = (
    ("BM Acc väska", "1"),
    ("Montagehandskar", "2"),
    ("Vita handskar", "2"),
    ("Spännremmar", "10"),
    ("Gaffatejp Svart + vit", "1+1"),
    ("Issotejp Svart + grå", "1+1"),
    ("Rengöringsspray", "1"),
    ("Trasa", "1"),
    ("Buntband vita/svarta", "10/10"),
    ("Stege", "2"),
    ("Skruvlåda", "1"),
    ("Bult & mutterlåda", "1"),
    ("Kardborre Ho + Ha", "1+1"),
    ("Dubbelhäft smal", "1"),
    ("Dubbelhäft bred", "1"),
    ("Högtalare", "1"),
    ("Sopborste", "1"),
    ("Packtejp", "2"),
    ("Vitt spännband m.m", "1"),
    ("Sträckfilm", "1"),
    ("Dammsugare", "1"),
    ("Verktygsväska", "1"),
    ("Skruvdragare", "1"),
    ("Bitssats", "1"),
)

_COUNTER_PARTS = frozenset(
    {"Lister forex", "Corners", "M8pin", "Special connector"}
)
_FURNITURE_AND_PLANTS = frozenset(
    {
        "Soffa", "Fåtölj", "Barbord", "Barstol", "Pall", "Sidobord",
        "Klädhängare", "Hyllplan", "Hyllbracket",
        "Monstera", "Ficus", "Bambu", "Kaktus", "Lavendel", "Palmlilja",
        "Rosmarin", "Sansevieria", "Olivträd", "Dracaena",
        "Blomma", "Espressomaskin", "Godiskål",
    }
)
_TECH = frozenset({"SAM-led", "El-uttag", "Trusslampa"})
_BEMATRIX_HARDWARE = frozenset(
    {"Connectors", "Corner 90° 4-pin", "M8 pin", "T 5-pin", "Baseplate"}
)
_FRAME_SIZE = re.compile(r"^\d+(,\d+)?x\d+(,\d+)?$")

_QUOTE_LINE_LABELS: dict[str, str] = {
    "walls": "Väggar",
    "carpet": "Matta",
    "wall_graphics": "Väggrafik",
    "storage_graphics": "Förrådsgrafik",
    "lighting": "SAM-led",
    "counters": "Diskar",
    "storage": "Förråd",
    "tvs": "TV",
    "plants": "Växter",
    "furniture": "Möbler",
    "truss": "Truss",
    "shelves": "Hyllor",
    "speakers": "Högtalare",
    "clothes_rack": "Klädhängare",
    "espresso_machine": "Espressomaskin",
    "flower_vase": "Blomma",
    "candy_bowl": "Godiskål",
    "power_outlet": "El-uttag",
}


def bom_category(label: str) -> str:
    """Packing list section for a BOM label."""
    if label.startswith("TV "):
        return CATEGORY_TV
    if (
        "disk" in label.lower()
        or label.startswith("Bematrix ram")
        or label.startswith("Barskiva")
        or label.startswith("Grafik ")
        or label in _COUNTER_PARTS
    ):
        return CATEGORY_COUNTER
    if label in _FURNITURE_AND_PLANTS:
        return CATEGORY_FURNITURE
    if label in _TECH or "Högtalar" in label:
        return CATEGORY_TECH
    if (
        label in ("Matta", "Vepa", "Forex", "Hyrgrafik")
        or "grafik" in label.lower()
    ):
        return CATEGORY_PRINT
    if label in _BEMATRIX_HARDWARE or _FRAME_SIZE.match(label):
        return CATEGORY_BEMATRIX
    return CATEGORY_OTHER


def categorize_bom(bom: Mapping[str, BomValue]) -> dict[str, list[tuple[str, BomValue]]]:
    """Group BOM entries by packing list section, in print order.

    Sections without entries are omitted. Entries keep the BOM's label
    order within a section.
    """
    grouped: dict[str, list[tuple[str, BomValue]]] = {c: [] for c in CATEGORY_ORDER}
    for label, value in bom.items():
        if isinstance(value, int) and value <= 0:
            continue
        grouped[bom_category(label)].append((label, value))
    return {category: items for category, items in grouped.items() if items}


def _sek(amount: int) -> str:
    """Format whole SEK with a space as thousands separator."""
    return f"{amount:,}".replace(",", " ") + " kr"


class PackingListFormatter:
    """Formats the BOM as a sectioned packing list."""

    def __init__(self, include_accessories: bool = True) -> None:
        """Initialize formatter.

        Args:
            include_accessories: Append the fixed BM Acc tool list.
        """
        self._include_accessories = include_accessories

    def format(self, bom: Mapping[str, BomValue]) -> str:
        lines = ["PACKLISTA", "=" * 60]
        grouped = categorize_bom(bom)
        if not grouped:
            lines.append("No parts in packing list.")
        for category, items in grouped.items():
            lines.append("")
            lines.append(category)
            lines.append("-" * 60)
            for label, value in items:
                lines.append(f"  {label:<44} {value}")

        if self._include_accessories:
            lines.append("")
            lines.append(CATEGORY_ACCESSORIES)
            lines.append("-" * 60)
            for item, count in BM_ACC_ITEMS:
                lines.append(f"  {item:<44} {count}")
        return "\n".join(lines)


class QuoteFormatter:
    """Formats a price breakdown as a quote."""

    def format(self, price: PriceBreakdown) -> str:
        labor = price.labor
        lines = [
            "OFFERT",
            "=" * 60,
            "Material",
            "-" * 60,
        ]
        for key, amount in price.material_lines.items():
            label = _QUOTE_LINE_LABELS.get(key, key)
            lines.append(f"  {label:<40} {_sek(amount):>15}")
        lines.extend(
            [
                f"  {'Summa material':<40} {_sek(price.material_cost):>15}",
                "",
                "Arbete",
                "-" * 60,
                f"  {'Montering':<26} {labor.crew} pers x {labor.build_hours:>2} h"
                f"  {_sek(price.build_cost):>15}",
                f"  {'Demontering':<26} {labor.crew} pers x {labor.demolition_hours:>2} h"
                f"  {_sek(price.demolition_cost):>15}",
                "",
                f"  {'Förbrukningsmaterial':<40} {_sek(price.consumables):>15}",
                f"  {'Skiss':<40} {_sek(price.admin_fee):>15}",
                "-" * 60,
                f"  {'Delsumma':<40} {_sek(price.subtotal):>15}",
                f"  {'Påslag 15%':<40} {_sek(price.markup):>15}",
                "=" * 60,
                f"  {'TOTALT':<40} {_sek(price.total):>15}",
            ]
        )
        return "\n".join(lines)


class WallPlanFormatter:
    """Formats wall runs, modules and the frame plan."""

    def format(self, runs: list[WallRun], frame_plan: WallFramePlan) -> str:
        if not runs:
            return "No walls (open booth)."
        lines = ["WALLS", "=" * 60]
        for run in runs:
            modules = ", ".join(f"{m.length:g}" for m in run.modules)
            lines.append(
                f"{run.side.value.title():<6} {run.length:g} m x {run.height:g} m"
                f"  modules: [{modules}]"
            )
            info = frame_plan.walls.get(run.side)
            if info is not None and info.storages:
                lines.append(f"       storage: {', '.join(info.storages)}")
        if frame_plan.free_storages:
            lines.append(f"Free-standing storage: {', '.join(frame_plan.free_storages)}")
        lines.append("")
        lines.append("FRAMES & HARDWARE")
        lines.append("-" * 60)
        for label in sorted(frame_plan.totals):
            lines.append(f"  {label:<44} {frame_plan.totals[label]}")
        return "\n".join(lines)


def slot_to_dict(slot: Slot) -> dict[str, Any]:
    """JSON-friendly form of a placement slot."""
    if slot.floor_position is not None:
        return {
            "x": slot.floor_position.x,
            "z": slot.floor_position.z,
            "rotation": slot.rotation,
        }
    assert slot.wall_position is not None
    return {
        "wall": slot.wall_position.wall.value,
        "slot": slot.wall_position.slot_index,
        "tier": slot.wall_position.height_tier,
    }


def component_to_dict(component: PlacedComponent) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": component.id,
        "kind": component.kind.value,
        "catalog_index": component.catalog_index,
        "rotation": component.rotation,
    }
    if component.kind.is_wall_mounted:
        position = component.wall_position
        data.update(
            wall=position.wall.value,
            slot=position.slot_index,
            tier=position.height_tier,
            orientation=component.orientation.value,
        )
    else:
        data.update(x=component.floor_position.x, z=component.floor_position.z)
    return data


def price_to_dict(price: PriceBreakdown) -> dict[str, Any]:
    return {
        "material_cost": price.material_cost,
        "build_cost": price.build_cost,
        "demolition_cost": price.demolition_cost,
        "consumables": price.consumables,
        "admin_fee": price.admin_fee,
        "subtotal": price.subtotal,
        "markup": price.markup,
        "total": price.total,
        "labor": {
            "crew": price.labor.crew,
            "build_hours": price.labor.build_hours,
            "demolition_hours": price.labor.demolition_hours,
            "tier_area": price.labor.tier_area,
        },
        "material_lines": dict(price.material_lines),
    }


class JsonExporter:
    """Exports quote and slot results as JSON."""

    def to_dict(self, output: QuoteOutput) -> dict[str, Any]:
        layout = output.layout
        return {
            "floor": {
                "width": layout.floor.width,
                "depth": layout.floor.depth,
                "area": layout.floor.area,
                "wall_shape": layout.floor.wall_shape.value,
                "wall_height": layout.floor.wall_height,
            },
            "components": [component_to_dict(c) for c in layout.components],
            "walls": [
                {
                    "side": run.side.value,
                    "length": run.length,
                    "modules": [m.length for m in run.modules],
                }
                for run in output.wall_runs
            ],
            "bom": output.bom.to_dict(),
            "price": price_to_dict(output.price),
            "rendered_fixtures": len(output.fixtures),
            "warnings": list(output.warnings),
        }

    def export(self, output: QuoteOutput) -> str:
        return json.dumps(self.to_dict(output), indent=2, ensure_ascii=False)

    def export_slots(self, output: SlotsOutput) -> str:
        data = {
            "kind": output.kind,
            "catalog_index": output.catalog_index,
            "slots": [slot_to_dict(s) for s in output.slots],
            "warnings": list(output.warnings),
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
