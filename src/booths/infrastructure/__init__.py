"""Infrastructure layer - formatters and exporters."""

from .formatters import (
    BM_ACC_ITEMS,
    CATEGORY_ORDER,
    JsonExporter,
    PackingListFormatter,
    QuoteFormatter,
    WallPlanFormatter,
    bom_category,
    categorize_bom,
    component_to_dict,
    price_to_dict,
    slot_to_dict,
)

__all__ = [
    "BM_ACC_ITEMS",
    "CATEGORY_ORDER",
    "JsonExporter",
    "PackingListFormatter",
    "QuoteFormatter",
    "WallPlanFormatter",
    "bom_category",
    "categorize_bom",
    "component_to_dict",
    "price_to_dict",
    "slot_to_dict",
]
