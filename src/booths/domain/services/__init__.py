"""Domain services for booth layout, packing lists and quotes.

This package provides the pure engine behind the configurator:
- Placement validation and legal slot generation
- Wall segmentation, wall frame planning and lighting
- Smart TV repositioning
- Bill of materials aggregation and price calculation
"""

from .bom import BomAggregator, counter_recipe, front_truss_segments, truss_recipe
from .editing import LayoutEditor
from .frames import (
    FrameColumn,
    TopRow,
    WallFrameInfo,
    WallFramePlan,
    WallFramePlanner,
    columns_for_length,
    frame_label,
    solve_column_stack,
    top_row_pieces,
)
from .lighting import LIGHT_STORAGE_MARGIN, LightFixture, billed_led_count, rendered_fixtures
from .markers import GRID_RULES, GridRule, MarkerGenerator, grid_points
from .placement import (
    DEFAULT_COLLISION_MARGINS,
    PlacementValidator,
    pair_key,
    quarter_turns,
)
from .pricing import (
    LABOR_TIERS,
    LaborTier,
    PriceCalculator,
    admin_fee,
    consumables_fee,
    counter_price,
    labor_tier,
    labor_tier_area,
)
from .rounding import ceil_to_step, round_half_up
from .surfaces import storage_face_length, wall_graphic_area
from .tv_placement import (
    TOP_MARGIN,
    TvRepositioner,
    place_tv,
    tv_dimensions,
    tvs_overlap,
)
from .walls import (
    MODULE_LENGTH,
    module_centers,
    run_for_side,
    seams,
    segment_wall,
    total_wall_length,
    wall_runs,
    wall_sides,
)

__all__ = [
    # Placement
    "DEFAULT_COLLISION_MARGINS",
    "PlacementValidator",
    "pair_key",
    "quarter_turns",
    # Markers
    "GRID_RULES",
    "GridRule",
    "MarkerGenerator",
    "grid_points",
    # Walls
    "MODULE_LENGTH",
    "module_centers",
    "run_for_side",
    "seams",
    "segment_wall",
    "total_wall_length",
    "wall_runs",
    "wall_sides",
    # TVs
    "TOP_MARGIN",
    "TvRepositioner",
    "place_tv",
    "tv_dimensions",
    "tvs_overlap",
    # Lighting
    "LIGHT_STORAGE_MARGIN",
    "LightFixture",
    "billed_led_count",
    "rendered_fixtures",
    # Wall frames
    "FrameColumn",
    "TopRow",
    "WallFrameInfo",
    "WallFramePlan",
    "WallFramePlanner",
    "columns_for_length",
    "frame_label",
    "solve_column_stack",
    "top_row_pieces",
    # BOM and pricing
    "BomAggregator",
    "counter_recipe",
    "front_truss_segments",
    "truss_recipe",
    "LABOR_TIERS",
    "LaborTier",
    "PriceCalculator",
    "admin_fee",
    "consumables_fee",
    "counter_price",
    "labor_tier",
    "labor_tier_area",
    "ceil_to_step",
    "round_half_up",
    "storage_face_length",
    "wall_graphic_area",
    # Editing
    "LayoutEditor",
]
