"""Application commands (use cases) for booth quotes and slots."""

from __future__ import annotations

import logging

from booths.application.config import BoothConfiguration, config_to_layout
from booths.domain import BoothLayout
from booths.domain.services import (
    BomAggregator,
    LayoutEditor,
    MarkerGenerator,
    PlacementValidator,
    PriceCalculator,
    WallFramePlanner,
    rendered_fixtures,
    wall_runs,
)
from booths.domain.value_objects import ComponentKind, WallShape

from .dtos import QuoteOutput, SlotsOutput

logger = logging.getLogger(__name__)


class GenerateQuoteCommand:
    """Command to build the packing list and quote for a booth.

    The command holds only stateless services, so a single instance can
    serve any number of layouts and requests.
    """

    def __init__(
        self,
        validator: PlacementValidator | None = None,
        bom_aggregator: BomAggregator | None = None,
        price_calculator: PriceCalculator | None = None,
        frame_planner: WallFramePlanner | None = None,
    ) -> None:
        self.validator = validator or PlacementValidator()
        self.frame_planner = frame_planner or WallFramePlanner(self.validator)
        self.bom_aggregator = bom_aggregator or BomAggregator(
            self.validator, self.frame_planner
        )
        self.price_calculator = price_calculator or PriceCalculator(self.validator)

    def execute(
        self, layout: BoothLayout, warnings: list[str] | None = None
    ) -> QuoteOutput:
        """Aggregate the BOM, plan wall frames and price a layout.

        Args:
            layout: Booth layout to quote.
            warnings: Warnings collected while building the layout.

        Returns:
            QuoteOutput with BOM, price breakdown and wall details.
        """
        floor = layout.floor
        bom = self.bom_aggregator.aggregate_layout(layout)
        price = self.price_calculator.calculate_layout(layout)
        frame_plan = self.frame_planner.plan(floor, layout.components)
        fixtures = (
            rendered_fixtures(floor, layout.components, self.validator)
            if layout.options.lights
            else []
        )
        logger.debug(
            f"Quoted {len(layout.components)} components: total {price.total} SEK"
        )
        return QuoteOutput(
            layout=layout,
            bom=bom,
            price=price,
            wall_runs=wall_runs(floor),
            frame_plan=frame_plan,
            fixtures=fixtures,
            warnings=list(warnings or []),
        )

    def execute_config(self, config: BoothConfiguration) -> QuoteOutput:
        """Build the layout from a configuration and quote it."""
        layout, warnings = config_to_layout(config, LayoutEditor(self.validator))
        return self.execute(layout, warnings)


class ListSlotsCommand:
    """Command to list legal placement slots for a component kind."""

    def __init__(self, validator: PlacementValidator | None = None) -> None:
        self.validator = validator or PlacementValidator()
        self.markers = MarkerGenerator(self.validator)

    def execute(
        self,
        config: BoothConfiguration,
        kind: ComponentKind,
        catalog_index: int = 0,
        rotation: float = 0.0,
        wall_shape: WallShape | None = None,
    ) -> SlotsOutput:
        """Legal slots for one more component, given a configured booth.

        Raises:
            UnknownCatalogIndexError: If catalog_index is out of range.
        """
        layout, warnings = config_to_layout(config, LayoutEditor(self.validator))
        slots = self.markers.legal_slots(
            layout.floor,
            layout.components,
            kind,
            catalog_index=catalog_index,
            rotation=rotation,
            wall_shape=wall_shape,
        )
        return SlotsOutput(
            kind=kind.value,
            catalog_index=catalog_index,
            slots=slots,
            warnings=warnings,
        )
