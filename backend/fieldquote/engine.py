"""Insulation estimate calculator.

Prices each measured area and sums the job. A line item's unit price is
resolved with this precedence:

1. **Manager override** — a positive ``price_override`` wins outright.
2. **Catalog** — when the estimator holds catalog rows, the cheapest
   stocked spray-foam thickness that meets the R-value.
3. **Hybrid** — hybrid items with layer inches are priced per inch of each
   layer by the hybrid calculator.
4. **Per inch** — closed/open cell items with that layer's inches are
   converted to an R-value and priced from the tier table.
5. **Per R-value** — the tier table for the item's family.

Anything that cannot be priced resolves to 0 ("to be determined") rather
than raising.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fieldquote.conversion import price_by_inches
from fieldquote.models.enums import InsulationFamily, PriceSource
from fieldquote.models.insulation import InsulationEstimate, ItemizedPrice, UnitPrice

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fieldquote.data.repository import RateTableRepository
    from fieldquote.hybrid import HybridCalculator
    from fieldquote.models.insulation import CatalogEntry, MeasurementLineItem

logger = logging.getLogger(__name__)

_SPRAY_FOAM = (InsulationFamily.CLOSED_CELL, InsulationFamily.OPEN_CELL)


class InsulationEstimator:
    """Turns insulation line items into an itemized estimate.

    Args:
        repository: Tier tables used for R-value and per-inch pricing.
        hybrid_calculator: Prices hybrid assemblies from their layer inches.
        catalog: Optional priced catalog rows consulted before the tier
            tables for spray-foam items.

    Example::

        from fieldquote import create_default_estimator

        estimator = create_default_estimator()
        estimate = estimator.estimate(line_items)
    """

    def __init__(
        self,
        repository: RateTableRepository,
        hybrid_calculator: HybridCalculator,
        catalog: Sequence[CatalogEntry] | None = None,
    ) -> None:
        self._repository = repository
        self._hybrid = hybrid_calculator
        self._catalog = tuple(catalog or ())

    def determine_unit_price(self, item: MeasurementLineItem) -> UnitPrice:
        """Resolve the price per square foot for one line item."""
        if item.price_override is not None and item.price_override > 0:
            return UnitPrice(unit_price=item.price_override, source=PriceSource.OVERRIDE)

        family = item.insulation_family

        if self._catalog and family in _SPRAY_FOAM and item.r_value:
            catalog_price = self._catalog_price(family, item.r_value)
            if catalog_price:
                return UnitPrice(unit_price=catalog_price, source=PriceSource.CATALOG)

        if family is InsulationFamily.HYBRID and (
            item.closed_cell_inches > 0 or item.open_cell_inches > 0
        ):
            calculation = self._hybrid.calculate(
                item.closed_cell_inches,
                item.open_cell_inches,
                framing_size=item.framing_size,
                area_type=item.area_type,
                construction_type=item.construction_type,
            )
            pricing = self._hybrid.price(calculation)
            return UnitPrice(
                unit_price=pricing.total_price_per_unit_area,
                source=PriceSource.HYBRID,
            )

        layer_inches = {
            InsulationFamily.CLOSED_CELL: item.closed_cell_inches,
            InsulationFamily.OPEN_CELL: item.open_cell_inches,
        }
        if family in _SPRAY_FOAM and layer_inches[family] > 0:
            by_inch = price_by_inches(
                item.square_feet, family, layer_inches[family], self._repository,
            )
            return UnitPrice(
                unit_price=by_inch.price_per_unit_area,
                source=PriceSource.PER_INCH,
            )

        side_hint = item.side_hint or (item.area_type.value if item.area_type else None)
        return UnitPrice(
            unit_price=self._repository.resolve(family, item.r_value, side_hint),
            source=PriceSource.PER_R_VALUE,
        )

    def price_line_item(self, item: MeasurementLineItem) -> ItemizedPrice:
        unit = self.determine_unit_price(item)
        return ItemizedPrice(
            price_per_unit_area=unit.unit_price,
            total_price=item.square_feet * unit.unit_price,
            source=unit.source,
        )

    def estimate(
        self,
        line_items: Iterable[MeasurementLineItem],
        tax_rate: float = 0.0,
    ) -> InsulationEstimate:
        """Price every line item and total the job.

        Args:
            line_items: Measured areas, in quote order.
            tax_rate: Carried through to the result for the quoting layer;
                not applied to ``total``.

        Returns:
            An InsulationEstimate whose ``itemized_prices`` follow the input
            order. An empty input yields a zeroed estimate.
        """
        itemized = [self.price_line_item(item) for item in line_items]
        subtotal = sum(p.total_price for p in itemized)

        logger.debug(
            "Insulation estimate: %d line items, subtotal %.2f", len(itemized), subtotal,
        )

        return InsulationEstimate(
            subtotal=subtotal,
            total=subtotal,
            tax_rate=tax_rate,
            itemized_prices=itemized,
        )

    def _catalog_price(self, family: InsulationFamily, r_value: float) -> float | None:
        """Cheapest catalog row of ``family`` rated at or above ``r_value``."""
        candidates = [
            e for e in self._catalog
            if e.insulation_family == family and e.r_value >= r_value
        ]
        if not candidates:
            return None
        return min(candidates, key=lambda e: (e.r_value, e.base_price)).base_price
