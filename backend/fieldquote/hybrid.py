"""Hybrid spray-foam calculator: closed-cell and open-cell layers in one cavity."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, TypeVar

from fieldquote.conversion import linear_hybrid, linear_r_value
from fieldquote.data.code_overrides import CODE_OVERRIDES
from fieldquote.models.enums import AreaType, ConstructionType, FramingSize, InsulationFamily
from fieldquote.models.insulation import HybridPricing, HybridSystemCalculation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fieldquote.data.code_overrides import CodeOverride
    from fieldquote.models.insulation import CatalogEntry

logger = logging.getLogger(__name__)

# Per-inch prices derived from the catalog: 7" closed cell at $8.70 and
# 3.5" open cell at $1.65.
CLOSED_CELL_PRICE_PER_INCH = 8.70 / 7.0
OPEN_CELL_PRICE_PER_INCH = 1.65 / 3.5

_E = TypeVar("_E", bound=StrEnum)


def _coerce(enum_cls: type[_E], value: _E | str | None) -> _E | None:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


class HybridCalculator:
    """Computes R-value makeup and price for hybrid foam assemblies.

    Certified assemblies in ``overrides`` are checked in order before the
    per-inch formula, so the certified numbers are what reach the quote.

    Args:
        overrides: Ordered certified assemblies. Defaults to the built-in
            code overrides.
        catalog: Optional priced catalog rows for nearest-R pricing.
    """

    def __init__(
        self,
        overrides: Sequence[CodeOverride] | None = None,
        catalog: Sequence[CatalogEntry] | None = None,
    ) -> None:
        self._overrides = tuple(CODE_OVERRIDES if overrides is None else overrides)
        self._catalog = tuple(catalog or ())

    def calculate(
        self,
        closed_cell_inches: float,
        open_cell_inches: float,
        framing_size: FramingSize | str | None = None,
        area_type: AreaType | str | None = None,
        construction_type: ConstructionType | str | None = None,
    ) -> HybridSystemCalculation:
        """Return the hybrid system's layer and total R-values."""
        framing = _coerce(FramingSize, framing_size)
        area = _coerce(AreaType, area_type)
        construction = _coerce(ConstructionType, construction_type)

        for override in self._overrides:
            if override.applies(
                closed_cell_inches, open_cell_inches, framing, area, construction,
            ):
                logger.debug("Hybrid assembly matched certified override %s", override.label)
                return HybridSystemCalculation(
                    closed_cell_inches=closed_cell_inches,
                    open_cell_inches=open_cell_inches,
                    closed_cell_r_value=override.closed_cell_r_value,
                    open_cell_r_value=override.open_cell_r_value,
                    total_r_value=override.total_r_value,
                    total_inches=closed_cell_inches + open_cell_inches,
                    override_label=override.label,
                )

        return linear_hybrid(closed_cell_inches, open_cell_inches)

    @staticmethod
    def price_static(calculation: HybridSystemCalculation) -> HybridPricing:
        """Price each layer at its flat per-inch rate."""
        closed_price = calculation.closed_cell_inches * CLOSED_CELL_PRICE_PER_INCH
        open_price = calculation.open_cell_inches * OPEN_CELL_PRICE_PER_INCH
        return HybridPricing(
            closed_cell_price=closed_price,
            open_cell_price=open_price,
            total_price_per_unit_area=closed_price + open_price,
        )

    def price_from_catalog(
        self,
        calculation: HybridSystemCalculation,
        catalog: Sequence[CatalogEntry] | None = None,
    ) -> HybridPricing:
        """Price each layer at the catalog row nearest its per-inch R-value.

        Falls back to :meth:`price_static` when no catalog rows are
        available. A layer with no thickness, or whose family has no rows,
        contributes nothing.
        """
        entries = tuple(catalog) if catalog is not None else self._catalog
        if not entries:
            logger.warning("No catalog pricing available; using per-inch hybrid pricing")
            return self.price_static(calculation)

        closed_entry = _nearest_entry(
            entries, InsulationFamily.CLOSED_CELL, calculation.closed_cell_inches,
        )
        open_entry = _nearest_entry(
            entries, InsulationFamily.OPEN_CELL, calculation.open_cell_inches,
        )
        closed_price = closed_entry.base_price if closed_entry else 0.0
        open_price = open_entry.base_price if open_entry else 0.0
        return HybridPricing(
            closed_cell_price=closed_price,
            open_cell_price=open_price,
            total_price_per_unit_area=closed_price + open_price,
            closed_cell_catalog_entry=closed_entry,
            open_cell_catalog_entry=open_entry,
        )

    def price(self, calculation: HybridSystemCalculation) -> HybridPricing:
        """Catalog pricing when a catalog was supplied, otherwise per-inch."""
        if self._catalog:
            return self.price_from_catalog(calculation)
        return self.price_static(calculation)


def _nearest_entry(
    entries: Sequence[CatalogEntry],
    family: InsulationFamily,
    inches: float,
) -> CatalogEntry | None:
    if inches == 0:
        return None
    candidates = [e for e in entries if e.insulation_family == family]
    if not candidates:
        return None
    target = linear_r_value(family, inches)
    return min(candidates, key=lambda e: abs(e.r_value - target))
