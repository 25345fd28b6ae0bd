"""Factory functions for creating pre-configured pricing components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldquote.data.insulation_rates import SEED_RATE_TABLES
from fieldquote.data.repository import RateTableRepository
from fieldquote.engine import InsulationEstimator
from fieldquote.estimate_builder import GeneralEstimateBuilder
from fieldquote.hvac import HvacPricingService
from fieldquote.hybrid import HybridCalculator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fieldquote.models.hvac import HvacPricingConfig
    from fieldquote.models.insulation import CatalogEntry


def create_default_repository() -> RateTableRepository:
    return RateTableRepository(SEED_RATE_TABLES)


def create_default_estimator(
    catalog: Sequence[CatalogEntry] | None = None,
) -> InsulationEstimator:
    """Create an InsulationEstimator wired up with the seed rate tables.

    Args:
        catalog: Optional catalog rows. When given, spray-foam items are
            priced from the catalog first and hybrid items use nearest-R
            catalog pricing.

    Example::

        from fieldquote import create_default_estimator

        estimator = create_default_estimator()
        estimate = estimator.estimate(line_items)
    """
    return InsulationEstimator(
        repository=create_default_repository(),
        hybrid_calculator=HybridCalculator(catalog=catalog),
        catalog=catalog,
    )


def create_default_builder() -> GeneralEstimateBuilder:
    return GeneralEstimateBuilder(estimator=create_default_estimator())


def create_hvac_service(config: HvacPricingConfig | None = None) -> HvacPricingService:
    return HvacPricingService(config)
