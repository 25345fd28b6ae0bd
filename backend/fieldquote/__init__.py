"""fieldquote pricing and estimation engine.

Usage::

    from fieldquote import create_default_estimator, MeasurementLineItem

    estimator = create_default_estimator()
    estimate = estimator.estimate([
        MeasurementLineItem(square_feet=500, insulation_family="open_cell", r_value=21),
    ])
"""

from fieldquote.conversion import approximate_r_value, inches_for_target_r_value
from fieldquote.data.building_code import required_r_value
from fieldquote.data.catalog import SEED_CATALOG_ENTRIES
from fieldquote.data.repository import RateTableRepository
from fieldquote.engine import InsulationEstimator
from fieldquote.estimate_builder import GeneralEstimateBuilder
from fieldquote.exceptions import FieldQuoteError, PricingConfigError
from fieldquote.factory import (
    create_default_builder,
    create_default_estimator,
    create_default_repository,
    create_hvac_service,
)
from fieldquote.hvac import HvacPricingService
from fieldquote.hybrid import HybridCalculator
from fieldquote.models.enums import (
    AreaType,
    ConstructionType,
    FramingSize,
    HvacSystemType,
    InstallationComplexity,
    InsulationFamily,
    PriceSource,
)
from fieldquote.models.estimate import EstimateOptions, GeneralEstimate
from fieldquote.models.hvac import (
    HvacJobSummary,
    HvacPricingBreakdown,
    HvacPricingConfig,
    HvacSystemMeasurement,
    HvacValidationReport,
    QuickEstimate,
)
from fieldquote.models.insulation import (
    HybridSystemCalculation,
    InsulationEstimate,
    MeasurementLineItem,
    PricingRule,
)
from fieldquote.validation import (
    InsulationValidationResult,
    validate_closed_cell_thickness,
    validate_hybrid_system,
    validate_line_item,
    validate_open_cell_thickness,
)

__all__ = [
    "SEED_CATALOG_ENTRIES",
    "AreaType",
    "ConstructionType",
    "EstimateOptions",
    "FieldQuoteError",
    "FramingSize",
    "GeneralEstimate",
    "GeneralEstimateBuilder",
    "HvacJobSummary",
    "HvacPricingBreakdown",
    "HvacPricingConfig",
    "HvacPricingService",
    "HvacSystemMeasurement",
    "HvacSystemType",
    "HvacValidationReport",
    "HybridCalculator",
    "HybridSystemCalculation",
    "InstallationComplexity",
    "InsulationEstimate",
    "InsulationEstimator",
    "InsulationFamily",
    "InsulationValidationResult",
    "MeasurementLineItem",
    "PriceSource",
    "PricingConfigError",
    "PricingRule",
    "QuickEstimate",
    "RateTableRepository",
    "approximate_r_value",
    "create_default_builder",
    "create_default_estimator",
    "create_default_repository",
    "create_hvac_service",
    "inches_for_target_r_value",
    "required_r_value",
    "validate_closed_cell_thickness",
    "validate_hybrid_system",
    "validate_line_item",
    "validate_open_cell_thickness",
]
