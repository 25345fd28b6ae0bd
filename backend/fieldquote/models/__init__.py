"""Domain models for the fieldquote pricing engine."""

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
    CatalogEntry,
    HybridPricing,
    HybridSystemCalculation,
    InsulationEstimate,
    ItemizedPrice,
    MeasurementLineItem,
    PricingRule,
    UnitPrice,
)

__all__ = [
    "AreaType",
    "CatalogEntry",
    "ConstructionType",
    "EstimateOptions",
    "FramingSize",
    "GeneralEstimate",
    "HvacJobSummary",
    "HvacPricingBreakdown",
    "HvacPricingConfig",
    "HvacSystemMeasurement",
    "HvacSystemType",
    "HvacValidationReport",
    "HybridPricing",
    "HybridSystemCalculation",
    "InstallationComplexity",
    "InsulationEstimate",
    "InsulationFamily",
    "ItemizedPrice",
    "MeasurementLineItem",
    "PriceSource",
    "PricingRule",
    "QuickEstimate",
    "UnitPrice",
]
