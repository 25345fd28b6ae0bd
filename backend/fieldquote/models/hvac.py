"""HVAC pricing models: configuration, system measurements and breakdowns."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from fieldquote.exceptions import PricingConfigError
from fieldquote.models.base import CamelModel, FrozenCamelModel
from fieldquote.models.enums import HvacSystemType, InstallationComplexity

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class DuctworkRates(FrozenCamelModel):
    price_per_foot: float = Field(ge=0)
    minimum_charge: float = Field(ge=0)


class VentRates(FrozenCamelModel):
    supply_vent_price: float = Field(ge=0)
    return_vent_price: float = Field(ge=0)


class AdditionalServiceFees(FrozenCamelModel):
    system_removal: float = Field(ge=0)
    electrical_upgrade: float = Field(ge=0)
    permit_fee: float = Field(ge=0)
    startup_testing: float = Field(ge=0)


class LaborModel(FrozenCamelModel):
    hourly_rate: float = Field(ge=0)
    base_hours: float = Field(ge=0)
    hours_per_ton: float = Field(ge=0)


class HvacPricingConfig(FrozenCamelModel):
    """Versioned HVAC rate configuration.

    Treated as a value object: the pricing service replaces it wholesale
    rather than mutating it. Every system type and complexity tier must be
    priced; a gap is a configuration error and fails at construction.
    """

    version: str = "2025.1"
    base_prices: dict[HvacSystemType, float]
    tonnage_multipliers: dict[HvacSystemType, float]
    ductwork: DuctworkRates
    vents: VentRates
    additional_services: AdditionalServiceFees
    complexity_multipliers: dict[InstallationComplexity, float]
    labor: LaborModel

    @model_validator(mode="after")
    def _require_complete_tables(self) -> HvacPricingConfig:
        for table_name, table in (
            ("base_prices", self.base_prices),
            ("tonnage_multipliers", self.tonnage_multipliers),
        ):
            missing = [t.value for t in HvacSystemType if t not in table]
            if missing:
                msg = f"HVAC config '{table_name}' is missing system types: {missing}"
                raise PricingConfigError(msg)
        missing_tiers = [
            c.value for c in InstallationComplexity if c not in self.complexity_multipliers
        ]
        if missing_tiers:
            msg = f"HVAC config 'complexity_multipliers' is missing tiers: {missing_tiers}"
            raise PricingConfigError(msg)
        return self


# ---------------------------------------------------------------------------
# Measurement input
# ---------------------------------------------------------------------------


class HvacSystemMeasurement(BaseModel):
    """One HVAC unit as captured on site.

    Field names follow the stored measurement columns. ``calculated_price``
    is a cache of a previous pricing run and is never read by the engine.
    """

    system_number: int = Field(default=1, ge=1)
    system_description: str = ""
    system_type: HvacSystemType

    # AHRI certification
    ahri_number: str = ""
    outdoor_model: str = ""
    indoor_model: str = ""
    manufacturer: str = ""
    tonnage: float = Field(ge=0)
    seer2_rating: float | None = None
    hspf2_rating: float | None = None
    eer2_rating: float | None = None
    ahri_certified: bool = False

    # Installation
    ductwork_linear_feet: float = Field(default=0.0, ge=0)
    supply_vents: int = Field(default=0, ge=0)
    return_vents: int = Field(default=0, ge=0)
    installation_complexity: InstallationComplexity = InstallationComplexity.STANDARD

    # Additional services
    existing_system_removal: bool = False
    electrical_upgrade_required: bool = False
    permit_required: bool = True
    startup_testing_required: bool = True

    installation_location: str | None = None
    special_requirements: str | None = None
    notes: str | None = None

    # Manager pricing
    price_override: float | None = None
    override_reason: str | None = None
    calculated_price: float | None = None


# ---------------------------------------------------------------------------
# Pricing output
# ---------------------------------------------------------------------------


class VentsCost(FrozenCamelModel):
    supply_vents: float
    return_vents: float
    total: float


class AdditionalServicesCost(FrozenCamelModel):
    system_removal: float
    electrical_upgrade: float
    permit_fee: float
    startup_testing: float
    total: float


class LaborCost(FrozenCamelModel):
    base_labor: float
    complexity_adjustment: float
    total_hours: float
    total_cost: float


class SystemSpecs(FrozenCamelModel):
    system_type: HvacSystemType
    tonnage: float
    manufacturer: str
    model: str


class HvacPricingBreakdown(FrozenCamelModel):
    """Full decomposition of one system's price.

    ``total_before_override`` is kept for audit display when a manager
    override replaces the calculated total.
    """

    base_system_cost: float
    tonnage_cost: float
    ductwork_cost: float
    vents_cost: VentsCost
    additional_services: AdditionalServicesCost
    labor_cost: LaborCost
    subtotal: float
    complexity_multiplier: float
    total_before_override: float
    price_override: float | None = None
    final_total: float
    calculated_at: datetime = Field(default_factory=datetime.now)
    system_specs: SystemSpecs


class JobTotals(CamelModel):
    subtotal: float = 0.0
    total_labor: float = 0.0
    total_materials: float = 0.0
    total_additional_services: float = 0.0
    grand_total: float = 0.0


class JobPricing(CamelModel):
    individual_breakdowns: list[HvacPricingBreakdown] = Field(default_factory=list)
    job_totals: JobTotals = Field(default_factory=JobTotals)


class JobTimeline(CamelModel):
    estimated_install_days: int = 0
    estimated_labor_hours: float = 0.0


class HvacJobSummary(CamelModel):
    """Per-job rollup of every system's breakdown."""

    systems: list[HvacSystemMeasurement] = Field(default_factory=list)
    total_systems: int = 0
    total_tonnage: float = 0.0
    total_ductwork: float = 0.0
    total_vents: int = 0
    pricing: JobPricing = Field(default_factory=JobPricing)
    timeline: JobTimeline = Field(default_factory=JobTimeline)

    @property
    def grand_total(self) -> float:
        return self.pricing.job_totals.grand_total


class PriceRange(CamelModel):
    min: float
    max: float


class QuickEstimate(CamelModel):
    """Ballpark figure for a system before it has been measured."""

    estimated_price: float
    price_range: PriceRange


class HvacValidationReport(CamelModel):
    """Advisory review flags; never blocks pricing."""

    is_valid: bool
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
