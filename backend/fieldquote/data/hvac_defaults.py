"""Default HVAC pricing configuration (2025 rates)."""

from __future__ import annotations

from fieldquote.models.enums import HvacSystemType, InstallationComplexity
from fieldquote.models.hvac import (
    AdditionalServiceFees,
    DuctworkRates,
    HvacPricingConfig,
    LaborModel,
    VentRates,
)

DEFAULT_HVAC_PRICING_CONFIG = HvacPricingConfig(
    version="2025.1",
    base_prices={
        HvacSystemType.CENTRAL_AIR: 4500,
        HvacSystemType.HEAT_PUMP: 5200,
        HvacSystemType.FURNACE: 3800,
        HvacSystemType.MINI_SPLIT: 2200,
    },
    tonnage_multipliers={
        HvacSystemType.CENTRAL_AIR: 800,
        HvacSystemType.HEAT_PUMP: 950,
        HvacSystemType.FURNACE: 650,
        HvacSystemType.MINI_SPLIT: 400,
    },
    ductwork=DuctworkRates(price_per_foot=35, minimum_charge=500),
    vents=VentRates(supply_vent_price=125, return_vent_price=150),
    additional_services=AdditionalServiceFees(
        system_removal=750,
        electrical_upgrade=1200,
        permit_fee=250,
        startup_testing=300,
    ),
    complexity_multipliers={
        InstallationComplexity.STANDARD: 1.0,
        InstallationComplexity.MODERATE: 1.25,
        InstallationComplexity.COMPLEX: 1.6,
    },
    labor=LaborModel(hourly_rate=85, base_hours=8, hours_per_ton=3),
)
