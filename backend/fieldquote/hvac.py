"""HVAC pricing service: per-system breakdowns, job rollups and reviews.

Per-system composition:

1. **Equipment** — base price for the system type plus tonnage x per-ton rate.
2. **Ductwork** — per-foot rate with a minimum charge whenever ductwork is run.
3. **Vents** — supply and return vents at their unit prices.
4. **Additional services** — flat fees for removal, electrical upgrade,
   permit and startup/testing, each gated by its measurement flag.
5. **Complexity** — the tier multiplier scales the material subtotal.
6. **Labor** — (base hours + tonnage x hours per ton) x tier multiplier at
   the hourly rate; added after the complexity adjustment.
7. **Override** — a manager price replaces the calculated total, which is
   kept on the breakdown for audit.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from fieldquote.conversion import round_half_up
from fieldquote.data.hvac_defaults import DEFAULT_HVAC_PRICING_CONFIG
from fieldquote.exceptions import PricingConfigError
from fieldquote.formatting import format_currency
from fieldquote.models.enums import HvacSystemType, InstallationComplexity
from fieldquote.models.hvac import (
    AdditionalServicesCost,
    HvacJobSummary,
    HvacPricingBreakdown,
    HvacPricingConfig,
    HvacValidationReport,
    JobPricing,
    JobTimeline,
    JobTotals,
    LaborCost,
    PriceRange,
    QuickEstimate,
    SystemSpecs,
    VentsCost,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from fieldquote.models.hvac import HvacSystemMeasurement

logger = logging.getLogger(__name__)

HOURS_PER_INSTALL_DAY = 8
QUICK_ESTIMATE_VARIANCE = 0.15

# Rules of thumb used by the review pass
MIN_TYPICAL_TONNAGE = 1
MAX_TYPICAL_TONNAGE = 10
MIN_SEER2_RATING = 14
DUCTWORK_FEET_PER_TON = 150
DUCTWORK_TOLERANCE_FEET = 100
SUPPLY_VENTS_PER_TON = 2
SUPPLY_VENT_TOLERANCE = 2


class HvacPricingService:
    """Prices HVAC systems against an immutable rate configuration.

    The configuration is replaced wholesale on update, so a calculation
    always sees one consistent configuration.

    Args:
        config: Rate configuration. Defaults to ``DEFAULT_HVAC_PRICING_CONFIG``.
    """

    def __init__(self, config: HvacPricingConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_HVAC_PRICING_CONFIG

    @property
    def config(self) -> HvacPricingConfig:
        return self._config

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_config(self, config: HvacPricingConfig) -> HvacPricingService:
        """Return a new service bound to ``config``."""
        return HvacPricingService(config)

    def update_config(self, patch: Mapping[str, Any]) -> HvacPricingConfig:
        """Shallow-merge top-level sections into the held configuration.

        Sections named in ``patch`` replace the current ones entirely (keys
        may be snake_case or camelCase). The merged result is validated and
        swapped in as a new value; the previous configuration is untouched.

        Raises:
            PricingConfigError: If the merged configuration is incomplete or
                a replaced section is malformed.
        """
        merged = self._config.model_dump(by_alias=True)
        for key, value in patch.items():
            field = HvacPricingConfig.model_fields.get(key)
            merged[field.alias if field and field.alias else key] = value
        try:
            config = HvacPricingConfig.model_validate(merged)
        except ValidationError as exc:
            msg = f"Invalid HVAC pricing config update {sorted(patch)}: {exc}"
            raise PricingConfigError(msg) from exc
        self._config = config
        logger.info("HVAC pricing configuration updated: %s", sorted(patch))
        return self._config

    # ------------------------------------------------------------------
    # Per-system pricing
    # ------------------------------------------------------------------

    def price_system(self, measurement: HvacSystemMeasurement) -> HvacPricingBreakdown:
        """Compute the full price breakdown for one HVAC system."""
        cfg = self._config
        logger.debug(
            "Pricing HVAC system #%d (%s, %s tons)",
            measurement.system_number,
            measurement.system_type,
            measurement.tonnage,
        )

        base_system_cost = _rate(cfg.base_prices, measurement.system_type, "base_prices")
        tonnage_cost = measurement.tonnage * _rate(
            cfg.tonnage_multipliers, measurement.system_type, "tonnage_multipliers",
        )
        complexity_multiplier = _rate(
            cfg.complexity_multipliers,
            measurement.installation_complexity,
            "complexity_multipliers",
        )

        feet = measurement.ductwork_linear_feet
        ductwork_cost = max(
            feet * cfg.ductwork.price_per_foot,
            cfg.ductwork.minimum_charge if feet > 0 else 0.0,
        )

        supply_cost = measurement.supply_vents * cfg.vents.supply_vent_price
        return_cost = measurement.return_vents * cfg.vents.return_vent_price
        vents = VentsCost(
            supply_vents=supply_cost,
            return_vents=return_cost,
            total=supply_cost + return_cost,
        )

        fees = cfg.additional_services
        removal = fees.system_removal if measurement.existing_system_removal else 0.0
        electrical = fees.electrical_upgrade if measurement.electrical_upgrade_required else 0.0
        permit = fees.permit_fee if measurement.permit_required else 0.0
        startup = fees.startup_testing if measurement.startup_testing_required else 0.0
        services = AdditionalServicesCost(
            system_removal=removal,
            electrical_upgrade=electrical,
            permit_fee=permit,
            startup_testing=startup,
            total=removal + electrical + permit + startup,
        )

        labor = cfg.labor
        base_labor = labor.base_hours * labor.hourly_rate
        tonnage_labor = measurement.tonnage * labor.hours_per_ton * labor.hourly_rate
        labor_hours = (
            labor.base_hours + measurement.tonnage * labor.hours_per_ton
        ) * complexity_multiplier
        labor_cost = labor_hours * labor.hourly_rate

        subtotal = (
            base_system_cost + tonnage_cost + ductwork_cost + vents.total + services.total
        )
        total_before_override = subtotal * complexity_multiplier + labor_cost
        final_total = (
            measurement.price_override
            if measurement.price_override is not None
            else total_before_override
        )

        breakdown = HvacPricingBreakdown(
            base_system_cost=base_system_cost,
            tonnage_cost=tonnage_cost,
            ductwork_cost=ductwork_cost,
            vents_cost=vents,
            additional_services=services,
            labor_cost=LaborCost(
                base_labor=base_labor,
                complexity_adjustment=labor_cost - base_labor - tonnage_labor,
                total_hours=labor_hours,
                total_cost=labor_cost,
            ),
            subtotal=subtotal,
            complexity_multiplier=complexity_multiplier,
            total_before_override=total_before_override,
            price_override=measurement.price_override,
            final_total=final_total,
            system_specs=SystemSpecs(
                system_type=measurement.system_type,
                tonnage=measurement.tonnage,
                manufacturer=measurement.manufacturer,
                model=f"{measurement.outdoor_model} / {measurement.indoor_model}",
            ),
        )

        logger.debug(
            "HVAC system #%d priced at %s (equipment %s, ductwork %s, labor %s, services %s)",
            measurement.system_number,
            format_currency(final_total),
            format_currency(base_system_cost + tonnage_cost),
            format_currency(ductwork_cost),
            format_currency(labor_cost),
            format_currency(services.total),
        )
        return breakdown

    # ------------------------------------------------------------------
    # Per-job rollup
    # ------------------------------------------------------------------

    def summarize_job(self, measurements: Sequence[HvacSystemMeasurement]) -> HvacJobSummary:
        """Price every system in a job and roll the results up.

        An empty job returns a zeroed summary.
        """
        logger.info("Summarizing HVAC job with %d systems", len(measurements))
        if not measurements:
            return HvacJobSummary()

        breakdowns = [self.price_system(m) for m in measurements]

        totals = JobTotals(
            subtotal=sum(b.subtotal for b in breakdowns),
            total_labor=sum(b.labor_cost.total_cost for b in breakdowns),
            total_materials=sum(b.subtotal - b.additional_services.total for b in breakdowns),
            total_additional_services=sum(b.additional_services.total for b in breakdowns),
            grand_total=sum(b.final_total for b in breakdowns),
        )
        labor_hours = sum(b.labor_cost.total_hours for b in breakdowns)

        summary = HvacJobSummary(
            systems=list(measurements),
            total_systems=len(measurements),
            total_tonnage=sum(m.tonnage for m in measurements),
            total_ductwork=sum(m.ductwork_linear_feet for m in measurements),
            total_vents=sum(m.supply_vents + m.return_vents for m in measurements),
            pricing=JobPricing(individual_breakdowns=breakdowns, job_totals=totals),
            timeline=JobTimeline(
                estimated_install_days=math.ceil(labor_hours / HOURS_PER_INSTALL_DAY),
                estimated_labor_hours=labor_hours,
            ),
        )

        logger.info(
            "HVAC job summary: %d systems, %s tons, grand total %s, %d install days",
            summary.total_systems,
            summary.total_tonnage,
            format_currency(totals.grand_total),
            summary.timeline.estimated_install_days,
        )
        return summary

    def quick_estimate(
        self,
        system_type: HvacSystemType | str,
        tonnage: float,
        ductwork_feet: float = 0.0,
        complexity: InstallationComplexity | str = InstallationComplexity.STANDARD,
    ) -> QuickEstimate:
        """Ballpark price before measurement, with a +/-15% range.

        Leaves out vents, additional services, the ductwork minimum charge
        and overrides. Figures are rounded to whole currency units.
        """
        cfg = self._config
        system_type = HvacSystemType(system_type)
        complexity = InstallationComplexity(complexity)

        multiplier = _rate(cfg.complexity_multipliers, complexity, "complexity_multipliers")
        equipment = _rate(cfg.base_prices, system_type, "base_prices") + tonnage * _rate(
            cfg.tonnage_multipliers, system_type, "tonnage_multipliers",
        )
        base_estimate = (equipment + ductwork_feet * cfg.ductwork.price_per_foot) * multiplier
        labor_estimate = (
            (cfg.labor.base_hours + tonnage * cfg.labor.hours_per_ton)
            * cfg.labor.hourly_rate
            * multiplier
        )
        estimated = base_estimate + labor_estimate

        return QuickEstimate(
            estimated_price=round_half_up(estimated),
            price_range=PriceRange(
                min=round_half_up(estimated * (1 - QUICK_ESTIMATE_VARIANCE)),
                max=round_half_up(estimated * (1 + QUICK_ESTIMATE_VARIANCE)),
            ),
        )

    # ------------------------------------------------------------------
    # Review
    # ------------------------------------------------------------------

    def validate(self, measurement: HvacSystemMeasurement) -> HvacValidationReport:
        """Flag specifications that deserve a human look.

        Warnings make the report invalid; recommendations never do. Neither
        prevents the system from being priced.
        """
        warnings: list[str] = []
        recommendations: list[str] = []
        tonnage = measurement.tonnage

        if tonnage < MIN_TYPICAL_TONNAGE or tonnage > MAX_TYPICAL_TONNAGE:
            warnings.append(
                f"Tonnage {tonnage:g} is outside typical residential range "
                f"({MIN_TYPICAL_TONNAGE}-{MAX_TYPICAL_TONNAGE} tons)"
            )

        if measurement.seer2_rating and measurement.seer2_rating < MIN_SEER2_RATING:
            warnings.append(
                f"SEER2 rating {measurement.seer2_rating:g} is below minimum efficiency standards"
            )
            recommendations.append(
                "Consider upgrading to a higher SEER2 rating for energy savings"
            )

        if measurement.system_type is HvacSystemType.HEAT_PUMP and not measurement.hspf2_rating:
            warnings.append("Heat pump systems should have an HSPF2 rating specified")

        recommended_ductwork = tonnage * DUCTWORK_FEET_PER_TON
        if (
            measurement.ductwork_linear_feet > 0
            and abs(measurement.ductwork_linear_feet - recommended_ductwork)
            > DUCTWORK_TOLERANCE_FEET
        ):
            recommendations.append(
                f"Consider reviewing ductwork quantity. Typical: ~{recommended_ductwork:g} ft "
                f"for {tonnage:g} tons"
            )

        recommended_supply = math.ceil(tonnage * SUPPLY_VENTS_PER_TON)
        if (
            measurement.supply_vents > 0
            and abs(measurement.supply_vents - recommended_supply) > SUPPLY_VENT_TOLERANCE
        ):
            recommendations.append(
                f"Consider {recommended_supply} supply vents for optimal airflow "
                f"with {tonnage:g} tons"
            )

        return HvacValidationReport(
            is_valid=not warnings,
            warnings=warnings,
            recommendations=recommendations,
        )


def _rate(table: Mapping[Any, float], key: Any, table_name: str) -> float:
    try:
        return table[key]
    except KeyError:
        msg = f"HVAC pricing config '{table_name}' has no entry for '{key}'"
        raise PricingConfigError(msg) from None
