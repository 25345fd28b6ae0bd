"""General estimate builder: services, complexity and discount on a subtotal.

Stages, in order:

1. **Complexity** — the multiplier scales the base insulation subtotal only.
2. **Surface prep** — flat rate per square foot, when selected.
3. **Fire retardant** — flat rate per square foot, when selected.
4. **Discount** — percentage of the running subtotal, subtracted.

Totals above the approval threshold are flagged for manager review. The
flag is advisory; nothing here blocks an estimate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldquote.models.estimate import EstimateOptions, GeneralEstimate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fieldquote.engine import InsulationEstimator
    from fieldquote.models.insulation import MeasurementLineItem

PREP_WORK_RATE = 0.50
FIRE_RETARDANT_RATE = 1.10
APPROVAL_THRESHOLD = 10_000.0


class GeneralEstimateBuilder:
    """Layers optional services and adjustments over an insulation subtotal."""

    def __init__(
        self,
        estimator: InsulationEstimator | None = None,
        prep_work_rate: float = PREP_WORK_RATE,
        fire_retardant_rate: float = FIRE_RETARDANT_RATE,
        approval_threshold: float = APPROVAL_THRESHOLD,
    ) -> None:
        self._estimator = estimator
        self._prep_work_rate = prep_work_rate
        self._fire_retardant_rate = fire_retardant_rate
        self._approval_threshold = approval_threshold

    def build(
        self,
        base_subtotal: float,
        total_square_feet: float,
        options: EstimateOptions | None = None,
    ) -> GeneralEstimate:
        options = options or EstimateOptions()
        multiplier = options.complexity_multiplier

        adjusted = base_subtotal * multiplier
        complexity_adjustment = base_subtotal * (multiplier - 1)

        prep_work_cost = 0.0
        if options.prep_work:
            prep_work_cost = total_square_feet * self._prep_work_rate
            adjusted += prep_work_cost

        fire_retardant_cost = 0.0
        if options.fire_retardant:
            fire_retardant_cost = total_square_feet * self._fire_retardant_rate
            adjusted += fire_retardant_cost

        discount_amount = adjusted * (options.discount_percent / 100)
        after_discount = adjusted - discount_amount

        return GeneralEstimate(
            base_subtotal=base_subtotal,
            total_square_feet=total_square_feet,
            complexity_multiplier=multiplier,
            complexity_adjustment=complexity_adjustment,
            prep_work_cost=prep_work_cost,
            fire_retardant_cost=fire_retardant_cost,
            adjusted_subtotal=adjusted,
            discount_percent=options.discount_percent,
            discount_amount=discount_amount,
            subtotal_after_discount=after_discount,
            total=after_discount,
            requires_approval=after_discount > self._approval_threshold,
        )

    def build_for_line_items(
        self,
        line_items: Sequence[MeasurementLineItem],
        options: EstimateOptions | None = None,
    ) -> GeneralEstimate:
        """Price the line items, then build on their subtotal and total area."""
        if self._estimator is None:
            msg = "GeneralEstimateBuilder needs an InsulationEstimator to price line items"
            raise ValueError(msg)
        base = self._estimator.estimate(line_items)
        total_square_feet = sum(item.square_feet for item in line_items)
        return self.build(base.subtotal, total_square_feet, options)
