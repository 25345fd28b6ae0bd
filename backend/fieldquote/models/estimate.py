"""General estimate models: optional services, complexity and discount."""

from __future__ import annotations

from pydantic import Field

from fieldquote.models.base import CamelModel


class EstimateOptions(CamelModel):
    """Options selected on the estimate builder form."""

    prep_work: bool = False
    fire_retardant: bool = False
    complexity_multiplier: float = Field(default=1.0, ge=1.0, le=2.0)
    discount_percent: float = Field(default=0.0, ge=0.0, le=50.0)


class GeneralEstimate(CamelModel):
    """Stage-by-stage result of the general estimate builder."""

    base_subtotal: float
    total_square_feet: float
    complexity_multiplier: float
    complexity_adjustment: float
    prep_work_cost: float
    fire_retardant_cost: float
    adjusted_subtotal: float
    discount_percent: float
    discount_amount: float
    subtotal_after_discount: float
    total: float
    requires_approval: bool
