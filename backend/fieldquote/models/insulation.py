"""Insulation pricing models: rate rules, line items and estimate results."""

from __future__ import annotations

import logging
import re

from pydantic import Field, field_validator

from fieldquote.models.base import CamelModel, FrozenCamelModel
from fieldquote.models.enums import (
    AreaType,
    ConstructionType,
    FramingSize,
    InsulationFamily,
    PriceSource,
)

logger = logging.getLogger(__name__)

_KNOWN_FAMILIES = frozenset(f.value for f in InsulationFamily)
_R_VALUE_PATTERN = re.compile(r"^\s*R-?\s*", re.IGNORECASE)


def parse_r_value(value: object) -> float | None:
    """Parse an R-value stored as a number or as text like 'R-30' / 'R30'.

    Returns None for empty or unparseable text so the item prices as 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = _R_VALUE_PATTERN.sub("", value).strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


class PricingRule(FrozenCamelModel):
    """One tier of an insulation price table.

    A rule covers the closed interval [min_r_value, max_r_value]. Tables
    are ordered and non-overlapping by design.
    """

    min_r_value: float
    max_r_value: float
    price_per_unit_area: float = Field(ge=0)
    thickness_label: str | None = None
    side_note: str | None = None

    def matches(self, r_value: float) -> bool:
        return self.min_r_value <= r_value <= self.max_r_value


class CatalogEntry(FrozenCamelModel):
    """A priced product row from the insulation catalog."""

    insulation_family: InsulationFamily
    r_value: float
    base_price: float = Field(ge=0)
    thickness: str


class MeasurementLineItem(CamelModel):
    """A single measured area to be insulated.

    Only ``square_feet``, ``insulation_family`` and ``r_value`` are needed
    for tiered pricing. The inch fields feed hybrid and per-inch pricing,
    and ``price_override`` is a manager-entered unit price.
    """

    square_feet: float = Field(ge=0)
    insulation_family: InsulationFamily | None = None
    r_value: float | None = None
    area_type: AreaType | None = None
    closed_cell_inches: float = Field(default=0.0, ge=0)
    open_cell_inches: float = Field(default=0.0, ge=0)
    framing_size: FramingSize | None = None
    construction_type: ConstructionType | None = None
    side_hint: str | None = None
    price_override: float | None = None

    @field_validator("r_value", mode="before")
    @classmethod
    def _coerce_r_value(cls, v: object) -> float | None:
        return parse_r_value(v)

    @field_validator("insulation_family", mode="before")
    @classmethod
    def _coerce_insulation_family(cls, v: object) -> object:
        # Unknown families are left unpriced rather than rejected.
        if isinstance(v, str) and str(v) not in _KNOWN_FAMILIES:
            logger.debug("Unknown insulation family %r; leaving unpriced", v)
            return None
        return v


class HybridSystemCalculation(FrozenCamelModel):
    """R-value makeup of a closed-cell + open-cell assembly.

    ``total_r_value`` is the sum of the two layers unless ``override_label``
    is set, in which case the certified assembly value is authoritative.
    """

    closed_cell_inches: float
    open_cell_inches: float
    closed_cell_r_value: float
    open_cell_r_value: float
    total_r_value: float
    total_inches: float
    override_label: str | None = None


class HybridPricing(FrozenCamelModel):
    """Per-unit-area price of a hybrid assembly, split by layer."""

    closed_cell_price: float
    open_cell_price: float
    total_price_per_unit_area: float
    closed_cell_catalog_entry: CatalogEntry | None = None
    open_cell_catalog_entry: CatalogEntry | None = None


class UnitPrice(FrozenCamelModel):
    """A resolved unit price and the rule that produced it."""

    unit_price: float
    source: PriceSource


class ItemizedPrice(CamelModel):
    """Priced line of an insulation estimate."""

    price_per_unit_area: float
    total_price: float
    source: PriceSource = PriceSource.PER_R_VALUE


class InsulationEstimate(CamelModel):
    """Subtotal and itemization for a list of insulation line items.

    ``tax_rate`` is carried for the quoting layer; it is not applied here,
    so ``total`` always equals ``subtotal``.
    """

    subtotal: float = 0.0
    total: float = 0.0
    tax_rate: float = 0.0
    itemized_prices: list[ItemizedPrice] = Field(default_factory=list)
