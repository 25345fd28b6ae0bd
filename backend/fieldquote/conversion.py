"""Conversions between applied foam thickness and effective R-value.

Closed-cell foam is rated at a constant R-7.0 per inch. Open-cell foam is
converted through the manufacturer's rated thicknesses, interpolating
linearly between them; the hybrid calculator's generic path uses the flat
R-3.8 per inch rate for the open-cell layer instead.

All rounding goes through :func:`round_half_up` so results match the
figures the quoting front end has always shown.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fieldquote.models.enums import InsulationFamily
from fieldquote.models.insulation import HybridSystemCalculation

if TYPE_CHECKING:
    from fieldquote.data.repository import RateTableRepository

R_VALUE_PER_INCH: dict[InsulationFamily, float] = {
    InsulationFamily.CLOSED_CELL: 7.0,
    InsulationFamily.OPEN_CELL: 3.8,
}

# (inches, rated R-value), sorted by inches
OPEN_CELL_ANCHORS: tuple[tuple[float, float], ...] = (
    (3.5, 13.0),
    (5.5, 21.0),
    (7.0, 27.0),
    (8.0, 30.0),
    (9.0, 34.0),
    (10.0, 38.0),
    (12.0, 45.0),
    (13.0, 49.0),
)

DEFAULT_MAX_CLOSED_CELL_INCHES = 3.0

COMMON_R_VALUES: tuple[float, ...] = (13, 15, 19, 21, 25, 30, 38, 49, 60, 70, 80, 90, 100)


@dataclass(frozen=True)
class InchPricing:
    price_per_unit_area: float
    total_price: float
    r_value: float


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from negative infinity at ``digits`` decimals."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_to_half_inch(inches: float) -> float:
    return math.floor(inches * 2 + 0.5) / 2


def closed_cell_r_value(inches: float) -> float:
    return inches * R_VALUE_PER_INCH[InsulationFamily.CLOSED_CELL]


def open_cell_r_value(inches: float) -> float:
    """Interpolate the rated open-cell R-value for a thickness.

    Thicknesses outside the rated range clamp to the nearest end. Rated
    thicknesses return their rating exactly; anything between two ratings
    is interpolated and rounded to a whole R-value.
    """
    first_inches, first_r = OPEN_CELL_ANCHORS[0]
    last_inches, last_r = OPEN_CELL_ANCHORS[-1]
    if inches <= first_inches:
        return first_r
    if inches >= last_inches:
        return last_r

    for (lo_in, lo_r), (hi_in, hi_r) in zip(OPEN_CELL_ANCHORS, OPEN_CELL_ANCHORS[1:]):
        if inches == lo_in:
            return lo_r
        if inches == hi_in:
            return hi_r
        if lo_in < inches < hi_in:
            fraction = (inches - lo_in) / (hi_in - lo_in)
            return round_half_up(lo_r + fraction * (hi_r - lo_r))

    return last_r  # pragma: no cover - anchors are contiguous


def r_value_for_inches(family: InsulationFamily, inches: float) -> float:
    """Effective R-value of a single foam layer."""
    if family is InsulationFamily.CLOSED_CELL:
        return closed_cell_r_value(inches)
    if family is InsulationFamily.OPEN_CELL:
        return open_cell_r_value(inches)
    msg = f"Thickness conversion is only defined for spray foam, got '{family}'"
    raise ValueError(msg)


def linear_r_value(family: InsulationFamily, inches: float) -> float:
    """R-value at the flat per-inch rate for a foam family."""
    return inches * R_VALUE_PER_INCH[family]


def linear_hybrid(closed_cell_inches: float, open_cell_inches: float) -> HybridSystemCalculation:
    """Generic hybrid makeup: each layer at its per-inch rate, to 1 decimal."""
    closed_r = round_half_up(linear_r_value(InsulationFamily.CLOSED_CELL, closed_cell_inches), 1)
    open_r = round_half_up(linear_r_value(InsulationFamily.OPEN_CELL, open_cell_inches), 1)
    return HybridSystemCalculation(
        closed_cell_inches=closed_cell_inches,
        open_cell_inches=open_cell_inches,
        closed_cell_r_value=closed_r,
        open_cell_r_value=open_r,
        total_r_value=round_half_up(closed_r + open_r, 1),
        total_inches=closed_cell_inches + open_cell_inches,
    )


def inches_for_target_r_value(
    target_r_value: float,
    max_closed_cell_inches: float = DEFAULT_MAX_CLOSED_CELL_INCHES,
) -> HybridSystemCalculation:
    """Plan a hybrid assembly that reaches ``target_r_value``.

    Closed cell goes on first, up to ``max_closed_cell_inches``, to act as
    the vapor barrier; open cell fills the remaining R-value. Both layers
    are rounded to the nearest half inch.
    """
    cc_rate = R_VALUE_PER_INCH[InsulationFamily.CLOSED_CELL]
    oc_rate = R_VALUE_PER_INCH[InsulationFamily.OPEN_CELL]

    closed_inches = min(max_closed_cell_inches, target_r_value / cc_rate)
    remaining = target_r_value - closed_inches * cc_rate
    open_inches = max(0.0, remaining / oc_rate)

    return linear_hybrid(round_to_half_inch(closed_inches), round_to_half_inch(open_inches))


def price_by_inches(
    square_feet: float,
    family: InsulationFamily,
    inches: float,
    repository: RateTableRepository,
) -> InchPricing:
    """Price a single foam layer from its thickness via the tier tables."""
    r_value = linear_r_value(family, inches)
    unit_price = repository.resolve(family, r_value)
    return InchPricing(
        price_per_unit_area=unit_price,
        total_price=square_feet * unit_price,
        r_value=r_value,
    )


def approximate_r_value(r_value: float) -> float:
    """Snap an R-value to the nearest common insulation target."""
    return min(COMMON_R_VALUES, key=lambda common: abs(r_value - common))
