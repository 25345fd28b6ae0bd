"""Advisory checks for insulation measurements.

These catch assemblies that cannot physically fit the framing or that
exceed what a foam can be sprayed to. Results are shown to the estimator
and never stop an item from being priced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from fieldquote.conversion import R_VALUE_PER_INCH, round_half_up
from fieldquote.models.enums import FramingSize, InsulationFamily

if TYPE_CHECKING:
    from fieldquote.models.insulation import MeasurementLineItem

# Actual cavity depths, not nominal sizes
FRAMING_CAVITY_DEPTHS: dict[FramingSize, float] = {
    FramingSize.TWO_BY_FOUR: 3.5,
    FramingSize.TWO_BY_SIX: 5.5,
    FramingSize.TWO_BY_EIGHT: 7.25,
    FramingSize.TWO_BY_TEN: 9.25,
    FramingSize.TWO_BY_TWELVE: 11.25,
}

MAX_CLOSED_CELL_INCHES = 7.0
MAX_OPEN_CELL_INCHES = 13.0
# Closed-cell depth assumed when working out the best hybrid R for a cavity
HYBRID_CLOSED_CELL_INCHES = 3.0
UNDERFILL_RATIO = 0.5

_FOAM_FAMILIES = (
    InsulationFamily.CLOSED_CELL,
    InsulationFamily.OPEN_CELL,
    InsulationFamily.HYBRID,
)
_CLOSED_CELL_LAYERS = (InsulationFamily.CLOSED_CELL, InsulationFamily.HYBRID)
_OPEN_CELL_LAYERS = (InsulationFamily.OPEN_CELL, InsulationFamily.HYBRID)


class InsulationValidationResult(BaseModel):
    valid: bool
    message: str | None = None
    warnings: list[str] = Field(default_factory=list)


def framing_depth(framing_size: FramingSize | str) -> float | None:
    try:
        return FRAMING_CAVITY_DEPTHS[FramingSize(framing_size)]
    except ValueError:
        return None


def _invalid_framing(framing_size: object) -> InsulationValidationResult:
    sizes = ", ".join(s.value for s in FramingSize)
    return InsulationValidationResult(
        valid=False,
        message=f"Invalid framing size: {framing_size}. Must be one of: {sizes}",
    )


def validate_hybrid_system(
    framing_size: FramingSize | str,
    closed_cell_inches: float,
    open_cell_inches: float,
) -> InsulationValidationResult:
    """Check that both foam layers fit inside the framing cavity."""
    depth = framing_depth(framing_size)
    if depth is None:
        return _invalid_framing(framing_size)

    size = FramingSize(framing_size).value
    total = closed_cell_inches + open_cell_inches
    if total > depth:
        return InsulationValidationResult(
            valid=False,
            message=f'Total insulation {total:g}" exceeds {size} cavity depth of {depth:g}"',
        )

    warnings: list[str] = []
    if total < depth * UNDERFILL_RATIO:
        warnings.append(
            f'Only using {total:g}" of {depth:g}" available cavity depth '
            f"({round_half_up(total / depth * 100):.0f}%)"
        )
    return InsulationValidationResult(valid=True, warnings=warnings)


def _validate_thickness(label: str, inches: float, max_inches: float) -> InsulationValidationResult:
    if inches <= 0:
        return InsulationValidationResult(
            valid=False, message=f"{label} thickness must be greater than 0",
        )
    if inches > max_inches:
        return InsulationValidationResult(
            valid=False,
            message=f'{label} thickness {inches:g}" exceeds maximum of {max_inches:g}"',
        )
    return InsulationValidationResult(valid=True)


def validate_closed_cell_thickness(
    inches: float, max_inches: float = MAX_CLOSED_CELL_INCHES,
) -> InsulationValidationResult:
    return _validate_thickness("Closed cell", inches, max_inches)


def validate_open_cell_thickness(
    inches: float, max_inches: float = MAX_OPEN_CELL_INCHES,
) -> InsulationValidationResult:
    return _validate_thickness("Open cell", inches, max_inches)


def max_achievable_r_value(framing_size: FramingSize | str, family: InsulationFamily) -> float:
    """Highest R-value a foam family can reach in a full cavity."""
    depth = framing_depth(framing_size)
    if depth is None:
        return 0.0
    cc_rate = R_VALUE_PER_INCH[InsulationFamily.CLOSED_CELL]
    oc_rate = R_VALUE_PER_INCH[InsulationFamily.OPEN_CELL]
    if family is InsulationFamily.CLOSED_CELL:
        return depth * cc_rate
    if family is InsulationFamily.OPEN_CELL:
        return depth * oc_rate
    if family is InsulationFamily.HYBRID:
        closed = min(HYBRID_CLOSED_CELL_INCHES, depth)
        return closed * cc_rate + max(0.0, depth - closed) * oc_rate
    return 0.0


def validate_r_value_for_framing(
    r_value: float,
    framing_size: FramingSize | str,
    family: InsulationFamily,
) -> InsulationValidationResult:
    """Check that ``r_value`` is reachable with the framing and foam type."""
    if framing_depth(framing_size) is None:
        return _invalid_framing(framing_size)
    max_r = max_achievable_r_value(framing_size, family)
    if r_value > max_r:
        return InsulationValidationResult(
            valid=False,
            message=(
                f"R-{r_value:g} cannot be achieved in {FramingSize(framing_size).value} "
                f"framing with {family.value} (max: R-{round_half_up(max_r):.0f})"
            ),
        )
    return InsulationValidationResult(valid=True)


def validate_line_item(item: MeasurementLineItem) -> InsulationValidationResult:
    """Run every applicable check and combine the results."""
    errors: list[str] = []
    warnings: list[str] = []

    family = item.insulation_family
    thickness_checks: list[InsulationValidationResult] = []
    if item.closed_cell_inches and family in _CLOSED_CELL_LAYERS:
        thickness_checks.append(validate_closed_cell_thickness(item.closed_cell_inches))
    if item.open_cell_inches and family in _OPEN_CELL_LAYERS:
        thickness_checks.append(validate_open_cell_thickness(item.open_cell_inches))
    errors.extend(check.message for check in thickness_checks if not check.valid and check.message)

    if (
        family is InsulationFamily.HYBRID
        and item.framing_size is not None
        and (item.closed_cell_inches or item.open_cell_inches)
    ):
        hybrid = validate_hybrid_system(
            item.framing_size, item.closed_cell_inches, item.open_cell_inches,
        )
        if not hybrid.valid and hybrid.message:
            errors.append(hybrid.message)
        warnings.extend(hybrid.warnings)

    if (
        item.r_value
        and item.framing_size is not None
        and item.insulation_family in _FOAM_FAMILIES
    ):
        reachable = validate_r_value_for_framing(
            item.r_value, item.framing_size, item.insulation_family,
        )
        if not reachable.valid and reachable.message:
            errors.append(reachable.message)

    return InsulationValidationResult(
        valid=not errors,
        message="; ".join(errors) if errors else None,
        warnings=warnings,
    )
