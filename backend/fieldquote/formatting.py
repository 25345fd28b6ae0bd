"""Formatting helpers for quote output.

Quotes show whole dollars and R-values without decimals, e.g. '$8,345'
and '2.5" Closed Cell (R-19) + 3" Open Cell (R-11)'.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fieldquote.conversion import round_half_up

if TYPE_CHECKING:
    from fieldquote.models.insulation import HybridSystemCalculation


def format_currency(amount: float) -> str:
    """Format an amount in whole dollars with comma separators."""
    rounded = round_half_up(amount)
    if rounded < 0:
        return f"-${-rounded:,.0f}"
    return f"${rounded:,.0f}"


def format_inches(inches: float) -> str:
    """Format a thickness: 3 -> '3"', 2.5 -> '2.5"'."""
    return f'{inches:g}"'


def format_r_value(r_value: float) -> str:
    return f"R-{round_half_up(r_value):.0f}"


def format_hybrid_description(calculation: HybridSystemCalculation) -> str:
    """One-line description of a hybrid assembly for the estimate."""
    parts: list[str] = []
    if calculation.closed_cell_inches > 0:
        parts.append(
            f"{format_inches(calculation.closed_cell_inches)} Closed Cell "
            f"({format_r_value(calculation.closed_cell_r_value)})"
        )
    if calculation.open_cell_inches > 0:
        parts.append(
            f"{format_inches(calculation.open_cell_inches)} Open Cell "
            f"({format_r_value(calculation.open_cell_r_value)})"
        )
    return " + ".join(parts)
