"""Tiered rate table repository for insulation pricing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fieldquote.data.insulation_rates import CEILING, WALL
from fieldquote.exceptions import PricingConfigError
from fieldquote.models.enums import InsulationFamily

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from fieldquote.models.insulation import PricingRule

logger = logging.getLogger(__name__)

# Legacy convention for mineral wool entered without a wall/ceiling hint.
_MINERAL_WOOL_DEFAULT_SIDES: dict[float, str] = {
    15.0: WALL,
    25.0: CEILING,
}


class RateTableRepository:
    """Resolves a price per square foot from insulation family and R-value.

    Tables are copied on construction and never modified afterwards. A
    value that no rule covers resolves to 0, which callers show as "to be
    determined"; a family without any table is a configuration error.
    """

    def __init__(self, tables: Mapping[InsulationFamily, Sequence[PricingRule]]) -> None:
        self._tables: dict[InsulationFamily, tuple[PricingRule, ...]] = {
            InsulationFamily(family): tuple(rules) for family, rules in tables.items()
        }

    @property
    def families(self) -> list[InsulationFamily]:
        return list(self._tables)

    def rules_for(self, family: InsulationFamily) -> tuple[PricingRule, ...]:
        """Return the full rule table for a family.

        Raises:
            PricingConfigError: If no table was loaded for the family.
        """
        table = self._tables.get(family)
        if table is None:
            msg = f"No pricing table configured for insulation family '{family}'"
            raise PricingConfigError(msg)
        return table

    def find_rule(
        self,
        family: InsulationFamily | str | None,
        r_value: float | None,
        side_hint: str | None = None,
    ) -> PricingRule | None:
        """Find the rule whose closed R-value interval contains ``r_value``.

        Returns None when the family is unset or unknown, the R-value is
        missing or zero, or no rule covers the value.
        """
        if not family or not r_value:
            return None
        try:
            family = InsulationFamily(family)
        except ValueError:
            logger.debug("Unknown insulation family %r; leaving unpriced", family)
            return None

        rules = self.rules_for(family)
        if family is InsulationFamily.MINERAL_WOOL:
            side = _mineral_wool_side(r_value, side_hint)
            if side is not None:
                rules = tuple(r for r in rules if r.side_note == side)

        for rule in rules:
            if rule.matches(r_value):
                return rule

        logger.debug("No %s price tier covers R-%s", family, r_value)
        return None

    def resolve(
        self,
        family: InsulationFamily | str | None,
        r_value: float | None,
        side_hint: str | None = None,
    ) -> float:
        """Return the catalog price per square foot, or 0 when unpriced."""
        rule = self.find_rule(family, r_value, side_hint)
        return rule.price_per_unit_area if rule is not None else 0.0


def _mineral_wool_side(r_value: float, side_hint: str | None) -> str | None:
    """Pick the Wall or Ceiling sub-table for mineral wool.

    A hint naming a wall or ceiling wins. Otherwise R-15 means Wall and
    R-25 means Ceiling; other values search the whole table in seed order.
    """
    if side_hint:
        hint = side_hint.lower()
        if "wall" in hint:
            return WALL
        if "ceiling" in hint:
            return CEILING
    return _MINERAL_WOOL_DEFAULT_SIDES.get(float(r_value))
