"""Seed insulation price tables.

Prices are per square foot and include material and labor. Rules are
closed R-value intervals; a few upper bounds are stretched (e.g. 30.9,
15.9) so that fractional R-values produced by foam thickness conversions
do not fall into gaps between tiers.
"""

from __future__ import annotations

from fieldquote.models.enums import InsulationFamily
from fieldquote.models.insulation import PricingRule

WALL = "Wall"
CEILING = "Ceiling"

OPEN_CELL_PRICING: list[PricingRule] = [
    PricingRule(min_r_value=0, max_r_value=15, price_per_unit_area=1.65, thickness_label='3.5"'),
    PricingRule(min_r_value=16, max_r_value=21, price_per_unit_area=1.90, thickness_label='5.5"'),
    PricingRule(min_r_value=22, max_r_value=28, price_per_unit_area=2.20, thickness_label='7"'),
    PricingRule(min_r_value=29, max_r_value=30.9, price_per_unit_area=2.40, thickness_label='8"'),
    PricingRule(min_r_value=31, max_r_value=34, price_per_unit_area=2.60, thickness_label='9"'),
    PricingRule(min_r_value=35, max_r_value=38, price_per_unit_area=2.90, thickness_label='10"'),
    PricingRule(min_r_value=39, max_r_value=45, price_per_unit_area=3.30, thickness_label='12"'),
    PricingRule(min_r_value=46, max_r_value=49, price_per_unit_area=3.50, thickness_label='13"'),
    PricingRule(min_r_value=50, max_r_value=999, price_per_unit_area=3.50, thickness_label='13+"'),
]

CLOSED_CELL_PRICING: list[PricingRule] = [
    PricingRule(min_r_value=0, max_r_value=7, price_per_unit_area=1.80, thickness_label='1"'),
    PricingRule(min_r_value=8, max_r_value=13, price_per_unit_area=2.30, thickness_label='1.5"'),
    PricingRule(min_r_value=14, max_r_value=15.9, price_per_unit_area=2.80, thickness_label='2"'),
    PricingRule(min_r_value=16, max_r_value=19, price_per_unit_area=3.60, thickness_label='2.5"'),
    PricingRule(min_r_value=20, max_r_value=21.9, price_per_unit_area=3.90, thickness_label='3"'),
    PricingRule(min_r_value=22, max_r_value=30.9, price_per_unit_area=5.70, thickness_label='4"'),
    PricingRule(min_r_value=31, max_r_value=38.9, price_per_unit_area=6.80, thickness_label='5"'),
    PricingRule(min_r_value=39, max_r_value=49.9, price_per_unit_area=8.70, thickness_label='7"'),
    PricingRule(min_r_value=50, max_r_value=999, price_per_unit_area=8.70, thickness_label='7+"'),
]

FIBERGLASS_BATT_PRICING: list[PricingRule] = [
    PricingRule(min_r_value=0, max_r_value=13, price_per_unit_area=0.80),
    PricingRule(min_r_value=14, max_r_value=19, price_per_unit_area=1.00),
    PricingRule(min_r_value=20, max_r_value=30, price_per_unit_area=1.20),
    PricingRule(min_r_value=31, max_r_value=38, price_per_unit_area=1.50),
    PricingRule(min_r_value=39, max_r_value=999, price_per_unit_area=1.80),
]

FIBERGLASS_BLOWN_PRICING: list[PricingRule] = [
    PricingRule(min_r_value=0, max_r_value=19, price_per_unit_area=0.90),
    PricingRule(min_r_value=20, max_r_value=30, price_per_unit_area=1.10),
    PricingRule(min_r_value=31, max_r_value=38, price_per_unit_area=1.30),
    PricingRule(min_r_value=39, max_r_value=49, price_per_unit_area=1.60),
    PricingRule(min_r_value=50, max_r_value=999, price_per_unit_area=1.90),
]

# Wall batts are sold at R-15 and R-23; ceiling batts start at R-25.
MINERAL_WOOL_PRICING: list[PricingRule] = [
    PricingRule(
        min_r_value=0, max_r_value=15, price_per_unit_area=1.45,
        thickness_label='3.5"', side_note=WALL,
    ),
    PricingRule(
        min_r_value=16, max_r_value=23, price_per_unit_area=1.95,
        thickness_label='5.5"', side_note=WALL,
    ),
    PricingRule(
        min_r_value=24, max_r_value=999, price_per_unit_area=2.40,
        thickness_label='7.25"', side_note=WALL,
    ),
    PricingRule(
        min_r_value=0, max_r_value=25, price_per_unit_area=1.75,
        thickness_label='6"', side_note=CEILING,
    ),
    PricingRule(
        min_r_value=26, max_r_value=30, price_per_unit_area=2.10,
        thickness_label='7.25"', side_note=CEILING,
    ),
    PricingRule(
        min_r_value=31, max_r_value=999, price_per_unit_area=2.65,
        thickness_label='9.25"', side_note=CEILING,
    ),
]

# Used only when a hybrid line item carries an R-value but no layer inches.
HYBRID_PRICING: list[PricingRule] = [
    PricingRule(min_r_value=0, max_r_value=15, price_per_unit_area=1.72, thickness_label='3.5"'),
    PricingRule(min_r_value=16, max_r_value=21, price_per_unit_area=2.90, thickness_label='4"'),
    PricingRule(min_r_value=22, max_r_value=30, price_per_unit_area=3.95, thickness_label='5.5"'),
    PricingRule(min_r_value=31, max_r_value=38, price_per_unit_area=4.75, thickness_label='7.5"'),
    PricingRule(min_r_value=39, max_r_value=999, price_per_unit_area=6.10, thickness_label='10"'),
]

SEED_RATE_TABLES: dict[InsulationFamily, list[PricingRule]] = {
    InsulationFamily.OPEN_CELL: OPEN_CELL_PRICING,
    InsulationFamily.CLOSED_CELL: CLOSED_CELL_PRICING,
    InsulationFamily.BATT: FIBERGLASS_BATT_PRICING,
    InsulationFamily.BLOWN_IN: FIBERGLASS_BLOWN_PRICING,
    InsulationFamily.MINERAL_WOOL: MINERAL_WOOL_PRICING,
    InsulationFamily.HYBRID: HYBRID_PRICING,
}
