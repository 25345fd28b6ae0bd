"""Seed spray-foam catalog used for nearest-R hybrid pricing.

Each row is one stocked thickness with its rated R-value. Where a product
is rated for a span (e.g. 1.5" at R-11/R-13) the upper rating is used.
"""

from __future__ import annotations

from fieldquote.models.enums import InsulationFamily
from fieldquote.models.insulation import CatalogEntry

_CC = InsulationFamily.CLOSED_CELL
_OC = InsulationFamily.OPEN_CELL

SEED_CATALOG_ENTRIES: list[CatalogEntry] = [
    # --- Closed cell ---
    CatalogEntry(insulation_family=_CC, r_value=7, base_price=1.80, thickness='1"'),
    CatalogEntry(insulation_family=_CC, r_value=13, base_price=2.30, thickness='1.5"'),
    CatalogEntry(insulation_family=_CC, r_value=15, base_price=2.80, thickness='2"'),
    CatalogEntry(insulation_family=_CC, r_value=19, base_price=3.60, thickness='2.5"'),
    CatalogEntry(insulation_family=_CC, r_value=21, base_price=3.90, thickness='3"'),
    CatalogEntry(insulation_family=_CC, r_value=30, base_price=5.70, thickness='4"'),
    CatalogEntry(insulation_family=_CC, r_value=38, base_price=6.80, thickness='5"'),
    CatalogEntry(insulation_family=_CC, r_value=49, base_price=8.70, thickness='7"'),
    # --- Open cell ---
    CatalogEntry(insulation_family=_OC, r_value=13, base_price=1.65, thickness='3.5"'),
    CatalogEntry(insulation_family=_OC, r_value=21, base_price=1.90, thickness='5.5"'),
    CatalogEntry(insulation_family=_OC, r_value=27, base_price=2.20, thickness='7"'),
    CatalogEntry(insulation_family=_OC, r_value=30, base_price=2.40, thickness='8"'),
    CatalogEntry(insulation_family=_OC, r_value=34, base_price=2.60, thickness='9"'),
    CatalogEntry(insulation_family=_OC, r_value=38, base_price=2.90, thickness='10"'),
    CatalogEntry(insulation_family=_OC, r_value=45, base_price=3.30, thickness='12"'),
    CatalogEntry(insulation_family=_OC, r_value=49, base_price=3.50, thickness='13"'),
]
