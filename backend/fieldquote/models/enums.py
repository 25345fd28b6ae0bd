"""Enums for the fieldquote domain models."""

from __future__ import annotations

from enum import StrEnum


class InsulationFamily(StrEnum):
    """Insulation product families; each maps to one pricing table."""

    OPEN_CELL = "open_cell"
    CLOSED_CELL = "closed_cell"
    BATT = "batt"
    BLOWN_IN = "blown_in"
    MINERAL_WOOL = "mineral_wool"
    HYBRID = "hybrid"


class AreaType(StrEnum):
    """Areas of a building that receive insulation."""

    ROOF = "roof"
    EXTERIOR_WALLS = "exterior_walls"
    INTERIOR_WALLS = "interior_walls"
    BASEMENT_WALLS = "basement_walls"
    CEILING = "ceiling"
    GABLE = "gable"


class ConstructionType(StrEnum):
    """Project construction type used by the building-code tables."""

    NEW = "new"
    REMODEL = "remodel"

    @classmethod
    def _missing_(cls, value: object) -> ConstructionType | None:
        # Job records store new construction as "new_construction".
        if isinstance(value, str) and value.lower() == "new_construction":
            return cls.NEW
        return None


class FramingSize(StrEnum):
    """Nominal stud/rafter sizes."""

    TWO_BY_FOUR = "2x4"
    TWO_BY_SIX = "2x6"
    TWO_BY_EIGHT = "2x8"
    TWO_BY_TEN = "2x10"
    TWO_BY_TWELVE = "2x12"


class PriceSource(StrEnum):
    """Which rule produced a line item's unit price."""

    OVERRIDE = "override"
    CATALOG = "catalog"
    HYBRID = "hybrid"
    PER_INCH = "per_inch"
    PER_R_VALUE = "per_r_value"


class HvacSystemType(StrEnum):
    """HVAC equipment categories with their own base and per-ton prices."""

    CENTRAL_AIR = "central_air"
    HEAT_PUMP = "heat_pump"
    FURNACE = "furnace"
    MINI_SPLIT = "mini_split"


class InstallationComplexity(StrEnum):
    """Installation difficulty tiers for HVAC work."""

    STANDARD = "standard"
    MODERATE = "moderate"
    COMPLEX = "complex"
