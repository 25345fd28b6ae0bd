"""Massachusetts building-code R-value requirements by project and area."""

from __future__ import annotations

from pydantic import BaseModel

from fieldquote.models.enums import AreaType, ConstructionType

MA_REQUIRED_R_VALUES: dict[ConstructionType, dict[AreaType, float]] = {
    ConstructionType.NEW: {
        AreaType.ROOF: 60,
        AreaType.EXTERIOR_WALLS: 30,
        AreaType.INTERIOR_WALLS: 13,
        AreaType.BASEMENT_WALLS: 15,
    },
    ConstructionType.REMODEL: {
        AreaType.ROOF: 49,
        AreaType.EXTERIOR_WALLS: 21,
        AreaType.INTERIOR_WALLS: 13,
        AreaType.BASEMENT_WALLS: 15,
    },
}

_AREA_DISPLAY_NAMES: dict[AreaType, str] = {
    AreaType.ROOF: "Roof",
    AreaType.EXTERIOR_WALLS: "Exterior Walls",
    AreaType.INTERIOR_WALLS: "Interior Walls",
    AreaType.BASEMENT_WALLS: "Basement Walls",
    AreaType.CEILING: "Ceiling",
    AreaType.GABLE: "Gable",
}


class CodeRequirement(BaseModel):
    """Minimum R-value the code requires for an area."""

    r_value: float
    construction_type: ConstructionType
    area_type: AreaType
    description: str


def area_display_name(area_type: AreaType) -> str:
    return _AREA_DISPLAY_NAMES.get(area_type, str(area_type))


def required_r_value(
    construction_type: ConstructionType | str,
    area_type: AreaType | str,
) -> CodeRequirement | None:
    """Look up the required R-value, or None for areas the code table omits."""
    construction_type = ConstructionType(construction_type)
    area_type = AreaType(area_type)
    r_value = MA_REQUIRED_R_VALUES[construction_type].get(area_type)
    if r_value is None:
        return None
    project = "New Construction" if construction_type is ConstructionType.NEW else "Remodel"
    return CodeRequirement(
        r_value=r_value,
        construction_type=construction_type,
        area_type=area_type,
        description=(
            f"Massachusetts {project} - {area_display_name(area_type)}: R-{r_value:g}"
        ),
    )
