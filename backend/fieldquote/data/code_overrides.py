"""Certified hybrid assemblies that override the per-inch R-value formula.

Each entry describes an assembly whose tested R-value is what must appear
on the quote, even where it differs from closed x 7.0 + open x 3.8. Entries
are checked in order; a ``None`` qualifier matches any value. New
assemblies are added here without touching the generic calculation.
"""

from __future__ import annotations

from dataclasses import dataclass

from fieldquote.models.enums import AreaType, ConstructionType, FramingSize


@dataclass(frozen=True)
class CodeOverride:
    label: str
    area_type: AreaType
    closed_cell_inches: float
    open_cell_inches: float
    closed_cell_r_value: float
    open_cell_r_value: float
    total_r_value: float
    construction_type: ConstructionType | None = None
    framing_size: FramingSize | None = None

    def applies(
        self,
        closed_cell_inches: float,
        open_cell_inches: float,
        framing_size: FramingSize | None,
        area_type: AreaType | None,
        construction_type: ConstructionType | None,
    ) -> bool:
        if area_type != self.area_type:
            return False
        if self.construction_type is not None and construction_type != self.construction_type:
            return False
        if self.framing_size is not None and framing_size != self.framing_size:
            return False
        return (
            closed_cell_inches == self.closed_cell_inches
            and open_cell_inches == self.open_cell_inches
        )


CODE_OVERRIDES: list[CodeOverride] = [
    # Exterior walls: 2.5" closed + 3" open is accepted as R-30.
    CodeOverride(
        label="exterior_walls_r30",
        area_type=AreaType.EXTERIOR_WALLS,
        closed_cell_inches=2.5,
        open_cell_inches=3.0,
        closed_cell_r_value=19.0,
        open_cell_r_value=11.0,
        total_r_value=30.0,
    ),
    # New construction roofs (R-60)
    CodeOverride(
        label="roof_new_2x10_r60",
        area_type=AreaType.ROOF,
        construction_type=ConstructionType.NEW,
        framing_size=FramingSize.TWO_BY_TEN,
        closed_cell_inches=4.0,
        open_cell_inches=5.0,
        closed_cell_r_value=28.0,
        open_cell_r_value=32.0,
        total_r_value=60.0,
    ),
    CodeOverride(
        label="roof_new_2x12_r60",
        area_type=AreaType.ROOF,
        construction_type=ConstructionType.NEW,
        framing_size=FramingSize.TWO_BY_TWELVE,
        closed_cell_inches=3.0,
        open_cell_inches=8.0,
        closed_cell_r_value=21.0,
        open_cell_r_value=39.0,
        total_r_value=60.0,
    ),
    # Remodel roofs (R-49)
    CodeOverride(
        label="roof_remodel_2x8_r49",
        area_type=AreaType.ROOF,
        construction_type=ConstructionType.REMODEL,
        framing_size=FramingSize.TWO_BY_EIGHT,
        closed_cell_inches=3.0,
        open_cell_inches=4.0,
        closed_cell_r_value=21.0,
        open_cell_r_value=28.0,
        total_r_value=49.0,
    ),
    CodeOverride(
        label="roof_remodel_2x10_r49",
        area_type=AreaType.ROOF,
        construction_type=ConstructionType.REMODEL,
        framing_size=FramingSize.TWO_BY_TEN,
        closed_cell_inches=2.0,
        open_cell_inches=6.0,
        closed_cell_r_value=14.0,
        open_cell_r_value=35.0,
        total_r_value=49.0,
    ),
    CodeOverride(
        label="roof_remodel_2x12_r49",
        area_type=AreaType.ROOF,
        construction_type=ConstructionType.REMODEL,
        framing_size=FramingSize.TWO_BY_TWELVE,
        closed_cell_inches=1.5,
        open_cell_inches=8.0,
        closed_cell_r_value=10.5,
        open_cell_r_value=38.5,
        total_r_value=49.0,
    ),
]
