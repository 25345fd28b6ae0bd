"""Tests for the pydantic domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fieldquote.data.hvac_defaults import DEFAULT_HVAC_PRICING_CONFIG
from fieldquote.models.enums import ConstructionType, HvacSystemType, InsulationFamily
from fieldquote.models.hvac import HvacPricingConfig
from fieldquote.models.insulation import MeasurementLineItem, PricingRule, parse_r_value

# ---------- R-value parsing ----------


class TestParseRValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (30, 30.0),
            (21.5, 21.5),
            ("R-30", 30.0),
            ("R30", 30.0),
            ("r-13", 13.0),
            (" 19 ", 19.0),
        ],
    )
    def test_parses(self, raw: object, expected: float) -> None:
        assert parse_r_value(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "R-", "TBD", True, [30]])
    def test_unparseable_is_none(self, raw: object) -> None:
        assert parse_r_value(raw) is None


# ---------- Line items ----------


class TestMeasurementLineItem:
    def test_camel_case_payload(self) -> None:
        item = MeasurementLineItem.model_validate({
            "squareFeet": 320,
            "insulationFamily": "closed_cell",
            "rValue": "R-21",
            "areaType": "basement_walls",
            "closedCellInches": 3,
        })
        assert item.square_feet == 320
        assert item.insulation_family is InsulationFamily.CLOSED_CELL
        assert item.r_value == 21.0
        assert item.closed_cell_inches == 3

    def test_dumps_camel_case(self) -> None:
        item = MeasurementLineItem(square_feet=10, insulation_family="batt", r_value=13)
        dumped = item.model_dump(by_alias=True)
        assert dumped["squareFeet"] == 10
        assert dumped["rValue"] == 13

    def test_negative_area_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeasurementLineItem(square_feet=-1)

    def test_unknown_family_is_unset(self) -> None:
        item = MeasurementLineItem.model_validate(
            {"squareFeet": 100, "insulationFamily": "cellulose", "rValue": 21},
        )
        assert item.insulation_family is None
        assert item.r_value == 21.0

    def test_non_string_family_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MeasurementLineItem(square_feet=10, insulation_family=5)


class TestPricingRule:
    def test_closed_interval(self) -> None:
        rule = PricingRule(min_r_value=16, max_r_value=21, price_per_unit_area=1.9)
        assert rule.matches(16)
        assert rule.matches(21)
        assert not rule.matches(21.1)

    def test_frozen(self) -> None:
        rule = PricingRule(min_r_value=0, max_r_value=13, price_per_unit_area=0.8)
        with pytest.raises(ValidationError):
            rule.price_per_unit_area = 1.0  # type: ignore[misc]


# ---------- Enums ----------


class TestConstructionType:
    def test_new_construction_alias(self) -> None:
        assert ConstructionType("new_construction") is ConstructionType.NEW
        assert ConstructionType("NEW_CONSTRUCTION") is ConstructionType.NEW

    def test_unknown_value(self) -> None:
        with pytest.raises(ValueError):
            ConstructionType("addition")


# ---------- HVAC configuration ----------


class TestHvacPricingConfig:
    def test_json_round_trip(self) -> None:
        raw = DEFAULT_HVAC_PRICING_CONFIG.model_dump_json(by_alias=True)
        assert HvacPricingConfig.model_validate_json(raw) == DEFAULT_HVAC_PRICING_CONFIG

    def test_dump_uses_camel_case(self) -> None:
        dumped = DEFAULT_HVAC_PRICING_CONFIG.model_dump(mode="json", by_alias=True)
        assert dumped["basePrices"]["central_air"] == 4500
        assert dumped["ductwork"]["minimumCharge"] == 500
        assert dumped["labor"]["hoursPerTon"] == 3

    def test_every_system_type_priced(self) -> None:
        for system_type in HvacSystemType:
            assert system_type in DEFAULT_HVAC_PRICING_CONFIG.base_prices
            assert system_type in DEFAULT_HVAC_PRICING_CONFIG.tonnage_multipliers

    def test_negative_rate_rejected(self) -> None:
        data = DEFAULT_HVAC_PRICING_CONFIG.model_dump()
        data["labor"]["hourly_rate"] = -1
        with pytest.raises(ValidationError):
            HvacPricingConfig.model_validate(data)
