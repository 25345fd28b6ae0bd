"""Tests for the tiered rate table repository."""

from __future__ import annotations

import pytest

from fieldquote.data.insulation_rates import OPEN_CELL_PRICING, SEED_RATE_TABLES
from fieldquote.data.repository import RateTableRepository
from fieldquote.exceptions import PricingConfigError
from fieldquote.models.enums import InsulationFamily


@pytest.fixture()
def repo() -> RateTableRepository:
    return RateTableRepository(SEED_RATE_TABLES)


# ---------------------------------------------------------------------------
# Tier lookup
# ---------------------------------------------------------------------------


class TestResolve:
    def test_open_cell_tier(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.OPEN_CELL, 21) == pytest.approx(1.90)

    def test_closed_cell_tier(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.CLOSED_CELL, 30) == pytest.approx(5.70)

    def test_stretched_upper_bound_covers_fraction(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.CLOSED_CELL, 15.5) == pytest.approx(2.80)

    def test_batt_and_blown_in(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.BATT, 13) == pytest.approx(0.80)
        assert repo.resolve(InsulationFamily.BLOWN_IN, 38) == pytest.approx(1.30)

    def test_string_family_accepted(self, repo: RateTableRepository) -> None:
        assert repo.resolve("open_cell", 38) == pytest.approx(2.90)

    def test_bounds_are_inclusive(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.OPEN_CELL, 16) == pytest.approx(1.90)
        assert repo.resolve(InsulationFamily.OPEN_CELL, 15) == pytest.approx(1.65)

    @pytest.mark.parametrize(
        "family", [f for f in InsulationFamily if f is not InsulationFamily.HYBRID],
    )
    def test_same_tier_same_rate(
        self, repo: RateTableRepository, family: InsulationFamily,
    ) -> None:
        for rule in repo.rules_for(family):
            low = repo.resolve(family, rule.min_r_value or 1, rule.side_note)
            high = repo.resolve(family, rule.max_r_value, rule.side_note)
            assert low == high
            assert low >= 0

    def test_find_rule_returns_thickness_label(self, repo: RateTableRepository) -> None:
        rule = repo.find_rule(InsulationFamily.OPEN_CELL, 30)
        assert rule is not None
        assert rule.thickness_label == '8"'


# ---------------------------------------------------------------------------
# Unpriced inputs resolve to 0
# ---------------------------------------------------------------------------


class TestUnpriced:
    def test_missing_family(self, repo: RateTableRepository) -> None:
        assert repo.resolve(None, 21) == 0.0

    def test_zero_or_missing_r_value(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.OPEN_CELL, 0) == 0.0
        assert repo.resolve(InsulationFamily.OPEN_CELL, None) == 0.0

    def test_unknown_family(self, repo: RateTableRepository) -> None:
        assert repo.resolve("cellulose", 21) == 0.0

    def test_value_in_tier_gap(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.OPEN_CELL, 15.5) == 0.0

    def test_negative_r_value(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.BATT, -5) == 0.0


class TestMissingTable:
    def test_rules_for_missing_family_raises(self) -> None:
        repo = RateTableRepository({InsulationFamily.OPEN_CELL: OPEN_CELL_PRICING})
        with pytest.raises(PricingConfigError, match="closed_cell"):
            repo.rules_for(InsulationFamily.CLOSED_CELL)

    def test_resolve_missing_family_raises(self) -> None:
        repo = RateTableRepository({InsulationFamily.OPEN_CELL: OPEN_CELL_PRICING})
        with pytest.raises(PricingConfigError):
            repo.resolve(InsulationFamily.CLOSED_CELL, 21)

    def test_families(self) -> None:
        repo = RateTableRepository({"open_cell": OPEN_CELL_PRICING})
        assert repo.families == [InsulationFamily.OPEN_CELL]


# ---------------------------------------------------------------------------
# Mineral wool wall / ceiling selection
# ---------------------------------------------------------------------------


class TestMineralWool:
    def test_r15_without_hint_is_wall(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.MINERAL_WOOL, 15) == pytest.approx(1.45)

    def test_r25_without_hint_is_ceiling(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.MINERAL_WOOL, 25) == pytest.approx(1.75)

    def test_wall_hint(self, repo: RateTableRepository) -> None:
        assert repo.resolve(
            InsulationFamily.MINERAL_WOOL, 25, "Exterior Wall",
        ) == pytest.approx(2.40)

    def test_ceiling_hint(self, repo: RateTableRepository) -> None:
        assert repo.resolve(
            InsulationFamily.MINERAL_WOOL, 15, "attic ceiling",
        ) == pytest.approx(1.75)

    def test_other_values_search_in_seed_order(self, repo: RateTableRepository) -> None:
        assert repo.resolve(InsulationFamily.MINERAL_WOOL, 30) == pytest.approx(2.40)

    def test_unrelated_hint_keeps_r_value_convention(self, repo: RateTableRepository) -> None:
        rule = repo.find_rule(InsulationFamily.MINERAL_WOOL, 25, "roof")
        assert rule is not None
        assert rule.side_note == "Ceiling"
        assert repo.resolve(
            InsulationFamily.MINERAL_WOOL, 15, "gable",
        ) == pytest.approx(1.45)

    def test_unrelated_hint_other_values_search_in_seed_order(
        self, repo: RateTableRepository,
    ) -> None:
        rule = repo.find_rule(InsulationFamily.MINERAL_WOOL, 30, "roof")
        assert rule is not None
        assert rule.side_note == "Wall"
