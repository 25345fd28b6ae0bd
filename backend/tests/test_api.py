"""Tests for the FastAPI application."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from fieldquote.api.app import create_app
from fieldquote.data.hvac_defaults import DEFAULT_HVAC_PRICING_CONFIG
from fieldquote.hvac import HvacPricingService
from fieldquote.models.enums import HvacSystemType

if TYPE_CHECKING:
    from fieldquote.engine import InsulationEstimator


def _create_test_client(
    estimator: InsulationEstimator | None = None,
    hvac_service: HvacPricingService | None = None,
) -> TestClient:
    app = create_app(estimator=estimator, hvac_service=hvac_service)
    return TestClient(app)


@pytest.fixture()
def client() -> TestClient:
    return _create_test_client(hvac_service=HvacPricingService())


_REFERENCE_SYSTEM = {
    "system_type": "central_air",
    "tonnage": 3,
    "permit_required": False,
    "startup_testing_required": False,
}


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# Insulation endpoints
# ---------------------------------------------------------------------------


class TestInsulationEstimate:
    def test_prices_line_items(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/estimate",
            json={
                "lineItems": [
                    {"squareFeet": 500, "insulationFamily": "open_cell", "rValue": 21},
                    {"squareFeet": 100, "insulationFamily": "closed_cell", "rValue": "R-30"},
                ],
                "taxRate": 0.0625,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["subtotal"] == pytest.approx(1520.0)
        assert data["total"] == pytest.approx(1520.0)
        assert data["taxRate"] == 0.0625
        assert data["itemizedPrices"][0]["pricePerUnitArea"] == pytest.approx(1.90)
        assert data["itemizedPrices"][0]["source"] == "per_r_value"

    def test_empty_body(self, client: TestClient) -> None:
        response = client.post("/api/insulation/estimate", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["subtotal"] == 0
        assert data["itemizedPrices"] == []

    def test_unknown_family_is_unpriced(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/estimate",
            json={
                "lineItems": [
                    {"squareFeet": 100, "insulationFamily": "cellulose", "rValue": 21},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["subtotal"] == 0
        assert data["itemizedPrices"][0]["totalPrice"] == 0

    def test_negative_area_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/estimate",
            json={"lineItems": [{"squareFeet": -10, "insulationFamily": "batt"}]},
        )
        assert response.status_code == 422


class TestHybrid:
    def test_certified_assembly(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/hybrid",
            json={"closedCellInches": 2.5, "openCellInches": 3, "areaType": "exterior_walls"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["calculation"]["totalRValue"] == 30.0
        assert data["calculation"]["overrideLabel"] == "exterior_walls_r30"
        assert data["pricing"]["totalPricePerUnitArea"] == pytest.approx(4.5214286, rel=1e-6)
        assert data["description"] == '2.5" Closed Cell (R-19) + 3" Open Cell (R-11)'

    def test_negative_inches_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/hybrid", json={"closedCellInches": -1, "openCellInches": 3},
        )
        assert response.status_code == 422


class TestHybridPlan:
    def test_plans_layers_for_target(self, client: TestClient) -> None:
        response = client.post("/api/insulation/hybrid/plan", json={"targetRValue": 30})

        assert response.status_code == 200
        data = response.json()
        assert data["calculation"]["closedCellInches"] == 3.0
        assert data["calculation"]["openCellInches"] == 2.5
        assert data["calculation"]["totalRValue"] == pytest.approx(30.5)
        assert data["nearestRValue"] == 30
        assert data["pricing"]["totalPricePerUnitArea"] > 0
        assert data["description"] == '3" Closed Cell (R-21) + 2.5" Open Cell (R-10)'

    def test_closed_cell_cap(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/hybrid/plan",
            json={"targetRValue": 30, "maxClosedCellInches": 1},
        )
        data = response.json()
        assert data["calculation"]["closedCellInches"] == 1.0
        assert data["calculation"]["openCellInches"] == 6.0

    def test_target_must_be_positive(self, client: TestClient) -> None:
        response = client.post("/api/insulation/hybrid/plan", json={"targetRValue": 0})
        assert response.status_code == 422


class TestInsulationValidate:
    def test_reports_overfilled_cavity(self, client: TestClient) -> None:
        response = client.post(
            "/api/insulation/validate",
            json={
                "squareFeet": 100,
                "insulationFamily": "hybrid",
                "framingSize": "2x4",
                "closedCellInches": 2.5,
                "openCellInches": 3,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert "exceeds 2x4 cavity depth" in data["message"]


class TestCodeRequirement:
    def test_known_area(self, client: TestClient) -> None:
        response = client.get(
            "/api/insulation/code-requirement",
            params={"construction_type": "remodel", "area_type": "roof"},
        )

        assert response.status_code == 200
        assert response.json()["r_value"] == 49

    def test_area_without_requirement(self, client: TestClient) -> None:
        response = client.get(
            "/api/insulation/code-requirement",
            params={"construction_type": "new", "area_type": "gable"},
        )
        assert response.status_code == 404


class TestGeneralEstimate:
    def test_builds_estimate(self, client: TestClient) -> None:
        response = client.post(
            "/api/estimates/general",
            json={
                "baseSubtotal": 1000,
                "totalSquareFeet": 100,
                "options": {"complexityMultiplier": 1.2, "prepWork": True, "discountPercent": 10},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == pytest.approx(1125.0)
        assert data["requiresApproval"] is False

    def test_out_of_range_multiplier(self, client: TestClient) -> None:
        response = client.post(
            "/api/estimates/general",
            json={
                "baseSubtotal": 1000,
                "totalSquareFeet": 100,
                "options": {"complexityMultiplier": 3},
            },
        )
        assert response.status_code == 422


# ---------------------------------------------------------------------------
# HVAC endpoints
# ---------------------------------------------------------------------------


class TestHvacEndpoints:
    def test_config(self, client: TestClient) -> None:
        response = client.get("/api/hvac/config")

        assert response.status_code == 200
        data = response.json()
        assert data["version"] == "2025.1"
        assert data["basePrices"]["central_air"] == 4500

    def test_price_system(self, client: TestClient) -> None:
        response = client.post("/api/hvac/systems/price", json=_REFERENCE_SYSTEM)

        assert response.status_code == 200
        data = response.json()
        assert data["subtotal"] == pytest.approx(6900)
        assert data["laborCost"]["totalCost"] == pytest.approx(1445)
        assert data["finalTotal"] == pytest.approx(8345)
        assert "calculatedAt" in data

    def test_price_system_with_override(self, client: TestClient) -> None:
        response = client.post(
            "/api/hvac/systems/price", json={**_REFERENCE_SYSTEM, "price_override": 7000},
        )

        data = response.json()
        assert data["finalTotal"] == 7000
        assert data["totalBeforeOverride"] == pytest.approx(8345)

    def test_job_summary(self, client: TestClient) -> None:
        response = client.post("/api/hvac/jobs/summary", json=[_REFERENCE_SYSTEM])

        assert response.status_code == 200
        data = response.json()
        assert data["pricing"]["jobTotals"]["grandTotal"] == pytest.approx(8345)
        assert data["timeline"]["estimatedInstallDays"] == 3

    def test_empty_job_summary(self, client: TestClient) -> None:
        response = client.post("/api/hvac/jobs/summary", json=[])

        assert response.status_code == 200
        data = response.json()
        assert data["totalSystems"] == 0
        assert data["pricing"]["jobTotals"]["grandTotal"] == 0

    def test_quick_estimate(self, client: TestClient) -> None:
        response = client.post(
            "/api/hvac/quick-estimate", json={"systemType": "central_air", "tonnage": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["estimatedPrice"] == 8345
        assert data["priceRange"] == {"min": 7093, "max": 9597}

    def test_validate(self, client: TestClient) -> None:
        response = client.post(
            "/api/hvac/systems/validate", json={"system_type": "heat_pump", "tonnage": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        assert data["warnings"] == ["Heat pump systems should have an HSPF2 rating specified"]

    def test_unknown_system_type_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/hvac/systems/price", json={"system_type": "boiler", "tonnage": 3},
        )
        assert response.status_code == 422


class TestConfigurationErrors:
    def test_missing_rate_returns_500(self) -> None:
        broken = DEFAULT_HVAC_PRICING_CONFIG.model_copy(
            update={"base_prices": {HvacSystemType.CENTRAL_AIR: 4500}},
        )
        client = _create_test_client(hvac_service=HvacPricingService(broken))

        response = client.post(
            "/api/hvac/systems/price", json={"system_type": "furnace", "tonnage": 2},
        )

        assert response.status_code == 500
        assert "base_prices" in response.json()["detail"]


class TestInjection:
    def test_uses_injected_estimator(self) -> None:
        from fieldquote.data.catalog import SEED_CATALOG_ENTRIES
        from fieldquote.factory import create_default_estimator

        client = _create_test_client(estimator=create_default_estimator(SEED_CATALOG_ENTRIES))
        response = client.post(
            "/api/insulation/estimate",
            json={
                "lineItems": [
                    {"squareFeet": 100, "insulationFamily": "open_cell", "rValue": 15.5},
                ],
            },
        )

        data = response.json()
        assert data["itemizedPrices"][0]["source"] == "catalog"
        assert data["subtotal"] == pytest.approx(190.0)
