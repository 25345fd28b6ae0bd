"""FastAPI application — create_app factory exposing the pricing engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import Field

# Load .env from the project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
load_dotenv(_backend_dir.parent / ".env")
load_dotenv(_backend_dir / ".env")

from fieldquote.conversion import (
    DEFAULT_MAX_CLOSED_CELL_INCHES,
    approximate_r_value,
    inches_for_target_r_value,
)
from fieldquote.data.building_code import required_r_value
from fieldquote.exceptions import FieldQuoteError
from fieldquote.formatting import format_hybrid_description
from fieldquote.models.base import CamelModel
from fieldquote.models.enums import (
    AreaType,
    ConstructionType,
    FramingSize,
    HvacSystemType,
    InstallationComplexity,
)
from fieldquote.models.estimate import EstimateOptions
from fieldquote.models.hvac import HvacSystemMeasurement  # noqa: TCH001 (FastAPI resolves at runtime)
from fieldquote.models.insulation import MeasurementLineItem
from fieldquote.validation import validate_line_item

if TYPE_CHECKING:
    from fieldquote.engine import InsulationEstimator
    from fieldquote.estimate_builder import GeneralEstimateBuilder
    from fieldquote.hvac import HvacPricingService
    from fieldquote.hybrid import HybridCalculator

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


class InsulationEstimateRequest(CamelModel):
    line_items: list[MeasurementLineItem] = Field(default_factory=list)
    tax_rate: float = 0.0


class HybridRequest(CamelModel):
    closed_cell_inches: float = Field(ge=0)
    open_cell_inches: float = Field(ge=0)
    framing_size: FramingSize | None = None
    area_type: AreaType | None = None
    construction_type: ConstructionType | None = None


class HybridPlanRequest(CamelModel):
    target_r_value: float = Field(gt=0)
    max_closed_cell_inches: float = Field(default=DEFAULT_MAX_CLOSED_CELL_INCHES, ge=0)


class GeneralEstimateRequest(CamelModel):
    base_subtotal: float = Field(ge=0)
    total_square_feet: float = Field(ge=0)
    options: EstimateOptions = Field(default_factory=EstimateOptions)


class QuickEstimateRequest(CamelModel):
    system_type: HvacSystemType
    tonnage: float = Field(ge=0)
    ductwork_feet: float = Field(default=0.0, ge=0)
    complexity: InstallationComplexity = InstallationComplexity.STANDARD


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def create_app(
    *,
    estimator: InsulationEstimator | None = None,
    hybrid_calculator: HybridCalculator | None = None,
    builder: GeneralEstimateBuilder | None = None,
    hvac_service: HvacPricingService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    estimator, hybrid_calculator, builder
        Optional pre-built insulation components (e.g. for tests). Defaults
        are created from the seed tables on first use.
    hvac_service
        Optional pre-built HVAC service. If not provided, one is created on
        first use, reading FIELDQUOTE_HVAC_CONFIG when set.
    """
    from fieldquote.api.deps import cors_origins_from_env

    app = FastAPI(title="fieldquote", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins_from_env(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.estimator = estimator
    app.state.hybrid_calculator = hybrid_calculator
    app.state.builder = builder
    app.state.hvac_service = hvac_service

    def _get_estimator() -> InsulationEstimator:
        if app.state.estimator is None:
            from fieldquote.factory import create_default_estimator

            app.state.estimator = create_default_estimator()
        return app.state.estimator

    def _get_hybrid_calculator() -> HybridCalculator:
        if app.state.hybrid_calculator is None:
            from fieldquote.hybrid import HybridCalculator

            app.state.hybrid_calculator = HybridCalculator()
        return app.state.hybrid_calculator

    def _get_builder() -> GeneralEstimateBuilder:
        if app.state.builder is None:
            from fieldquote.estimate_builder import GeneralEstimateBuilder

            app.state.builder = GeneralEstimateBuilder(estimator=_get_estimator())
        return app.state.builder

    def _get_hvac_service() -> HvacPricingService:
        if app.state.hvac_service is None:
            from fieldquote.api.deps import create_hvac_service_from_env

            app.state.hvac_service = create_hvac_service_from_env()
        return app.state.hvac_service

    @app.exception_handler(FieldQuoteError)
    async def _engine_error(request: Request, exc: FieldQuoteError) -> JSONResponse:
        logger.error("Pricing engine error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # Insulation
    # ------------------------------------------------------------------

    @app.post("/api/insulation/estimate")
    def insulation_estimate(body: InsulationEstimateRequest) -> dict[str, Any]:
        result = _get_estimator().estimate(body.line_items, tax_rate=body.tax_rate)
        return _dump(result)

    @app.post("/api/insulation/hybrid")
    def hybrid(body: HybridRequest) -> dict[str, Any]:
        calculator = _get_hybrid_calculator()
        calculation = calculator.calculate(
            body.closed_cell_inches,
            body.open_cell_inches,
            framing_size=body.framing_size,
            area_type=body.area_type,
            construction_type=body.construction_type,
        )
        return {
            "calculation": _dump(calculation),
            "pricing": _dump(calculator.price(calculation)),
            "description": format_hybrid_description(calculation),
        }

    @app.post("/api/insulation/hybrid/plan")
    def hybrid_plan(body: HybridPlanRequest) -> dict[str, Any]:
        calculation = inches_for_target_r_value(
            body.target_r_value, max_closed_cell_inches=body.max_closed_cell_inches,
        )
        return {
            "calculation": _dump(calculation),
            "nearestRValue": approximate_r_value(calculation.total_r_value),
            "pricing": _dump(_get_hybrid_calculator().price(calculation)),
            "description": format_hybrid_description(calculation),
        }

    @app.post("/api/insulation/validate")
    def insulation_validate(item: MeasurementLineItem) -> dict[str, Any]:
        return _dump(validate_line_item(item))

    @app.get("/api/insulation/code-requirement")
    def code_requirement(
        construction_type: ConstructionType,
        area_type: AreaType,
    ) -> dict[str, Any]:
        requirement = required_r_value(construction_type, area_type)
        if requirement is None:
            raise HTTPException(
                status_code=404,
                detail=f"No code requirement for area type '{area_type}'",
            )
        return _dump(requirement)

    @app.post("/api/estimates/general")
    def general_estimate(body: GeneralEstimateRequest) -> dict[str, Any]:
        result = _get_builder().build(
            body.base_subtotal, body.total_square_feet, body.options,
        )
        return _dump(result)

    # ------------------------------------------------------------------
    # HVAC
    # ------------------------------------------------------------------

    @app.get("/api/hvac/config")
    def hvac_config() -> dict[str, Any]:
        return _dump(_get_hvac_service().config)

    @app.post("/api/hvac/systems/price")
    def hvac_price_system(measurement: HvacSystemMeasurement) -> dict[str, Any]:
        return _dump(_get_hvac_service().price_system(measurement))

    @app.post("/api/hvac/systems/validate")
    def hvac_validate(measurement: HvacSystemMeasurement) -> dict[str, Any]:
        return _dump(_get_hvac_service().validate(measurement))

    @app.post("/api/hvac/jobs/summary")
    def hvac_job_summary(measurements: list[HvacSystemMeasurement]) -> dict[str, Any]:
        return _dump(_get_hvac_service().summarize_job(measurements))

    @app.post("/api/hvac/quick-estimate")
    def hvac_quick_estimate(body: QuickEstimateRequest) -> dict[str, Any]:
        result = _get_hvac_service().quick_estimate(
            body.system_type, body.tonnage, body.ductwork_feet, body.complexity,
        )
        return _dump(result)

    return app
