"""Dependency construction for the FastAPI endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from fieldquote.exceptions import PricingConfigError
from fieldquote.factory import create_hvac_service
from fieldquote.hvac import HvacPricingService
from fieldquote.models.hvac import HvacPricingConfig

logger = logging.getLogger(__name__)

HVAC_CONFIG_ENV = "FIELDQUOTE_HVAC_CONFIG"
CORS_ORIGINS_ENV = "FIELDQUOTE_CORS_ORIGINS"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


def load_hvac_config(path: Path) -> HvacPricingConfig:
    """Read a complete HVAC pricing configuration from a JSON file.

    Raises:
        PricingConfigError: If the file is missing or not a complete config.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read HVAC pricing config at {path}: {exc}"
        raise PricingConfigError(msg) from exc
    try:
        return HvacPricingConfig.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Invalid HVAC pricing config at {path}: {exc}"
        raise PricingConfigError(msg) from exc


def create_hvac_service_from_env() -> HvacPricingService:
    """Create the HVAC service, honouring FIELDQUOTE_HVAC_CONFIG when set."""
    config_path = os.environ.get(HVAC_CONFIG_ENV, "")
    if not config_path:
        return create_hvac_service()
    config = load_hvac_config(Path(config_path))
    logger.info("Loaded HVAC pricing config %s from %s", config.version, config_path)
    return create_hvac_service(config)


def cors_origins_from_env() -> list[str]:
    raw = os.environ.get(CORS_ORIGINS_ENV, "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)
