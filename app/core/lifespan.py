"""Application lifespan: startup and shutdown.

Wiring only: shared HTTP client, telemetry, search capability probe,
DB engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings
from app.domain.exceptions import SqlNotConfiguredException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.search.capabilities import probe_capabilities

logger = logging.getLogger(__name__)


async def detect_search_capabilities(app: FastAPI) -> None:
    """Probe the record store and cache the result on app.state.

    A failed probe leaves detected=False; request dependencies re-probe then.
    """
    try:
        engine = database.get_engine()
    except SqlNotConfiguredException:
        app.state.search_capabilities = None
        return
    async with engine.connect() as conn:
        capabilities = await probe_capabilities(conn)
    app.state.search_capabilities = capabilities
    logger.info(
        "Search store: dialect=%s similarity=%s cached_address=%s",
        capabilities.dialect,
        capabilities.supports_similarity,
        capabilities.has_cached_address,
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client (geocoding), telemetry (if enabled), search
    capability probe. Shutdown: HTTP client close, telemetry shutdown,
    SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(timeout=settings.geocoding_timeout_seconds)

    if settings.telemetry_enabled:
        from app.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_sqlalchemy(database.get_engine())
        logger.info("Telemetry initialized")

    await detect_search_capabilities(app)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    from app.shared.telemetry.telemetry import get_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()

    await database.dispose_engine()
    logger.info("Database engine disposed")
