"""Health check endpoints for liveness and readiness probes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import get_search_query_builder
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.search import SearchQueryBuilder
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    db: Annotated[AsyncSession, Depends(get_db)],
    builder: Annotated[SearchQueryBuilder, Depends(get_search_query_builder)],
) -> ReadinessResponse | JSONResponse:
    """200 when the database answers SELECT 1 (reports the search strategy); else 503."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Readiness check failed: database unreachable", exc_info=True)
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message="database unreachable").model_dump(),
        )
    return ReadinessResponse(search_strategy=builder.strategy.name)
