"""Record store capability probe.

Decides once per store whether trigram similarity and the cached address
column are available. The result picks the search strategy.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from app.infrastructure.persistence.search.strategies import (
    FuzzyRankedStrategy,
    PlainOrderedStrategy,
    SearchStrategy,
)

logger = logging.getLogger(__name__)

_PG_TRGM_SQL = text("SELECT 1 FROM pg_extension WHERE extname = 'pg_trgm'")
_CACHED_ADDRESS_SQL = text(
    "SELECT 1 FROM information_schema.columns "
    "WHERE table_schema = current_schema() "
    "AND table_name = 'places' AND column_name = 'full_address_cached'"
)


@dataclass(frozen=True)
class StoreCapabilities:
    """What the record store supports for text search.

    detected is False when the probe could not run; callers re-probe later
    instead of trusting the plain fallback forever.
    """

    dialect: str
    supports_similarity: bool = False
    has_cached_address: bool = False
    detected: bool = True


async def probe_capabilities(conn: AsyncConnection) -> StoreCapabilities:
    """Inspect the store behind conn. Never raises on database errors."""
    dialect = conn.dialect.name
    if dialect != "postgresql":
        return StoreCapabilities(dialect=dialect)
    try:
        has_trgm = (await conn.execute(_PG_TRGM_SQL)).scalar() is not None
        has_cached = (await conn.execute(_CACHED_ADDRESS_SQL)).scalar() is not None
    except SQLAlchemyError:
        logger.warning(
            "Search capability probe failed; using plain ordering until re-probed",
            exc_info=True,
        )
        return StoreCapabilities(dialect=dialect, detected=False)
    if not has_trgm:
        logger.info("pg_trgm extension not installed; search uses plain ordering")
    return StoreCapabilities(
        dialect=dialect,
        supports_similarity=has_trgm,
        has_cached_address=has_trgm and has_cached,
    )


def select_strategy(capabilities: StoreCapabilities) -> SearchStrategy:
    """Fuzzy ranking when the store has similarity(), plain ordering otherwise."""
    if capabilities.supports_similarity:
        return FuzzyRankedStrategy(use_cached_address=capabilities.has_cached_address)
    return PlainOrderedStrategy()
