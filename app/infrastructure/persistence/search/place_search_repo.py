"""Place search repository: runs SearchQueryBuilder statements on a session."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.place import PlaceResult
from app.application.dtos.search import SearchQuery, SuggestionRow
from app.domain.exceptions import SearchUnavailableException
from app.infrastructure.persistence.repositories.place_repo import place_to_result
from app.infrastructure.persistence.search.query_builder import (
    SearchQueryBuilder,
    rank_suggestions,
)
from app.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class PlaceSearchRepository:
    """Text search and suggestions over a place scope.

    Implements IPlaceSearchRepository. Storage errors surface as
    SearchUnavailableException with the original error chained.
    """

    def __init__(self, db: AsyncSession, builder: SearchQueryBuilder) -> None:
        self.db = db
        self.builder = builder

    @property
    def strategy_name(self) -> str:
        return self.builder.strategy.name

    @traced("places.search")
    async def search(self, query: SearchQuery) -> list[PlaceResult]:
        add_span_attributes(
            strategy=self.strategy_name, limit=query.limit, offset=query.offset
        )
        stmt = self.builder.build_search(query)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Place search failed (strategy=%s)", self.strategy_name)
            raise SearchUnavailableException("search") from e
        return [place_to_result(p) for p in result.scalars().all()]

    @traced("places.search_count")
    async def count(self, query: SearchQuery) -> int:
        try:
            result = await self.db.execute(self.builder.build_count(query))
        except SQLAlchemyError as e:
            logger.error("Place search count failed (strategy=%s)", self.strategy_name)
            raise SearchUnavailableException("count") from e
        return int(result.scalar_one())

    @traced("places.suggest")
    async def suggest(self, query: SearchQuery) -> list[str]:
        add_span_attributes(strategy=self.strategy_name, limit=query.limit)
        try:
            result = await self.db.execute(self.builder.build_suggest(query))
        except SQLAlchemyError as e:
            logger.error("Place suggest failed (strategy=%s)", self.strategy_name)
            raise SearchUnavailableException("suggest") from e
        rows = (
            SuggestionRow(name=r.name, city=r.city, address=r.address)
            for r in result.all()
        )
        return rank_suggestions(rows, query.text, query.limit)
