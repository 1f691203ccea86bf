"""Place search use case. Delegates to IPlaceSearchRepository.

Blank queries never reach the store. Limits are clamped here, so the
repository only ever sees sane values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.place import PlacePage, PlaceResult
from app.application.dtos.search import PlaceScope, SearchQuery

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IPlaceSearchRepository


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class PlaceSearchService:
    """Text search and suggestions over a caller-chosen place scope."""

    def __init__(
        self,
        search_repo: IPlaceSearchRepository,
        *,
        page_size: int = 50,
        max_page_size: int = 100,
        suggest_default_limit: int = 8,
        suggest_max_limit: int = 20,
    ) -> None:
        self.search_repo = search_repo
        self.page_size = page_size
        self.max_page_size = max_page_size
        self.suggest_default_limit = suggest_default_limit
        self.suggest_max_limit = suggest_max_limit

    @property
    def strategy_name(self) -> str:
        return self.search_repo.strategy_name

    async def search(
        self,
        text: str,
        scope: PlaceScope,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[PlaceResult]:
        """Matching places in scope, best first. Blank text returns []."""
        query = SearchQuery(
            text=text,
            scope=scope,
            limit=clamp(limit or self.page_size, 1, self.max_page_size),
            offset=max(0, offset),
        )
        if query.is_blank:
            return []
        return await self.search_repo.search(query)

    async def search_page(
        self, text: str, scope: PlaceScope, page: int = 1, per_page: int | None = None
    ) -> PlacePage:
        """One page of search results plus the total match count."""
        page = max(1, page)
        per_page = clamp(per_page or self.page_size, 1, self.max_page_size)
        query = SearchQuery(
            text=text, scope=scope, limit=per_page, offset=(page - 1) * per_page
        )
        if query.is_blank:
            return PlacePage(items=[], page=page, per_page=per_page, total=0)
        total = await self.search_repo.count(query)
        items = await self.search_repo.search(query) if total else []
        return PlacePage(items=items, page=page, per_page=per_page, total=total)

    async def suggest(
        self, text: str, scope: PlaceScope, limit: int | None = None
    ) -> list[str]:
        """Up to limit labels (default 8, clamped to [1, 20]); direct matches first."""
        query = SearchQuery(
            text=text,
            scope=scope,
            limit=clamp(
                self.suggest_default_limit if limit is None else limit,
                1,
                self.suggest_max_limit,
            ),
        )
        if query.is_blank:
            return []
        return await self.search_repo.suggest(query)
