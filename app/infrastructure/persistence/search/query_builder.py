"""SearchQueryBuilder: search, count and suggestion statements for a place scope.

The builder never executes anything; PlaceSearchRepository runs its
statements. rank_suggestions is the in-memory half of suggest.
"""

from collections.abc import Iterable

from sqlalchemy import ColumnElement, Select, func, select

from app.application.dtos.search import SearchQuery, SuggestionRow
from app.infrastructure.persistence.models.place import Place
from app.infrastructure.persistence.scopes import scope_filters
from app.infrastructure.persistence.search.strategies import SearchStrategy

DEFAULT_CANDIDATE_CAP = 50


class SearchQueryBuilder:
    """Builds statements for one strategy."""

    def __init__(
        self, strategy: SearchStrategy, candidate_cap: int = DEFAULT_CANDIDATE_CAP
    ) -> None:
        self.strategy = strategy
        self.candidate_cap = candidate_cap

    def _where(self, query: SearchQuery) -> list[ColumnElement[bool]]:
        return [*scope_filters(query.scope), self.strategy.predicate(query.text)]

    def build_search(self, query: SearchQuery) -> Select:
        """Matching places, ordered per strategy, offset and limited."""
        stmt = (
            select(Place)
            .where(*self._where(query))
            .order_by(*self.strategy.order_by(query.text))
            .limit(query.limit)
        )
        if query.offset:
            stmt = stmt.offset(query.offset)
        return stmt

    def build_count(self, query: SearchQuery) -> Select:
        return select(func.count()).select_from(Place).where(*self._where(query))

    def build_suggest(self, query: SearchQuery) -> Select:
        """Label columns of the first candidate_cap matches, in search order."""
        return (
            select(
                Place.name,
                Place.city,
                self.strategy.address_expression().label("address"),
            )
            .where(*self._where(query))
            .order_by(*self.strategy.order_by(query.text))
            .limit(self.candidate_cap)
        )


def rank_suggestions(rows: Iterable[SuggestionRow], text: str, limit: int) -> list[str]:
    """Flatten, dedupe and order candidate labels.

    Labels containing text (case-insensitive) come first, then the rest;
    both groups keep candidate order. At most limit labels are returned.
    """
    if limit <= 0:
        return []
    needle = text.strip().lower()
    seen: set[str] = set()
    direct: list[str] = []
    indirect: list[str] = []
    for row in rows:
        for label in row.labels():
            if label in seen:
                continue
            seen.add(label)
            if needle and needle in label.lower():
                direct.append(label)
            else:
                indirect.append(label)
    return (direct + indirect)[:limit]
