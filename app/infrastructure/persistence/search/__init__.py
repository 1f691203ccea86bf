"""Place text search: capability probe, strategies, query builder, repository."""

from app.infrastructure.persistence.search.capabilities import (
    StoreCapabilities,
    probe_capabilities,
    select_strategy,
)
from app.infrastructure.persistence.search.place_search_repo import (
    PlaceSearchRepository,
)
from app.infrastructure.persistence.search.query_builder import (
    SearchQueryBuilder,
    rank_suggestions,
)
from app.infrastructure.persistence.search.strategies import (
    FuzzyRankedStrategy,
    PlainOrderedStrategy,
    SearchStrategy,
    escape_like,
)

__all__ = [
    "FuzzyRankedStrategy",
    "PlaceSearchRepository",
    "PlainOrderedStrategy",
    "SearchQueryBuilder",
    "SearchStrategy",
    "StoreCapabilities",
    "escape_like",
    "probe_capabilities",
    "rank_suggestions",
    "select_strategy",
]
