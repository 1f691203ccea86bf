"""Tests for search strategies and SearchQueryBuilder (compiled SQL, no database)."""

from sqlalchemy.dialects import postgresql, sqlite

from app.application.dtos.search import PlaceScope, SearchQuery
from app.infrastructure.persistence.models import Place
from app.infrastructure.persistence.search import (
    FuzzyRankedStrategy,
    PlainOrderedStrategy,
    SearchQueryBuilder,
)
from app.infrastructure.persistence.search.strategies import contains_pattern, escape_like


def _compile(stmt, dialect):
    compiled = stmt.compile(dialect=dialect)
    return str(compiled), list(compiled.params.values())


def test_escape_like_wildcards() -> None:
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"
    assert escape_like("c:\\dir") == "c:\\\\dir"
    assert contains_pattern("50%_off") == "%50\\%\\_off%"


def test_fuzzy_search_uses_ilike_and_similarity_ranking() -> None:
    builder = SearchQueryBuilder(FuzzyRankedStrategy())
    sql, params = _compile(
        builder.build_search(SearchQuery(text="station", limit=10)), postgresql.dialect()
    )
    assert "ILIKE" in sql
    assert "ESCAPE" in sql
    assert "greatest(similarity(" in sql
    assert "ORDER BY greatest(" in sql
    assert "places.created_at DESC, places.id DESC" in sql
    assert "%station%" in params
    assert "station" in params
    assert "OFFSET" not in sql


def test_fuzzy_cached_address_replaces_live_concatenation() -> None:
    live_sql, _ = _compile(
        SearchQueryBuilder(FuzzyRankedStrategy()).build_search(SearchQuery(text="x")),
        postgresql.dialect(),
    )
    cached_sql, _ = _compile(
        SearchQueryBuilder(FuzzyRankedStrategy(use_cached_address=True)).build_search(
            SearchQuery(text="x")
        ),
        postgresql.dialect(),
    )
    assert "full_address_cached" not in live_sql
    assert "coalesce(places.address_line" in live_sql
    assert "full_address_cached" in cached_sql


def test_cached_address_is_not_mapped_on_place() -> None:
    # Inserts and updates must not name a column only the trigram migration adds.
    assert "full_address_cached" not in Place.__table__.c
    insert_sql = str(Place.__table__.insert().compile(dialect=sqlite.dialect()))
    assert "full_address_cached" not in insert_sql


def test_plain_search_lowercases_and_orders_by_recency() -> None:
    builder = SearchQueryBuilder(PlainOrderedStrategy())
    sql, params = _compile(
        builder.build_search(SearchQuery(text="Osaka", limit=5, offset=10)),
        sqlite.dialect(),
    )
    assert "lower(places.name) LIKE" in sql
    assert "similarity" not in sql
    assert "ORDER BY places.created_at DESC, places.id DESC" in sql
    assert "OFFSET" in sql
    assert "%osaka%" in params


def test_query_text_is_always_bound() -> None:
    hostile = "tokyo'; DROP TABLE places; --"
    for strategy, dialect in (
        (FuzzyRankedStrategy(), postgresql.dialect()),
        (PlainOrderedStrategy(), sqlite.dialect()),
    ):
        builder = SearchQueryBuilder(strategy)
        for stmt in (
            builder.build_search(SearchQuery(text=hostile)),
            builder.build_count(SearchQuery(text=hostile)),
            builder.build_suggest(SearchQuery(text=hostile)),
        ):
            sql, _ = _compile(stmt, dialect)
            assert "DROP TABLE" not in sql


def test_scope_filters() -> None:
    builder = SearchQueryBuilder(PlainOrderedStrategy())
    active_sql, _ = _compile(
        builder.build_count(SearchQuery(text="a", scope=PlaceScope.all_active())),
        sqlite.dialect(),
    )
    mine_sql, mine_params = _compile(
        builder.build_count(SearchQuery(text="a", scope=PlaceScope.authored_by(7))),
        sqlite.dialect(),
    )
    trash_sql, _ = _compile(
        builder.build_count(SearchQuery(text="a", scope=PlaceScope.trash())),
        sqlite.dialect(),
    )
    assert "places.deleted_at IS NULL" in active_sql
    assert "places.author_id = ?" in mine_sql
    assert 7 in mine_params
    assert "places.deleted_at IS NOT NULL" in trash_sql


def test_suggest_is_capped_at_candidate_cap() -> None:
    builder = SearchQueryBuilder(PlainOrderedStrategy(), candidate_cap=50)
    sql, params = _compile(
        builder.build_suggest(SearchQuery(text="shibuya", limit=3)), sqlite.dialect()
    )
    assert "AS address" in sql
    assert 50 in params
    assert 3 not in params


def test_strategy_names() -> None:
    assert PlainOrderedStrategy().name == "plain_ordered"
    assert FuzzyRankedStrategy().name == "fuzzy_ranked"
