"""Tests for PlaceSearchRepository error handling (session stub, no database)."""

import pytest
from sqlalchemy.exc import OperationalError

from app.application.dtos.search import SearchQuery
from app.domain.exceptions import SearchUnavailableException
from app.infrastructure.persistence.search import (
    PlaceSearchRepository,
    PlainOrderedStrategy,
    SearchQueryBuilder,
)


class _FailingSession:
    """Session whose execute always fails like a lost connection."""

    def __init__(self) -> None:
        self.calls = 0

    async def execute(self, stmt):
        self.calls += 1
        raise OperationalError("SELECT ...", {}, ConnectionError("server closed the connection"))


@pytest.fixture
def session() -> _FailingSession:
    return _FailingSession()


@pytest.fixture
def repo(session: _FailingSession) -> PlaceSearchRepository:
    return PlaceSearchRepository(session, SearchQueryBuilder(PlainOrderedStrategy()))


@pytest.mark.parametrize("operation", ["search", "count", "suggest"])
async def test_storage_error_becomes_search_unavailable(
    repo: PlaceSearchRepository, session: _FailingSession, operation: str
) -> None:
    with pytest.raises(SearchUnavailableException) as exc_info:
        await getattr(repo, operation)(SearchQuery(text="tokyo"))

    exc = exc_info.value
    assert exc.error_code == "SEARCH_UNAVAILABLE"
    assert exc.details == {"operation": operation}
    assert isinstance(exc.__cause__, OperationalError)
    assert session.calls == 1
