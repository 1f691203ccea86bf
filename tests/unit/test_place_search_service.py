"""Tests for PlaceSearchService (clamping, blank short-circuit) with a fake repository."""

import pytest

from app.application.dtos.search import PlaceScope, SearchQuery
from app.application.use_cases.search import PlaceSearchService, clamp


class _FakeSearchRepo:
    strategy_name = "plain_ordered"

    def __init__(self, total: int = 3) -> None:
        self.total = total
        self.queries: list[tuple[str, SearchQuery]] = []

    async def search(self, query: SearchQuery):
        self.queries.append(("search", query))
        return []

    async def count(self, query: SearchQuery) -> int:
        self.queries.append(("count", query))
        return self.total

    async def suggest(self, query: SearchQuery) -> list[str]:
        self.queries.append(("suggest", query))
        return ["label"]


@pytest.fixture
def repo() -> _FakeSearchRepo:
    return _FakeSearchRepo()


@pytest.fixture
def service(repo: _FakeSearchRepo) -> PlaceSearchService:
    return PlaceSearchService(repo)


def test_clamp() -> None:
    assert clamp(0, 1, 20) == 1
    assert clamp(99, 1, 20) == 20
    assert clamp(5, 1, 20) == 5


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
async def test_blank_text_never_reaches_store(service, repo, text) -> None:
    assert await service.search(text, PlaceScope.all_active()) == []
    assert await service.suggest(text, PlaceScope.all_active()) == []
    page = await service.search_page(text, PlaceScope.all_active())
    assert page.total == 0 and page.items == []
    assert repo.queries == []


async def test_search_trims_text_and_clamps_limit(service, repo) -> None:
    await service.search("  station ", PlaceScope.all_active(), limit=10_000, offset=-5)
    (op, query), = repo.queries
    assert op == "search"
    assert query.text == "station"
    assert query.limit == 100
    assert query.offset == 0


async def test_suggest_limit_defaults_and_clamps(service, repo) -> None:
    await service.suggest("shi", PlaceScope.all_active())
    await service.suggest("shi", PlaceScope.all_active(), limit=0)
    await service.suggest("shi", PlaceScope.all_active(), limit=500)
    assert [q.limit for _, q in repo.queries] == [8, 1, 20]


async def test_search_page_offsets_and_total(service, repo) -> None:
    page = await service.search_page("osaka", PlaceScope.authored_by(3), page=2, per_page=2)
    assert [op for op, _ in repo.queries] == ["count", "search"]
    query = repo.queries[1][1]
    assert query.offset == 2
    assert query.scope.author_id == 3
    assert page.total == 3
    assert page.total_pages == 2


async def test_search_page_skips_search_when_nothing_matches() -> None:
    repo = _FakeSearchRepo(total=0)
    page = await PlaceSearchService(repo).search_page("xyz123", PlaceScope.all_active())
    assert page.total == 0
    assert [op for op, _ in repo.queries] == ["count"]
