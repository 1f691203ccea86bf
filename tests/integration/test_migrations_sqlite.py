"""Alembic migrations on SQLite: the plain store `alembic upgrade head` builds."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from app.application.dtos.search import SearchQuery
from app.infrastructure.persistence.repositories import PlaceRepository, UserRepository
from app.infrastructure.persistence.search import (
    PlaceSearchRepository,
    PlainOrderedStrategy,
    SearchQueryBuilder,
    probe_capabilities,
)


@pytest.fixture
async def migrated_engine(migrate):
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await migrate(conn)
    yield engine
    await engine.dispose()


async def test_upgrade_builds_plain_store(migrated_engine) -> None:
    async with migrated_engine.connect() as conn:
        tables = await conn.run_sync(lambda c: set(inspect(c).get_table_names()))
        columns = await conn.run_sync(
            lambda c: {col["name"] for col in inspect(c).get_columns("places")}
        )
        capabilities = await probe_capabilities(conn)

    assert {"users", "places", "alembic_version"} <= tables
    assert "full_address_cached" not in columns
    assert not capabilities.supports_similarity


async def test_places_are_writable_on_migrated_store(migrated_engine) -> None:
    async with AsyncSession(migrated_engine, expire_on_commit=False) as session:
        async with session.begin():
            author = await UserRepository(session).create_user(
                email="migrated@example.com", password="password123"
            )
            places = PlaceRepository(session)
            created = await places.create_place(
                author.id, {"name": "Tokyo Tower", "city": "Tokyo"}
            )
            updated = await places.update_place(
                created.id, {"address_line": "4-2-8 Shibakoen"}
            )

        assert updated.id == created.id
        assert updated.name == "Tokyo Tower"
        assert updated.address.address_line == "4-2-8 Shibakoen"

        repo = PlaceSearchRepository(session, SearchQueryBuilder(PlainOrderedStrategy()))
        results = await repo.search(SearchQuery(text="shibakoen"))
    assert [p.id for p in results] == [created.id]
