"""Pytest configuration and fixtures for places-api.

HTTP tests run against app.main:app over ASGI with an in-memory SQLite
store (plain ordered search). Each test gets a fresh schema; the engine is
disposed afterwards, which drops the in-memory database.

Set TEST_POSTGRES_URL to also run tests marked requires_db against a real
PostgreSQL with pg_trgm (fuzzy ranked search).
"""

import os
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ.pop("GOOGLE_MAPS_API_KEY", None)
os.environ.pop("GOOGLE_MAPS_GEOCODING_KEY", None)

import pytest  # noqa: E402
from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncConnection  # noqa: E402

from app.application.dtos.user import UserResult  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.domain.enums import UserRole  # noqa: E402
from app.infrastructure.persistence import database  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402, F401
from app.infrastructure.persistence.repositories import UserRepository  # noqa: E402
from app.infrastructure.security.jwt import JwtTokenIssuer  # noqa: E402

get_settings.cache_clear()

from app.main import app  # noqa: E402

TEST_PASSWORD = "password123"
MIGRATIONS_DIR = (
    Path(__file__).resolve().parents[1] / "app" / "infrastructure" / "persistence" / "migrations"
)


@pytest.fixture(autouse=True)
async def fresh_database():
    """Create all tables before each test; dispose the engine after."""
    engine = database.get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    app.state.search_capabilities = None
    limiter.reset()
    yield
    await database.dispose_engine()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def create_user(
    email: str,
    *,
    role: UserRole = UserRole.USER,
    username: str | None = None,
    password: str = TEST_PASSWORD,
) -> UserResult:
    """Insert a user directly (bypasses the rate-limited register endpoint)."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            repo = UserRepository(session)
            user = await repo.create_user(email=email, password=password, username=username)
            if role is not UserRole.USER:
                user = await repo.set_role(user.id, role)
    assert user is not None
    return user


def auth_headers_for(user: UserResult) -> dict[str, str]:
    token = JwtTokenIssuer(get_settings()).create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def user() -> UserResult:
    return await create_user("alice@example.com", username="alice")


@pytest.fixture
async def other_user() -> UserResult:
    return await create_user("bob@example.com", username="bob")


@pytest.fixture
async def admin_user() -> UserResult:
    return await create_user("admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
def auth_headers(user: UserResult) -> dict[str, str]:
    return auth_headers_for(user)


@pytest.fixture
def other_headers(other_user: UserResult) -> dict[str, str]:
    return auth_headers_for(other_user)


@pytest.fixture
def admin_headers(admin_user: UserResult) -> dict[str, str]:
    return auth_headers_for(admin_user)


@pytest.fixture
def make_place(client: AsyncClient, auth_headers: dict[str, str]):
    """Create a place through the API as the default user; returns its id."""

    async def _make(headers: dict[str, str] | None = None, **fields) -> int:
        response = await client.post(
            "/api/v1/places", json=fields, headers=headers or auth_headers
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]

    return _make


@pytest.fixture
def user_factory():
    """create_user as a fixture, for tests that need extra accounts."""
    return create_user


@pytest.fixture
def headers_for():
    return auth_headers_for


async def upgrade_to_head(conn: AsyncConnection) -> None:
    """Run the Alembic migrations to head on an open connection."""

    def _upgrade(sync_conn) -> None:
        cfg = Config()
        cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
        cfg.attributes["connection"] = sync_conn
        command.upgrade(cfg, "head")

    await conn.run_sync(_upgrade)


@pytest.fixture
def migrate():
    return upgrade_to_head
