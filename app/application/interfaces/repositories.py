"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.place import PlaceResult
    from app.application.dtos.search import PlaceScope, SearchQuery
    from app.application.dtos.user import UserResult


# Place repository interface
class IPlaceRepository(Protocol):
    """Protocol for place persistence (CRUD and soft delete)."""

    async def get_by_id(
        self, place_id: int, scope: PlaceScope | None = None
    ) -> PlaceResult | None:
        """Return the place if it is within scope (default: active places only)."""

    async def list_for_scope(
        self, scope: PlaceScope, *, limit: int, offset: int = 0
    ) -> list[PlaceResult]:
        """Return places in scope, newest first."""

    async def count_for_scope(self, scope: PlaceScope) -> int:
        """Return the number of places in scope."""

    async def create_place(self, author_id: int, values: dict[str, Any]) -> PlaceResult:
        """Insert a place owned by author_id."""

    async def update_place(self, place_id: int, values: dict[str, Any]) -> PlaceResult:
        """Write the given column values to an existing place."""

    async def set_deleted_at(self, place_id: int, deleted_at: datetime | None) -> None:
        """Soft delete (timestamp) or restore (None) a place."""


# Place search interface
class IPlaceSearchRepository(Protocol):
    """Protocol for text search over a place scope (fuzzy or plain, per store)."""

    @property
    def strategy_name(self) -> str:
        """Name of the active strategy (e.g. 'fuzzy_ranked', 'plain_ordered')."""

    async def search(self, query: SearchQuery) -> list[PlaceResult]:
        """Return matching places, ranked per strategy, limited and offset."""

    async def count(self, query: SearchQuery) -> int:
        """Return the number of places in scope matching the query text."""

    async def suggest(self, query: SearchQuery) -> list[str]:
        """Return deduplicated labels, direct matches first, at most query.limit."""


# User repository interface
class IUserRepository(Protocol):
    """Protocol for user persistence."""

    async def get_by_id(self, user_id: int) -> UserResult | None:
        """Return an active (not soft-deleted) user by id."""

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Return the active user with this email and password, or None."""

    async def email_exists(self, email: str) -> bool:
        """Return True if any user has this email (case-insensitive)."""

    async def username_exists(self, username: str) -> bool:
        """Return True if any user has this username (case-insensitive)."""

    async def create_user(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        username: str | None = None,
    ) -> UserResult:
        """Insert a user with the default role; the password is hashed here."""

    async def touch_last_seen(self, user_id: int) -> None:
        """Set last_seen_at to now."""
