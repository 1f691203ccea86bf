"""User repository with password helpers. Interface methods return application DTOs."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.domain.enums import UserRole
from app.domain.exceptions import DuplicateEmailException
from app.infrastructure.persistence.models.user import User
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.security.password import get_password_hash, verify_password
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# Lazy dummy hash for constant-time comparison when the email is unknown.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison; computed once in a thread."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to UserResult (no password)."""
    return UserResult(
        id=u.id,
        email=u.email,
        display_name=u.display_name,
        username=u.username,
        avatar_url=u.avatar_url,
        role=UserRole(u.role),
    )


class UserRepository(BaseRepository[User]):
    """User persistence. authenticate, create_user, uniqueness checks."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def _get_active_by_email(self, email: str) -> User | None:
        result = await self.db.execute(
            select(User).where(
                func.lower(User.email) == email.strip().lower(),
                User.deleted_at.is_(None),
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: int) -> UserResult | None:
        result = await self.db.execute(
            select(User).where(User.id == user_id, User.deleted_at.is_(None))
        )
        user = result.scalar_one_or_none()
        return _user_to_result(user) if user else None

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        user = await self._get_active_by_email(email)
        if user is None or not user.hashed_password:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            return None
        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            return None
        return _user_to_result(user)

    async def email_exists(self, email: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(func.lower(User.email) == email.strip().lower())
        )
        return result.first() is not None

    async def username_exists(self, username: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(func.lower(User.username) == username.strip().lower())
        )
        return result.first() is not None

    async def create_user(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        username: str | None = None,
    ) -> UserResult:
        """Create a user; raise DuplicateEmailException on unique constraint violation."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        user = User(
            email=email.strip().lower(),
            hashed_password=hashed,
            display_name=display_name,
            username=username,
            role=UserRole.USER.value,
        )
        try:
            created = await self.add(user)
        except IntegrityError as e:
            raise DuplicateEmailException() from e
        logger.info("User registered: id=%s", created.id)
        return _user_to_result(created)

    async def touch_last_seen(self, user_id: int) -> None:
        user = await self.get_model(user_id)
        if user is None:
            return
        user.last_seen_at = utc_now()
        await self.save(user)

    async def set_role(self, user_id: int, role: UserRole) -> UserResult | None:
        """Change a user's role (admin tooling; not exposed over HTTP)."""
        user = await self.get_model(user_id)
        if user is None:
            return None
        user.role = role.value
        await self.save(user)
        logger.info("User role changed: id=%s role=%s", user_id, role.value)
        return _user_to_result(user)

    async def get_by_email(self, email: str) -> UserResult | None:
        user = await self._get_active_by_email(email)
        return _user_to_result(user) if user else None
