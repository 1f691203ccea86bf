"""Authentication use cases: register and sign in (email and password)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.user import UserResult
from app.domain.exceptions import (
    AuthenticationException,
    DuplicateEmailException,
    UserAlreadyExistsException,
)
from app.domain.value_objects.core import normalize_text

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IUserRepository
    from app.application.interfaces.services import ITokenIssuer

logger = logging.getLogger(__name__)


class AuthService:
    """Registers users and issues access tokens for valid credentials."""

    def __init__(self, user_repo: IUserRepository, token_issuer: ITokenIssuer) -> None:
        self.user_repo = user_repo
        self.token_issuer = token_issuer

    async def register(
        self,
        email: str,
        password: str,
        display_name: str | None = None,
        username: str | None = None,
    ) -> UserResult:
        """Create a user. Email and username must be unused (case-insensitive)."""
        email = email.strip().lower()
        username = normalize_text(username)
        if await self.user_repo.email_exists(email):
            raise DuplicateEmailException()
        if username and await self.user_repo.username_exists(username):
            raise UserAlreadyExistsException()
        return await self.user_repo.create_user(
            email=email,
            password=password,
            display_name=normalize_text(display_name),
            username=username,
        )

    async def sign_in(self, email: str, password: str) -> tuple[UserResult, str]:
        """Return the user and a fresh access token; raise on bad credentials."""
        user = await self.user_repo.authenticate(email, password)
        if user is None:
            logger.info("Sign-in rejected")
            raise AuthenticationException("Invalid email or password")
        await self.user_repo.touch_last_seen(user.id)
        token = self.token_issuer.create_access_token({"sub": str(user.id)})
        return user, token
