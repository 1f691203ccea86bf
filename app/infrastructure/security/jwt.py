"""JWT access tokens (HS256) for API authentication.

The sub claim carries the user id as a string. Tokens are stateless: sign-out
does not revoke them, they simply expire.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import Settings, get_settings


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    settings: Settings | None = None,
) -> str:
    """Encode data as a signed JWT with an exp claim.

    Args:
        data: Claims to encode; must include sub.
        expires_delta: Optional TTL; defaults to access_token_expire_minutes.
        settings: Optional settings; defaults to get_settings().

    Returns:
        Encoded JWT string.
    """
    settings = settings or get_settings()
    to_encode = data.copy()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = datetime.now(UTC) + ttl
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    """Decode a JWT and return its payload.

    Raises:
        ValueError: If the token is invalid, expired, or lacks exp/sub.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload


def user_id_from_token(token: str, settings: Settings | None = None) -> int:
    """Return the user id in sub. Raises ValueError if it is not an integer."""
    sub = verify_token(token, settings)["sub"]
    try:
        return int(sub)
    except (TypeError, ValueError) as e:
        raise ValueError("Invalid token subject") from e


class JwtTokenIssuer:
    """ITokenIssuer backed by create_access_token."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    def create_access_token(self, data: dict[str, Any]) -> str:
        return create_access_token(data, settings=self.settings)
