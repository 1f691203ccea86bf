"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass

from app.domain.enums import UserRole


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user, etc.). No password."""

    id: int
    email: str
    display_name: str | None
    username: str | None
    avatar_url: str | None
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
