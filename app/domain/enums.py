"""Domain enumerations for the Places application.

Enums represent fixed sets of domain values (user roles, soft-delete visibility).
"""

from enum import Enum


class UserRole(str, Enum):
    """User role. Admins may modify and restore any place; users only their own."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings."""
        return [role.value for role in cls]


class PlaceVisibility(str, Enum):
    """Soft-delete visibility of a place scope.

    ACTIVE hides soft-deleted places (default), WITH_DELETED includes them,
    ONLY_DELETED returns soft-deleted places only (trash).
    """

    ACTIVE = "active"
    WITH_DELETED = "with_deleted"
    ONLY_DELETED = "only_deleted"
