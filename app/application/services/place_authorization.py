"""Place authorization: owner-or-admin rule for modifying places."""

from __future__ import annotations

from app.application.dtos.place import PlaceResult
from app.application.dtos.user import UserResult
from app.domain.exceptions import AuthorizationException


class PlaceAuthorizationService:
    """Decides who may modify a place. The author and admins may; nobody else."""

    def can_modify(self, user: UserResult, place: PlaceResult) -> bool:
        return user.is_admin or (
            place.author_id is not None and place.author_id == user.id
        )

    def require_modify(self, user: UserResult, place: PlaceResult, action: str) -> None:
        """Raise AuthorizationException unless user may perform action on place."""
        if not self.can_modify(user, place):
            raise AuthorizationException(resource="place", action=action)

    def require_admin(self, user: UserResult, action: str) -> None:
        if not user.is_admin:
            raise AuthorizationException(resource="place", action=action)
