"""WHERE clauses for a PlaceScope (soft-delete visibility and author)."""

from sqlalchemy import ColumnElement

from app.application.dtos.search import PlaceScope
from app.domain.enums import PlaceVisibility
from app.infrastructure.persistence.models.place import Place


def scope_filters(scope: PlaceScope) -> list[ColumnElement[bool]]:
    """Clauses selecting exactly the places of scope."""
    filters: list[ColumnElement[bool]] = []
    if scope.visibility == PlaceVisibility.ACTIVE:
        filters.append(Place.deleted_at.is_(None))
    elif scope.visibility == PlaceVisibility.ONLY_DELETED:
        filters.append(Place.deleted_at.is_not(None))
    if scope.author_id is not None:
        filters.append(Place.author_id == scope.author_id)
    return filters
