"""Application DTOs (no ORM dependency)."""

from app.application.dtos.place import (
    GeocodeResult,
    PlacePage,
    PlaceResult,
    PlaceWrite,
)
from app.application.dtos.search import PlaceScope, SearchQuery, SuggestionRow
from app.application.dtos.user import UserResult

__all__ = [
    "GeocodeResult",
    "PlacePage",
    "PlaceResult",
    "PlaceScope",
    "PlaceWrite",
    "SearchQuery",
    "SuggestionRow",
    "UserResult",
]
