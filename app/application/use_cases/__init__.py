"""Application use cases: places, search, authentication."""

from app.application.use_cases.auth import AuthService
from app.application.use_cases.places import PlaceService
from app.application.use_cases.search import PlaceSearchService

__all__ = ["AuthService", "PlaceSearchService", "PlaceService"]
