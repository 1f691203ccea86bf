"""Application layer: DTOs, interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP). Infrastructure
implements the interfaces (repositories, geocoder, token issuer).
"""

from app.application.interfaces import (
    IGeocoder,
    IPlaceRepository,
    IPlaceSearchRepository,
    ITokenIssuer,
    IUserRepository,
)
from app.application.services import GeocodingPolicy, PlaceAuthorizationService
from app.application.use_cases import AuthService, PlaceSearchService, PlaceService

__all__ = [
    "AuthService",
    "GeocodingPolicy",
    "IGeocoder",
    "IPlaceRepository",
    "IPlaceSearchRepository",
    "ITokenIssuer",
    "IUserRepository",
    "PlaceAuthorizationService",
    "PlaceSearchService",
    "PlaceService",
]
