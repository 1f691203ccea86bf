"""Application services: place authorization and geocoding policy."""

from app.application.services.geocoding_policy import GeocodingPolicy, should_geocode
from app.application.services.place_authorization import PlaceAuthorizationService

__all__ = [
    "GeocodingPolicy",
    "PlaceAuthorizationService",
    "should_geocode",
]
