"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import PlaceVisibility, UserRole
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    PlacesException,
    ResourceNotFoundException,
    SearchUnavailableException,
    ValidationException,
)
from app.domain.value_objects import Address, Coordinates

__all__ = [
    # Enums
    "PlaceVisibility",
    "UserRole",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "PlacesException",
    "ResourceNotFoundException",
    "SearchUnavailableException",
    "ValidationException",
    # Value objects
    "Address",
    "Coordinates",
]
