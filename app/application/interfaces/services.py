"""Service interfaces (ports) for the application layer.

Protocols define contracts for infrastructure services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.place import GeocodeResult


# Geocoder interface
class IGeocoder(Protocol):
    """Protocol for forward geocoding (address -> coordinates).

    Implementations return None instead of raising when the provider is not
    configured or the lookup fails; saving a place never depends on it.
    """

    async def geocode(self, address: str) -> GeocodeResult | None:
        """Return coordinates and place_id for address, or None."""


# Token issuer interface
class ITokenIssuer(Protocol):
    """Protocol for access token creation."""

    def create_access_token(self, data: dict[str, Any]) -> str:
        """Return a signed access token carrying the given claims."""
