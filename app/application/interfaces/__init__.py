"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import (
    IPlaceRepository,
    IPlaceSearchRepository,
    IUserRepository,
)
from app.application.interfaces.services import (
    IGeocoder,
    ITokenIssuer,
)

__all__ = [
    "IGeocoder",
    "IPlaceRepository",
    "IPlaceSearchRepository",
    "ITokenIssuer",
    "IUserRepository",
]
