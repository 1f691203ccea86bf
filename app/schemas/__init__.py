"""Pydantic request/response schemas for the API."""

from app.schemas.auth import (
    MeResponse,
    RegisterRequest,
    RegisterResponse,
    SignInRequest,
    SignInResponse,
    UserProfile,
)
from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.place import (
    OkResponse,
    PlaceCreatedResponse,
    PlaceCreateRequest,
    PlaceDetailResponse,
    PlaceIndexItem,
    PlaceListResponse,
    PlaceUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "MeResponse",
    "OkResponse",
    "PlaceCreateRequest",
    "PlaceCreatedResponse",
    "PlaceDetailResponse",
    "PlaceIndexItem",
    "PlaceListResponse",
    "PlaceUpdateRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "RegisterRequest",
    "RegisterResponse",
    "SignInRequest",
    "SignInResponse",
    "UserProfile",
]
