"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.place_repo import (
    PlaceRepository,
    place_to_result,
)
from app.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "PlaceRepository",
    "UserRepository",
    "place_to_result",
]
