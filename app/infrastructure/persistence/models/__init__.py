"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.place import Place
from app.infrastructure.persistence.models.user import User

__all__ = [
    "IntegerIdMixin",
    "Place",
    "SoftDeleteMixin",
    "TimestampMixin",
    "User",
]
