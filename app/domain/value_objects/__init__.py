"""Domain value objects and shared value types."""

from app.domain.value_objects.core import (
    ADDRESS_FIELDS,
    Address,
    Coordinates,
    normalize_text,
)

__all__ = [
    "ADDRESS_FIELDS",
    "Address",
    "Coordinates",
    "normalize_text",
]
