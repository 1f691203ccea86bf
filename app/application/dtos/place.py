"""DTOs for place use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.value_objects.core import Address


@dataclass(frozen=True)
class PlaceResult:
    """Place read-model (result of get_by_id, search, list_for_scope, etc.)."""

    id: int
    author_id: int | None
    name: str
    description: str | None
    address: Address
    latitude: float | None
    longitude: float | None
    google_place_id: str | None
    phone: str | None
    website_url: str | None
    status: str | None
    geocoded_at: datetime | None
    deleted_at: datetime | None
    created_at: datetime

    @property
    def city(self) -> str | None:
        return self.address.city

    @property
    def full_address(self) -> str:
        return self.address.full_address

    @property
    def is_soft_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(frozen=True)
class PlaceWrite:
    """Place attributes for create/update.

    Only keys present in `values` are written (partial update). Keys are
    column names: name, description, address fields, latitude, longitude,
    google_place_id, phone, website_url, status.
    """

    values: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.values


@dataclass(frozen=True)
class GeocodeResult:
    """Result of a forward geocode. Only coordinates and place_id are persisted."""

    lat: float
    lng: float
    place_id: str | None = None
    formatted_address: str | None = None


@dataclass(frozen=True)
class PlacePage:
    """One page of places plus the total row count of the scope."""

    items: list[PlaceResult]
    page: int
    per_page: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.per_page - 1) // self.per_page
