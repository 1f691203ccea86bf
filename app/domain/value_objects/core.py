"""Domain value objects for the Places application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass, fields

from app.domain.exceptions import ValidationException

# Order matters: it is the concatenation order of the searchable address
# text and of the full_address_cached generated column.
ADDRESS_FIELDS: tuple[str, ...] = (
    "address_line",
    "city",
    "state",
    "postal_code",
    "country",
)


def normalize_text(value: str | None) -> str | None:
    """Strip surrounding whitespace; blank strings become None."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True)
class Address:
    """Postal address of a place. Every component is optional."""

    address_line: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None

    def parts(self) -> tuple[str | None, ...]:
        """Components in ADDRESS_FIELDS order."""
        return tuple(getattr(self, name) for name in ADDRESS_FIELDS)

    @property
    def full_address(self) -> str:
        """Non-blank components joined by single spaces (geocoding and display)."""
        return " ".join(p.strip() for p in self.parts() if p and p.strip())

    @property
    def search_text(self) -> str:
        """Components joined by single spaces with absent ones rendered empty.

        Equal to the full_address_cached generated column, so rows rank the
        same whether the store has the column or concatenates live.
        """
        return " ".join(p or "" for p in self.parts())

    def is_blank(self) -> bool:
        return not self.full_address

    def differs_from(self, other: "Address") -> bool:
        """True if any component changed (compared after normalization)."""
        return any(
            normalize_text(getattr(self, f.name)) != normalize_text(getattr(other, f.name))
            for f in fields(self)
        )


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair in degrees. Validates WGS84 ranges."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValidationException(
                "latitude must be between -90 and 90", field="latitude"
            )
        if not -180 <= self.longitude <= 180:
            raise ValidationException(
                "longitude must be between -180 and 180", field="longitude"
            )
