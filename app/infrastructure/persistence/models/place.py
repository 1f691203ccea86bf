"""Place ORM model. Shared location records with geocoding metadata and soft delete."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.value_objects.core import ADDRESS_FIELDS
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    SoftDeleteMixin,
    TimestampMixin,
)

# Generated column expression for full_address_cached (trigram migration,
# PostgreSQL only). Not mapped: stores built without it must still accept writes.
FULL_ADDRESS_SQL = " || ' ' || ".join(f"COALESCE({name}, '')" for name in ADDRESS_FIELDS)


class Place(IntegerIdMixin, TimestampMixin, SoftDeleteMixin, Base):
    """Place entity. Table: places. Owned by a user (author_id)."""

    __tablename__ = "places"
    __table_args__ = (
        CheckConstraint(
            "latitude IS NULL OR (latitude >= -90 AND latitude <= 90)",
            name="ck_places_latitude_range",
        ),
        CheckConstraint(
            "longitude IS NULL OR (longitude >= -180 AND longitude <= 180)",
            name="ck_places_longitude_range",
        ),
    )

    author_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    address_line: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    state: Mapped[str | None] = mapped_column(String, nullable=True)
    postal_code: Mapped[str | None] = mapped_column(String, nullable=True)
    country: Mapped[str | None] = mapped_column(String, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    google_place_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    phone: Mapped[str | None] = mapped_column(String(100), nullable=True)
    website_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    status: Mapped[str | None] = mapped_column(String, nullable=True)

    geocoded_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    geocode_provider: Mapped[str | None] = mapped_column(String, nullable=True)
    geocode_permitted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    geocode_terms_version: Mapped[str | None] = mapped_column(String, nullable=True)
