"""When a place needs (re-)geocoding.

Stored provider results may be reused for a limited time only, so
coordinates older than max_age are refreshed on the next save.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from app.shared.utils.datetime import ensure_utc

DEFAULT_MAX_AGE = timedelta(days=30)


def should_geocode(
    full_address: str,
    address_changed: bool,
    latitude: float | None,
    longitude: float | None,
    geocoded_at: datetime | None,
    now: datetime,
    max_age: timedelta = DEFAULT_MAX_AGE,
) -> bool:
    """True iff there is an address and coordinates are missing, stale, or outdated."""
    if not full_address.strip():
        return False
    if latitude is None or longitude is None:
        return True
    if address_changed:
        return True
    geocoded_at = ensure_utc(geocoded_at)
    return geocoded_at is not None and ensure_utc(now) >= geocoded_at + max_age


class GeocodingPolicy:
    """should_geocode with a configured max_age."""

    def __init__(self, max_age: timedelta = DEFAULT_MAX_AGE) -> None:
        self.max_age = max_age

    @classmethod
    def from_days(cls, days: int) -> GeocodingPolicy:
        return cls(timedelta(days=days))

    def should_geocode(
        self,
        full_address: str,
        address_changed: bool,
        latitude: float | None,
        longitude: float | None,
        geocoded_at: datetime | None,
        now: datetime,
    ) -> bool:
        return should_geocode(
            full_address,
            address_changed,
            latitude,
            longitude,
            geocoded_at,
            now,
            self.max_age,
        )
