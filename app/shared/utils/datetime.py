"""UTC datetime helpers. Stored and compared datetimes are timezone-aware UTC."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize dt to aware UTC.

    Naive values are taken to be UTC (SQLite returns timestamps without an
    offset). Use at persistence boundaries before comparing datetimes.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
