"""Place repository. Interface methods return application DTOs."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.place import PlaceResult
from app.application.dtos.search import PlaceScope
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.core import ADDRESS_FIELDS, Address
from app.infrastructure.persistence.models.place import Place
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.scopes import scope_filters

logger = logging.getLogger(__name__)

# Columns a PlaceWrite may set; anything else is ignored.
WRITABLE_COLUMNS = frozenset(
    {
        "name",
        "description",
        *ADDRESS_FIELDS,
        "latitude",
        "longitude",
        "google_place_id",
        "phone",
        "website_url",
        "status",
        "geocoded_at",
        "geocode_provider",
        "geocode_permitted",
        "geocode_terms_version",
    }
)


def place_to_result(p: Place) -> PlaceResult:
    """Map ORM Place to PlaceResult."""
    return PlaceResult(
        id=p.id,
        author_id=p.author_id,
        name=p.name,
        description=p.description,
        address=Address(**{name: getattr(p, name) for name in ADDRESS_FIELDS}),
        latitude=p.latitude,
        longitude=p.longitude,
        google_place_id=p.google_place_id,
        phone=p.phone,
        website_url=p.website_url,
        status=p.status,
        geocoded_at=p.geocoded_at,
        deleted_at=p.deleted_at,
        created_at=p.created_at,
    )


class PlaceRepository(BaseRepository[Place]):
    """Place persistence: scoped reads, create, partial update, soft delete."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Place)

    async def _get_in_scope(self, place_id: int, scope: PlaceScope) -> Place | None:
        result = await self.db.execute(
            select(Place).where(Place.id == place_id, *scope_filters(scope))
        )
        return result.scalar_one_or_none()

    async def get_by_id(
        self, place_id: int, scope: PlaceScope | None = None
    ) -> PlaceResult | None:
        place = await self._get_in_scope(place_id, scope or PlaceScope.all_active())
        return place_to_result(place) if place else None

    async def list_for_scope(
        self, scope: PlaceScope, *, limit: int, offset: int = 0
    ) -> list[PlaceResult]:
        stmt = (
            select(Place)
            .where(*scope_filters(scope))
            .order_by(Place.created_at.desc(), Place.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [place_to_result(p) for p in result.scalars().all()]

    async def count_for_scope(self, scope: PlaceScope) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Place).where(*scope_filters(scope))
        )
        return int(result.scalar_one())

    async def create_place(self, author_id: int, values: dict[str, Any]) -> PlaceResult:
        place = Place(
            author_id=author_id,
            **{k: v for k, v in values.items() if k in WRITABLE_COLUMNS},
        )
        created = await self.add(place)
        logger.info("Place created: id=%s author_id=%s", created.id, author_id)
        return place_to_result(created)

    async def update_place(self, place_id: int, values: dict[str, Any]) -> PlaceResult:
        """Apply values to a place (soft-deleted included). Raises if missing."""
        place = await self._get_in_scope(place_id, PlaceScope.with_deleted())
        if place is None:
            raise ResourceNotFoundException("place", place_id)
        for key, value in values.items():
            if key in WRITABLE_COLUMNS:
                setattr(place, key, value)
        return place_to_result(await self.save(place))

    async def set_deleted_at(self, place_id: int, deleted_at: datetime | None) -> None:
        place = await self._get_in_scope(place_id, PlaceScope.with_deleted())
        if place is None:
            raise ResourceNotFoundException("place", place_id)
        place.deleted_at = deleted_at
        await self.save(place)
        logger.info(
            "Place %s: id=%s", "deleted" if deleted_at else "restored", place_id
        )
