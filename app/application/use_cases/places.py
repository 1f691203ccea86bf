"""Place operations: list, get, create, update, soft delete, restore."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from app.application.dtos.place import PlacePage, PlaceResult, PlaceWrite
from app.application.dtos.search import PlaceScope
from app.application.services.geocoding_policy import GeocodingPolicy
from app.application.services.place_authorization import PlaceAuthorizationService
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects.core import ADDRESS_FIELDS, Address, Coordinates, normalize_text
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.dtos.user import UserResult
    from app.application.interfaces.repositories import IPlaceRepository
    from app.application.interfaces.services import IGeocoder
    from app.application.use_cases.search import PlaceSearchService

logger = logging.getLogger(__name__)

STRING_FIELDS = (
    "name",
    "description",
    *ADDRESS_FIELDS,
    "google_place_id",
    "phone",
    "website_url",
    "status",
)


def normalize_values(values: dict[str, Any]) -> dict[str, Any]:
    """Strip strings (blank becomes None). Other values pass through."""
    out = dict(values)
    for key in STRING_FIELDS:
        if key in out and (out[key] is None or isinstance(out[key], str)):
            out[key] = normalize_text(out[key])
    return out


def _validate(values: dict[str, Any]) -> None:
    if "name" in values and not values["name"]:
        raise ValidationException("name can't be blank", field="name")
    lat, lng = values.get("latitude"), values.get("longitude")
    if lat is not None or lng is not None:
        Coordinates(
            latitude=lat if lat is not None else 0.0,
            longitude=lng if lng is not None else 0.0,
        )


class PlaceService:
    """Place management on top of IPlaceRepository and PlaceSearchService.

    Scopes are picked here: public lists see active places, "mine" narrows to
    the author, the trash is admin-only. Geocoding is best effort: a failed
    lookup never fails a save.
    """

    def __init__(
        self,
        place_repo: IPlaceRepository,
        search_service: PlaceSearchService,
        authorization: PlaceAuthorizationService | None = None,
        geocoder: IGeocoder | None = None,
        geocoding_policy: GeocodingPolicy | None = None,
        *,
        geocode_provider: str = "google",
        geocode_terms_version: str | None = None,
    ) -> None:
        self.place_repo = place_repo
        self.search_service = search_service
        self.authorization = authorization or PlaceAuthorizationService()
        self.geocoder = geocoder
        self.geocoding_policy = geocoding_policy or GeocodingPolicy()
        self.geocode_provider = geocode_provider
        self.geocode_terms_version = geocode_terms_version

    async def _list(
        self, scope: PlaceScope, page: int, per_page: int | None, q: str | None
    ) -> PlacePage:
        if q and q.strip():
            return await self.search_service.search_page(q, scope, page, per_page)
        page = max(1, page)
        per_page = max(
            1,
            min(per_page or self.search_service.page_size, self.search_service.max_page_size),
        )
        total = await self.place_repo.count_for_scope(scope)
        items = (
            await self.place_repo.list_for_scope(
                scope, limit=per_page, offset=(page - 1) * per_page
            )
            if total
            else []
        )
        return PlacePage(items=items, page=page, per_page=per_page, total=total)

    async def list_places(
        self, page: int = 1, per_page: int | None = None, q: str | None = None
    ) -> PlacePage:
        """Active places, newest first, or search results when q is given."""
        return await self._list(PlaceScope.all_active(), page, per_page, q)

    async def list_mine(
        self,
        user: UserResult,
        page: int = 1,
        per_page: int | None = None,
        q: str | None = None,
    ) -> PlacePage:
        return await self._list(PlaceScope.authored_by(user.id), page, per_page, q)

    async def list_deleted(
        self,
        user: UserResult,
        page: int = 1,
        per_page: int | None = None,
        q: str | None = None,
    ) -> PlacePage:
        """Soft-deleted places (admin only)."""
        self.authorization.require_admin(user, "list_deleted")
        return await self._list(PlaceScope.trash(), page, per_page, q)

    async def suggest(self, q: str, limit: int | None = None) -> list[str]:
        return await self.search_service.suggest(q, PlaceScope.all_active(), limit)

    async def suggest_mine(
        self, user: UserResult, q: str, limit: int | None = None
    ) -> list[str]:
        return await self.search_service.suggest(q, PlaceScope.authored_by(user.id), limit)

    async def get_place(self, place_id: int) -> PlaceResult:
        """Active place by id; else raise ResourceNotFoundException."""
        place = await self.place_repo.get_by_id(place_id)
        if place is None:
            raise ResourceNotFoundException("place", place_id)
        return place

    async def create_place(self, user: UserResult, data: PlaceWrite) -> PlaceResult:
        """Create a place authored by user; geocodes the address when needed."""
        values = normalize_values(data.values)
        if not values.get("name"):
            raise ValidationException("name can't be blank", field="name")
        _validate(values)
        address = Address(**{k: values.get(k) for k in ADDRESS_FIELDS})
        await self._geocode_into(
            values,
            address=address,
            address_changed=not address.is_blank(),
            latitude=values.get("latitude"),
            longitude=values.get("longitude"),
            geocoded_at=None,
        )
        return await self.place_repo.create_place(user.id, values)

    async def update_place(
        self, user: UserResult, place_id: int, data: PlaceWrite
    ) -> PlaceResult:
        """Partial update (owner or admin); re-geocodes when the address changed."""
        place = await self.get_place(place_id)
        self.authorization.require_modify(user, place, "update")
        values = normalize_values(data.values)
        _validate(values)
        address = replace(
            place.address, **{k: values[k] for k in ADDRESS_FIELDS if k in values}
        )
        await self._geocode_into(
            values,
            address=address,
            address_changed=address.differs_from(place.address),
            latitude=values.get("latitude", place.latitude),
            longitude=values.get("longitude", place.longitude),
            geocoded_at=place.geocoded_at,
        )
        if not values:
            return place
        return await self.place_repo.update_place(place_id, values)

    async def delete_place(self, user: UserResult, place_id: int) -> None:
        """Soft delete (owner or admin)."""
        place = await self.get_place(place_id)
        self.authorization.require_modify(user, place, "delete")
        await self.place_repo.set_deleted_at(place_id, utc_now())

    async def restore_place(self, user: UserResult, place_id: int) -> PlaceResult:
        """Clear deleted_at (owner or admin). Restoring an active place is a no-op."""
        place = await self.place_repo.get_by_id(place_id, PlaceScope.with_deleted())
        if place is None:
            raise ResourceNotFoundException("place", place_id)
        self.authorization.require_modify(user, place, "restore")
        if place.is_soft_deleted:
            await self.place_repo.set_deleted_at(place_id, None)
        return replace(place, deleted_at=None)

    async def _geocode_into(
        self,
        values: dict[str, Any],
        *,
        address: Address,
        address_changed: bool,
        latitude: float | None,
        longitude: float | None,
        geocoded_at: Any,
    ) -> None:
        """Write geocode results into values when the policy asks for it."""
        if self.geocoder is None:
            return
        now = utc_now()
        if not self.geocoding_policy.should_geocode(
            address.full_address, address_changed, latitude, longitude, geocoded_at, now
        ):
            return
        result = await self.geocoder.geocode(address.full_address)
        if result is None:
            return
        values.update(
            latitude=result.lat,
            longitude=result.lng,
            geocoded_at=now,
            geocode_provider=self.geocode_provider,
            geocode_permitted=True,
            geocode_terms_version=self.geocode_terms_version,
        )
        if result.place_id:
            values["google_place_id"] = result.place_id
