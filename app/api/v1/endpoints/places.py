"""Places API: list, search, suggestions, detail, create, update, soft delete, restore.

index and show are public; everything else needs a JWT. Modifying a place
requires its author or an admin (enforced in PlaceService).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_current_user,
    get_current_user_for_write,
    get_place_service,
    get_place_service_for_write,
)
from app.application.dtos.place import PlacePage, PlaceWrite
from app.application.dtos.user import UserResult
from app.application.use_cases.places import PlaceService
from app.core.limiter import limit_writes
from app.schemas.place import (
    OkResponse,
    PlaceCreatedResponse,
    PlaceCreateRequest,
    PlaceDetailResponse,
    PlaceIndexItem,
    PlaceListResponse,
    PlaceUpdateRequest,
)

router = APIRouter()

QueryText = Annotated[str | None, Query(max_length=200, description="Search text")]
Page = Annotated[int, Query(ge=1)]
PerPage = Annotated[int | None, Query(ge=1, le=100)]
SuggestText = Annotated[str, Query(max_length=200, description="Partial text")]
SuggestLimit = Annotated[int, Query(ge=1, le=20)]


def _page_response(page: PlacePage) -> PlaceListResponse:
    return PlaceListResponse(
        items=[PlaceIndexItem.model_validate(p) for p in page.items],
        page=page.page,
        per_page=page.per_page,
        total=page.total,
        total_pages=page.total_pages,
    )


@router.get("", response_model=PlaceListResponse)
async def list_places(
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
    q: QueryText = None,
    page: Page = 1,
    per_page: PerPage = None,
):
    """Active places, newest first; with q, substring matches ranked by relevance."""
    return _page_response(await place_svc.list_places(page=page, per_page=per_page, q=q))


@router.get("/suggest", response_model=list[str])
async def suggest_places(
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
    q: SuggestText = "",
    limit: SuggestLimit = 8,
):
    """Autocomplete labels (names, cities, addresses) over all active places."""
    return await place_svc.suggest(q, limit)


@router.get("/mine", response_model=PlaceListResponse)
async def list_my_places(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
    q: QueryText = None,
    page: Page = 1,
    per_page: PerPage = None,
):
    """Places authored by the current user."""
    result = await place_svc.list_mine(current_user, page=page, per_page=per_page, q=q)
    return _page_response(result)


@router.get("/suggest_mine", response_model=list[str])
async def suggest_my_places(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
    q: SuggestText = "",
    limit: SuggestLimit = 8,
):
    """Autocomplete labels over the current user's places."""
    return await place_svc.suggest_mine(current_user, q, limit)


@router.get("/deleted", response_model=PlaceListResponse)
async def list_deleted_places(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
    q: QueryText = None,
    page: Page = 1,
    per_page: PerPage = None,
):
    """Soft-deleted places (admin only)."""
    result = await place_svc.list_deleted(current_user, page=page, per_page=per_page, q=q)
    return _page_response(result)


@router.get("/{place_id}", response_model=PlaceDetailResponse)
async def get_place(
    place_id: int,
    place_svc: Annotated[PlaceService, Depends(get_place_service)],
):
    return PlaceDetailResponse.from_result(await place_svc.get_place(place_id))


@router.post("", response_model=PlaceCreatedResponse, status_code=201)
@limit_writes
async def create_place(
    request: Request,
    body: PlaceCreateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user_for_write)],
    place_svc: Annotated[PlaceService, Depends(get_place_service_for_write)],
):
    """Create a place owned by the current user."""
    place = await place_svc.create_place(
        current_user, PlaceWrite(body.model_dump(exclude_unset=True))
    )
    return PlaceCreatedResponse(id=place.id)


@router.patch("/{place_id}", response_model=OkResponse)
@limit_writes
async def update_place(
    request: Request,
    place_id: int,
    body: PlaceUpdateRequest,
    current_user: Annotated[UserResult, Depends(get_current_user_for_write)],
    place_svc: Annotated[PlaceService, Depends(get_place_service_for_write)],
):
    """Partial update; only fields present in the body change."""
    await place_svc.update_place(
        current_user, place_id, PlaceWrite(body.model_dump(exclude_unset=True))
    )
    return OkResponse()


@router.delete("/{place_id}", status_code=204)
@limit_writes
async def delete_place(
    request: Request,
    place_id: int,
    current_user: Annotated[UserResult, Depends(get_current_user_for_write)],
    place_svc: Annotated[PlaceService, Depends(get_place_service_for_write)],
):
    """Soft delete (sets deleted_at)."""
    await place_svc.delete_place(current_user, place_id)


@router.post("/{place_id}/restore", response_model=OkResponse)
@limit_writes
async def restore_place(
    request: Request,
    place_id: int,
    current_user: Annotated[UserResult, Depends(get_current_user_for_write)],
    place_svc: Annotated[PlaceService, Depends(get_place_service_for_write)],
):
    """Undo a soft delete."""
    await place_svc.restore_place(current_user, place_id)
    return OkResponse()
