"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application use cases.
Routes depend only on these providers, never on infrastructure directly.

Each route uses exactly one session: read routes build everything on
get_db, write routes on get_db_transactional (the *_for_write providers).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.user import UserResult
from app.application.services.geocoding_policy import GeocodingPolicy
from app.application.services.place_authorization import PlaceAuthorizationService
from app.application.use_cases.auth import AuthService
from app.application.use_cases.places import PlaceService
from app.application.use_cases.search import PlaceSearchService
from app.core.config import Settings, get_settings
from app.domain.exceptions import AuthenticationException
from app.infrastructure.external.geocoding import GoogleGeocoder
from app.infrastructure.persistence.database import (
    get_db,
    get_db_transactional,
    get_engine,
)
from app.infrastructure.persistence.repositories import PlaceRepository, UserRepository
from app.infrastructure.persistence.search import (
    PlaceSearchRepository,
    SearchQueryBuilder,
    StoreCapabilities,
    probe_capabilities,
    select_strategy,
)
from app.infrastructure.security.jwt import JwtTokenIssuer, user_id_from_token

_http_bearer = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    return get_settings()


# ---- Search ----


async def get_search_capabilities(request: Request) -> StoreCapabilities:
    """Capabilities cached on app.state; re-probed until a probe succeeds."""
    capabilities: StoreCapabilities | None = getattr(
        request.app.state, "search_capabilities", None
    )
    if capabilities is None or not capabilities.detected:
        async with get_engine().connect() as conn:
            capabilities = await probe_capabilities(conn)
        request.app.state.search_capabilities = capabilities
    return capabilities


def get_search_query_builder(
    capabilities: Annotated[StoreCapabilities, Depends(get_search_capabilities)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> SearchQueryBuilder:
    return SearchQueryBuilder(
        select_strategy(capabilities), candidate_cap=settings.suggest_candidate_cap
    )


def _search_service(
    db: AsyncSession, builder: SearchQueryBuilder, settings: Settings
) -> PlaceSearchService:
    return PlaceSearchService(
        PlaceSearchRepository(db, builder),
        page_size=settings.search_page_size,
        max_page_size=settings.search_max_page_size,
        suggest_default_limit=settings.suggest_default_limit,
        suggest_max_limit=settings.suggest_max_limit,
    )


async def get_place_search_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    builder: Annotated[SearchQueryBuilder, Depends(get_search_query_builder)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PlaceSearchService:
    """Search and suggestions (read session)."""
    return _search_service(db, builder, settings)


# ---- Places ----


def get_geocoder(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> GoogleGeocoder:
    """Geocoder sharing the app-wide HTTP client when the lifespan created one."""
    return GoogleGeocoder.from_settings(
        settings, http_client=getattr(request.app.state, "http_client", None)
    )


def _place_service(
    db: AsyncSession,
    builder: SearchQueryBuilder,
    settings: Settings,
    geocoder: GoogleGeocoder | None = None,
) -> PlaceService:
    return PlaceService(
        place_repo=PlaceRepository(db),
        search_service=_search_service(db, builder, settings),
        authorization=PlaceAuthorizationService(),
        geocoder=geocoder if geocoder is not None and geocoder.enabled else None,
        geocoding_policy=GeocodingPolicy.from_days(settings.geocoding_max_cache_age_days),
        geocode_provider=settings.geocoding_provider_name,
        geocode_terms_version=settings.geocoding_terms_version,
    )


async def get_place_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    builder: Annotated[SearchQueryBuilder, Depends(get_search_query_builder)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> PlaceService:
    """Place listing and lookup (read session)."""
    return _place_service(db, builder, settings)


async def get_place_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    builder: Annotated[SearchQueryBuilder, Depends(get_search_query_builder)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    geocoder: Annotated[GoogleGeocoder, Depends(get_geocoder)],
) -> PlaceService:
    """Place create/update/delete/restore (transactional session)."""
    return _place_service(db, builder, settings, geocoder)


# ---- Users and auth ----


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    return UserRepository(db)


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service_for_write(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(user_repo, JwtTokenIssuer(settings))


async def _resolve_user(
    credentials: HTTPAuthorizationCredentials | None, user_repo: UserRepository
) -> UserResult | None:
    if not credentials:
        return None
    try:
        user_id = user_id_from_token(credentials.credentials)
    except ValueError:
        return None
    return await user_repo.get_by_id(user_id)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Current user from JWT if present and valid; else None."""
    return await _resolve_user(credentials, user_repo)


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Current user from JWT (read routes); raise 401 if missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authenticated")
    return current_user


async def get_current_user_for_write(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
) -> UserResult:
    """Current user from JWT (write routes, same session as the write)."""
    user = await _resolve_user(credentials, user_repo)
    if user is None:
        raise AuthenticationException("Not authenticated")
    return user
