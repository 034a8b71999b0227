from typing import Annotated

from fastapi import Depends, Query, Request

from translation_service.auth.deps import (
    OptionalTokenDep,
    SessionDep,
    get_current_user,
    get_token_payload,
)
from translation_service.auth.models import User
from translation_service.core.cache import CacheService, CacheStore
from translation_service.core.config import Settings, get_settings
from translation_service.core.exceptions import AuthenticationError
from translation_service.exports import (
    CacheInvalidator,
    ExportService,
    FreshnessResolver,
)

SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_cache_store(request: Request) -> CacheStore:
    """The cache store created by the application factory."""
    store: CacheStore = request.app.state.cache_store
    return store


CacheStoreDep = Annotated[CacheStore, Depends(get_cache_store)]


def get_cache_service(store: CacheStoreDep, settings: SettingsDep) -> CacheService:
    return CacheService(store, prefix=settings.CACHE_KEY_PREFIX)


CacheDep = Annotated[CacheService, Depends(get_cache_service)]


def get_freshness_resolver(
    session: SessionDep, cache: CacheDep, settings: SettingsDep
) -> FreshnessResolver:
    return FreshnessResolver(
        session, cache, ttl_minutes=settings.FINGERPRINT_CACHE_TTL_MINUTES
    )


FreshnessDep = Annotated[FreshnessResolver, Depends(get_freshness_resolver)]


def get_export_service(
    session: SessionDep, cache: CacheDep, freshness: FreshnessDep, settings: SettingsDep
) -> ExportService:
    return ExportService(
        session, cache, freshness, ttl_minutes=settings.EXPORT_CACHE_TTL_MINUTES
    )


ExportServiceDep = Annotated[ExportService, Depends(get_export_service)]


def get_cache_invalidator(cache: CacheDep) -> CacheInvalidator:
    return CacheInvalidator(cache)


InvalidatorDep = Annotated[CacheInvalidator, Depends(get_cache_invalidator)]


def require_export_access(
    session: SessionDep, settings: SettingsDep, token: OptionalTokenDep
) -> User | None:
    """Exports are public unless EXPORT_REQUIRES_AUTH is set.

    Raises:
        AuthenticationError: If auth is required and no valid token was sent
    """
    if not settings.EXPORT_REQUIRES_AUTH:
        return None
    if not token:
        raise AuthenticationError("Not authenticated")
    return get_current_user(session, get_token_payload(token))


class Pagination:
    """page/per_page query parameters translated to offset/limit."""

    def __init__(
        self,
        page: Annotated[int, Query(ge=1)] = 1,
        per_page: Annotated[
            int, Query(ge=1, le=get_settings().MAX_PAGE_SIZE)
        ] = get_settings().DEFAULT_PAGE_SIZE,
    ):
        self.page = page
        self.per_page = per_page

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


PaginationDep = Annotated[Pagination, Depends()]
