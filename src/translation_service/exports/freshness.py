"""Freshness fingerprints for export scopes.

A fingerprint summarises the state of the rows an export reads: the latest
updated_at and the row count of every table in scope. Creates and updates
move updated_at forward, deletes change the count, so any write yields a new
fingerprint and therefore a new export cache key.

Fingerprints are cached for a short TTL. Until the cached value expires or
is invalidated, exports keep using the old key; the invalidator deletes the
cached fingerprint after every write so the window only applies when the
invalidation itself could not reach the cache.
"""

from datetime import datetime
import uuid

from sqlmodel import Session, SQLModel, func, select

from translation_service.core.cache import CacheService
from translation_service.core.logging import get_logger
from translation_service.languages.models import Language
from translation_service.tags.models import Tag
from translation_service.translations.models import Translation

logger = get_logger(__name__)

ALL_SCOPE = "all"
TAGS_SCOPE = "tags"
EMPTY_STAMP = "empty"


def language_scope(language_id: uuid.UUID) -> str:
    return f"lang:{language_id}"


def fingerprint_cache_key(cache: CacheService, scope: str) -> str:
    return cache.key("fingerprint", scope)


def _stamp(value: datetime | None) -> str:
    if value is None:
        return EMPTY_STAMP
    return value.strftime("%Y%m%dT%H%M%S%f")


class FreshnessResolver:
    """Computes and caches the fingerprint of an export scope."""

    def __init__(self, session: Session, cache: CacheService, ttl_minutes: int = 60):
        self.session = session
        self.cache = cache
        self.ttl_minutes = ttl_minutes

    def fingerprint(self, language_id: uuid.UUID | None = None) -> str:
        """Fingerprint for one language, or for all languages when None."""
        scope = ALL_SCOPE if language_id is None else language_scope(language_id)
        return self.cache.remember(
            fingerprint_cache_key(self.cache, scope),
            self.ttl_minutes,
            lambda: self.compute_fingerprint(language_id),
        )

    def tags_fingerprint(self) -> str:
        """Fingerprint for tag-filtered exports."""
        return self.cache.remember(
            fingerprint_cache_key(self.cache, TAGS_SCOPE),
            self.ttl_minutes,
            self.compute_tags_fingerprint,
        )

    def compute_fingerprint(self, language_id: uuid.UUID | None = None) -> str:
        if language_id is not None:
            fingerprint = self._table_state(Translation, language_id)
        else:
            fingerprint = "|".join(
                [self._table_state(Translation), self._table_state(Language)]
            )
        logger.debug(
            "fingerprint_computed",
            language_id=str(language_id) if language_id else None,
            fingerprint=fingerprint,
        )
        return fingerprint

    def compute_tags_fingerprint(self) -> str:
        fingerprint = "|".join(
            [
                self._table_state(Translation),
                self._table_state(Language),
                self._table_state(Tag),
            ]
        )
        logger.debug("fingerprint_computed", scope=TAGS_SCOPE, fingerprint=fingerprint)
        return fingerprint

    def _table_state(
        self,
        model: type[Language] | type[Tag] | type[Translation],
        language_id: uuid.UUID | None = None,
    ) -> str:
        statement = select(func.max(model.updated_at), func.count(model.id))
        if language_id is not None:
            statement = statement.where(Translation.language_id == language_id)
        last_updated, count = self.session.exec(statement).one()
        return f"{_stamp(last_updated)}.{count}"
