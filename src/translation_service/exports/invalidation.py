import uuid

from translation_service.core.cache import CacheService
from translation_service.core.logging import get_logger
from translation_service.exports.freshness import (
    ALL_SCOPE,
    TAGS_SCOPE,
    fingerprint_cache_key,
    language_scope,
)

logger = get_logger(__name__)


class CacheInvalidator:
    """Drops cached fingerprints after writes.

    Export payloads are never deleted. Once the fingerprint for a scope is
    gone the next export recomputes it, gets a new cache key, and the old
    payload is left to expire on its own TTL. Only exact keys are deleted.
    Call after the write has been committed.
    """

    def __init__(self, cache: CacheService):
        self.cache = cache

    def translation_changed(self, *language_ids: uuid.UUID | None) -> None:
        """A translation was created, updated or deleted.

        Pass both the old and new language id when a translation moved.
        """
        scopes = [ALL_SCOPE, TAGS_SCOPE]
        scopes.extend(
            language_scope(language_id)
            for language_id in dict.fromkeys(language_ids)
            if language_id is not None
        )
        self._forget(scopes, reason="translation_changed")

    def language_changed(self, language_id: uuid.UUID) -> None:
        self._forget(
            [ALL_SCOPE, TAGS_SCOPE, language_scope(language_id)],
            reason="language_changed",
        )

    def tag_changed(self) -> None:
        self._forget([TAGS_SCOPE], reason="tag_changed")

    def _forget(self, scopes: list[str], reason: str) -> None:
        keys = [fingerprint_cache_key(self.cache, scope) for scope in scopes]
        if self.cache.forget(*keys):
            logger.info("fingerprint_invalidated", reason=reason, scopes=scopes)
        else:
            # Stale exports are possible until the fingerprint TTL runs out
            logger.warning(
                "fingerprint_invalidation_incomplete", reason=reason, scopes=scopes
            )
