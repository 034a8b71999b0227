"""
Tests for CacheInvalidator: which fingerprints each write drops.
"""

import uuid

from translation_service.core.cache import CacheService
from translation_service.exports import (
    ALL_SCOPE,
    TAGS_SCOPE,
    CacheInvalidator,
    fingerprint_cache_key,
    language_scope,
)
from tests.factories import FailingCacheStore

EN = uuid.UUID("00000000-0000-0000-0000-000000000001")
FR = uuid.UUID("00000000-0000-0000-0000-000000000002")


def _seed_fingerprints(cache: CacheService) -> dict[str, str]:
    keys = {
        scope: fingerprint_cache_key(cache, scope)
        for scope in (ALL_SCOPE, TAGS_SCOPE, language_scope(EN), language_scope(FR))
    }
    for key in keys.values():
        cache.put(key, "fp", ttl_minutes=60)
    return keys


def _remaining(cache: CacheService, keys: dict[str, str]) -> set[str]:
    return {scope for scope, key in keys.items() if cache.get(key) is not None}


def test_translation_change_drops_language_and_aggregate_scopes(cache, invalidator):
    keys = _seed_fingerprints(cache)

    invalidator.translation_changed(EN)

    assert _remaining(cache, keys) == {language_scope(FR)}


def test_translation_moved_between_languages(cache, invalidator):
    keys = _seed_fingerprints(cache)

    invalidator.translation_changed(EN, FR)

    assert _remaining(cache, keys) == set()


def test_language_change(cache, invalidator):
    keys = _seed_fingerprints(cache)

    invalidator.language_changed(FR)

    assert _remaining(cache, keys) == {language_scope(EN)}


def test_tag_change_only_drops_tag_scope(cache, invalidator):
    keys = _seed_fingerprints(cache)

    invalidator.tag_changed()

    assert _remaining(cache, keys) == {
        ALL_SCOPE,
        language_scope(EN),
        language_scope(FR),
    }


def test_exports_are_never_deleted(cache, cache_store, invalidator):
    export_key = cache.key("export", "all", "some-fingerprint")
    cache.put(export_key, {"en": {}}, ttl_minutes=60)

    invalidator.translation_changed(EN)
    invalidator.language_changed(EN)
    invalidator.tag_changed()

    assert export_key in cache_store


def test_unavailable_cache_does_not_raise():
    store = FailingCacheStore()
    invalidator = CacheInvalidator(CacheService(store, prefix="test"))

    invalidator.translation_changed(EN)

    assert store.calls == ["delete", "delete", "delete"]
