from translation_service.exports.freshness import (
    ALL_SCOPE,
    TAGS_SCOPE,
    FreshnessResolver,
    fingerprint_cache_key,
    language_scope,
)
from translation_service.exports.invalidation import CacheInvalidator
from translation_service.exports.service import (
    ExportService,
    FlatExport,
    NestedExport,
    normalize_tag_names,
    tag_filter_hash,
)

__all__ = [
    "ALL_SCOPE",
    "TAGS_SCOPE",
    "CacheInvalidator",
    "ExportService",
    "FlatExport",
    "FreshnessResolver",
    "NestedExport",
    "fingerprint_cache_key",
    "language_scope",
    "normalize_tag_names",
    "tag_filter_hash",
]
