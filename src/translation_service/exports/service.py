"""Export assembly for translation key/value maps.

Every export is keyed by its scope plus the scope's freshness fingerprint,
read through the cache, and computed from the database on a miss. Cache
failures degrade to direct computation; database errors propagate.
"""

from collections.abc import Iterable
import hashlib

from sqlmodel import Session, col, select

from translation_service.core.cache import CacheService
from translation_service.core.logging import get_logger
from translation_service.exports.freshness import FreshnessResolver
from translation_service.languages.crud import get_language_by_code
from translation_service.languages.models import Language
from translation_service.tags.models import Tag, TranslationTagLink
from translation_service.translations.models import Translation

logger = get_logger(__name__)

FlatExport = dict[str, str]
NestedExport = dict[str, dict[str, str]]

DEFAULT_EXPORT_TTL_MINUTES = 1440


def normalize_tag_names(tag_names: Iterable[str]) -> list[str]:
    """Strip, drop blanks and duplicates, and sort tag names."""
    return sorted({name.strip() for name in tag_names if name and name.strip()})


def tag_filter_hash(tag_names: list[str]) -> str:
    return hashlib.md5(",".join(tag_names).encode("utf-8")).hexdigest()


class ExportService:
    def __init__(
        self,
        session: Session,
        cache: CacheService,
        freshness: FreshnessResolver,
        ttl_minutes: int = DEFAULT_EXPORT_TTL_MINUTES,
    ):
        self.session = session
        self.cache = cache
        self.freshness = freshness
        self.ttl_minutes = ttl_minutes

    def export_by_language(self, code: str) -> FlatExport:
        """Flat key -> content map for one language.

        Returns an empty map when no language has this code.
        """
        language = get_language_by_code(session=self.session, code=code)
        if language is None:
            logger.info("export_unknown_language", code=code)
            return {}

        fingerprint = self.freshness.fingerprint(language.id)
        cache_key = self.cache.key("export", "lang", code, fingerprint)
        return self.cache.remember(
            cache_key,
            self.ttl_minutes,
            lambda: self._translations_for_language(language),
        )

    def export_all(self) -> NestedExport:
        """code -> (key -> content) for every language, active or not."""
        fingerprint = self.freshness.fingerprint()
        cache_key = self.cache.key("export", "all", fingerprint)
        return self.cache.remember(cache_key, self.ttl_minutes, self._all_translations)

    def export_by_tags(
        self, tag_names: Iterable[str], language_code: str | None = None
    ) -> NestedExport:
        """code -> (key -> content) for translations carrying ANY of the tags.

        Unknown tag names simply match nothing.
        """
        names = normalize_tag_names(tag_names)
        if not names:
            return {}

        fingerprint = self.freshness.tags_fingerprint()
        cache_key = self.cache.key(
            "export",
            "tags",
            tag_filter_hash(names),
            f"lang={language_code}" if language_code else "lang=*",
            fingerprint,
        )
        return self.cache.remember(
            cache_key,
            self.ttl_minutes,
            lambda: self._tagged_translations(names, language_code),
        )

    def _translations_for_language(self, language: Language) -> FlatExport:
        statement = (
            select(Translation.key, Translation.content)
            .where(Translation.language_id == language.id)
            .order_by(Translation.key)
        )
        result = {key: content for key, content in self.session.exec(statement)}
        logger.info(
            "export_computed", scope="language", code=language.code, keys=len(result)
        )
        return result

    def _all_translations(self) -> NestedExport:
        languages = self.session.exec(select(Language).order_by(Language.code)).all()
        result: NestedExport = {language.code: {} for language in languages}

        statement = (
            select(Language.code, Translation.key, Translation.content)
            .join(Language, col(Language.id) == col(Translation.language_id))
            .order_by(Language.code, Translation.key)
        )
        for code, key, content in self.session.exec(statement):
            result[code][key] = content

        logger.info("export_computed", scope="all", languages=len(result))
        return result

    def _tagged_translations(
        self, tag_names: list[str], language_code: str | None
    ) -> NestedExport:
        tagged_ids = (
            select(TranslationTagLink.translation_id)
            .join(Tag, col(Tag.id) == col(TranslationTagLink.tag_id))
            .where(col(Tag.name).in_(tag_names))
        )
        statement = (
            select(Language.code, Translation.key, Translation.content)
            .join(Language, col(Language.id) == col(Translation.language_id))
            .where(col(Translation.id).in_(tagged_ids))
        )
        if language_code:
            statement = statement.where(Language.code == language_code)
        statement = statement.order_by(Language.code, Translation.key)

        result: NestedExport = {}
        for code, key, content in self.session.exec(statement):
            result.setdefault(code, {})[key] = content

        logger.info(
            "export_computed",
            scope="tags",
            tags=tag_names,
            language=language_code,
            languages=len(result),
        )
        return result
