"""
Tests for export freshness fingerprints.
"""

from translation_service.exports import ALL_SCOPE, fingerprint_cache_key
from translation_service.exports.freshness import EMPTY_STAMP
from translation_service.translations import TranslationUpdate, update_translation
from translation_service.translations.crud import delete_translation
from tests.factories import make_language, make_tag, make_translation


class TestComputeFingerprint:
    def test_language_without_translations(self, session, freshness):
        language = make_language(session, code="en")

        assert freshness.compute_fingerprint(language.id) == f"{EMPTY_STAMP}.0"

    def test_empty_fingerprint_is_deterministic(self, session, freshness):
        language = make_language(session, code="en")

        first = freshness.compute_fingerprint(language.id)
        second = freshness.compute_fingerprint(language.id)

        assert first == second

    def test_changes_when_translation_added(self, session, freshness):
        language = make_language(session, code="en")
        make_translation(session, language, key="greeting", content="Hello")
        before = freshness.compute_fingerprint(language.id)

        make_translation(session, language, key="hi", content="Hi")

        after = freshness.compute_fingerprint(language.id)
        assert after != before
        assert after.endswith(".2")

    def test_changes_when_translation_updated(self, session, freshness):
        language = make_language(session, code="en")
        translation = make_translation(session, language, key="greeting")
        before = freshness.compute_fingerprint(language.id)

        update_translation(
            session=session,
            db_translation=translation,
            translation_in=TranslationUpdate(content="Howdy"),
        )

        assert freshness.compute_fingerprint(language.id) != before

    def test_changes_when_translation_deleted(self, session, freshness):
        language = make_language(session, code="en")
        make_translation(session, language, key="greeting")
        newest = make_translation(session, language, key="farewell")
        before = freshness.compute_fingerprint(language.id)

        delete_translation(session=session, db_translation=newest)

        assert freshness.compute_fingerprint(language.id) != before

    def test_language_scope_ignores_other_languages(self, session, freshness):
        english = make_language(session, code="en")
        french = make_language(session, code="fr")
        make_translation(session, english, key="greeting")
        before = freshness.compute_fingerprint(english.id)

        make_translation(session, french, key="greeting", content="Bonjour")

        assert freshness.compute_fingerprint(english.id) == before

    def test_all_scope_includes_languages(self, session, freshness):
        before = freshness.compute_fingerprint()
        assert before == f"{EMPTY_STAMP}.0|{EMPTY_STAMP}.0"

        make_language(session, code="en")

        after = freshness.compute_fingerprint()
        assert after != before
        assert after.startswith(f"{EMPTY_STAMP}.0|")

    def test_tags_scope_includes_tags(self, session, freshness):
        before = freshness.compute_tags_fingerprint()

        make_tag(session, name="mobile")

        assert freshness.compute_tags_fingerprint() != before


class TestCachedFingerprint:
    def test_fingerprint_is_cached(self, session, freshness, cache):
        language = make_language(session, code="en")

        fingerprint = freshness.fingerprint()

        assert cache.get(fingerprint_cache_key(cache, ALL_SCOPE)) == fingerprint
        assert cache.get("test:fingerprint:all") == fingerprint
        # Cached value wins until it expires or is invalidated
        make_translation(session, language, key="hi")
        assert freshness.fingerprint() == fingerprint

    def test_invalidation_forces_recompute(self, session, freshness, invalidator):
        language = make_language(session, code="en")
        before = freshness.fingerprint(language.id)

        make_translation(session, language, key="hi")
        invalidator.translation_changed(language.id)

        assert freshness.fingerprint(language.id) != before
