"""Bulk-seed random translations for load and export testing.

Usage:
    python -m translation_service.scripts.seed_translations [count]

Requires the default languages and tags (see initial_data).
"""

import argparse
import random
import time
import uuid

from sqlmodel import Session, select

from translation_service.core.cache import CacheService, build_cache_store
from translation_service.core.config import settings
from translation_service.core.db import engine
from translation_service.core.logging import get_logger, setup_logging
from translation_service.core.uow import atomic
from translation_service.exports.invalidation import CacheInvalidator
from translation_service.languages.models import Language
from translation_service.tags.models import Tag, TranslationTagLink
from translation_service.translations.models import Translation

setup_logging()
logger = get_logger(__name__)

DEFAULT_COUNT = 100_000
CHUNK_SIZE = 1000
MAX_TAGS_PER_TRANSLATION = 3

KEY_GROUPS = ["app", "auth", "checkout", "errors", "menu", "profile", "settings"]
WORDS = [
    "account", "button", "cancel", "confirm", "continue", "delete", "email",
    "error", "message", "password", "save", "search", "title", "welcome",
]  # fmt: skip


def _random_content() -> str:
    return " ".join(random.choices(WORDS, k=random.randint(2, 8))).capitalize()


def seed_chunk(
    session: Session,
    language_ids: list[uuid.UUID],
    tag_ids: list[uuid.UUID],
    start: int,
    size: int,
) -> None:
    """Insert one chunk of translations and their tag links in one transaction."""
    with atomic(session) as uow:
        translations = [
            Translation(
                language_id=language_ids[(start + offset) % len(language_ids)],
                key=f"{random.choice(KEY_GROUPS)}.seed_{uuid.uuid4().hex[:12]}",
                content=_random_content(),
                meta={"seeded": True},
            )
            for offset in range(size)
        ]
        uow.session.add_all(translations)
        uow.flush()

        if not tag_ids:
            return
        for translation in translations:
            k = random.randint(0, min(MAX_TAGS_PER_TRANSLATION, len(tag_ids)))
            uow.session.add_all(
                TranslationTagLink(translation_id=translation.id, tag_id=tag_id)
                for tag_id in random.sample(tag_ids, k=k)
            )


def seed(session: Session, count: int) -> tuple[int, list[uuid.UUID]]:
    language_ids = list(session.exec(select(Language.id)).all())
    if not language_ids:
        raise SystemExit("No languages found, run initial_data first")
    tag_ids = list(session.exec(select(Tag.id)).all())

    created = 0
    while created < count:
        size = min(CHUNK_SIZE, count - created)
        seed_chunk(session, language_ids, tag_ids, start=created, size=size)
        # Chunks are independent transactions; drop loaded rows between them
        session.expunge_all()
        created += size
        logger.info("seed_progress", created=created, total=count)
    return created, language_ids


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("count", type=int, nargs="?", default=DEFAULT_COUNT)
    args = parser.parse_args()

    started = time.perf_counter()
    with Session(engine) as session:
        created, language_ids = seed(session, args.count)
    elapsed = time.perf_counter() - started

    # Only a shared store (Redis) holds fingerprints the running API can see
    cache = CacheService(build_cache_store(settings), prefix=settings.CACHE_KEY_PREFIX)
    CacheInvalidator(cache).translation_changed(*language_ids)

    logger.info(
        "seed_finished",
        created=created,
        elapsed_seconds=round(elapsed, 2),
        per_second=round(created / elapsed) if elapsed else created,
    )


if __name__ == "__main__":
    main()
