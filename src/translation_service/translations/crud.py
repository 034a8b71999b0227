import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, col, or_, select
from sqlmodel.sql.expression import SelectOfScalar

from translation_service.core.db import paginate
from translation_service.core.exceptions import ResourceExistsError
from translation_service.core.logging import get_logger
from translation_service.core.uow import atomic
from translation_service.tags.models import Tag, TranslationTagLink
from translation_service.translations.models import (
    Translation,
    TranslationCreate,
    TranslationUpdate,
)

logger = get_logger(__name__)


def _relation_loaders() -> list[Any]:
    return [
        selectinload(Translation.language),  # type: ignore[arg-type]
        selectinload(Translation.tags),  # type: ignore[arg-type]
    ]


def _with_relations(
    statement: SelectOfScalar[Translation],
) -> SelectOfScalar[Translation]:
    return statement.options(*_relation_loaders())


def create_translation(
    *, session: Session, translation_in: TranslationCreate, tags: list[Tag]
) -> Translation:
    """Create a translation and its tag links in one transaction.

    Args:
        session: Database session
        translation_in: Translation creation data
        tags: Already-resolved tags to attach

    Returns:
        Created translation with language and tags loaded

    Raises:
        ResourceExistsError: If the language already has a translation for key
    """
    db_translation = Translation(
        language_id=translation_in.language_id,
        key=translation_in.key,
        content=translation_in.content,
        meta=translation_in.meta,
    )
    try:
        with atomic(session) as uow:
            db_translation.tags = tags
            uow.session.add(db_translation)
    except IntegrityError as e:
        logger.info(
            "translation_create_conflict",
            language_id=str(translation_in.language_id),
            key=translation_in.key,
        )
        raise ResourceExistsError("Translation", "key") from e

    session.refresh(db_translation)
    return db_translation


def get_translation(
    *, session: Session, translation_id: uuid.UUID
) -> Translation | None:
    statement = _with_relations(
        select(Translation).where(Translation.id == translation_id)
    )
    return session.exec(statement).first()


def get_translation_by_key(
    *, session: Session, language_id: uuid.UUID, key: str
) -> Translation | None:
    statement = select(Translation).where(
        Translation.language_id == language_id, Translation.key == key
    )
    return session.exec(statement).first()


def get_translations(
    *,
    session: Session,
    language_id: uuid.UUID | None = None,
    tag: str | None = None,
    key: str | None = None,
    content: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> tuple[list[Translation], int]:
    """Get translations matching every given filter.

    Args:
        session: Database session
        language_id: Only translations of this language
        tag: Only translations carrying a tag with this name
        key: Substring of the translation key
        content: Substring of the translation content
        skip: Number of translations to skip
        limit: Maximum number of translations to return

    Returns:
        Tuple of (list of translations, total count)
    """
    statement = select(Translation)
    if language_id is not None:
        statement = statement.where(Translation.language_id == language_id)
    if tag:
        statement = statement.where(
            col(Translation.tags).any(col(Tag.name) == tag)
        )
    if key:
        statement = statement.where(col(Translation.key).ilike(f"%{key}%"))
    if content:
        statement = statement.where(col(Translation.content).ilike(f"%{content}%"))

    return paginate(
        session,
        statement,
        skip=skip,
        limit=limit,
        order_by=(Translation.key, Translation.id),
        options=_relation_loaders(),
    )


def search_translations(
    *,
    session: Session,
    key: str | None = None,
    content: str | None = None,
    language_id: uuid.UUID | None = None,
    tag_ids: list[uuid.UUID] | None = None,
    skip: int = 0,
    limit: int = 100,
) -> tuple[list[Translation], int]:
    """Search translations whose key OR content matches, then narrow by
    language and by any of the given tag ids.
    """
    statement = select(Translation)

    text_conditions = []
    if key:
        text_conditions.append(col(Translation.key).ilike(f"%{key}%"))
    if content:
        text_conditions.append(col(Translation.content).ilike(f"%{content}%"))
    if text_conditions:
        statement = statement.where(or_(*text_conditions))

    if language_id is not None:
        statement = statement.where(Translation.language_id == language_id)
    if tag_ids:
        tagged = select(TranslationTagLink.translation_id).where(
            col(TranslationTagLink.tag_id).in_(tag_ids)
        )
        statement = statement.where(col(Translation.id).in_(tagged))

    return paginate(
        session,
        statement,
        skip=skip,
        limit=limit,
        order_by=(Translation.key, Translation.id),
        options=_relation_loaders(),
    )


def update_translation(
    *,
    session: Session,
    db_translation: Translation,
    translation_in: TranslationUpdate,
    tags: list[Tag] | None = None,
) -> Translation:
    """Update a translation; tags are replaced when given.

    The row update and the tag sync share one transaction and updated_at
    is always bumped so export fingerprints move forward.

    Raises:
        ResourceExistsError: If the new (language, key) pair is taken
    """
    translation_data = translation_in.model_dump(exclude_unset=True, exclude={"tags"})
    try:
        with atomic(session) as uow:
            db_translation.sqlmodel_update(translation_data)
            if tags is not None:
                db_translation.tags = tags
            db_translation.touch()
            uow.session.add(db_translation)
    except IntegrityError as e:
        logger.info(
            "translation_update_conflict",
            translation_id=str(db_translation.id),
        )
        raise ResourceExistsError("Translation", "key") from e

    session.refresh(db_translation)
    return db_translation


def delete_translation(*, session: Session, db_translation: Translation) -> None:
    with atomic(session) as uow:
        uow.session.delete(db_translation)
