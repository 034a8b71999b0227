import uuid

from sqlmodel import Session, select

from translation_service.core.db import paginate
from translation_service.languages.models import (
    Language,
    LanguageCreate,
    LanguageUpdate,
)


def create_language(*, session: Session, language_in: LanguageCreate) -> Language:
    """Create a new language.

    Args:
        session: Database session
        language_in: Language creation data

    Returns:
        Created language object
    """
    db_language = Language.model_validate(language_in)
    session.add(db_language)
    session.commit()
    session.refresh(db_language)
    return db_language


def get_language(*, session: Session, language_id: uuid.UUID) -> Language | None:
    return session.get(Language, language_id)


def get_language_by_code(*, session: Session, code: str) -> Language | None:
    statement = select(Language).where(Language.code == code)
    return session.exec(statement).first()


def get_languages(
    *, session: Session, skip: int = 0, limit: int = 100
) -> tuple[list[Language], int]:
    """Get all languages ordered by code, with total count."""
    return paginate(
        session, select(Language), skip=skip, limit=limit, order_by=Language.code
    )


def update_language(
    *, session: Session, db_language: Language, language_in: LanguageUpdate
) -> Language:
    """Update a language and bump its updated_at.

    Args:
        session: Database session
        db_language: Existing language object
        language_in: Update data

    Returns:
        Updated language object
    """
    language_data = language_in.model_dump(exclude_unset=True)
    db_language.sqlmodel_update(language_data)
    db_language.touch()
    session.add(db_language)
    session.commit()
    session.refresh(db_language)
    return db_language


def delete_language(*, session: Session, db_language: Language) -> None:
    """Delete a language together with all of its translations."""
    session.delete(db_language)
    session.commit()
