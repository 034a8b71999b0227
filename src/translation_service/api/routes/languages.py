import uuid
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path

from translation_service.api.deps import InvalidatorDep, PaginationDep
from translation_service.auth import Message, SessionDep, get_current_user
from translation_service.core.exceptions import (
    ResourceExistsError,
    ResourceNotFoundError,
)
from translation_service.core.logging import get_logger
from translation_service.languages import (
    Language,
    LanguageCreate,
    LanguagePublic,
    LanguagesPublic,
    LanguageUpdate,
    create_language,
    delete_language,
    get_language,
    get_language_by_code,
    get_languages,
    update_language,
)

router = APIRouter(
    prefix="/languages",
    tags=["languages"],
    dependencies=[Depends(get_current_user)],
)
logger = get_logger(__name__)


def get_language_or_404(
    session: SessionDep,
    language_id: Annotated[uuid.UUID, Path(description="Language UUID")],
) -> Language:
    language = get_language(session=session, language_id=language_id)
    if not language:
        raise ResourceNotFoundError("Language", str(language_id))
    return language


ExistingLanguage = Annotated[Language, Depends(get_language_or_404)]


@router.get("/", response_model=LanguagesPublic)
def read_languages(session: SessionDep, pagination: PaginationDep) -> Any:
    """List languages ordered by code, active and inactive."""
    languages, count = get_languages(
        session=session, skip=pagination.skip, limit=pagination.limit
    )
    return LanguagesPublic(data=languages, count=count)


@router.post("/", response_model=LanguagePublic, status_code=201)
def create_language_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    language_in: LanguageCreate,
) -> Any:
    """Create a language. The code must be unique."""
    if get_language_by_code(session=session, code=language_in.code):
        raise ResourceExistsError("Language", "code")

    language = create_language(session=session, language_in=language_in)
    invalidator.language_changed(language.id)
    logger.info("language_created", language_id=str(language.id), code=language.code)
    return language


@router.get("/{language_id}", response_model=LanguagePublic)
def read_language(language: ExistingLanguage) -> Any:
    return language


@router.put("/{language_id}", response_model=LanguagePublic)
def update_language_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    language: ExistingLanguage,
    language_in: LanguageUpdate,
) -> Any:
    """Update a language. A new code must not belong to another language."""
    if language_in.code is not None and language_in.code != language.code:
        if get_language_by_code(session=session, code=language_in.code):
            raise ResourceExistsError("Language", "code")

    updated = update_language(
        session=session, db_language=language, language_in=language_in
    )
    invalidator.language_changed(updated.id)
    logger.info("language_updated", language_id=str(updated.id), code=updated.code)
    return updated


@router.delete("/{language_id}", response_model=Message)
def delete_language_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    language: ExistingLanguage,
) -> Any:
    """Delete a language and, with it, all of its translations."""
    language_id = language.id
    code = language.code

    delete_language(session=session, db_language=language)
    invalidator.language_changed(language_id)
    logger.info("language_deleted", language_id=str(language_id), code=code)
    return Message(message="Language deleted successfully")
