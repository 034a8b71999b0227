import uuid
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session

from translation_service.api.deps import InvalidatorDep, PaginationDep
from translation_service.auth import Message, SessionDep, get_current_user
from translation_service.core.exceptions import (
    ResourceExistsError,
    ResourceNotFoundError,
    ValidationError,
)
from translation_service.core.logging import get_logger
from translation_service.languages import get_language
from translation_service.tags import Tag, get_tags_by_ids
from translation_service.translations import (
    Translation,
    TranslationCreate,
    TranslationPublic,
    TranslationsPublic,
    TranslationUpdate,
    create_translation,
    delete_translation,
    get_translation,
    get_translation_by_key,
    get_translations,
    search_translations,
    update_translation,
)

router = APIRouter(
    prefix="/translations",
    tags=["translations"],
    dependencies=[Depends(get_current_user)],
)
logger = get_logger(__name__)


def get_translation_or_404(
    session: SessionDep,
    translation_id: Annotated[uuid.UUID, Path(description="Translation UUID")],
) -> Translation:
    translation = get_translation(session=session, translation_id=translation_id)
    if not translation:
        raise ResourceNotFoundError("Translation", str(translation_id))
    return translation


ExistingTranslation = Annotated[Translation, Depends(get_translation_or_404)]


def _ensure_language(session: Session, language_id: uuid.UUID) -> None:
    if not get_language(session=session, language_id=language_id):
        raise ValidationError("Language does not exist", field="language_id")


def _resolve_tags(session: Session, tag_ids: list[uuid.UUID]) -> list[Tag]:
    unique_ids = list(dict.fromkeys(tag_ids))
    tags = get_tags_by_ids(session=session, tag_ids=unique_ids)
    if len(tags) != len(unique_ids):
        raise ValidationError("One or more tags do not exist", field="tags")
    return tags


def _parse_tag_ids(raw: str | None) -> list[uuid.UUID]:
    if not raw:
        return []
    try:
        return [uuid.UUID(part.strip()) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise ValidationError("tags must be comma-separated UUIDs", field="tags") from e


def _page_of(translations: list[Translation], count: int) -> TranslationsPublic:
    return TranslationsPublic(
        data=[TranslationPublic.from_translation(t) for t in translations],
        count=count,
    )


@router.get("/", response_model=TranslationsPublic)
def read_translations(
    session: SessionDep,
    pagination: PaginationDep,
    language_id: uuid.UUID | None = None,
    tag: Annotated[str | None, Query(description="Tag name")] = None,
    key: Annotated[str | None, Query(description="Substring of the key")] = None,
    content: Annotated[
        str | None, Query(description="Substring of the content")
    ] = None,
) -> Any:
    """List translations. Every given filter must match."""
    translations, count = get_translations(
        session=session,
        language_id=language_id,
        tag=tag,
        key=key,
        content=content,
        skip=pagination.skip,
        limit=pagination.limit,
    )
    return _page_of(translations, count)


@router.get("/search", response_model=TranslationsPublic)
def search_translations_endpoint(
    session: SessionDep,
    pagination: PaginationDep,
    key: str | None = None,
    content: str | None = None,
    language_id: uuid.UUID | None = None,
    tags: Annotated[
        str | None, Query(description="Comma-separated tag UUIDs, any may match")
    ] = None,
) -> Any:
    """Search translations by key OR content, narrowed by language and tags."""
    translations, count = search_translations(
        session=session,
        key=key,
        content=content,
        language_id=language_id,
        tag_ids=_parse_tag_ids(tags),
        skip=pagination.skip,
        limit=pagination.limit,
    )
    return _page_of(translations, count)


@router.post("/", response_model=TranslationPublic, status_code=201)
def create_translation_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    translation_in: TranslationCreate,
) -> Any:
    """Create a translation with its tags in one transaction."""
    _ensure_language(session, translation_in.language_id)
    tags = _resolve_tags(session, translation_in.tags or [])

    if get_translation_by_key(
        session=session, language_id=translation_in.language_id, key=translation_in.key
    ):
        raise ResourceExistsError("Translation", "key")

    translation = create_translation(
        session=session, translation_in=translation_in, tags=tags
    )
    invalidator.translation_changed(translation.language_id)
    logger.info(
        "translation_created",
        translation_id=str(translation.id),
        language_id=str(translation.language_id),
        key=translation.key,
    )
    return TranslationPublic.from_translation(translation)


@router.get("/{translation_id}", response_model=TranslationPublic)
def read_translation(translation: ExistingTranslation) -> Any:
    return TranslationPublic.from_translation(translation)


@router.put("/{translation_id}", response_model=TranslationPublic)
def update_translation_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    translation: ExistingTranslation,
    translation_in: TranslationUpdate,
) -> Any:
    """Update a translation. Passing tags replaces the whole tag set."""
    previous_language_id = translation.language_id

    if translation_in.language_id is not None:
        _ensure_language(session, translation_in.language_id)
    tags = (
        _resolve_tags(session, translation_in.tags)
        if translation_in.tags is not None
        else None
    )

    target_language_id = translation_in.language_id or translation.language_id
    target_key = translation_in.key or translation.key
    existing = get_translation_by_key(
        session=session, language_id=target_language_id, key=target_key
    )
    if existing and existing.id != translation.id:
        raise ResourceExistsError("Translation", "key")

    updated = update_translation(
        session=session,
        db_translation=translation,
        translation_in=translation_in,
        tags=tags,
    )
    invalidator.translation_changed(previous_language_id, updated.language_id)
    logger.info(
        "translation_updated",
        translation_id=str(updated.id),
        language_id=str(updated.language_id),
        key=updated.key,
    )
    return TranslationPublic.from_translation(updated)


@router.delete("/{translation_id}", response_model=Message)
def delete_translation_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    translation: ExistingTranslation,
) -> Any:
    translation_id = str(translation.id)
    language_id = translation.language_id

    delete_translation(session=session, db_translation=translation)
    invalidator.translation_changed(language_id)
    logger.info(
        "translation_deleted",
        translation_id=translation_id,
        language_id=str(language_id),
    )
    return Message(message="Translation deleted successfully")
