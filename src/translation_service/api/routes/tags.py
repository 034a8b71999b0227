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
from translation_service.tags import (
    Tag,
    TagCreate,
    TagPublic,
    TagsPublic,
    TagUpdate,
    create_tag,
    delete_tag,
    get_tag,
    get_tag_by_name,
    get_tags,
    update_tag,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    dependencies=[Depends(get_current_user)],
)
logger = get_logger(__name__)


def get_tag_or_404(
    session: SessionDep,
    tag_id: Annotated[uuid.UUID, Path(description="Tag UUID")],
) -> Tag:
    tag = get_tag(session=session, tag_id=tag_id)
    if not tag:
        raise ResourceNotFoundError("Tag", str(tag_id))
    return tag


ExistingTag = Annotated[Tag, Depends(get_tag_or_404)]


@router.get("/", response_model=TagsPublic)
def read_tags(session: SessionDep, pagination: PaginationDep) -> Any:
    tags, count = get_tags(
        session=session, skip=pagination.skip, limit=pagination.limit
    )
    return TagsPublic(data=tags, count=count)


@router.post("/", response_model=TagPublic, status_code=201)
def create_tag_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    tag_in: TagCreate,
) -> Any:
    """Create a tag. Names are unique."""
    if get_tag_by_name(session=session, name=tag_in.name):
        raise ResourceExistsError("Tag", "name")

    tag = create_tag(session=session, tag_in=tag_in)
    invalidator.tag_changed()
    logger.info("tag_created", tag_id=str(tag.id), name=tag.name)
    return tag


@router.get("/{tag_id}", response_model=TagPublic)
def read_tag(tag: ExistingTag) -> Any:
    return tag


@router.put("/{tag_id}", response_model=TagPublic)
def update_tag_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    tag: ExistingTag,
    tag_in: TagUpdate,
) -> Any:
    if tag_in.name is not None and tag_in.name != tag.name:
        if get_tag_by_name(session=session, name=tag_in.name):
            raise ResourceExistsError("Tag", "name")

    updated = update_tag(session=session, db_tag=tag, tag_in=tag_in)
    invalidator.tag_changed()
    logger.info("tag_updated", tag_id=str(updated.id), name=updated.name)
    return updated


@router.delete("/{tag_id}", response_model=Message)
def delete_tag_endpoint(
    session: SessionDep,
    invalidator: InvalidatorDep,
    tag: ExistingTag,
) -> Any:
    """Delete a tag. Tagged translations are kept, only the links go."""
    tag_id = str(tag.id)
    name = tag.name

    delete_tag(session=session, db_tag=tag)
    invalidator.tag_changed()
    logger.info("tag_deleted", tag_id=tag_id, name=name)
    return Message(message="Tag deleted successfully")
