import uuid

from sqlmodel import Session, col, select

from translation_service.core.db import paginate
from translation_service.tags.models import Tag, TagCreate, TagUpdate


def create_tag(*, session: Session, tag_in: TagCreate) -> Tag:
    db_tag = Tag.model_validate(tag_in)
    session.add(db_tag)
    session.commit()
    session.refresh(db_tag)
    return db_tag


def get_tag(*, session: Session, tag_id: uuid.UUID) -> Tag | None:
    return session.get(Tag, tag_id)


def get_tag_by_name(*, session: Session, name: str) -> Tag | None:
    statement = select(Tag).where(Tag.name == name)
    return session.exec(statement).first()


def get_tags(
    *, session: Session, skip: int = 0, limit: int = 100
) -> tuple[list[Tag], int]:
    return paginate(session, select(Tag), skip=skip, limit=limit, order_by=Tag.name)


def get_tags_by_ids(*, session: Session, tag_ids: list[uuid.UUID]) -> list[Tag]:
    if not tag_ids:
        return []
    statement = select(Tag).where(col(Tag.id).in_(tag_ids))
    return list(session.exec(statement).all())


def update_tag(*, session: Session, db_tag: Tag, tag_in: TagUpdate) -> Tag:
    tag_data = tag_in.model_dump(exclude_unset=True)
    db_tag.sqlmodel_update(tag_data)
    db_tag.touch()
    session.add(db_tag)
    session.commit()
    session.refresh(db_tag)
    return db_tag


def delete_tag(*, session: Session, db_tag: Tag) -> None:
    """Delete a tag. Only its association rows go with it."""
    session.delete(db_tag)
    session.commit()
