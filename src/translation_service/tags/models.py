from typing import TYPE_CHECKING
import uuid

from sqlmodel import Field, Relationship, SQLModel

from translation_service.core.base_models import (
    PaginatedResponse,
    TimestampedTable,
    TimestampResponseMixin,
)

if TYPE_CHECKING:
    from translation_service.translations.models import Translation


class TranslationTagLink(SQLModel, table=True):
    """Association between translations and tags. Carries no payload."""

    __tablename__ = "translation_tag"

    translation_id: uuid.UUID = Field(
        foreign_key="translations.id", primary_key=True, ondelete="CASCADE"
    )
    tag_id: uuid.UUID = Field(
        foreign_key="tags.id", primary_key=True, ondelete="CASCADE", index=True
    )


class TagBase(SQLModel):
    name: str = Field(min_length=1, max_length=255, unique=True, index=True)
    description: str | None = Field(default=None, max_length=255)


class Tag(TagBase, TimestampedTable, table=True):
    __tablename__ = "tags"

    translations: list["Translation"] = Relationship(
        back_populates="tags", link_model=TranslationTagLink
    )


class TagCreate(TagBase):
    pass


class TagUpdate(SQLModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=255)


class TagPublic(TagBase, TimestampResponseMixin):
    id: uuid.UUID


TagsPublic = PaginatedResponse[TagPublic]


Tag.model_rebuild()
