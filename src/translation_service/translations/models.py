from datetime import datetime
from typing import Any
import uuid

from sqlalchemy import JSON, Column, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from translation_service.core.base_models import PaginatedResponse, TimestampedTable
from translation_service.languages.models import Language, LanguageSummary
from translation_service.tags.models import Tag, TagPublic, TranslationTagLink


class TranslationBase(SQLModel):
    key: str = Field(min_length=1, max_length=255, index=True)
    content: str


class Translation(TranslationBase, TimestampedTable, table=True):
    __tablename__ = "translations"
    __table_args__ = (
        UniqueConstraint("language_id", "key", name="uq_translations_language_id_key"),
    )

    language_id: uuid.UUID = Field(
        foreign_key="languages.id", nullable=False, ondelete="CASCADE", index=True
    )
    # "metadata" is reserved on declarative models, so the attribute is renamed
    meta: dict[str, Any] | None = Field(
        default=None, sa_column=Column("metadata", JSON, nullable=True)
    )

    language: Language = Relationship(back_populates="translations")
    tags: list[Tag] = Relationship(
        back_populates="translations", link_model=TranslationTagLink
    )


class TranslationCreate(TranslationBase):
    language_id: uuid.UUID
    meta: dict[str, Any] | None = Field(default=None, alias="metadata")
    tags: list[uuid.UUID] | None = None


class TranslationUpdate(SQLModel):
    language_id: uuid.UUID | None = None
    key: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    meta: dict[str, Any] | None = Field(default=None, alias="metadata")
    # None leaves tags untouched, [] removes all of them
    tags: list[uuid.UUID] | None = None


class TranslationPublic(SQLModel):
    id: uuid.UUID
    language: LanguageSummary
    key: str
    content: str
    meta: dict[str, Any] | None = Field(default=None, alias="metadata")
    tags: list[TagPublic] = []
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_translation(cls, translation: Translation) -> "TranslationPublic":
        return cls.model_validate(
            {
                "id": translation.id,
                "language": LanguageSummary(
                    id=translation.language.id,
                    code=translation.language.code,
                    name=translation.language.name,
                ),
                "key": translation.key,
                "content": translation.content,
                "metadata": translation.meta,
                "tags": [TagPublic.model_validate(tag) for tag in translation.tags],
                "created_at": translation.created_at,
                "updated_at": translation.updated_at,
            }
        )


TranslationsPublic = PaginatedResponse[TranslationPublic]
