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


class LanguageBase(SQLModel):
    code: str = Field(min_length=1, max_length=10, unique=True, index=True)
    name: str = Field(min_length=1, max_length=255)
    is_active: bool = True


class Language(LanguageBase, TimestampedTable, table=True):
    __tablename__ = "languages"

    # Deleting a language deletes its translations
    translations: list["Translation"] = Relationship(
        back_populates="language",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )


class LanguageCreate(LanguageBase):
    pass


class LanguageUpdate(SQLModel):
    code: str | None = Field(default=None, min_length=1, max_length=10)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    is_active: bool | None = None


class LanguagePublic(LanguageBase, TimestampResponseMixin):
    id: uuid.UUID


class LanguageSummary(SQLModel):
    id: uuid.UUID
    code: str
    name: str


LanguagesPublic = PaginatedResponse[LanguagePublic]


Language.model_rebuild()
