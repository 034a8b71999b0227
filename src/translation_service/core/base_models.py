"""Base models and mixins shared by the SQLModel tables and schemas.

Usage:
    class Language(LanguageBase, TimestampedTable, table=True):
        ...

    class LanguagePublic(LanguageBase, TimestampResponseMixin):
        id: uuid.UUID
"""

import uuid
from datetime import UTC, datetime
from typing import Generic, TypeVar

from sqlmodel import Field, SQLModel

T = TypeVar("T")


def utcnow() -> datetime:
    return datetime.now(UTC)


class UUIDPrimaryKeyMixin(SQLModel):
    """Standard UUID primary key for all models."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)


class TimestampMixin(SQLModel):
    """Created/updated timestamps.

    updated_at is indexed because export fingerprints aggregate over it.
    """

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, index=True)

    def touch(self) -> None:
        self.updated_at = utcnow()


class BaseTable(UUIDPrimaryKeyMixin):
    """Base for simple tables (ID only). Use for: User."""


class TimestampedTable(UUIDPrimaryKeyMixin, TimestampMixin):
    """Base for tables with timestamps. Use for: Language, Tag, Translation."""


class TimestampResponseMixin(SQLModel):
    """For Public/Response schemas that include timestamps."""

    created_at: datetime
    updated_at: datetime


class PaginatedResponse(SQLModel, Generic[T]):
    """Standard paginated response wrapper.

    Example:
        @router.get("/tags", response_model=PaginatedResponse[TagPublic])
        def list_tags(...):
            return PaginatedResponse(data=tags, count=len(tags))
    """

    data: list[T]
    count: int
