from datetime import datetime
import uuid

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

from translation_service.core.base_models import BaseTable


class UserBase(SQLModel):
    email: EmailStr = Field(unique=True, index=True, max_length=255)
    is_active: bool = True
    is_superuser: bool = False
    full_name: str | None = Field(default=None, max_length=255)


class User(UserBase, BaseTable, table=True):
    __tablename__ = "users"

    hashed_password: str


class UserCreate(UserBase):
    password: str = Field(min_length=8, max_length=128)


class UserPublic(UserBase):
    id: uuid.UUID


class Token(SQLModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # Access token expiry in seconds


class TokenPayload(SQLModel):
    sub: str | None = None
    type: str = "access"
    jti: str | None = None  # JWT ID for token revocation
    exp: datetime | None = None


class Message(SQLModel):
    message: str
