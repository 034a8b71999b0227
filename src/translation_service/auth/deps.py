from typing import Annotated
import uuid

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlmodel import Session

from translation_service.auth.models import TokenPayload, User
from translation_service.auth.token_revocation import is_token_revoked
from translation_service.core.config import settings
from translation_service.core.db import get_db
from translation_service.core.exceptions import AuthenticationError
from translation_service.core.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/login")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/login", auto_error=False
)

SessionDep = Annotated[Session, Depends(get_db)]
TokenDep = Annotated[str, Depends(oauth2_scheme)]
OptionalTokenDep = Annotated[str | None, Depends(optional_oauth2_scheme)]


def get_token_payload(token: TokenDep) -> TokenPayload:
    """Decode and validate the bearer token.

    Raises:
        AuthenticationError: If the token cannot be decoded
    """
    claims = decode_access_token(token)
    try:
        return TokenPayload(**claims)
    except ValidationError as e:
        raise AuthenticationError("Could not validate credentials") from e


TokenPayloadDep = Annotated[TokenPayload, Depends(get_token_payload)]


def get_current_user(session: SessionDep, payload: TokenPayloadDep) -> User:
    """Get the current authenticated user from the bearer token.

    Raises:
        AuthenticationError: If the token is revoked or the user is
            missing or inactive
    """
    if is_token_revoked(session, payload.jti):
        raise AuthenticationError("Token has been revoked")

    try:
        user_id = uuid.UUID(payload.sub or "")
    except ValueError as e:
        raise AuthenticationError("Could not validate credentials") from e

    user = session.get(User, user_id)
    if not user:
        raise AuthenticationError("User not found")
    if not user.is_active:
        raise AuthenticationError("Inactive user")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
