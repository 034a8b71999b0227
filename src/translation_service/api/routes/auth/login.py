"""Login and logout routes."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm

from translation_service.auth import (
    CurrentUser,
    Message,
    SessionDep,
    Token,
    TokenPayloadDep,
    authenticate,
    revoke_token,
)
from translation_service.core.logging import get_logger
from translation_service.core.rate_limit import LOGIN_RATE_LIMIT, limiter
from translation_service.core.security import (
    access_token_lifetime,
    create_access_token,
)

router = APIRouter()
logger = get_logger(__name__)


@router.post("/login", response_model=Token)
@limiter.limit(LOGIN_RATE_LIMIT)
def login_access_token(
    request: Request,  # Required for rate limiter
    session: SessionDep,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
) -> Token:
    """OAuth2 compatible token login (username is the email address).

    Rate limited to prevent brute force attacks.
    """
    user = authenticate(
        session=session, email=form_data.username, password=form_data.password
    )
    if not user:
        logger.info("user_login_failed", email=form_data.username)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Incorrect email or password",
        )
    if not user.is_active:
        logger.info("user_login_inactive", email=user.email)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )

    access_token, _jti, _expires_at = create_access_token(str(user.id))
    logger.info("user_login", email=user.email)

    return Token(
        access_token=access_token,
        expires_in=int(access_token_lifetime().total_seconds()),
    )


@router.post("/logout", response_model=Message)
def logout(
    session: SessionDep,
    current_user: CurrentUser,
    payload: TokenPayloadDep,
) -> Message:
    """Revoke the token used for this request."""
    if payload.jti:
        revoke_token(
            session=session,
            jti=payload.jti,
            user_id=current_user.id,
            expires_at=payload.exp or datetime.now(UTC),
        )
    logger.info("user_logout", email=current_user.email)
    return Message(message="Logged out successfully")
