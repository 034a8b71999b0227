from datetime import UTC, datetime, timedelta
from typing import Any
import uuid

import jwt
from passlib.context import CryptContext

from translation_service.core.config import settings
from translation_service.core.exceptions import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"


def access_token_lifetime() -> timedelta:
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(
    subject: str,
    expires_delta: timedelta | None = None,
) -> tuple[str, str, datetime]:
    """Create a signed access token for subject.

    Every token carries a unique jti so a single token can be revoked on
    logout without touching the user's other sessions.

    Returns:
        Tuple of (token, jti, expires_at)
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or access_token_lifetime())
    jti = str(uuid.uuid4())
    claims = {
        "exp": expire,
        "iat": now,
        "sub": str(subject),
        "type": ACCESS_TOKEN_TYPE,
        "jti": jti,
    }
    token = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token, jti, expire


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify signature, expiry and token type.

    Raises:
        AuthenticationError: If the token is malformed, expired or not an
            access token
    """
    try:
        claims: dict[str, Any] = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError("Could not validate credentials") from e

    if claims.get("type") != ACCESS_TOKEN_TYPE:
        raise AuthenticationError("Invalid token type")
    return claims


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
