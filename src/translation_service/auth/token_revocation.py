"""Revocation list for access tokens.

Logout stores the token's jti in the revoked_tokens table. Lookups go
through a process-local cache first and fall back to the table, so
revocations survive restarts and are shared between workers.
"""

from datetime import UTC, datetime
import uuid

from sqlmodel import Field, Session, SQLModel, col, select

from translation_service.core.cache import InMemoryCacheStore
from translation_service.core.config import settings
from translation_service.core.logging import get_logger

logger = get_logger(__name__)

_revoked_tokens_cache = InMemoryCacheStore()


class RevokedToken(SQLModel, table=True):
    __tablename__ = "revoked_tokens"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    jti: str = Field(index=True, unique=True)
    user_id: uuid.UUID = Field(index=True)
    revoked_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime  # When the token would have naturally expired


def _remember_revoked(jti: str, expires_at: datetime | None = None) -> None:
    ttl_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    if expires_at is not None:
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        remaining = (expires_at - datetime.now(UTC)).total_seconds()
        ttl_minutes = max(1, int(remaining // 60) + 1)
    _revoked_tokens_cache.set(jti, True, ttl_minutes)


def revoke_token(
    session: Session,
    jti: str,
    user_id: uuid.UUID,
    expires_at: datetime,
) -> None:
    """Revoke a token by its jti.

    Args:
        session: Database session
        jti: JWT ID to revoke
        user_id: User who owns the token
        expires_at: When the token would naturally expire
    """
    if is_token_revoked(session, jti):
        return

    session.add(RevokedToken(jti=jti, user_id=user_id, expires_at=expires_at))
    session.commit()
    _remember_revoked(jti, expires_at)

    logger.info("token_revoked", jti=jti, user_id=str(user_id))


def is_token_revoked(session: Session, jti: str | None) -> bool:
    if jti is None:
        return False

    if _revoked_tokens_cache.get(jti) is True:
        return True

    statement = select(RevokedToken).where(RevokedToken.jti == jti)
    result = session.exec(statement).first()
    if result:
        _remember_revoked(jti, result.expires_at)
        return True

    return False


def cleanup_expired_tokens(session: Session) -> int:
    """Remove revoked tokens that would have expired anyway.

    Returns:
        Count of removed rows
    """
    now = datetime.now(UTC)
    statement = select(RevokedToken).where(col(RevokedToken.expires_at) < now)
    expired_tokens = session.exec(statement).all()

    for token in expired_tokens:
        session.delete(token)
    if expired_tokens:
        session.commit()
        logger.info("expired_tokens_cleaned", count=len(expired_tokens))

    _revoked_tokens_cache.cleanup_expired()
    return len(expired_tokens)
