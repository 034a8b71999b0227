from translation_service.auth.crud import (
    authenticate,
    create_user,
    get_user_by_email,
    get_user_by_id,
)
from translation_service.auth.deps import (
    CurrentUser,
    OptionalTokenDep,
    SessionDep,
    TokenDep,
    TokenPayloadDep,
    get_current_user,
    get_token_payload,
)
from translation_service.auth.models import (
    Message,
    Token,
    TokenPayload,
    User,
    UserCreate,
    UserPublic,
)
from translation_service.auth.token_revocation import (
    RevokedToken,
    cleanup_expired_tokens,
    is_token_revoked,
    revoke_token,
)

__all__ = [
    # Dependencies
    "CurrentUser",
    "OptionalTokenDep",
    "SessionDep",
    "TokenDep",
    "TokenPayloadDep",
    "get_current_user",
    "get_token_payload",
    # Models
    "Message",
    "RevokedToken",
    "Token",
    "TokenPayload",
    "User",
    "UserCreate",
    "UserPublic",
    # CRUD
    "authenticate",
    "cleanup_expired_tokens",
    "create_user",
    "get_user_by_email",
    "get_user_by_id",
    "is_token_revoked",
    "revoke_token",
]
