import uuid

from sqlmodel import Session, select

from translation_service.auth.models import User, UserCreate
from translation_service.core.security import get_password_hash, verify_password


def create_user(*, session: Session, user_create: UserCreate) -> User:
    """Create a new user with a hashed password.

    Args:
        session: Database session
        user_create: User creation data

    Returns:
        Created user object
    """
    db_obj = User.model_validate(
        user_create,
        update={"hashed_password": get_password_hash(user_create.password)},
    )
    session.add(db_obj)
    session.commit()
    session.refresh(db_obj)
    return db_obj


def get_user_by_email(*, session: Session, email: str) -> User | None:
    statement = select(User).where(User.email == email)
    return session.exec(statement).first()


def get_user_by_id(*, session: Session, user_id: uuid.UUID) -> User | None:
    return session.get(User, user_id)


# Valid bcrypt hash that never verifies; keeps unknown-email logins as slow
# as wrong-password logins
_DUMMY_HASH = "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.VIiOMjKQBNHxMK"


def authenticate(*, session: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Returns:
        User object if credentials are valid, None otherwise
    """
    db_user = get_user_by_email(session=session, email=email)

    if not db_user:
        verify_password(password, _DUMMY_HASH)
        return None

    if not verify_password(password, db_user.hashed_password):
        return None

    return db_user
