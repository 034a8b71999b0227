"""Create the first superuser and the default languages and tags."""

from sqlmodel import Session

from translation_service.auth import UserCreate, create_user, get_user_by_email
from translation_service.core.config import settings
from translation_service.core.db import engine
from translation_service.core.logging import get_logger, setup_logging
from translation_service.languages import (
    LanguageCreate,
    create_language,
    get_language_by_code,
)
from translation_service.tags import TagCreate, create_tag, get_tag_by_name

# Registers the Translation mapper referenced by Language and Tag relationships
from translation_service.translations.models import Translation  # noqa: F401

setup_logging()
logger = get_logger(__name__)

DEFAULT_LANGUAGES = [
    ("en", "English"),
    ("fr", "French"),
    ("es", "Spanish"),
    ("de", "German"),
    ("it", "Italian"),
]

DEFAULT_TAGS = [
    ("mobile", "Mobile application strings"),
    ("desktop", "Desktop application strings"),
    ("web", "Web application strings"),
    ("api", "API responses"),
    ("error", "Error messages"),
    ("success", "Success messages"),
    ("notification", "Notification texts"),
    ("email", "Email templates"),
]


def init(session: Session) -> None:
    """Idempotent: existing rows are left alone."""
    user = get_user_by_email(session=session, email=settings.FIRST_SUPERUSER_EMAIL)
    if not user:
        user = create_user(
            session=session,
            user_create=UserCreate(
                email=settings.FIRST_SUPERUSER_EMAIL,
                password=settings.FIRST_SUPERUSER_PASSWORD,
                full_name="Administrator",
                is_superuser=True,
            ),
        )
        logger.info("superuser_created", email=user.email)
    else:
        logger.info("superuser_exists", email=user.email)

    for code, name in DEFAULT_LANGUAGES:
        if get_language_by_code(session=session, code=code) is None:
            create_language(
                session=session, language_in=LanguageCreate(code=code, name=name)
            )
            logger.info("language_created", code=code)

    for name, description in DEFAULT_TAGS:
        if get_tag_by_name(session=session, name=name) is None:
            create_tag(
                session=session, tag_in=TagCreate(name=name, description=description)
            )
            logger.info("tag_created", name=name)


def main() -> None:
    logger.info("initial_data_started")
    with Session(engine) as session:
        init(session)
    logger.info("initial_data_finished")


if __name__ == "__main__":
    main()
