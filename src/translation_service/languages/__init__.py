from translation_service.languages.crud import (
    create_language,
    delete_language,
    get_language,
    get_language_by_code,
    get_languages,
    update_language,
)
from translation_service.languages.models import (
    Language,
    LanguageBase,
    LanguageCreate,
    LanguagePublic,
    LanguagesPublic,
    LanguageSummary,
    LanguageUpdate,
)

__all__ = [
    # Models
    "Language",
    "LanguageBase",
    "LanguageCreate",
    "LanguagePublic",
    "LanguageSummary",
    "LanguageUpdate",
    "LanguagesPublic",
    # CRUD
    "create_language",
    "delete_language",
    "get_language",
    "get_language_by_code",
    "get_languages",
    "update_language",
]
