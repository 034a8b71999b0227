from translation_service.translations.crud import (
    create_translation,
    delete_translation,
    get_translation,
    get_translation_by_key,
    get_translations,
    search_translations,
    update_translation,
)
from translation_service.translations.models import (
    Translation,
    TranslationBase,
    TranslationCreate,
    TranslationPublic,
    TranslationsPublic,
    TranslationUpdate,
)

__all__ = [
    # Models
    "Translation",
    "TranslationBase",
    "TranslationCreate",
    "TranslationPublic",
    "TranslationUpdate",
    "TranslationsPublic",
    # CRUD
    "create_translation",
    "delete_translation",
    "get_translation",
    "get_translation_by_key",
    "get_translations",
    "search_translations",
    "update_translation",
]
