from translation_service.tags.crud import (
    create_tag,
    delete_tag,
    get_tag,
    get_tag_by_name,
    get_tags,
    get_tags_by_ids,
    update_tag,
)
from translation_service.tags.models import (
    Tag,
    TagBase,
    TagCreate,
    TagPublic,
    TagsPublic,
    TagUpdate,
    TranslationTagLink,
)

__all__ = [
    # Models
    "Tag",
    "TagBase",
    "TagCreate",
    "TagPublic",
    "TagUpdate",
    "TagsPublic",
    "TranslationTagLink",
    # CRUD
    "create_tag",
    "delete_tag",
    "get_tag",
    "get_tag_by_name",
    "get_tags",
    "get_tags_by_ids",
    "update_tag",
]
