from fastapi import APIRouter

from translation_service.api.routes import (
    auth,
    exports,
    info,
    languages,
    tags,
    translations,
)

api_router = APIRouter()
api_router.include_router(info.router)
api_router.include_router(auth.router)
api_router.include_router(languages.router)
api_router.include_router(tags.router)
api_router.include_router(translations.router)
api_router.include_router(exports.router)
