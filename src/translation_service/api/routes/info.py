from typing import Any

from fastapi import APIRouter

from translation_service.api.deps import SettingsDep

router = APIRouter(tags=["info"])


@router.get("/")
def api_info(settings: SettingsDep) -> dict[str, Any]:
    """Service name, version and a map of the available endpoints."""
    prefix = settings.API_V1_STR
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "description": "Translation management API with cached JSON exports",
        "endpoints": {
            "auth": {
                "login": f"POST {prefix}/login",
                "logout": f"POST {prefix}/logout",
                "user": f"GET {prefix}/user",
            },
            "languages": f"{prefix}/languages",
            "tags": f"{prefix}/tags",
            "translations": f"{prefix}/translations",
            "search": f"GET {prefix}/translations/search",
            "export": {
                "language": f"GET {prefix}/export/language/{{code}}",
                "all": f"GET {prefix}/export/all",
                "tags": f"GET {prefix}/export/tags?tags=a,b&language={{code}}",
            },
        },
    }
