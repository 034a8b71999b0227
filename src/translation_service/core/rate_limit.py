from slowapi import Limiter
from slowapi.util import get_remote_address

from translation_service.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["100/minute"] if settings.ENVIRONMENT != "local" else [],
    enabled=settings.ENVIRONMENT != "local",
)

LOGIN_RATE_LIMIT = "5/minute"

EXPORT_RATE_LIMIT = "60/minute"
