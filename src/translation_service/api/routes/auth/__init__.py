"""Authentication routes package.

- login: token issuance and logout (revocation)
- profile: the authenticated user
"""

from fastapi import APIRouter

from translation_service.api.routes.auth import login, profile

router = APIRouter(tags=["auth"])

router.include_router(login.router)
router.include_router(profile.router)
