"""Authenticated user profile route."""

from typing import Any

from fastapi import APIRouter

from translation_service.auth import CurrentUser, UserPublic

router = APIRouter()


@router.get("/user", response_model=UserPublic)
def read_current_user(current_user: CurrentUser) -> Any:
    """Get the user the bearer token belongs to."""
    return current_user
