"""Public export endpoints consumed by client applications."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from translation_service.api.deps import ExportServiceDep, require_export_access
from translation_service.auth import SessionDep
from translation_service.core.exceptions import ResourceNotFoundError, ValidationError
from translation_service.core.logging import get_logger
from translation_service.core.rate_limit import EXPORT_RATE_LIMIT, limiter
from translation_service.exports import FlatExport, NestedExport, normalize_tag_names
from translation_service.languages import get_language_by_code

router = APIRouter(
    prefix="/export",
    tags=["export"],
    dependencies=[Depends(require_export_access)],
)
logger = get_logger(__name__)


@router.get("/language/{code}", response_model=FlatExport)
@limiter.limit(EXPORT_RATE_LIMIT)
def export_language(
    request: Request,  # Required for rate limiter
    session: SessionDep,
    exports: ExportServiceDep,
    code: str,
) -> FlatExport:
    """Every key of one language as a flat ``{key: content}`` map.

    Raises:
        ResourceNotFoundError: If no language has this code
    """
    result = exports.export_by_language(code)
    # An empty export is either an empty language or an unknown code
    if not result and get_language_by_code(session=session, code=code) is None:
        raise ResourceNotFoundError("Language", code)
    return result


@router.get("/all", response_model=NestedExport)
@limiter.limit(EXPORT_RATE_LIMIT)
def export_all(request: Request, exports: ExportServiceDep) -> NestedExport:
    """``{code: {key: content}}`` for every language, active or not."""
    return exports.export_all()


@router.get("/tags", response_model=NestedExport)
@limiter.limit(EXPORT_RATE_LIMIT)
def export_tags(
    request: Request,
    session: SessionDep,
    exports: ExportServiceDep,
    tags: Annotated[
        str | None, Query(description="Comma-separated tag names, any may match")
    ] = None,
    language: Annotated[
        str | None, Query(description="Restrict to one language code")
    ] = None,
) -> NestedExport:
    """``{code: {key: content}}`` for translations carrying any of the tags."""
    tag_names = normalize_tag_names((tags or "").split(","))
    if not tag_names:
        raise ValidationError("At least one tag is required", field="tags")
    if language and get_language_by_code(session=session, code=language) is None:
        raise ValidationError("Language does not exist", field="language")

    return exports.export_by_tags(tag_names, language_code=language or None)
