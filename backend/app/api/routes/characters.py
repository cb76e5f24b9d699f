"""Characters API: GET /api/characters, one JSON page of the catalog.

Invariants:
    - page defaults to 1; a non-integer page is a RequestValidationError (400)
    - page < 1 is NOT rejected here: the engine raises "page must be >= 1"
    - Response body is {page, size, total, items}
"""

import logging

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_engine
from app.schemas.catalog import ApiErrorResponse, PageResponse
from app.services.catalog_engine import CatalogRetrievalEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["characters"])


@router.get(
    "/characters",
    response_model=PageResponse,
    responses={
        400: {"model": ApiErrorResponse},
        503: {"model": ApiErrorResponse},
    },
)
async def list_characters(
    page: int = Query(1),
    search: str | None = Query(None),
    house: str | None = Query(None),
    engine: CatalogRetrievalEngine = Depends(get_engine),
):
    """Paginated characters, optionally narrowed by house then by name."""
    result = await engine.get_page(page, search, house)
    return PageResponse.from_domain(result)
