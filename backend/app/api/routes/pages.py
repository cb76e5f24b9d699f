"""HTML Views: server-rendered home, houses and characters pages.

Invariants:
    - /characters uses the same engine call as the JSON API; errors go through the global handlers
    - total_pages = ceil(total / size), derived here for display only
    - search/house echoed back as "" when absent so the filter form stays populated
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.dependencies import get_engine
from app.core.house_catalog import HOUSES
from app.services.catalog_engine import CatalogRetrievalEngine

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html")


@router.get("/houses")
async def houses(request: Request):
    return templates.TemplateResponse(
        request, "houses.html", {"houses": HOUSES},
    )


@router.get("/characters")
async def characters_page(
    request: Request,
    page: int = Query(1),
    search: str | None = Query(None),
    house: str | None = Query(None),
    engine: CatalogRetrievalEngine = Depends(get_engine),
):
    resp = await engine.get_page(page, search, house)
    return templates.TemplateResponse(
        request,
        "characters.html",
        {
            "resp": resp,
            "search": search or "",
            "house": house or "",
            "total_pages": resp.total_pages,
            "houses": HOUSES,
        },
    )
