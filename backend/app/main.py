"""Hogwarts Catalog API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Character snapshot loaded once on startup; a failed load aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Engine stored on app.state, not a module global: built once, injected via get_engine
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import characters, health, pages
from app.config import get_settings
from app.infrastructure.hp_api_client import HPApiClient
from app.infrastructure.observability import setup_logging
from app.services.catalog_engine import CatalogRetrievalEngine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    client = HPApiClient(
        settings.hp_api_base_url,
        timeout_seconds=settings.hp_api_timeout_seconds,
    )
    try:
        app.state.engine = await CatalogRetrievalEngine.load(client)
    except Exception:
        logger.critical("Character snapshot load failed, refusing to start", exc_info=True)
        await client.aclose()
        raise
    logger.info(
        "Hogwarts Catalog API started",
        extra={"count": len(app.state.engine.snapshot)},
    )
    yield
    logger.info("Hogwarts Catalog API shutting down")
    await client.aclose()


app = FastAPI(
    title="Hogwarts Catalog API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Routes: explicit registration. characters (JSON) before pages so /api/* is unambiguous.
app.include_router(health.router)
app.include_router(characters.router)
app.include_router(pages.router)

register_error_handlers(app)
