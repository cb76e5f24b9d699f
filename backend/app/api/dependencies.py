"""Route Dependencies: hand the lifespan-built engine to route handlers.

Tests replace get_engine via app.dependency_overrides with an engine over a fake source.
"""

from fastapi import Request

from app.services.catalog_engine import CatalogRetrievalEngine


def get_engine(request: Request) -> CatalogRetrievalEngine:
    return request.app.state.engine
