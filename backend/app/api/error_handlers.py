"""Error Handlers: global exception handlers for the catalog API.

Invariants:
    - CatalogError -> its http_status with {timestamp, status, error, message, path}
    - RequestValidationError -> 400 with the same envelope plus field-level details
    - Exception (catch-all) -> 500 "Something went wrong.", never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CatalogError), validation (Pydantic), catch-all (Exception)
    - Only place errors are logged: the engine raises, the boundary reports
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import CatalogError, build_error_body

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/upstream error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle InvalidArgumentError (400) and UpstreamUnavailableError (503)."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"CatalogError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request.url.path),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors (e.g. non-integer page)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(request, exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error",
                "Something went wrong.",
                request.url.path,
            ),
        )


def _build_validation_error_response(
    request: Request, exc: RequestValidationError,
) -> dict:
    """Build structured validation error response."""
    body = build_error_body(
        status.HTTP_400_BAD_REQUEST,
        "Bad request",
        "Invalid request parameters",
        request.url.path,
    )
    body["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return body
