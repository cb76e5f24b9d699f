"""Error Hierarchy: typed, categorized exceptions for every catalog failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; upstream errors (503) are critical
    - to_response() produces the REST error envelope (timestamp, status, error, message, path)
    - Raised where detected, translated only by app/api/error_handlers.py

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Timestamp captured at construction, not at serialization: reflects when the failure happened
"""

from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    label: str = "Internal server error"

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self, path: str) -> dict:
        """Convert to standardized REST error response."""
        return build_error_body(
            self.http_status, self.label, self.message, path,
            timestamp=self.timestamp,
        )


def build_error_body(
    status: int,
    error: str,
    message: str,
    path: str,
    timestamp: datetime | None = None,
) -> dict:
    """Error envelope shared by domain, validation and catch-all handlers."""
    return {
        "timestamp": (timestamp or datetime.now(timezone.utc)).isoformat(),
        "status": status,
        "error": error,
        "message": message,
        "path": path,
    }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(CatalogError):
    """Query argument the caller can correct (bad or out-of-range page)."""

    label = "Bad request"

    def __init__(self, message: str):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )


# ─── Upstream Errors (503) ──────────────────────────────────────

class UpstreamUnavailableError(CatalogError):
    """The external character source failed or returned garbage."""

    label = "External API error"

    def __init__(self, message: str):
        super().__init__(
            message, "EXTERNAL_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, 503,
        )
