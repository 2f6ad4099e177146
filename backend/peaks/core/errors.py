"""Error Hierarchy - typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400/404-level and recoverable; nothing here is fatal
    - to_response() produces the REST body; no internal details leak into it
    - PeakValidationError is the one exception to the envelope shape: its body
      is the bare list of messages clients already consume

Design Decisions:
    - Single hierarchy with PeaksError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

import reprlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    peak_id: int | None = None
    index: int | None = None
    debug_info: dict[str, Any] | None = None


class PeaksError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict | list:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "peak_id": self.context.peak_id,
                    "index": self.context.index,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class PeakValidationError(PeaksError):
    """Candidate peak failed validation. Body is the list of messages."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            "; ".join(errors), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> list[str]:
        return list(self.errors)


class InvalidHeightError(PeaksError):
    """Height string could not be parsed as an integer."""
    def __init__(self, raw: object, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid height: {reprlib.repr(raw)} is not an integer",
            "INVALID_HEIGHT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.raw = raw


class PeakNotFoundError(PeaksError):
    """Index or id does not address a stored peak."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Peak not found.",
            "PEAK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
