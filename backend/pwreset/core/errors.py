"""Error Hierarchy — typed, categorized exceptions for all pwreset failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) mean the caller's input was wrong; nothing to retry
    - to_response() produces the REST envelope
    - No plaintext password ever appears in an error message

Design Decisions:
    - Single hierarchy with PwResetError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Non-str inputs fail fast instead of being coerced: a coerced value hashes to a
      plausible but wrong digest with no visible symptom
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    legacy_id: str | None = None
    username: str | None = None


class PwResetError(Exception):
    """Base exception for all pwreset errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "legacy_id": self.context.legacy_id,
                    "username": self.context.username,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidInputError(PwResetError):
    """A credential field is not text."""
    def __init__(self, field: str, value: Any, context: ErrorContext | None = None):
        super().__init__(
            f"'{field}' must be a string, got {type(value).__name__}",
            "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        """REST envelope plus the offending field name."""
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class InvalidIterationsError(PwResetError):
    """Stretch iteration count is negative or not an integer."""
    def __init__(self, iterations: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Iteration count must be a non-negative integer, got {iterations!r}",
            "INVALID_ITERATIONS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.iterations = iterations


# ─── Internal Errors (500-level) ────────────────────────────────

class DerivationError(PwResetError):
    """Hash derivation failed for a reason other than bad input."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Hash derivation failed: {message}",
            "DERIVATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
