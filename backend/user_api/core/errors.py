"""Error Hierarchy — typed, categorized exceptions for all User API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope shared by every error response
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserApiError base: FastAPI global handler catches all
      (uniform error shape)
    - Core returns violations/conflicts as values; routes raise these errors at the
      boundary so the handler can map them to HTTP
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from user_api.core.domain_types import FieldViolation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    debug_info: dict[str, Any] | None = None


class UserApiError(Exception):
    """Base exception for all User API errors."""

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
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UserValidationError(UserApiError):
    """One or more user fields failed format validation."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        fields = ", ".join(v.field.value for v in violations)
        super().__init__(
            f"Invalid user data: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {
                "field": v.field.value,
                "message": v.message,
                "type": v.kind.value,
            }
            for v in self.violations
        ]
        return response


class EmailConflictError(UserApiError):
    """A user with this email already exists."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "A user with this email already exists",
            "USER_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class RegistryNotInitializedError(UserApiError):
    """User registry requested before application startup completed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User registry is not available",
            "REGISTRY_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
