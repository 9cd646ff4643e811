"""Error Hierarchy - typed, categorized exceptions for all Student Registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - message_key (when set) lets the global handler re-localize the message per request

Design Decisions:
    - Single hierarchy with StudentApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from student_api.core.domain_types import MessageKey, StudentId


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context surfaced in error responses and logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    student_id: int | None = None
    locale: str | None = None


class StudentApiError(Exception):
    """Base exception for all Student Registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        message_key: MessageKey | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.message_key = message_key

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
                    "student_id": self.context.student_id,
                    "locale": self.context.locale,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class StudentNotFoundError(StudentApiError):
    """No student exists with the requested id."""
    def __init__(
        self,
        student_id: StudentId,
        message: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.student_id = student_id
        super().__init__(
            message or f"Student '{student_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404, MessageKey.STUDENT_NOT_FOUND,
        )
        self.student_id = student_id


class DuplicateEmailError(StudentApiError):
    """Another student already uses the e-mail address.

    email is None when the conflict was only seen as a unique-index violation.
    """
    def __init__(self, email: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            f"A student with email '{email}' already exists" if email
            else "A student with this email already exists",
            "EMAIL_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409, MessageKey.STUDENT_EMAIL_EXISTS,
        )
        self.email = email


# ─── Infrastructure Errors (500-level) ──────────────────────────

class MessageNotFoundError(StudentApiError):
    """Message key missing from the default catalog."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        super().__init__(
            f"No message defined for key '{key}'",
            "MESSAGE_NOT_FOUND", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500, MessageKey.INTERNAL_ERROR,
        )
        self.key = key


class DatabaseError(StudentApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503, MessageKey.DATABASE_UNAVAILABLE,
        )
        self.operation = operation
