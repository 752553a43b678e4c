"""Error Hierarchy: typed, categorized exceptions for infrastructure failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope rendered by the global handler
    - No internal details (SQL, driver messages) leaked in user-facing messages
    - Validation failures are NOT exceptions; see WriteResult in domain_types

Design Decisions:
    - Single hierarchy with UserApiError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None


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
                "context": {"operation": self.context.operation},
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UserApiError):
    """Database operation failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        context: ErrorContext | None = None,
        code: str = "DATABASE_ERROR",
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class ConstraintViolationError(DatabaseError):
    """A write broke a table constraint (duplicate primary key)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "commit", context, code="CONSTRAINT_VIOLATION")


class ConnectivityError(DatabaseError):
    """The data store could not be reached."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "connect", context, code="CONNECTIVITY_ERROR")
