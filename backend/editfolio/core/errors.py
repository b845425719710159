"""Error Hierarchy — typed, categorized exceptions for all account failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Callers branch on `category`, never on message text
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with EditfolioError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorCategory is the closed set of failure kinds; new kinds require a new member here
"""

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
    """High-level error kinds for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ALREADY_EXISTS = "already_exists"
    WRONG_CREDENTIAL = "wrong_credential"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class EditfolioError(Exception):
    """Base exception for all Editfolio errors."""

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

class ItemNotFoundError(EditfolioError):
    """Requested item does not exist (or is not eligible for the operation)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "ITEM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ItemAlreadyExistsError(EditfolioError):
    """A unique key is already taken by another item."""
    def __init__(
        self, resource_type: str, key: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{key}' already exists",
            "ITEM_ALREADY_EXISTS", ErrorCategory.ALREADY_EXISTS,
            ErrorSeverity.ERROR, context, 409,
        )
        self.resource_type = resource_type
        self.key = key


class WrongPasswordError(EditfolioError):
    """Supplied password does not match the stored credential."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Wrong password",
            "USER_WRONG_PASSWORD", ErrorCategory.WRONG_CREDENTIAL,
            ErrorSeverity.WARNING, context, 401,
        )


class AuthenticationError(EditfolioError):
    """Request carries no valid identity."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.UNAUTHENTICATED,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(EditfolioError):
    """Authenticated identity lacks the required role."""
    def __init__(self, required_role: str, context: ErrorContext | None = None):
        super().__init__(
            f"Role '{required_role}' or higher required",
            "FORBIDDEN", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )
        self.required_role = required_role


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(EditfolioError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class UseCaseTimeoutError(EditfolioError):
    """Use-case operation exceeded its time budget."""
    def __init__(
        self, operation: str, timeout_seconds: float, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Operation '{operation}' exceeded {timeout_seconds}s",
            "TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.timeout_seconds = timeout_seconds
