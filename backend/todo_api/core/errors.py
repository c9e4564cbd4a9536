"""Error Hierarchy — typed, categorized exceptions shared by both services.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is fixed per class: the wire contract never depends on call site
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - No password, hash, or driver diagnostic ever appears in a message

Design Decisions:
    - Single hierarchy with TodoApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - AuthenticationFailedError separate from ResourceNotFoundError: the service layer
      always tells "wrong password" from "no such user"; the transport may blur them
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    CONFLICT = "conflict"
    DATABASE = "database"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None


class TodoApiError(Exception):
    """Base exception for all service errors."""

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

class InvalidInputError(TodoApiError):
    """A required field is missing or empty."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class InvalidIdentifierError(TodoApiError):
    """A path or query identifier is not a UUID."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw}' is not a valid identifier",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InconsistentIdentifierError(TodoApiError):
    """Path identifier and body identifier disagree."""
    def __init__(self, path_id: str, body_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Body id '{body_id}' does not match path id '{path_id}'",
            "INCONSISTENT_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class OwnerMissingError(TodoApiError):
    """Todo created without an owner."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "owner_id is required",
            "OWNER_MISSING", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class OwnerChangedError(TodoApiError):
    """Update attempted to reassign a Todo to another owner."""
    def __init__(self, todo_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"owner_id of todo '{todo_id}' cannot be changed",
            "OWNER_CHANGED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationFailedError(TodoApiError):
    """Credentials did not match."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication failed",
            "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(TodoApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class ConflictError(TodoApiError):
    """Uniqueness constraint violated."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ServiceUnavailableError(TodoApiError):
    """Underlying store unreachable."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Service unavailable: {reason}",
            "SERVICE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class CredentialHashError(TodoApiError):
    """Stored password hash is corrupt or uses unsupported parameters."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CREDENTIAL_HASH_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(TodoApiError):
    """Uncategorized database failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
