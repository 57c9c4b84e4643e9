"""Error Hierarchy — typed, categorized exceptions for all devgate failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - CallerError (400) covers every request validation failure; never raised for store failures
    - ResourceNotFoundError (404) is distinct from CallerError — a lookup miss is not a bad request
    - to_response() produces the REST envelope; to_soft_response() the legacy {"error": msg} shape
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DevgateError base: FastAPI global handler catches all (ADR: uniform error shape)
    - StartupError shares the base but is never rendered — it aborts create_app
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    action: str | None = None
    role_id: str | None = None
    debug_info: dict[str, Any] | None = None


class DevgateError(Exception):
    """Base exception for all devgate errors."""

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
                    "action": self.context.action,
                    "role_id": self.context.role_id,
                },
            }
        }

    def to_soft_response(self) -> dict:
        """Legacy dev-endpoint shape: a bare message under "error"."""
        return {"error": self.message}


# ─── Caller Errors (400) ────────────────────────────────────────

class CallerError(DevgateError):
    """The request itself is wrong — missing, empty or malformed input."""
    def __init__(
        self, message: str, code: str = "CALLER_ERROR",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ActionRequiredError(CallerError):
    """No action tag on a /dev request."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("action required", "ACTION_REQUIRED", context)


class ActionNotRecognizedError(CallerError):
    """Action tag outside the recognized set."""
    def __init__(self, action: str, context: ErrorContext | None = None):
        super().__init__(
            "action not recognized", "ACTION_NOT_RECOGNIZED", context,
        )
        self.action = action


class MalformedResourceIdError(CallerError):
    """resource_id is not an account:kind:identifier triple."""
    def __init__(self, resource_id: str, context: ErrorContext | None = None):
        super().__init__(
            "malformed resource_id", "MALFORMED_RESOURCE_ID", context,
        )
        self.resource_id = resource_id


class MissingParameterError(CallerError):
    """A parameter the operation needs is absent or empty."""
    def __init__(self, parameter: str, context: ErrorContext | None = None):
        super().__init__(
            f"{parameter} required", "PARAMETER_REQUIRED", context,
        )
        self.parameter = parameter


# ─── Access Errors (401/403) ────────────────────────────────────

class AuthenticationError(DevgateError):
    """Missing or invalid credentials."""
    def __init__(
        self, message: str = "Authentication required",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "AUTHENTICATION_REQUIRED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(DevgateError):
    """Acting identity lacks the privilege for the operation."""
    def __init__(
        self, role_id: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Role '{role_id}' is not permitted to {operation}",
            "PERMISSION_DENIED", ErrorCategory.PERMISSION,
            ErrorSeverity.ERROR, context, 403,
        )
        self.role_id = role_id
        self.operation = operation


# ─── Lookup / State Errors (404/409) ────────────────────────────

class ResourceNotFoundError(DevgateError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(DevgateError):
    """Resource already exists."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' already exists",
            "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(DevgateError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class StartupError(DevgateError):
    """App composition cannot guarantee its invariants. Fatal."""
    def __init__(self, message: str):
        super().__init__(
            message, "STARTUP_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, None, 500,
        )
