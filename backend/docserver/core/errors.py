"""Error Hierarchy — typed, categorized exceptions for all docserver failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status it maps to (http_status) and a message
    - Documentation errors (400/404) are copied verbatim onto the response by routes
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DocServerError base: routes map any subclass by http_status
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    module_type: str | None = None
    module_id: str | None = None
    debug_info: dict[str, Any] | None = None


class DocServerError(Exception):
    """Base exception for all docserver errors."""

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


# ─── Documentation Errors (400-level) ───────────────────────────

class DocumentationError(DocServerError):
    """Failure reported by the documentation collaborator.

    Routes never interpret these: ``http_status`` and ``message`` go onto the
    response as-is.
    """


class InvalidModuleTypeError(DocumentationError):
    """Module type is missing or not one of backend/frontend."""
    def __init__(self, module_type: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.module_type = module_type
        super().__init__(
            'Invalid or missing module type. Accepted values are "backend" and "frontend"',
            "INVALID_MODULE_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class MissingModuleIdError(DocumentationError):
    """Module id is empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Missing module id",
            "MISSING_MODULE_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class DocModuleNotFoundError(DocumentationError):
    """No documentation exists for the requested module."""
    def __init__(
        self, module_id: str, module_type: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.module_id = module_id
        ctx.module_type = module_type
        super().__init__(
            "No documentation for this module was found",
            "DOC_MODULE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.module_id = module_id


# ─── Internal Errors (500-level) ────────────────────────────────

class RouteRegistrationError(DocServerError):
    """A documentation route was bound twice on the same router."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"Route '{path}' is already registered on this router",
            "ROUTE_ALREADY_REGISTERED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.path = path
