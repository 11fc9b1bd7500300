"""Error Handlers — global exception handler for the documentation API.

Invariants:
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Documentation routes answer their own DocumentationErrors in plain text;
      only what escapes a route (e.g. a Swagger provider failure) lands here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from docserver.core.errors import ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_generic_error_handler(app)


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
