"""Documentation Routes — module lists, module docs and Swagger metadata.

Invariants:
    - Same four paths, same behavior on the tenant and the admin router
    - Each path bound exactly once per router (RouteRegistrationError otherwise)
    - DocumentationError -> its http_status and message, copied verbatim
    - Exactly one response per request; nothing here retries or wraps errors
    - Swagger endpoints have no error path of their own

Design Decisions:
    - register_routes(router, collaborators) over module-level routers:
      the same handlers are bound to two servers with injected collaborators
    - Swagger endpoints are private (include_in_schema=False) so they never
      describe themselves
"""

import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from docserver.api.context import get_request_context
from docserver.core.collaborator_protocols import Collaborators, RequestContext
from docserver.core.domain_types import DocEntry
from docserver.core.errors import DocumentationError, RouteRegistrationError

logger = logging.getLogger(__name__)

DOC_TYPE_PATH = "/api/doc/{type}"
DOC_MODULE_PATH = "/api/doc/{type}/{module}"
SWAGGER_PATH = "/api/swagger"
SWAGGER_API_PATH = "/api/swagger/{id}"

ROUTE_PATHS = (DOC_TYPE_PATH, DOC_MODULE_PATH, SWAGGER_PATH, SWAGGER_API_PATH)


def _error_response(exc: DocumentationError) -> PlainTextResponse:
    logger.info(
        f"Documentation request failed: {exc.message}",
        extra={
            "error_code": exc.code,
            "status_code": exc.http_status,
            "module_type": exc.context.module_type,
            "module_id": exc.context.module_id,
        },
    )
    return PlainTextResponse(exc.message, status_code=exc.http_status)


def _ensure_unbound(router: APIRouter) -> None:
    bound = {r.path for r in router.routes if isinstance(r, APIRoute)}
    for path in ROUTE_PATHS:
        if path in bound:
            raise RouteRegistrationError(path)


def register_routes(router: APIRouter, collaborators: Collaborators) -> APIRouter:
    """Bind the documentation and Swagger endpoints onto ``router``."""
    _ensure_unbound(router)
    docs = collaborators.docs
    swagger = collaborators.swagger

    @router.get(DOC_TYPE_PATH, status_code=status.HTTP_200_OK, tags=["doc"])
    async def get_doc_modules_by_type(
        module_type: str = Path(alias="type"),
    ):
        """Retrieve the list of available back-end or front-end modules.

        Accepted types are "backend" and "frontend"; anything else is rejected
        with 400 by the documentation provider.
        """
        try:
            modules: list[str] = await docs.list_modules(module_type)
        except DocumentationError as exc:
            return _error_response(exc)
        return modules

    @router.get(DOC_MODULE_PATH, status_code=status.HTTP_200_OK, tags=["doc"])
    async def get_doc_module(
        module_type: str = Path(alias="type"),
        module: str = Path(),
    ):
        """Retrieve the documentation for a particular module.

        400 for an invalid type or missing module id, 404 when no
        documentation exists for the module.
        """
        try:
            entries: list[DocEntry] = await docs.get_module_documentation(
                module, module_type,
            )
        except DocumentationError as exc:
            return _error_response(exc)
        return entries

    @router.get(
        SWAGGER_PATH, status_code=status.HTTP_200_OK, include_in_schema=False,
    )
    async def get_swagger(
        ctx: RequestContext = Depends(get_request_context),
    ):
        """Swagger 1.2 resource listing."""
        return swagger.get_resources(ctx)

    @router.get(
        SWAGGER_API_PATH, status_code=status.HTTP_200_OK, include_in_schema=False,
    )
    async def get_swagger_id(
        resource_id: str = Path(alias="id"),
        ctx: RequestContext = Depends(get_request_context),
    ):
        """Swagger 1.2 API declaration for one resource."""
        return swagger.get_api(ctx, resource_id)

    return router
