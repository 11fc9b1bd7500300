"""Documentation API — FastAPI application entry points for both server contexts.

Invariants:
    - Tenant and admin servers expose identical documentation routes
    - Routes registered explicitly through register_routes (no import-time binding)
    - Each server owns its own APIRouter; register_routes runs once per router
    - A catch-all error handler turns anything escaping a route into a 500 envelope
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app factory over a module-level app: tests build apps with fake
      collaborators, production builds both servers from settings
    - One DocumentationRegistry shared by both servers: the docs cache is per
      process, not per server
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docserver.api.error_handlers import register_error_handlers
from docserver.api.routes import health
from docserver.api.routes.doc import register_routes
from docserver.config import Settings, get_settings
from docserver.core.collaborator_protocols import Collaborators, DocumentationProvider
from docserver.core.domain_types import ServerType
from docserver.infrastructure.observability import setup_logging
from docserver.services.documentation import DocumentationRegistry
from docserver.services.swagger import SwaggerRegistry

logger = logging.getLogger(__name__)


def build_documentation_registry(settings: Settings) -> DocumentationRegistry:
    return DocumentationRegistry(
        backend_dir=settings.backend_docs_dir,
        frontend_dir=settings.frontend_docs_dir,
        backend_prefix=settings.backend_module_prefix,
        excluded_dirs=settings.doc_excluded_dirs,
    )


def create_app(
    server_type: ServerType,
    settings: Settings | None = None,
    collaborators: Collaborators | None = None,
    docs: DocumentationProvider | None = None,
) -> FastAPI:
    """Build one server context.

    Pass ``collaborators`` to replace both providers, or only ``docs`` to keep
    the Swagger registry bound to this app. Passing both is an error.
    """
    if collaborators is not None and docs is not None:
        raise ValueError("Pass either collaborators or docs, not both")
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Documentation API ({server_type.value}) started",
            extra={"server_type": server_type.value},
        )
        yield
        logger.info(
            f"Documentation API ({server_type.value}) shutting down",
            extra={"server_type": server_type.value},
        )

    app = FastAPI(
        title=f"{settings.service_title} ({server_type.value})",
        version=settings.api_version,
        lifespan=lifespan,
    )
    app.state.server_type = server_type
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    if collaborators is None:
        collaborators = Collaborators(
            docs=docs or build_documentation_registry(settings),
            swagger=SwaggerRegistry(
                app,
                api_version=settings.api_version,
                info={"title": settings.service_title},
            ),
        )

    router = APIRouter()
    register_routes(router, collaborators)
    app.include_router(health.router)
    app.include_router(router)
    return app


def create_tenant_app(
    settings: Settings | None = None, docs: DocumentationProvider | None = None,
) -> FastAPI:
    return create_app(ServerType.TENANT, settings, docs=docs)


def create_admin_app(
    settings: Settings | None = None, docs: DocumentationProvider | None = None,
) -> FastAPI:
    return create_app(ServerType.ADMIN, settings, docs=docs)


async def _serve(settings: Settings) -> None:
    docs = build_documentation_registry(settings)
    servers = [
        uvicorn.Server(uvicorn.Config(
            create_tenant_app(settings, docs),
            host=settings.tenant_host, port=settings.tenant_port,
            log_level=settings.log_level.lower(),
        )),
        uvicorn.Server(uvicorn.Config(
            create_admin_app(settings, docs),
            host=settings.admin_host, port=settings.admin_port,
            log_level=settings.log_level.lower(),
        )),
    ]
    await asyncio.gather(*(server.serve() for server in servers))


def serve() -> None:
    """Run the tenant and admin servers side by side."""
    asyncio.run(_serve(get_settings()))


if __name__ == "__main__":
    serve()
