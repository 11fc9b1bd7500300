"""Swagger Registry — Swagger 1.2 documents for the routes a FastAPI app serves.

Invariants:
    - Only APIRoutes with include_in_schema=True are described (private routes hidden)
    - HEAD and OPTIONS never appear as operations
    - basePath is always the caller's base URL + "/api"

Design Decisions:
    - Route descriptors collected lazily on first use: the registry is created
      before the routes it describes are registered
    - Summary/notes come from the endpoint docstring (first paragraph / rest)
"""

import inspect
import logging
from typing import Any

from fastapi import FastAPI
from fastapi.routing import APIRoute

from docserver.core.collaborator_protocols import RequestContext
from docserver.core.swagger_spec import (
    API_PREFIX, RouteDescriptor, build_api_declaration, build_resource_listing,
)

logger = logging.getLogger(__name__)

_SKIPPED_METHODS = {"HEAD", "OPTIONS"}


def describe_routes(app: FastAPI) -> list[RouteDescriptor]:
    """Route descriptors for every public APIRoute of the app."""
    descriptors = []
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue
        doc = inspect.getdoc(route.endpoint) or ""
        summary, _, notes = doc.partition("\n\n")
        params = tuple(p.alias for p in route.dependant.path_params)
        for method in sorted(route.methods - _SKIPPED_METHODS):
            descriptors.append(RouteDescriptor(
                path=route.path,
                method=method,
                nickname=route.name,
                summary=route.summary or " ".join(summary.split()),
                notes=notes.strip(),
                path_params=params,
            ))
    return descriptors


class SwaggerRegistry:
    """SwaggerProvider backed by the routes of one FastAPI app."""

    def __init__(self, app: FastAPI, api_version: str, info: dict[str, str] | None = None):
        self._app = app
        self._api_version = api_version
        self._info = info
        self._routes: list[RouteDescriptor] | None = None

    @property
    def routes(self) -> list[RouteDescriptor]:
        if self._routes is None:
            self._routes = describe_routes(self._app)
            logger.info(f"Collected {len(self._routes)} route descriptors for Swagger")
        return self._routes

    def get_resources(self, ctx: RequestContext) -> dict[str, Any]:
        return build_resource_listing(self.routes, self._api_version, self._info)

    def get_api(self, ctx: RequestContext, resource_id: str) -> dict[str, Any]:
        base_path = ctx.base_url.rstrip("/") + API_PREFIX
        return build_api_declaration(
            self.routes, resource_id, base_path, self._api_version,
        )
