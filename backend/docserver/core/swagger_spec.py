"""Swagger Spec Assembly — route descriptors to Swagger 1.2 documents.

Invariants:
    - swaggerVersion is always "1.2"
    - A resource is the first path segment after /api (e.g. /api/doc/{type} -> "doc")
    - Paths in the API declaration are relative to basePath (the /api prefix is stripped)
    - Unknown resource ids produce a declaration with no apis, never an error

Design Decisions:
    - Descriptors are plain frozen dataclasses: assembly is testable without FastAPI
    - Output key order mirrors the Swagger 1.2 document layout
"""

from dataclasses import dataclass, field
from typing import Any

SWAGGER_VERSION = "1.2"
API_PREFIX = "/api"


@dataclass(frozen=True)
class RouteDescriptor:
    """One served endpoint as seen by the Swagger builder."""
    path: str
    method: str
    nickname: str
    summary: str = ""
    notes: str = ""
    path_params: tuple[str, ...] = field(default_factory=tuple)


def resource_of(path: str) -> str | None:
    """Resource id for a path, or None when the path is outside /api."""
    if not path.startswith(API_PREFIX + "/"):
        return None
    rest = path[len(API_PREFIX) + 1:]
    segment = rest.split("/", 1)[0]
    if not segment or segment.startswith("{"):
        return None
    return segment


def build_resource_listing(
    routes: list[RouteDescriptor],
    api_version: str,
    info: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Swagger 1.2 resource listing (section 5.1)."""
    resources = sorted({r for r in (resource_of(d.path) for d in routes) if r})
    listing: dict[str, Any] = {
        "apiVersion": api_version,
        "swaggerVersion": SWAGGER_VERSION,
        "apis": [
            {"path": f"/{resource}", "description": f"Operations on {resource}"}
            for resource in resources
        ],
    }
    if info:
        listing["info"] = dict(info)
    return listing


def _operation(route: RouteDescriptor) -> dict[str, Any]:
    return {
        "method": route.method.upper(),
        "nickname": route.nickname,
        "summary": route.summary,
        "notes": route.notes,
        "type": "object",
        "parameters": [
            {
                "paramType": "path",
                "name": name,
                "type": "string",
                "required": True,
            }
            for name in route.path_params
        ],
    }


def build_api_declaration(
    routes: list[RouteDescriptor],
    resource_id: str,
    base_path: str,
    api_version: str,
) -> dict[str, Any]:
    """Swagger 1.2 API declaration for one resource (section 5.2)."""
    by_path: dict[str, list[dict[str, Any]]] = {}
    for route in routes:
        if resource_of(route.path) != resource_id:
            continue
        relative = route.path[len(API_PREFIX):]
        by_path.setdefault(relative, []).append(_operation(route))

    return {
        "apiVersion": api_version,
        "swaggerVersion": SWAGGER_VERSION,
        "basePath": base_path,
        "resourcePath": f"/{resource_id}",
        "produces": ["application/json"],
        "apis": [
            {"path": path, "operations": operations}
            for path, operations in sorted(by_path.items())
        ],
        "models": {},
    }
