"""Boundary Protocols — contracts between the route layer and its collaborators.

Invariants:
    - Routes depend only on these Protocols, never on concrete registries
    - Documentation failures are raised as DocumentationError (status + message)
    - Swagger providers model no failure path

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async documentation methods: implementations do filesystem IO; Swagger
      methods stay sync because they only read already-registered routes
"""

from dataclasses import dataclass
from typing import Any, Protocol

from docserver.core.domain_types import DocEntry, ServerType


@dataclass(frozen=True)
class RequestContext:
    """Authentication/session context attached to every request."""
    server_type: ServerType
    tenant_alias: str
    base_url: str
    user_id: str | None = None


class DocumentationProvider(Protocol):
    """Contract for module discovery and documentation retrieval."""
    async def list_modules(self, module_type: str) -> list[str]: ...
    async def get_module_documentation(
        self, module_id: str, module_type: str,
    ) -> list[DocEntry]: ...


class SwaggerProvider(Protocol):
    """Contract for Swagger 1.2 resource listing and API declarations."""
    def get_resources(self, ctx: RequestContext) -> dict[str, Any]: ...
    def get_api(self, ctx: RequestContext, resource_id: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class Collaborators:
    """Everything the documentation routes delegate to."""
    docs: DocumentationProvider
    swagger: SwaggerProvider
