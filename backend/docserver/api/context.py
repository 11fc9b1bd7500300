"""Request Context — the session context object attached to every request.

Invariants:
    - The admin server always reports the configured admin tenant alias
    - The tenant server prefers the X-Tenant-Alias header, then the request host
    - base_url never ends with a slash
"""

from fastapi import Request

from docserver.core.collaborator_protocols import RequestContext
from docserver.core.domain_types import ServerType

TENANT_ALIAS_HEADER = "x-tenant-alias"
USER_ID_HEADER = "x-user-id"


def get_request_context(request: Request) -> RequestContext:
    """FastAPI dependency building the RequestContext for this request."""
    server_type: ServerType = request.app.state.server_type
    if server_type is ServerType.ADMIN:
        tenant_alias = request.app.state.settings.admin_tenant_alias
    else:
        tenant_alias = (
            request.headers.get(TENANT_ALIAS_HEADER)
            or request.url.hostname
            or ""
        )
    return RequestContext(
        server_type=server_type,
        tenant_alias=tenant_alias,
        base_url=str(request.base_url).rstrip("/"),
        user_id=request.headers.get(USER_ID_HEADER),
    )
