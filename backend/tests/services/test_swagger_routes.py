"""Swagger routes — pass-through of provider output with the request context.

Invariants:
    - Both endpoints return 200 with the provider's object, on tenant and admin
    - The provider receives a RequestContext for the server that answered
    - Provider failures are not handled by the route (generic 500 envelope)
    - Domain errors escaping a Swagger route get the same envelope, not their own status
"""

from httpx import ASGITransport, AsyncClient

from docserver.core.domain_types import ServerType
from docserver.core.errors import DocModuleNotFoundError, DocServerError


async def test_swagger_listing_returns_provider_object(client):
    res = await client.get("/api/swagger")
    assert res.status_code == 200
    assert res.json() == {"swaggerVersion": "1.2", "apis": [{"path": "/doc"}]}


async def test_swagger_api_returns_provider_object(client):
    res = await client.get("/api/swagger/doc")
    assert res.status_code == 200
    assert res.json() == {"swaggerVersion": "1.2", "resourcePath": "/doc"}


async def test_swagger_context_carries_server_type(client, fake_swagger, server_type):
    await client.get("/api/swagger")
    ctx = fake_swagger.contexts[0]
    assert ctx.server_type is server_type
    assert ctx.base_url == "http://test"


async def test_tenant_alias_from_header_on_tenant_server(client, fake_swagger, server_type):
    await client.get("/api/swagger", headers={"X-Tenant-Alias": "cam", "X-User-Id": "u:cam:1"})
    ctx = fake_swagger.contexts[0]
    assert ctx.user_id == "u:cam:1"
    if server_type is ServerType.ADMIN:
        assert ctx.tenant_alias == "admin"
    else:
        assert ctx.tenant_alias == "cam"


async def test_tenant_alias_falls_back_to_host(client, fake_swagger, server_type):
    await client.get("/api/swagger")
    ctx = fake_swagger.contexts[0]
    expected = "admin" if server_type is ServerType.ADMIN else "test"
    assert ctx.tenant_alias == expected
    assert ctx.user_id is None


async def test_swagger_provider_failure_surfaces_as_500(app, fake_swagger):
    fake_swagger.fail_with = RuntimeError("boom")
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/swagger/doc")
    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "boom" not in res.text


async def test_swagger_domain_error_gets_generic_500(app, fake_swagger):
    fake_swagger.fail_with = DocModuleNotFoundError("doc", "backend")
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/swagger")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "No documentation" not in res.text


def test_only_catch_all_handler_is_registered(app):
    assert DocServerError not in app.exception_handlers
    assert app.exception_handlers[Exception].__name__ == "generic_error_handler"
