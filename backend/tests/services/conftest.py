"""Service test fixtures — fake collaborators + FastAPI test clients.

Invariants:
    - Every test gets fresh fakes (no state shared between tests)
    - server_type fixture runs route tests against both tenant and admin apps
    - Fakes raise the real DocumentationError subclasses

Design Decisions:
    - Fakes over AsyncMock: the error contract (status + message) is the
      thing under test, so fakes raise exactly what a provider would
    - httpx AsyncClient over ASGITransport: same client the routes see in prod
"""

import pytest
from httpx import ASGITransport, AsyncClient

from docserver.config import Settings
from docserver.core.collaborator_protocols import Collaborators
from docserver.core.domain_types import ServerType
from docserver.main import create_app
from tests.services.fake_collaborators import FakeDocs, FakeSwagger


@pytest.fixture
def settings(tmp_path):
    return Settings(
        backend_docs_dir=tmp_path / "backend",
        frontend_docs_dir=tmp_path / "frontend",
        admin_tenant_alias="admin",
        log_format="text",
    )


@pytest.fixture
def fake_docs():
    return FakeDocs()


@pytest.fixture
def fake_swagger():
    return FakeSwagger()


@pytest.fixture(params=[ServerType.TENANT, ServerType.ADMIN], ids=["tenant", "admin"])
def server_type(request):
    return request.param


@pytest.fixture
def app(server_type, settings, fake_docs, fake_swagger):
    return create_app(
        server_type, settings,
        collaborators=Collaborators(docs=fake_docs, swagger=fake_swagger),
    )


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
