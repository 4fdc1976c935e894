"""Route test fixtures — FastAPI test client with every collaborator faked.

Invariants:
    - Every test gets fresh fakes (no state shared between tests)
    - Collaborator dependencies overridden via app.dependency_overrides
    - Lifespan does not run under ASGITransport, so no Firebase app is created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from museum_api.api.dependencies import (
    get_document_store, get_identity_client, get_object_store, get_qr_encoder,
)
from museum_api.main import app
from tests.api.fakes import Fakes


@pytest.fixture
def fakes():
    return Fakes()


@pytest.fixture
async def client(fakes):
    """FastAPI test client with collaborator dependencies overridden."""
    app.dependency_overrides[get_identity_client] = lambda: fakes.identity
    app.dependency_overrides[get_document_store] = lambda: fakes.documents
    app.dependency_overrides[get_object_store] = lambda: fakes.objects
    app.dependency_overrides[get_qr_encoder] = lambda: fakes.qr

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
