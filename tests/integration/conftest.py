from __future__ import annotations

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tests.utils.fake_services import FakeServices

os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture(scope="session")
def app_instance():
    """Create the FastAPI app."""
    from app.main import app  # type: ignore

    yield app


@pytest.fixture
def fake_services():
    return FakeServices()


@pytest_asyncio.fixture
async def client(app_instance, fake_services):
    """HTTP client bound to the ASGI app, with external services faked."""
    from app.dependencies import get_analysis_service
    from app.services import AnalysisService

    services_client = fake_services.client()
    app_instance.dependency_overrides[get_analysis_service] = lambda: AnalysisService(
        services_client
    )
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app_instance.dependency_overrides.clear()
    await services_client.aclose()
