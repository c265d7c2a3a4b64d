"""API test fixtures — FastAPI app over an in-process ASGI transport.

Invariants:
    - No network: httpx talks to the app through ASGITransport
    - Settings overrides are cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from solscribe.config import Settings, get_settings
from solscribe.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_settings():
    """Swap the Settings dependency for one test: use_settings(reject_zero_amounts=True)."""
    def _apply(**overrides) -> Settings:
        settings = Settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _apply
    app.dependency_overrides.clear()
