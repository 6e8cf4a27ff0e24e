"""Root conftest — shared test configuration and the ASGI test client.

Invariants:
    - Tests never read a developer's .env overrides for PORT/logging
    - get_settings cache cleared around every test so env changes take effect

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real app, no socket
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("LOG_FORMAT", "text")

from base64_service.config import get_settings  # noqa: E402
from base64_service.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client():
    """FastAPI test client bound to the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
