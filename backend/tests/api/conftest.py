"""API test fixtures — FastAPI app over an in-process ASGI transport."""

import pytest
from httpx import ASGITransport, AsyncClient

from pwreset.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
