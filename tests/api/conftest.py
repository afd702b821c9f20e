"""API test fixtures — FastAPI app over an in-process ASGI transport.

Design Decisions:
    - No lifespan: routes need no startup state, logging stays pytest's
"""

import pytest
from httpx import ASGITransport, AsyncClient

from doomsday.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
