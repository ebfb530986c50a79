"""
Shared test fixtures.

The app runs in-process behind ``httpx.ASGITransport``; no socket is bound.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.config import Settings


@pytest.fixture
def app_settings() -> Settings:
    return Settings(port=3000, _env_file=None)


@pytest_asyncio.fixture
async def client(app_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(app_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
