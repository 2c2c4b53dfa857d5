"""Pytest bootstrap configuration.

Force test mode before any module that loads application settings is
imported, so importing ``main`` never binds a port.
"""
import os

import httpx
import pytest
import pytest_asyncio

os.environ["NODE_ENV"] = "test"

from core.config import Settings  # noqa: E402


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, NODE_ENV="test")


@pytest.fixture
def app(test_settings):
    from main import create_app
    return create_app(test_settings)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
