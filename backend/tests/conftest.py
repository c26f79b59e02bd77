"""
MemoPad Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── store: Empty MemoStore (max_plus_one ids)
    ├── sequence_store: Empty MemoStore (monotonic ids)
    ├── memo_service: MemoService over `store`
    ├── app: FastAPI app built by create_app() around `store`
    └── test_client: HTTPX AsyncClient bound to `app`
"""

import os

# Quiet logs during tests; must be set before memopad.config is imported
os.environ["MEMOPAD_LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from memopad.main import create_app
from memopad.services.memo_service import MemoService
from memopad.store import MemoStore


@pytest.fixture
def store():
    """Empty store using the default max(id)+1 assignment."""
    return MemoStore()


@pytest.fixture
def sequence_store():
    """Empty store using a monotonic id counter."""
    return MemoStore(id_strategy="sequence")


@pytest.fixture
def memo_service(store):
    return MemoService(store)


@pytest.fixture
def app(store):
    """
    A fresh application around the `store` fixture.

    Tests can inspect `store` directly to check what a request did.
    """
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/memos")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
