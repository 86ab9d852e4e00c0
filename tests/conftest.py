"""
Global test fixtures for the Aerospike console.

This module provides shared fixtures for all tests including:
- Mock Redis (fakeredis)
- Sample records as returned by the API
- FastAPI test clients
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest.fixture
def mock_redis():
    """
    Create a mock Redis client using fakeredis.
    """
    try:
        import fakeredis
        redis_client = fakeredis.FakeRedis(decode_responses=True)
        yield redis_client
        redis_client.flushall()
        redis_client.close()
    except ImportError:
        pytest.skip("fakeredis not installed")


@pytest_asyncio.fixture
async def mock_async_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    try:
        import fakeredis.aioredis
        redis_client = fakeredis.aioredis.FakeRedis(decode_responses=True)
        yield redis_client
        await redis_client.flushall()
        await redis_client.close()
    except ImportError:
        pytest.skip("fakeredis with aioredis not installed")


# =============================================================================
# Record Fixtures
# =============================================================================

def make_record(key: str, namespace: str = "test", set_name: str = "users", **bins) -> dict:
    """A record as the API returns it."""
    return {
        "namespace": namespace,
        "set_name": set_name,
        "key": key,
        "key_type": "string",
        "bins": bins or {"name": key},
        "ttl": -1,
        "generation": 1,
        "expiration": None,
    }


@pytest.fixture
def sample_record() -> dict:
    """A record with scalar, nested and JSON-as-string bins."""
    return {
        "namespace": "test",
        "set_name": "users",
        "key": "alice",
        "key_type": "string",
        "bins": {
            "name": "Alice",
            "age": 31,
            "active": True,
            "tags": ["admin", "ops"],
            "profile": '{"city": "Paris", "langs": ["fr", "en"]}',
        },
        "ttl": 3600,
        "generation": 4,
        "expiration": "2026-01-01T12:00:00+00:00",
    }


@pytest.fixture
def records_25() -> list[dict]:
    """Records r1..r25 in scan order."""
    return [make_record(f"r{i}") for i in range(1, 26)]


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    services or connections.
    """
    from app.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture
async def async_client(app):
    """
    Create an async test client.

    Use this for testing async endpoints.
    """
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
