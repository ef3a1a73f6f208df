"""
EduLibrary Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── id_generator:    deterministic ids ("res-1", "res-2", ...)
    ├── valid_payload:   camelCase request body that passes validation
    ├── memory_storage:  empty InMemoryResourceStorage using id_generator
    ├── sql_storage:     SQLResourceStorage on a temp-file SQLite database
    └── test_client:     HTTPX AsyncClient bound to an app over memory_storage
"""

import itertools
import os

# Override settings for testing BEFORE any app imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from edulibrary.config import Settings
from edulibrary.database import create_engine
from edulibrary.storage.memory import InMemoryResourceStorage
from edulibrary.storage.sql import SQLResourceStorage


@pytest.fixture
def id_generator():
    """Returns "res-1", "res-2", ... so created ids are predictable."""
    counter = itertools.count(1)
    return lambda: f"res-{next(counter)}"


@pytest.fixture
def valid_payload():
    return {
        "title": "Intro to Machine Learning",
        "description": "Supervised and unsupervised learning explained from first principles.",
        "category": "Data Science",
        "skillLevel": "Intermediate",
        "imageUrl": "https://example.com/ml.png",
        "resourceType": "Video Course",
        "videoUrl": "https://youtu.be/abc123",
    }


@pytest.fixture
def memory_storage(id_generator):
    return InMemoryResourceStorage(id_generator=id_generator)


@pytest_asyncio.fixture
async def sql_storage(tmp_path, id_generator):
    """
    SQL storage against a throwaway SQLite file.

    Schema is created by startup(), as with DB_CREATE_SCHEMA=true.
    """
    settings = Settings(log_level="WARNING")
    engine = create_engine(settings, url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    storage = SQLResourceStorage(engine, id_generator=id_generator, create_tables=True)
    await storage.startup()
    yield storage
    await storage.shutdown()


@pytest_asyncio.fixture
async def test_client(memory_storage):
    """
    Async HTTP client talking to a fresh app over `memory_storage`.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/resources")
            assert response.status_code == 200
    """
    from edulibrary.main import create_app

    app = create_app(storage=memory_storage)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
