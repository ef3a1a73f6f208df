"""
EduLibrary Backend — Configuration and Storage Selection Tests
================================================================

What:  Settings validation and build_storage() backend selection.
"""

import pydantic
import pytest

from edulibrary.config import Settings
from edulibrary.storage import build_storage
from edulibrary.storage.memory import InMemoryResourceStorage
from edulibrary.storage.seed import SAMPLE_RESOURCES
from edulibrary.storage.sql import SQLResourceStorage


class TestSettings:
    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(log_level="LOUD")

    def test_storage_backend_case_insensitive(self):
        assert Settings(storage_backend="DATABASE").storage_backend == "database"

    def test_unknown_storage_backend_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(storage_backend="redis")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


class TestBuildStorage:
    @pytest.mark.asyncio
    async def test_memory_backend_seeded(self):
        storage = build_storage(Settings(storage_backend="memory", seed_sample_data=True))

        assert isinstance(storage, InMemoryResourceStorage)
        assert await storage.count() == len(SAMPLE_RESOURCES)

    @pytest.mark.asyncio
    async def test_memory_backend_unseeded(self):
        storage = build_storage(Settings(storage_backend="memory", seed_sample_data=False))
        assert await storage.count() == 0

    @pytest.mark.asyncio
    async def test_database_backend(self, tmp_path):
        settings = Settings(
            storage_backend="database",
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'app.db'}",
            db_create_schema=True,
            seed_sample_data=True,
        )
        storage = build_storage(settings)
        assert isinstance(storage, SQLResourceStorage)

        await storage.startup()
        assert await storage.count() == len(SAMPLE_RESOURCES)
        await storage.shutdown()

    def test_database_backend_requires_url(self):
        with pytest.raises(ValueError, match="DATABASE_URL"):
            build_storage(Settings(storage_backend="database", database_url="  "))
