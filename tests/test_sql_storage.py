"""
EduLibrary Backend — SQL Storage Tests
========================================

What:  Storage contract tests for SQLResourceStorage on SQLite (aiosqlite).
How:   `sql_storage` fixture creates the schema in a temp-file database.

The same properties as the in-memory store must hold here; the id
generator is injected so ids are deterministic.
"""

import pytest

from edulibrary.config import Settings
from edulibrary.database import create_engine
from edulibrary.schemas.resource import Category, ResourceCreate
from edulibrary.storage.seed import SAMPLE_RESOURCES
from edulibrary.storage.sql import SQLResourceStorage


@pytest.fixture
def resource_data(valid_payload):
    return ResourceCreate.model_validate(valid_payload)


class TestSQLStorageCrud:
    @pytest.mark.asyncio
    async def test_create_and_get(self, sql_storage, resource_data):
        resource = await sql_storage.create(resource_data)

        assert resource.id == "res-1"
        assert resource.model_dump(exclude={"id", "embed_url"}) == resource_data.model_dump()
        assert await sql_storage.get(resource.id) == resource

    @pytest.mark.asyncio
    async def test_list_returns_all(self, sql_storage, resource_data):
        first = await sql_storage.create(resource_data)
        second = await sql_storage.create(resource_data)

        listed = await sql_storage.list()
        assert {r.id for r in listed} == {first.id, second.id}
        assert await sql_storage.count() == 2

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, sql_storage, resource_data, valid_payload):
        original = await sql_storage.create(resource_data)

        replacement = dict(valid_payload, title="Renamed", category="Design", videoUrl="")
        updated = await sql_storage.update(
            original.id, ResourceCreate.model_validate(replacement)
        )

        assert updated.id == original.id
        assert updated.title == "Renamed"
        assert updated.category is Category.DESIGN
        assert updated.video_url is None
        assert await sql_storage.get(original.id) == updated

    @pytest.mark.asyncio
    async def test_update_unknown(self, sql_storage, resource_data):
        await sql_storage.create(resource_data)

        assert await sql_storage.update("missing", resource_data) is None
        assert await sql_storage.count() == 1

    @pytest.mark.asyncio
    async def test_delete(self, sql_storage, resource_data):
        resource = await sql_storage.create(resource_data)

        assert await sql_storage.delete("missing") is False
        assert await sql_storage.delete(resource.id) is True
        assert await sql_storage.get(resource.id) is None
        assert await sql_storage.count() == 0

    @pytest.mark.asyncio
    async def test_health_check(self, sql_storage):
        assert await sql_storage.health_check() is True


class TestSQLStorageLifecycle:
    @pytest.mark.asyncio
    async def test_seeds_empty_table_once(self, tmp_path, id_generator):
        settings = Settings(log_level="WARNING")
        url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"

        storage = SQLResourceStorage(
            create_engine(settings, url=url),
            id_generator=id_generator,
            seed=SAMPLE_RESOURCES,
            create_tables=True,
        )
        await storage.startup()
        assert await storage.count() == len(SAMPLE_RESOURCES)
        await storage.shutdown()

        # Second process start against the same file: rows exist, no reseed
        restarted = SQLResourceStorage(
            create_engine(settings, url=url),
            seed=SAMPLE_RESOURCES,
            create_tables=True,
        )
        await restarted.startup()
        assert await restarted.count() == len(SAMPLE_RESOURCES)
        await restarted.shutdown()
