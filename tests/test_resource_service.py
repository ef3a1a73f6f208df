"""
EduLibrary Backend — Resource Service Unit Tests
==================================================

What:  Tests for ResourceService business logic.
How:   Real InMemoryResourceStorage for the happy paths; AsyncMock storage to
       simulate backend failures.

What we test:
    ✅ Validation failures raise ValidationError and never reach storage
    ✅ Missing ids raise NotFoundError
    ✅ Storage exceptions become StorageError with the cause chained
    ✅ Update is a full replacement
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from edulibrary.exceptions import NotFoundError, StorageError, ValidationError
from edulibrary.services.resource_service import ResourceService
from edulibrary.storage.base import ResourceStorage


class TestResourceServiceCrud:
    @pytest.mark.asyncio
    async def test_create_and_get(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)

        created = await service.create_resource(valid_payload)
        fetched = await service.get_resource(created.id)

        assert fetched == created
        assert created.title == valid_payload["title"]

    @pytest.mark.asyncio
    async def test_list_resources(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)
        await service.create_resource(valid_payload)
        await service.create_resource(valid_payload)

        assert len(await service.list_resources()) == 2

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, memory_storage):
        service = ResourceService(memory_storage)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_resource("missing")
        assert "missing" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_update_is_full_replacement(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)
        created = await service.create_resource(valid_payload)

        replacement = {k: v for k, v in valid_payload.items() if k != "videoUrl"}
        replacement["title"] = "Second Edition"
        updated = await service.update_resource(created.id, replacement)

        assert updated.id == created.id
        assert updated.title == "Second Edition"
        assert updated.video_url is None

    @pytest.mark.asyncio
    async def test_partial_update_payload_rejected(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)
        created = await service.create_resource(valid_payload)

        with pytest.raises(ValidationError):
            await service.update_resource(created.id, {"title": "Only the title"})
        assert (await service.get_resource(created.id)).title == valid_payload["title"]

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)

        with pytest.raises(NotFoundError):
            await service.update_resource("missing", valid_payload)
        assert await memory_storage.count() == 0

    @pytest.mark.asyncio
    async def test_delete(self, memory_storage, valid_payload):
        service = ResourceService(memory_storage)
        created = await service.create_resource(valid_payload)

        await service.delete_resource(created.id)

        with pytest.raises(NotFoundError):
            await service.get_resource(created.id)
        with pytest.raises(NotFoundError):
            await service.delete_resource(created.id)


class TestResourceServiceValidation:
    @pytest.mark.asyncio
    async def test_invalid_payload_never_reaches_storage(self, valid_payload):
        storage = MagicMock(spec=ResourceStorage)
        storage.create = AsyncMock()
        service = ResourceService(storage)

        valid_payload["skillLevel"] = "Expert"
        with pytest.raises(ValidationError) as exc_info:
            await service.create_resource(valid_payload)

        storage.create.assert_not_called()
        assert [e.field for e in exc_info.value.errors] == ["skillLevel"]
        assert exc_info.value.details.startswith("skillLevel:")

    @pytest.mark.asyncio
    async def test_invalid_update_on_missing_id_is_validation_error(self, memory_storage):
        service = ResourceService(memory_storage)

        with pytest.raises(ValidationError):
            await service.update_resource("missing", {"title": ""})


class TestResourceServiceStorageFailures:
    def _failing_storage(self):
        storage = MagicMock(spec=ResourceStorage)
        storage.backend_name = "database"
        error = ConnectionError("connection reset by peer")
        for name in ("list", "get", "create", "update", "delete"):
            setattr(storage, name, AsyncMock(side_effect=error))
        return storage

    @pytest.mark.asyncio
    async def test_list_failure_wrapped(self):
        service = ResourceService(self._failing_storage())

        with pytest.raises(StorageError) as exc_info:
            await service.list_resources()

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.context == {
            "operation": "list",
            "error_type": "ConnectionError",
        }
        assert "connection reset" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_write_failures_wrapped(self, valid_payload):
        service = ResourceService(self._failing_storage())

        with pytest.raises(StorageError):
            await service.create_resource(valid_payload)
        with pytest.raises(StorageError):
            await service.update_resource("res-1", valid_payload)
        with pytest.raises(StorageError):
            await service.delete_resource("res-1")
        with pytest.raises(StorageError):
            await service.get_resource("res-1")
