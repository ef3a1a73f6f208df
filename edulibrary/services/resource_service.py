"""
EduLibrary Backend — Resource Service (Business Logic)
========================================================

What:  Orchestrates payload validation and storage calls for every endpoint.
How:   Wraps a ResourceStorage; validates input with validate_resource_payload(),
       turns "absent" storage results into NotFoundError and any storage
       exception into StorageError.
Who:   Called by the route handlers in routes/resources.py.

Error Handling Strategy:
    validation failure → ValidationError (400), storage never called
    missing id         → NotFoundError   (404)
    storage exception  → StorageError    (500); cause logged with traceback,
                         chained on the raised error, never sent to the client

update_resource() replaces the whole record. Fields missing from the
payload fail validation (required) or become absent (videoUrl); nothing is
merged from the stored record.
"""

import logging
from typing import Any, Awaitable, List, TypeVar

from edulibrary.exceptions import NotFoundError, StorageError, ValidationError
from edulibrary.schemas.resource import Resource, ResourceCreate, validate_resource_payload
from edulibrary.storage.base import ResourceStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceService:
    """
    Business logic for resource CRUD.

    Stateless apart from the storage reference, so routes build one per
    request from `app.state.storage`.
    """

    def __init__(self, storage: ResourceStorage):
        self.storage = storage

    async def list_resources(self) -> List[Resource]:
        return await self._call("list", self.storage.list())

    async def get_resource(self, resource_id: str) -> Resource:
        """
        Raises:
            NotFoundError: no resource has this id (→ 404)
            StorageError: the store failed (→ 500)
        """
        resource = await self._call("get", self.storage.get(resource_id))
        if resource is None:
            raise NotFoundError(resource="Resource", resource_id=resource_id)
        return resource

    async def create_resource(self, payload: Any) -> Resource:
        data = self._validate(payload)
        resource = await self._call("create", self.storage.create(data))
        logger.info("Resource created: %s", resource.id)
        return resource

    async def update_resource(self, resource_id: str, payload: Any) -> Resource:
        """
        Replace every field of an existing resource.

        Validation runs before the id is looked up, so an invalid payload
        is reported as 400 even when the id does not exist.
        """
        data = self._validate(payload)
        resource = await self._call("update", self.storage.update(resource_id, data))
        if resource is None:
            raise NotFoundError(resource="Resource", resource_id=resource_id)
        logger.info("Resource updated: %s", resource_id)
        return resource

    async def delete_resource(self, resource_id: str) -> None:
        deleted = await self._call("delete", self.storage.delete(resource_id))
        if not deleted:
            raise NotFoundError(resource="Resource", resource_id=resource_id)
        logger.info("Resource deleted: %s", resource_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    def _validate(self, payload: Any) -> ResourceCreate:
        result = validate_resource_payload(payload)
        if not result.ok:
            raise ValidationError(message="Invalid resource data", errors=result.errors)
        return result.value

    async def _call(self, operation: str, pending: Awaitable[T]) -> T:
        try:
            return await pending
        except Exception as e:
            logger.error(
                "Storage error during %s on %s backend: %s",
                operation,
                self.storage.backend_name,
                str(e),
                exc_info=True,
            )
            raise StorageError(
                context={"operation": operation, "error_type": type(e).__name__},
            ) from e
