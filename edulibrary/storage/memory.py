"""
EduLibrary Backend — In-Memory Resource Storage
=================================================

What:  ResourceStorage backed by a plain dict keyed by resource id.
Who:   Default backend (STORAGE_BACKEND=memory) and the store used by tests.
When:  Created by build_storage() at app construction; lives until process exit.

The dict preserves insertion order, so list() returns records in creation
order and update() keeps a record in its original position. Every operation
holds `_lock` for its whole body, which keeps reads and writes atomic per
key when the store is called from worker threads (e.g. sync route handlers
running in the threadpool). On the event loop the lock is never contended.
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional

from edulibrary.schemas.resource import Resource, ResourceCreate
from edulibrary.storage.base import ResourceStorage
from edulibrary.storage.ids import MAX_ID_ATTEMPTS, IdGenerator, random_id

logger = logging.getLogger(__name__)


class InMemoryResourceStorage(ResourceStorage):
    """Process-lifetime resource store. Nothing survives a restart."""

    backend_name = "memory"

    def __init__(
        self,
        id_generator: IdGenerator = random_id,
        seed: Iterable[ResourceCreate] = (),
    ):
        self._generate_id = id_generator
        self._records: Dict[str, Resource] = {}
        self._lock = threading.Lock()

        for data in seed:
            self._insert(data)
        if self._records:
            logger.info("In-memory storage seeded with %d resources", len(self._records))

    def _insert(self, data: ResourceCreate) -> Resource:
        with self._lock:
            for _ in range(MAX_ID_ATTEMPTS):
                resource_id = self._generate_id()
                if resource_id not in self._records:
                    break
            else:
                raise RuntimeError(
                    f"Could not generate a unique resource id after {MAX_ID_ATTEMPTS} attempts"
                )
            resource = Resource.from_create(resource_id, data)
            self._records[resource_id] = resource
            return resource

    async def list(self) -> List[Resource]:
        with self._lock:
            return list(self._records.values())

    async def get(self, resource_id: str) -> Optional[Resource]:
        with self._lock:
            return self._records.get(resource_id)

    async def create(self, data: ResourceCreate) -> Resource:
        return self._insert(data)

    async def update(self, resource_id: str, data: ResourceCreate) -> Optional[Resource]:
        with self._lock:
            if resource_id not in self._records:
                return None
            resource = Resource.from_create(resource_id, data)
            self._records[resource_id] = resource
            return resource

    async def delete(self, resource_id: str) -> bool:
        with self._lock:
            return self._records.pop(resource_id, None) is not None

    async def count(self) -> int:
        with self._lock:
            return len(self._records)
