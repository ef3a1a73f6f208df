"""
EduLibrary Backend — Abstract Resource Storage Interface
==========================================================

What:  Abstract base class defining the contract every resource store fulfils.
How:   Concrete stores inherit from ResourceStorage and implement the five CRUD
       operations plus `count()` and `health_check()`.
Who:   Called by ResourceService; constructed by `build_storage()`.

Implementations:
    - InMemoryResourceStorage: dict keyed by id, process lifetime
    - SQLResourceStorage:      async SQLAlchemy over the `resources` table

Absence is not an error at this layer: `get` and `update` return None and
`delete` returns False for unknown ids. Stores never re-validate their input;
ResourceCreate values have already passed `validate_resource_payload()`.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from edulibrary.schemas.resource import Resource, ResourceCreate


class ResourceStorage(ABC):
    """
    Contract:
        - list() returns all records in insertion order
        - get() returns the record or None
        - create() assigns a fresh unique id and returns the stored record
        - update() replaces every field except id, or returns None
        - delete() returns True if a record was removed, False otherwise
    """

    # Short name reported by the health endpoint
    backend_name: str = "unknown"

    @abstractmethod
    async def list(self) -> List[Resource]:
        ...

    @abstractmethod
    async def get(self, resource_id: str) -> Optional[Resource]:
        ...

    @abstractmethod
    async def create(self, data: ResourceCreate) -> Resource:
        """
        Store a new record under a freshly generated id.

        Raises:
            RuntimeError: the id generator kept returning ids already in use.
        """
        ...

    @abstractmethod
    async def update(self, resource_id: str, data: ResourceCreate) -> Optional[Resource]:
        """
        Replace every field of an existing record; the id is preserved.

        This is a full replacement, not a merge: optional fields missing
        from `data` become absent on the stored record.
        """
        ...

    @abstractmethod
    async def delete(self, resource_id: str) -> bool:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...

    async def health_check(self) -> bool:
        """True if the store can serve requests. Must not raise."""
        return True

    async def startup(self) -> None:
        """Called once by the application lifespan before serving requests."""

    async def shutdown(self) -> None:
        """Called once by the application lifespan on shutdown."""
