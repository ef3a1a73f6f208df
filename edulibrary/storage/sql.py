"""
EduLibrary Backend — SQL Resource Storage
===========================================

What:  Persistent ResourceStorage over the `resources` table.
How:   One AsyncSession per operation from an async_sessionmaker; writes run
       inside `session.begin()` so they commit on success and roll back on
       any exception.
Who:   Selected by build_storage() when STORAGE_BACKEND=database.

Lifecycle:
    startup():  optionally create the schema (DB_CREATE_SCHEMA=true), then
                seed the sample catalog if the table is empty
    shutdown(): dispose the engine (closes pooled connections)

Database exceptions are NOT caught here. They propagate to ResourceService,
which logs them and raises StorageError (HTTP 500).
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from edulibrary.database import create_schema, create_session_factory, dispose_engine
from edulibrary.models.resource import ResourceRecord
from edulibrary.schemas.resource import Resource, ResourceCreate
from edulibrary.storage.base import ResourceStorage
from edulibrary.storage.ids import MAX_ID_ATTEMPTS, IdGenerator, random_id

logger = logging.getLogger(__name__)


class SQLResourceStorage(ResourceStorage):
    """Resource store backed by any async SQLAlchemy database."""

    backend_name = "database"

    def __init__(
        self,
        engine: AsyncEngine,
        id_generator: IdGenerator = random_id,
        seed: Iterable[ResourceCreate] = (),
        create_tables: bool = False,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
    ):
        self.engine = engine
        self._session_factory = session_factory or create_session_factory(engine)
        self._generate_id = id_generator
        self._seed = tuple(seed)
        self._create_tables = create_tables

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def startup(self) -> None:
        if self._create_tables:
            await create_schema(self.engine)
            logger.info("Database schema ensured")

        if self._seed and await self.count() == 0:
            for data in self._seed:
                await self.create(data)
            logger.info("Database storage seeded with %d resources", len(self._seed))

    async def shutdown(self) -> None:
        await dispose_engine(self.engine)

    async def health_check(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Database health check failed: %s", str(e))
            return False

    # ── CRUD ──────────────────────────────────────────────────────────────

    async def list(self) -> List[Resource]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ResourceRecord).order_by(ResourceRecord.created_at, ResourceRecord.id)
            )
            return [record.to_resource() for record in result.scalars().all()]

    async def get(self, resource_id: str) -> Optional[Resource]:
        async with self._session_factory() as session:
            record = await session.get(ResourceRecord, resource_id)
            return record.to_resource() if record is not None else None

    async def create(self, data: ResourceCreate) -> Resource:
        async with self._session_factory() as session:
            async with session.begin():
                resource_id = await self._unused_id(session)
                record = ResourceRecord(id=resource_id)
                record.apply(data)
                session.add(record)
            return record.to_resource()

    async def update(self, resource_id: str, data: ResourceCreate) -> Optional[Resource]:
        async with self._session_factory() as session:
            async with session.begin():
                record = await session.get(ResourceRecord, resource_id)
                if record is None:
                    return None
                record.apply(data)
            return record.to_resource()

    async def delete(self, resource_id: str) -> bool:
        async with self._session_factory() as session:
            async with session.begin():
                record = await session.get(ResourceRecord, resource_id)
                if record is None:
                    return False
                await session.delete(record)
            return True

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count(ResourceRecord.id)))
            return result.scalar() or 0

    async def _unused_id(self, session: AsyncSession) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            resource_id = self._generate_id()
            if await session.get(ResourceRecord, resource_id) is None:
                return resource_id
        raise RuntimeError(
            f"Could not generate a unique resource id after {MAX_ID_ATTEMPTS} attempts"
        )
