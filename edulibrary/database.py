"""
EduLibrary Backend — Database Engine and Session Management
=============================================================

What:  Async SQLAlchemy engine/session factories and the declarative Base.
How:   `create_engine()` builds an async engine from Settings (or a bare URL),
       `create_session_factory()` wraps it in an async_sessionmaker.
Who:   SQLResourceStorage (runtime) and Alembic's env.py (migrations).
When:  Only when STORAGE_BACKEND=database; the in-memory backend never
       touches this module's engine helpers.

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from Settings and are
    passed for server databases only. SQLite URLs get SQLAlchemy's default
    pool for the aiosqlite dialect, which rejects pool sizing arguments.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from edulibrary.config import Settings


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object between the models, `create_schema()` and
    Alembic autogenerate.
    """
    pass


def create_engine(settings: Settings, url: Optional[str] = None) -> AsyncEngine:
    """
    Build the async engine for `url` (defaults to settings.database_url).

    SQL echo is enabled at DEBUG log level.
    """
    url = url or settings.database_url
    kwargs = {"echo": settings.log_level == "DEBUG"}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: records are converted to pydantic after commit
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table registered on Base.metadata (idempotent)."""
    # Models register themselves on import
    import edulibrary.models.resource  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """Close all pooled connections. Called from the storage shutdown hook."""
    await engine.dispose()
