# Storage package init
"""
EduLibrary Backend — Storage Layer
====================================

What:  Resource persistence behind the ResourceStorage interface.
How:   `build_storage()` reads Settings.storage_backend and constructs one
       store, which the app factory keeps on `app.state.storage`.

Storage Inventory:
    - ResourceStorage (abstract): list / get / create / update / delete
    - InMemoryResourceStorage:    dict-backed, process lifetime
    - SQLResourceStorage:         async SQLAlchemy, `resources` table
"""

import logging

from edulibrary.config import Settings
from edulibrary.storage.base import ResourceStorage
from edulibrary.storage.ids import IdGenerator, random_id
from edulibrary.storage.memory import InMemoryResourceStorage
from edulibrary.storage.seed import SAMPLE_RESOURCES

logger = logging.getLogger(__name__)

__all__ = [
    "ResourceStorage",
    "InMemoryResourceStorage",
    "build_storage",
    "random_id",
]


def build_storage(settings: Settings, id_generator: IdGenerator = random_id) -> ResourceStorage:
    """
    Construct the store selected by `settings.storage_backend`.

    Raises:
        ValueError: the configuration is unusable for the selected backend.
    """
    settings.validate_storage_config()
    seed = SAMPLE_RESOURCES if settings.seed_sample_data else ()

    if settings.storage_backend == "database":
        # Imported lazily so the memory backend never loads a DB driver
        from edulibrary.database import create_engine
        from edulibrary.storage.sql import SQLResourceStorage

        logger.info("Using database storage")
        return SQLResourceStorage(
            engine=create_engine(settings),
            id_generator=id_generator,
            seed=seed,
            create_tables=settings.db_create_schema,
        )

    logger.info("Using in-memory storage")
    return InMemoryResourceStorage(id_generator=id_generator, seed=seed)
