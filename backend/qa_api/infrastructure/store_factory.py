"""Store Factory — builds the process-wide Store from settings.

Invariants:
    - Called once, by the application lifespan (the process root owns the Store)
    - open_store raises StartupError if the backing store is unreachable,
      which aborts startup

Design Decisions:
    - Backend chosen by STORE_BACKEND; handlers only ever see the Store protocol
"""

import logging

from qa_api.config import Settings
from qa_api.core.domain_types import StoreBackend
from qa_api.core.errors import StartupError
from qa_api.core.repository_protocols import Store
from qa_api.infrastructure.database_store import DatabaseStore
from qa_api.infrastructure.memory_store import InMemoryStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> Store:
    if settings.store_backend == StoreBackend.MEMORY:
        return InMemoryStore()
    return DatabaseStore.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


async def open_store(settings: Settings) -> Store:
    """Build the Store and verify it can serve requests."""
    store = build_store(settings)
    if not await store.health_check():
        await store.close()
        raise StartupError(
            f"Couldn't establish {settings.store_backend.value} store connection",
        )
    logger.info(f"{settings.store_backend.value} store ready")
    return store
