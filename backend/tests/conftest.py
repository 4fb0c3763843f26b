"""Root conftest — shared test configuration and Store fixtures.

Invariants:
    - Tests never reach a real PostgreSQL server
    - The `store` fixture runs each contract test against BOTH backends
    - Every database test gets a fresh SQLite file, reached through a real
      connection pool (concurrent sessions get separate connections)

Design Decisions:
    - SQLite via aiosqlite: fast, no external dependency, the
      SQL used by DatabaseStore is portable
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from qa_api.db.base import Base  # noqa: E402
import qa_api.models  # noqa: E402,F401
from qa_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from qa_api.infrastructure.database_store import DatabaseStore  # noqa: E402
from qa_api.infrastructure.memory_store import InMemoryStore  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'qa.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_store(test_engine):
    return DatabaseStore(DatabaseSessionManager.from_engine(test_engine))


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture(params=["database", "memory"])
def store(request, db_store, memory_store):
    """Each Store backend in turn."""
    return memory_store if request.param == "memory" else db_store
