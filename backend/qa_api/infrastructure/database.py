"""Database Session Manager — bounded async connection pool with rollback and health checks.

Invariants:
    - pool_size (+ max_overflow) bounds concurrent backing-store operations;
      callers past the bound suspend until a connection is returned
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy/driver exceptions, and any other non-taxonomy exception,
      mapped to DatabaseQueryError (core/errors.py)
    - health_check never raises; any failure reads as False
    - Taxonomy errors raised inside a session propagate unchanged

Design Decisions:
    - Owned by the Store, which is owned by the application lifespan (no module singleton)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - SQLite URLs skip pool sizing: SQLAlchemy picks its own pool for them (tests)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from qa_api.core.errors import DatabaseQueryError, QAError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 0,
    ):
        if database_url.startswith("sqlite"):
            engine = create_async_engine(database_url)
        else:
            engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self._bind(engine)

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an already-built engine (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseQueryError("commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseQueryError("execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseQueryError("query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseQueryError("unknown") from e
        except OSError as e:
            logger.error(f"DB connection error: {e}")
            raise DatabaseQueryError("connect") from e
        except QAError:
            await session.rollback()
            raise
        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected DB error: {e!r}")
            raise DatabaseQueryError("unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness checks)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
