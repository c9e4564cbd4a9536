"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - SQLAlchemy exceptions that escape a repository are mapped to DatabaseError
    - Domain errors raised inside a session (e.g. ConflictError) pass through untouched
    - In-memory SQLite uses one shared connection so every session sees the same data;
      sessions on that connection run one at a time, otherwise concurrent requests
      would share a single transaction

Design Decisions:
    - Constructed explicitly in each app's lifespan and injected into repositories
      (no module-level singleton)
    - expire_on_commit=False: prevents lazy-load issues in async context
    - create_tables only creates what is absent; there is no migration tool
"""

import asyncio
import logging
from contextlib import asynccontextmanager, nullcontext
from typing import AsyncGenerator

from sqlalchemy import Table, text
from sqlalchemy.exc import (
    OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from todo_api.core.domain_types import HealthReport, ServiceStatus
from todo_api.core.errors import DatabaseError
from todo_api.db.base import Base

logger = logging.getLogger(__name__)


def _engine_options(
    database_url: str, pool_size: int, max_overflow: int, pool_timeout: float,
) -> dict:
    """Pool options per backend; SQLite pools reject pool_size/max_overflow."""
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or database_url.endswith("://"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_timeout": pool_timeout,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        pool_timeout: float = 30.0,
    ):
        options = _engine_options(database_url, pool_size, max_overflow, pool_timeout)
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        # StaticPool hands every caller the same connection
        self._shared_connection = options.get("poolclass") is StaticPool
        self._lock = asyncio.Lock()

    def _exclusive(self):
        return self._lock if self._shared_connection else nullcontext()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        async with self._exclusive():
            session = self._session_factory()
            try:
                yield session
            except OperationalError as e:
                await session.rollback()
                logger.error(f"DB operational error: {e}")
                raise DatabaseError("Connection or operational error", "execute") from e
            except DBAPIError as e:
                await session.rollback()
                logger.error(f"DB driver error: {e}")
                raise DatabaseError("Database driver error", "query") from e
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"SQLAlchemy error: {e}")
                raise DatabaseError("Database operation failed", "unknown") from e
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_tables(self, tables: list[Table] | None = None) -> None:
        """Create the given tables (default: all) if they do not exist yet."""
        async with self._exclusive(), self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, tables=tables)
        logger.info(
            "Database tables created or verified",
            extra={"tables": [t.name for t in tables] if tables else "all"},
        )

    async def health_check(self) -> HealthReport:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self._exclusive(), self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return HealthReport(ServiceStatus.OK)
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return HealthReport(ServiceStatus.UNAVAILABLE, error=str(e))

    async def dispose(self) -> None:
        await self.engine.dispose()
