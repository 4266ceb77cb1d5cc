# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Gives each web request (and each background run) its own unit of work with the database,
# so saving a reminder and recording its phone alert either both happen or neither does.
#
# 🧪 Purpose (Technical Summary):
# Async session factory with commit-on-success / rollback-on-error semantics, exposed as a
# FastAPI dependency (one session per request, cached by FastAPI so the repository and the
# alert registrar share it) and as a context manager for Celery tasks.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py
#
# 🔄 Connected Modules / Calls From:
# - app/modules/care_management/presentation/dependencies.py (request sessions)
# - app/background_jobs/tasks/care_reminders.py (reconciliation sessions)
# - app/main.py (lifespan initialization)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import DatabaseError, PlantCareException, TransactionError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Builds sessions on one engine and owns their transaction boundary."""

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def is_initialized(self) -> bool:
        return self._session_factory is not None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        try:
            engine = engine or get_database_engine()
        except RuntimeError as e:
            raise DatabaseError(f"Session initialization failed: {e}", operation="initialize") from e

        self._session_factory = async_sessionmaker(engine, expire_on_commit=False)
        logger.info("Database session factory initialized")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session and commit it when the block exits cleanly.

        Domain errors roll back and propagate unchanged so the API keeps
        their status code. SQLAlchemy failures become DatabaseError and
        anything else TransactionError.
        """
        if self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except PlantCareException:
            await session.rollback()
            raise
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}") from e
        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error, transaction rolled back: {e}")
            raise TransactionError(f"Transaction failed: {e}") from e
        finally:
            await session.close()


session_manager = DatabaseSessionManager()


def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one committed-on-success session per request."""
    async with session_manager.get_session() as session:
        yield session


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Session outside a request, e.g. in Celery tasks:

        async with database_session() as db:
            await build_reminder_service(db).reconcile_alerts()
    """
    async with session_manager.get_session() as session:
        yield session
