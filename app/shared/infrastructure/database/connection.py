# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Opens (and later closes) the link to the database where reminders and their alerts live,
# and can tell whether the database is currently answering.
#
# 🧪 Purpose (Technical Summary):
# Owns the process-wide async SQLAlchemy engine: pool options from settings, a SELECT 1
# health probe with exponential backoff, and init/close hooks for the API lifespan and
# Celery tasks. PostgreSQL (asyncpg) in deployment, SQLite (aiosqlite) locally, where SQLAlchemy
# takes over transaction control so SAVEPOINTs and foreign keys behave as on PostgreSQL.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine), asyncpg / aiosqlite drivers
# - app/shared/config/settings.py
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py
# - app/main.py lifespan, app/background_jobs/tasks/care_reminders.py
# - app/api/v1/health.py

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _status(status: str, error: Optional[str] = None) -> Dict[str, Any]:
    result = {"status": status, "timestamp": datetime.now(timezone.utc).isoformat()}
    if error:
        result["error"] = error
    return result


def configure_sqlite_engine(engine: AsyncEngine) -> None:
    """
    Hand SQLite transaction control to SQLAlchemy and enforce foreign keys.

    The sqlite3 driver otherwise emits its own BEGIN lazily, which breaks
    begin_nested() SAVEPOINTs, and SQLite ignores ON DELETE CASCADE unless
    foreign_keys is switched on per connection.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


class DatabaseConnectionManager:
    """Lazily created async engine with a retrying health probe."""

    def __init__(self, settings: Optional[Settings] = None, retry_attempts: int = 3, retry_delay: float = 1.0):
        self.settings = settings or get_settings()
        self.retry_attempts = retry_attempts
        self.retry_delay = retry_delay
        self._engine: Optional[AsyncEngine] = None

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    def engine_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "echo": self.settings.DATABASE_ECHO,
            "pool_pre_ping": True,
        }
        if self.settings.is_sqlite:
            return options

        options.update(
            pool_size=self.settings.DB_POOL_SIZE,
            max_overflow=self.settings.DB_MAX_OVERFLOW,
            pool_timeout=self.settings.DB_POOL_TIMEOUT,
            pool_recycle=self.settings.DB_POOL_RECYCLE,
            connect_args={
                "server_settings": {"application_name": "plant_care_reminders"},
                "command_timeout": 60,
            },
        )
        return options

    async def initialize(self) -> AsyncEngine:
        """
        Create the engine and probe it.

        Raises:
            ConnectionError: If the database does not answer after retries
        """
        if self._engine is not None:
            return self._engine

        self._engine = create_async_engine(self.settings.database_url, **self.engine_options())
        if self.settings.is_sqlite:
            configure_sqlite_engine(self._engine)
        health = await self.health_check()
        if health["status"] != "healthy":
            await self.close()
            raise ConnectionError(health["error"])

        logger.info(f"Database engine ready ({self._engine.url.get_backend_name()})")
        return self._engine

    async def health_check(self) -> Dict[str, Any]:
        if self._engine is None:
            return _status("unhealthy", "Database engine not initialized")

        for attempt in range(1, self.retry_attempts + 1):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))
                return _status("healthy")
            except Exception as e:
                logger.warning(f"Database health check failed (attempt {attempt}/{self.retry_attempts}): {e}")
                if attempt < self.retry_attempts:
                    await asyncio.sleep(self.retry_delay * (2 ** (attempt - 1)))

        return _status("unhealthy", "Database unreachable after retries")

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")


db_manager = DatabaseConnectionManager()


async def init_database() -> AsyncEngine:
    try:
        return await db_manager.initialize()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise


async def close_database() -> None:
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Raises:
        RuntimeError: If init_database() has not run
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
