# 📄 File: app/shared/config/database.py
#
# 🧭 Purpose (Layman Explanation):
# Defines the common starting point that every reminder database table is built from,
# so all tables and their constraints get consistent, predictable names.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy declarative base with a constraint naming convention shared by ORM
# models and Alembic autogeneration, plus helpers to create or drop the schema.
#
# 🔗 Dependencies:
# - SQLAlchemy declarative ORM
#
# 🔄 Connected Modules / Calls From:
# - app.modules.care_management.infrastructure.database.models
# - migrations/env.py
# - Test fixtures creating an in-memory schema

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase


# =============================================================================
# DATABASE MODELS BASE CLASS
# =============================================================================

# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class DatabaseBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides the shared metadata so Alembic and the test fixtures
    see every reminder table through a single registry.
    """
    metadata = metadata


# =============================================================================
# SCHEMA UTILITIES
# =============================================================================

async def create_all_tables(engine: AsyncEngine) -> None:
    """Create every table registered on DatabaseBase (local runs and tests)."""
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.create_all)


async def drop_all_tables(engine: AsyncEngine) -> None:
    """Drop every table registered on DatabaseBase."""
    async with engine.begin() as conn:
        await conn.run_sync(DatabaseBase.metadata.drop_all)
