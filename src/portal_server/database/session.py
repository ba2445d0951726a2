"""Database session management."""

import logging
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base
from .config import get_database_echo, get_database_url, is_sqlite

logger = logging.getLogger(__name__)

_database_url = get_database_url()

# Create async engine
engine = create_async_engine(
    _database_url,
    echo=get_database_echo(),
    future=True,
    pool_pre_ping=not is_sqlite(_database_url),
)

if is_sqlite(_database_url):

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
        """SQLite ignores foreign keys unless asked per connection."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create session factory
SessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting database sessions.

    Yields:
        AsyncSession instance
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """
    Initialize database tables.

    Creates all tables defined in ORM models.
    """
    async with engine.begin() as conn:
        # Import all models to register them with Base
        from .models import EpisodeLinkORM, EpisodeORM  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database initialized successfully")


async def dispose_db() -> None:
    """Close all pooled connections."""
    await engine.dispose()
    logger.info("Database connections closed")
