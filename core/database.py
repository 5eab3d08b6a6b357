# =============================================================================
# core/database.py - Database Engine Factory
# =============================================================================
# Builds the SQLAlchemy async engine that owns the connection pool.
# The engine is created once at startup and shared by every service; callers
# check out a connection per operation with `async with engine.begin()`.
#
# Usage:
#   engine = create_engine(settings)
#   ...
#   await engine.dispose()
# =============================================================================

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from app.config import Settings

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite leaves foreign keys off per-connection unless asked."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured SQLite database.

    Creates the parent directory of the database file if needed, so a fresh
    checkout can start with only the environment variables set.

    Args:
        settings: Application settings (SQLITE_DSN, pool and echo options)

    Returns:
        AsyncEngine bound to sqlite+aiosqlite
    """
    db_path = Path(settings.SQLITE_DSN)
    if db_path.parent and not db_path.parent.exists():
        db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(
        settings.database_url,
        echo=settings.DB_ECHO,
        poolclass=AsyncAdaptedQueuePool,
        pool_timeout=settings.DB_POOL_TIMEOUT_SECONDS,
        pool_pre_ping=True,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    logger.info(f"Database engine created for {settings.SQLITE_DSN}")
    return engine
