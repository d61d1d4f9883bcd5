"""Database engine management."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.thinktimer.core.config import get_settings

_engine: AsyncEngine | None = None


def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite ships with foreign keys off; the time_blocks cascade needs them on."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async SQLite engine with foreign key enforcement."""
    engine = create_async_engine(url, echo=echo, pool_pre_ping=True)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_engine(settings.resolved_database_url, echo=settings.database_echo)
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
