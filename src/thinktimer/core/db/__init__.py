"""Database utilities - engine, session, schema."""

from src.thinktimer.core.db.engine import create_engine, dispose_engine, get_engine
from src.thinktimer.core.db.schema import MIGRATIONS, AddColumn, ensure_schema
from src.thinktimer.core.db.session import get_session

__all__ = [
    # Engine
    "create_engine",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    # Schema
    "AddColumn",
    "MIGRATIONS",
    "ensure_schema",
]
