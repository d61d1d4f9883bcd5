"""Schema manager: base tables, additive column migrations, singleton seed.

There is no separate migration runner. ``ensure_schema`` runs on every
startup, so every step must be safe to repeat: tables are created only if
absent, and each column step inspects the live table before adding.
"""

from dataclasses import dataclass
from typing import Any

import sqlalchemy as sa
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from src.thinktimer.core.logging import get_logger
from src.thinktimer.models import SETTINGS_ID, UserSettings
from src.thinktimer.models.base import local_now
from src.thinktimer.models.settings import (
    DEFAULT_CUSTOM_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    DEFAULT_TIME_FORMAT,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class AddColumn:
    """Add ``column`` to ``table`` if missing, then backfill NULLs.

    ``backfill`` is either a constant or a zero-argument callable evaluated
    at migration time. ``None`` leaves existing rows NULL.
    """

    table: str
    column: str
    type_: sa.types.TypeEngine
    server_default: str | None = None
    backfill: Any = None

    @property
    def key(self) -> str:
        return f"{self.table}.{self.column}"

    def applies(self, connection: Connection) -> bool:
        columns = {c["name"] for c in sa.inspect(connection).get_columns(self.table)}
        return self.column not in columns

    def apply(self, connection: Connection) -> None:
        op = Operations(MigrationContext.configure(connection))
        op.add_column(
            self.table,
            sa.Column(self.column, self.type_, nullable=True, server_default=self.server_default),
        )
        self.fill_nulls(connection)

    def fill_nulls(self, connection: Connection) -> None:
        if self.backfill is None:
            return
        value = self.backfill() if callable(self.backfill) else self.backfill
        table = sa.table(self.table, sa.column(self.column, self.type_))
        connection.execute(
            sa.update(table).where(table.c[self.column].is_(None)).values({self.column: value})
        )


MIGRATIONS: tuple[AddColumn, ...] = (
    AddColumn(
        "settings", "timeformat", sa.Text(),
        server_default=DEFAULT_TIME_FORMAT, backfill=DEFAULT_TIME_FORMAT,
    ),
    AddColumn(
        "settings", "custom_url", sa.Text(),
        server_default=DEFAULT_CUSTOM_URL, backfill=DEFAULT_CUSTOM_URL,
    ),
    AddColumn("projects", "directory", sa.Text(), server_default="", backfill=""),
    AddColumn("projects", "discord", sa.Text()),
    AddColumn("settings", "updated_at", sa.DateTime(), backfill=local_now),
)


def _seed_settings(connection: Connection) -> None:
    table = UserSettings.__table__
    connection.execute(
        sqlite_insert(table)
        .values(
            id=SETTINGS_ID,
            theme=DEFAULT_THEME,
            language=DEFAULT_LANGUAGE,
            timeformat=DEFAULT_TIME_FORMAT,
            custom_url=DEFAULT_CUSTOM_URL,
            updated_at=local_now(),
        )
        .on_conflict_do_nothing(index_elements=["id"])
    )


def ensure_schema_sync(
    connection: Connection,
    migrations: tuple[AddColumn, ...] = MIGRATIONS,
) -> list[str]:
    """Bring the store up to the current schema. Returns the columns added."""
    SQLModel.metadata.create_all(connection, checkfirst=True)

    added: list[str] = []
    for step in migrations:
        if step.applies(connection):
            step.apply(connection)
            added.append(step.key)
            logger.info("Added column", column=step.key)

    _seed_settings(connection)
    return added


async def ensure_schema(engine: AsyncEngine) -> list[str]:
    """Create tables, apply pending column migrations and seed settings.

    Runs in a single transaction; any error propagates to the caller.
    """
    async with engine.begin() as connection:
        return await connection.run_sync(ensure_schema_sync)
