"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.thinktimer.repositories.partial_update import Assignment

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def table(self) -> Any:
        return self.model.__table__  # type: ignore[attr-defined]

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key, bypassing stale identity-map state."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def update_by_id(self, id: int, assignments: list[Assignment]) -> int:
        """Apply assignments in the given order. Returns the matched row count."""
        stmt = (
            update(self.table)
            .where(self.table.c.id == id)
            .ordered_values(*((self.table.c[column], value) for column, value in assignments))
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_by_id(self, id: int) -> int:
        """Delete by primary key. Returns the deleted row count."""
        result = await self.session.execute(delete(self.table).where(self.table.c.id == id))
        return result.rowcount
