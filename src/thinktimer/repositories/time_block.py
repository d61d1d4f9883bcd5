"""Repository for TimeBlock entity."""

from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlmodel import col, select

from src.thinktimer.models import Project, TimeBlock
from src.thinktimer.repositories.base import BaseRepository


class TimeBlockRepository(BaseRepository[TimeBlock]):
    """Repository for TimeBlock entity.

    Reads that feed the UI are joined with projects to expose project_name.
    """

    model = TimeBlock

    def _joined(self) -> Any:
        return (
            select(TimeBlock, Project.name)
            .join(Project, col(TimeBlock.project_id) == col(Project.id))
            .execution_options(populate_existing=True)
        )

    async def get_with_project_name(self, id: int) -> tuple[TimeBlock, str] | None:
        """Get a block and its project's name."""
        result = await self.session.execute(self._joined().where(col(TimeBlock.id) == id))
        row = result.one_or_none()
        return (row[0], row[1]) if row is not None else None

    async def list_started_between(
        self,
        start: datetime,
        end: datetime,
        include_end: bool = False,
    ) -> list[tuple[TimeBlock, str]]:
        """List blocks whose start_time is in [start, end) or [start, end], newest first."""
        upper = col(TimeBlock.start_time) <= end if include_end else col(TimeBlock.start_time) < end
        result = await self.session.execute(
            self._joined()
            .where(col(TimeBlock.start_time) >= start, upper)
            .order_by(col(TimeBlock.start_time).desc())
        )
        return [(row[0], row[1]) for row in result.all()]

    async def total_duration_for_project(self, project_id: int) -> int:
        """Sum of durations for a project; 0 when it has no blocks."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(TimeBlock.duration), 0)).where(
                col(TimeBlock.project_id) == project_id
            )
        )
        return int(result.scalar_one())
