"""Repository for Project entity."""

from sqlmodel import col, select

from src.thinktimer.models import Project
from src.thinktimer.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_all(self) -> list[Project]:
        """List all projects, newest first."""
        result = await self.session.execute(
            select(Project).order_by(col(Project.created_at).desc(), col(Project.id).desc())
        )
        return list(result.scalars().all())
