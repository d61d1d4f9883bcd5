"""Project record store - business logic over ProjectRepository."""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.thinktimer.core.exceptions import NotFoundError
from src.thinktimer.core.logging import get_logger
from src.thinktimer.models import Project, ProjectStatus
from src.thinktimer.models.base import local_now
from src.thinktimer.repositories import ProjectRepository, build_assignments
from src.thinktimer.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project CRUD. Each public method is one transaction."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        session: AsyncSession,
        clock: Callable[[], datetime] = local_now,
    ):
        self.project_repo = project_repo
        self.session = session
        self.clock = clock

    async def create(self, data: ProjectCreate) -> Project:
        """Insert a project with status=active and created/updated set to now."""
        now = self.clock()
        project = Project(
            **data.model_dump(),
            status=ProjectStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        try:
            self.project_repo.add(project)
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=project.id)
        return project

    async def list_all(self) -> list[Project]:
        """All projects, newest first. Empty list when there are none."""
        return await self.project_repo.list_all()

    async def get_by_id(self, project_id: int) -> Project:
        """Get a project or raise NotFoundError."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return project

    async def update(self, project_id: int, data: ProjectUpdate) -> Project:
        """Write only the fields present in data, refresh updated_at, reload."""
        assignments = build_assignments(data, self.clock())
        try:
            matched = await self.project_repo.update_by_id(project_id, assignments)
            if matched == 0:
                raise NotFoundError("Project", project_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project updated",
            project_id=project_id,
            fields=[column for column, _ in assignments],
        )
        return await self.get_by_id(project_id)

    async def delete(self, project_id: int) -> None:
        """Delete a project and, by cascade, its time blocks.

        Deleting an id that does not exist is a no-op.
        """
        try:
            deleted = await self.project_repo.delete_by_id(project_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if deleted:
            logger.info("Project deleted", project_id=project_id)
