"""Test helper functions for common data creation patterns."""

from datetime import datetime, timedelta

from src.thinktimer.models import Project
from src.thinktimer.schemas.time_block import TimeBlockRead
from src.thinktimer.services import ProjectService, TimeBlockService
from tests.factories import ProjectCreateFactory, TimeBlockCreateFactory


class FakeClock:
    """Callable clock for services; advance it to simulate elapsed time."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


async def create_project(service: ProjectService, **kwargs) -> Project:
    """Create a project from the factory, overriding any fields given."""
    return await service.create(ProjectCreateFactory.build(**kwargs))


async def create_time_block(
    service: TimeBlockService,
    project_id: int,
    **kwargs,
) -> TimeBlockRead:
    """Create a time block for a project, overriding any fields given."""
    return await service.create(TimeBlockCreateFactory.build(project_id=project_id, **kwargs))
