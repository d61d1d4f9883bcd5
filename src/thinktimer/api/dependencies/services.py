"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.thinktimer.api.dependencies.db import DBSession
from src.thinktimer.api.dependencies.repositories import (
    ProjectRepo,
    SettingsRepo,
    TimeBlockRepo,
)
from src.thinktimer.services import ProjectService, SettingsService, TimeBlockService


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, session)


def get_time_block_service(
    time_block_repo: TimeBlockRepo, session: DBSession
) -> TimeBlockService:
    """Get time block service."""
    return TimeBlockService(time_block_repo, session)


def get_settings_service(settings_repo: SettingsRepo, session: DBSession) -> SettingsService:
    """Get settings service."""
    return SettingsService(settings_repo, session)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TimeBlockServiceDep = Annotated[TimeBlockService, Depends(get_time_block_service)]
SettingsServiceDep = Annotated[SettingsService, Depends(get_settings_service)]
