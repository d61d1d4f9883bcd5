"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.thinktimer.api.dependencies.db import DBSession
from src.thinktimer.repositories import (
    ProjectRepository,
    SettingsRepository,
    TimeBlockRepository,
)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_time_block_repository(session: DBSession) -> TimeBlockRepository:
    return TimeBlockRepository(session)


def get_settings_repository(session: DBSession) -> SettingsRepository:
    return SettingsRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
TimeBlockRepo = Annotated[TimeBlockRepository, Depends(get_time_block_repository)]
SettingsRepo = Annotated[SettingsRepository, Depends(get_settings_repository)]
