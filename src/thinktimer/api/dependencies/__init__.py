"""FastAPI dependency injection definitions."""

from src.thinktimer.api.dependencies.context import bind_path_ids
from src.thinktimer.api.dependencies.db import DBSession, get_db_session
from src.thinktimer.api.dependencies.services import (
    ProjectServiceDep,
    SettingsServiceDep,
    TimeBlockServiceDep,
)

__all__ = [
    "bind_path_ids",
    "DBSession",
    "get_db_session",
    "ProjectServiceDep",
    "SettingsServiceDep",
    "TimeBlockServiceDep",
]
