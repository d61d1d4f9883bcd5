"""Repository layer - data access abstraction."""

from src.thinktimer.repositories.base import BaseRepository
from src.thinktimer.repositories.partial_update import build_assignments
from src.thinktimer.repositories.project import ProjectRepository
from src.thinktimer.repositories.settings import SettingsRepository
from src.thinktimer.repositories.time_block import TimeBlockRepository

__all__ = [
    "BaseRepository",
    "build_assignments",
    "ProjectRepository",
    "SettingsRepository",
    "TimeBlockRepository",
]
