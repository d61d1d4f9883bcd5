from src.thinktimer.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectTotalDuration,
    ProjectUpdate,
)
from src.thinktimer.schemas.settings import SettingsRead, SettingsUpdate
from src.thinktimer.schemas.system import OpenDirectoryRequest, OpenUrlRequest
from src.thinktimer.schemas.time_block import (
    TimeBlockCreate,
    TimeBlockRead,
    TimeBlockStop,
    TimeBlockUpdate,
)

__all__ = [
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectTotalDuration",
    "ProjectUpdate",
    # Settings
    "SettingsRead",
    "SettingsUpdate",
    # System
    "OpenDirectoryRequest",
    "OpenUrlRequest",
    # Time block
    "TimeBlockCreate",
    "TimeBlockRead",
    "TimeBlockStop",
    "TimeBlockUpdate",
]
