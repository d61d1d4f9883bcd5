"""Model exports.

Importing this package registers every table on SQLModel.metadata.
"""

from src.thinktimer.models.enums import ProjectStatus, Theme, TimeFormat
from src.thinktimer.models.project import Project
from src.thinktimer.models.settings import SETTINGS_ID, UserSettings
from src.thinktimer.models.time_block import TimeBlock

__all__ = [
    # Enums
    "ProjectStatus",
    "Theme",
    "TimeFormat",
    # Tables
    "Project",
    "TimeBlock",
    "UserSettings",
    "SETTINGS_ID",
]
