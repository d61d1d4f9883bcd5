from src.thinktimer.services.project_service import ProjectService
from src.thinktimer.services.settings_service import SettingsService
from src.thinktimer.services.time_block_service import TimeBlockService

__all__ = [
    "ProjectService",
    "SettingsService",
    "TimeBlockService",
]
