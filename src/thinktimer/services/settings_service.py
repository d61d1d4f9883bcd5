from collections.abc import Callable
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.thinktimer.core.exceptions import NotFoundError
from src.thinktimer.core.logging import get_logger
from src.thinktimer.models import SETTINGS_ID
from src.thinktimer.models.base import local_now
from src.thinktimer.repositories import SettingsRepository, build_assignments
from src.thinktimer.schemas.settings import SettingsRead, SettingsUpdate

logger = get_logger(__name__)


class SettingsService:
    """User settings singleton."""

    def __init__(
        self,
        settings_repo: SettingsRepository,
        session: AsyncSession,
        clock: Callable[[], datetime] = local_now,
    ):
        self.settings_repo = settings_repo
        self.session = session
        self.clock = clock

    async def get(self) -> SettingsRead:
        """Get the settings row. Missing only if the schema was never ensured."""
        settings = await self.settings_repo.get_singleton()
        if settings is None:
            raise NotFoundError("Settings", SETTINGS_ID)
        return settings

    async def update(self, data: SettingsUpdate) -> SettingsRead:
        """Write only the fields present in data and return the refreshed row."""
        assignments = build_assignments(data, self.clock())
        try:
            matched = await self.settings_repo.update_by_id(SETTINGS_ID, assignments)
            if matched == 0:
                raise NotFoundError("Settings", SETTINGS_ID)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Settings updated", fields=[column for column, _ in assignments])
        return await self.get()
