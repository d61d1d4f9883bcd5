"""Repository for the settings singleton."""

from sqlalchemy import func, select

from src.thinktimer.models import SETTINGS_ID, UserSettings
from src.thinktimer.models.settings import (
    DEFAULT_CUSTOM_URL,
    DEFAULT_LANGUAGE,
    DEFAULT_THEME,
    DEFAULT_TIME_FORMAT,
)
from src.thinktimer.repositories.base import BaseRepository
from src.thinktimer.schemas.settings import SettingsRead


class SettingsRepository(BaseRepository[UserSettings]):
    """Reads and writes always target the row with id=SETTINGS_ID."""

    model = UserSettings

    async def get_singleton(self) -> SettingsRead | None:
        """Read the singleton, defaulting columns that are NULL on older rows."""
        result = await self.session.execute(
            select(
                UserSettings.id,
                func.coalesce(UserSettings.theme, DEFAULT_THEME).label("theme"),
                func.coalesce(UserSettings.language, DEFAULT_LANGUAGE).label("language"),
                func.coalesce(UserSettings.timeformat, DEFAULT_TIME_FORMAT).label("timeformat"),
                func.coalesce(UserSettings.custom_url, DEFAULT_CUSTOM_URL).label("custom_url"),
                UserSettings.updated_at,
            ).where(UserSettings.id == SETTINGS_ID)
        )
        row = result.one_or_none()
        return SettingsRead.model_validate(dict(row._mapping)) if row is not None else None
