"""Singleton user settings row."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.thinktimer.models.enums import Theme, TimeFormat

SETTINGS_ID = 1

DEFAULT_THEME = Theme.LIGHT.value
DEFAULT_LANGUAGE = "en"
DEFAULT_TIME_FORMAT = TimeFormat.H24.value
DEFAULT_CUSTOM_URL = ""


class UserSettings(SQLModel, table=True):
    """Process-wide user preferences; exactly one row with id=SETTINGS_ID.

    Columns added after the first release are nullable so rows written by
    older versions stay readable; reads coalesce them to the defaults.
    """

    __tablename__ = "settings"

    id: int | None = Field(default=None, primary_key=True)
    theme: str | None = Field(default=DEFAULT_THEME, sa_column_kwargs={"server_default": DEFAULT_THEME})
    language: str | None = Field(
        default=DEFAULT_LANGUAGE, sa_column_kwargs={"server_default": DEFAULT_LANGUAGE}
    )
    timeformat: str | None = Field(
        default=DEFAULT_TIME_FORMAT, sa_column_kwargs={"server_default": DEFAULT_TIME_FORMAT}
    )
    custom_url: str | None = Field(
        default=DEFAULT_CUSTOM_URL, sa_column_kwargs={"server_default": DEFAULT_CUSTOM_URL}
    )
    updated_at: datetime | None = None
