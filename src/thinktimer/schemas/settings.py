"""Settings schemas for API request/response."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.thinktimer.models.enums import Theme, TimeFormat


class SettingsUpdate(BaseModel):
    """Schema for a partial settings update.

    Accepts both the column names and the camelCase keys the UI sends.
    """

    theme: Theme | None = None
    language: str | None = Field(default=None, min_length=2, max_length=16)
    timeformat: TimeFormat | None = Field(
        default=None, validation_alias=AliasChoices("timeformat", "timeFormat")
    )
    custom_url: str | None = Field(
        default=None, validation_alias=AliasChoices("custom_url", "customUrl")
    )

    @field_validator("theme", "language", "timeformat")
    @classmethod
    def validate_not_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class SettingsRead(BaseModel):
    """Schema for reading the settings singleton."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    theme: str
    language: str
    timeformat: str = Field(serialization_alias="timeFormat")
    custom_url: str = Field(serialization_alias="customUrl")
    updated_at: datetime | None = None
