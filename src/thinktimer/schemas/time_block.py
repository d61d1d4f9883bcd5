"""Time block schemas for API request/response."""

from datetime import datetime
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from src.thinktimer.models.base import to_local_naive
from src.thinktimer.models.time_block import TimeBlock


class TimeBlockCreate(BaseModel):
    """Schema for creating a time block.

    Omit end_time to start a running timer. Manual entries supply the
    duration directly and set is_manual.
    """

    project_id: int
    start_time: datetime
    end_time: datetime | None = None
    duration: int = Field(default=0, ge=0)
    is_manual: bool = False
    description: str | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_times(cls, v: datetime | None) -> datetime | None:
        return to_local_naive(v) if v is not None else None

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class TimeBlockUpdate(BaseModel):
    """Schema for a partial time block update."""

    start_time: datetime | None = None
    end_time: datetime | None = None
    duration: int | None = Field(default=None, ge=0)
    description: str | None = None

    @field_validator("start_time", "duration")
    @classmethod
    def validate_not_null(cls, v: datetime | int | None) -> datetime | int:
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_times(cls, v: datetime | None) -> datetime | None:
        return to_local_naive(v) if v is not None else None


class TimeBlockStop(BaseModel):
    """Payload for stopping a paused/resumed timer with its accumulated total."""

    duration: int = Field(ge=0)


class TimeBlockRead(BaseModel):
    """Schema for reading a time block, joined with its project's name."""

    id: int
    project_id: int
    project_name: str
    start_time: datetime
    end_time: datetime | None
    duration: int
    is_manual: bool
    description: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_running(self) -> bool:
        return self.end_time is None

    @classmethod
    def from_row(cls, block: TimeBlock, project_name: str) -> Self:
        return cls(**block.model_dump(), project_name=project_name)
