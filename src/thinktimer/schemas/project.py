"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.thinktimer.models.base import to_local_naive
from src.thinktimer.models.enums import ProjectStatus


def _strip_name(v: str | None) -> str:
    if v is None:
        raise ValueError("Project name cannot be null")
    v = v.strip()
    if not v:
        raise ValueError("Project name cannot be empty or whitespace only")
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    url: str | None = None
    discord: str | None = None
    directory: str | None = None
    deadline: datetime | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _strip_name(v)

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime | None) -> datetime | None:
        return to_local_naive(v) if v is not None else None


class ProjectUpdate(BaseModel):
    """Schema for a partial project update.

    Only fields present in the payload are written. An explicit null clears
    a nullable column; name and status cannot be cleared.
    """

    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    url: str | None = None
    discord: str | None = None
    directory: str | None = None
    deadline: datetime | None = None
    status: ProjectStatus | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        return _strip_name(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: ProjectStatus | None) -> ProjectStatus:
        if v is None:
            raise ValueError("Project status cannot be null")
        return v

    @field_validator("deadline")
    @classmethod
    def validate_deadline(cls, v: datetime | None) -> datetime | None:
        return to_local_naive(v) if v is not None else None


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    name: str
    description: str | None
    url: str | None
    discord: str | None
    directory: str | None
    deadline: datetime | None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectTotalDuration(BaseModel):
    """Total tracked seconds for a project."""

    project_id: int
    total_seconds: int
