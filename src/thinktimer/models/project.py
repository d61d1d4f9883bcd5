"""Project model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.thinktimer.models.base import local_now
from src.thinktimer.models.enums import ProjectStatus


class Project(SQLModel, table=True):
    """A unit of work that time blocks are recorded against."""

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str
    description: str | None = None
    url: str | None = None
    discord: str | None = None
    directory: str | None = Field(default="", sa_column_kwargs={"server_default": ""})
    deadline: datetime | None = None
    status: str = Field(
        default=ProjectStatus.ACTIVE.value,
        sa_column_kwargs={"server_default": ProjectStatus.ACTIVE.value},
    )
    created_at: datetime = Field(default_factory=local_now)
    updated_at: datetime = Field(default_factory=local_now)
