"""TimeBlock model - one recorded interval of work."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.thinktimer.models.base import local_now


class TimeBlock(SQLModel, table=True):
    """A work session against a project.

    A block whose end_time is NULL is a running timer. Once stopped,
    duration (seconds) is authoritative; it is not re-derived from the
    start/end timestamps when is_manual is set.
    """

    __tablename__ = "time_blocks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    start_time: datetime = Field(index=True)
    end_time: datetime | None = None
    duration: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
    is_manual: bool = Field(default=False, sa_column_kwargs={"server_default": "0"})
    description: str | None = None
    created_at: datetime = Field(default_factory=local_now)
    updated_at: datetime = Field(default_factory=local_now)

    @property
    def is_running(self) -> bool:
        return self.end_time is None
