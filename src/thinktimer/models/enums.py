"""Shared enums for models."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    ACTIVE = "active"
    COMPLETED = "completed"
    PAUSED = "paused"


class Theme(str, Enum):
    """UI colour theme."""

    LIGHT = "light"
    DARK = "dark"


class TimeFormat(str, Enum):
    """Clock display format."""

    H12 = "12"
    H24 = "24"
