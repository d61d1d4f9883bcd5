"""Root test fixtures shared across all test types.

Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Never touch the real per-user store from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# ruff: noqa: E402 - Imports must be after env var setup
from datetime import datetime

import pytest
import structlog
from structlog.testing import capture_logs

import src.thinktimer.core.db.schema as schema_module
import src.thinktimer.services.project_service as project_service_module
import src.thinktimer.services.settings_service as settings_service_module
import src.thinktimer.services.time_block_service as time_block_service_module
from src.thinktimer.core.config import get_settings
from src.thinktimer.core.logging import get_logger
from tests.helpers import FakeClock

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    """A controllable clock starting at a fixed local time."""
    return FakeClock(datetime(2025, 3, 14, 9, 0, 0))


LOGGING_MODULES = (
    schema_module,
    project_service_module,
    settings_service_module,
    time_block_service_module,
)


@pytest.fixture
def log_events(monkeypatch: pytest.MonkeyPatch):
    """Capture the structlog events emitted by the schema manager and services."""
    cache_on_first_use = structlog.get_config()["cache_logger_on_first_use"]
    structlog.configure(cache_logger_on_first_use=False)
    # Module loggers may already be bound to the processors of an earlier setup_logging
    for module in LOGGING_MODULES:
        monkeypatch.setattr(module, "logger", get_logger(module.__name__))

    with capture_logs() as events:
        yield events

    structlog.configure(cache_logger_on_first_use=cache_on_first_use)
