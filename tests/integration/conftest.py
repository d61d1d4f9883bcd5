"""Integration test fixtures for database and HTTP client operations.

Each test gets its own SQLite file under tmp_path with the schema ensured.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from src.thinktimer.core import db
from src.thinktimer.core.config import get_settings
from src.thinktimer.core.db import create_engine, ensure_schema, get_session
from src.thinktimer.main import create_app
from src.thinktimer.repositories import (
    ProjectRepository,
    SettingsRepository,
    TimeBlockRepository,
)
from src.thinktimer.services import ProjectService, SettingsService, TimeBlockService
from tests.helpers import FakeClock


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine on a fresh file with the schema ensured."""
    test_engine = create_engine(sqlite_url(tmp_path / "thinktimer.db"))
    await ensure_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session; services commit their own work."""
    async with get_session(engine) as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession, clock: FakeClock) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session, clock=clock)


@pytest.fixture
def time_block_service(db_session: AsyncSession, clock: FakeClock) -> TimeBlockService:
    return TimeBlockService(TimeBlockRepository(db_session), db_session, clock=clock)


@pytest.fixture
def settings_service(db_session: AsyncSession, clock: FakeClock) -> SettingsService:
    return SettingsService(SettingsRepository(db_session), db_session, clock=clock)


@pytest.fixture
async def client(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> AsyncGenerator[AsyncClient]:
    """Create a test client with the app lifespan (schema ensure) running."""
    monkeypatch.setenv("DATABASE_URL", sqlite_url(tmp_path / "api.db"))
    get_settings.cache_clear()
    await db.dispose_engine()

    app = create_app()
    async with app.router.lifespan_context(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as client:
            yield client

    await db.dispose_engine()
    get_settings.cache_clear()
