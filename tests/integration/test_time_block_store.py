"""Tests for the time block record store, date queries and timer stop logic."""

from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from src.thinktimer.core.exceptions import DateParseError, NotFoundError
from src.thinktimer.schemas.project import ProjectUpdate
from src.thinktimer.schemas.time_block import TimeBlockUpdate
from src.thinktimer.services import ProjectService, TimeBlockService
from tests.factories import TimeBlockCreateFactory
from tests.helpers import FakeClock, create_project, create_time_block

pytestmark = pytest.mark.integration


@pytest.fixture
async def project_id(project_service: ProjectService) -> int:
    project = await create_project(project_service, name="Deep Work")
    return project.id


class TestCreateAndGet:
    async def test_create_running_block(self, time_block_service: TimeBlockService, project_id):
        block = await create_time_block(
            time_block_service, project_id, description="Draft chapter"
        )

        assert block.id is not None
        assert block.project_id == project_id
        assert block.project_name == "Deep Work"
        assert block.is_running
        assert block.duration == 0
        assert block.is_manual is False
        assert block.description == "Draft chapter"

    async def test_create_manual_block(self, time_block_service: TimeBlockService, project_id):
        start = datetime(2025, 3, 10, 14, 0)
        block = await time_block_service.create(
            TimeBlockCreateFactory.manual(
                project_id, start, 5400, end_time=start + timedelta(hours=1, minutes=30)
            )
        )

        assert block.is_manual is True
        assert block.duration == 5400
        assert not block.is_running

    async def test_create_for_unknown_project_fails(self, time_block_service: TimeBlockService):
        with pytest.raises(IntegrityError):
            await create_time_block(time_block_service, 999)

    async def test_project_name_follows_rename(
        self,
        time_block_service: TimeBlockService,
        project_service: ProjectService,
        project_id,
    ):
        block = await create_time_block(time_block_service, project_id)
        await project_service.update(project_id, ProjectUpdate(name="Renamed"))

        assert (await time_block_service.get_by_id(block.id)).project_name == "Renamed"

    async def test_get_not_found(self, time_block_service: TimeBlockService):
        with pytest.raises(NotFoundError):
            await time_block_service.get_by_id(42)

    async def test_ids_increase(self, time_block_service: TimeBlockService, project_id):
        ids = [(await create_time_block(time_block_service, project_id)).id for _ in range(3)]
        assert ids == sorted(set(ids))

        await time_block_service.delete(ids[-1])
        replacement = await create_time_block(time_block_service, project_id)

        assert replacement.id > ids[-1]


class TestDateQueries:
    async def test_get_by_date_bounds(self, time_block_service: TimeBlockService, project_id):
        day = date(2025, 3, 14)
        before = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 13, 23, 59, 59)
        )
        at_midnight = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 14, 0, 0, 0)
        )
        late = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 14, 23, 59, 59)
        )
        next_day = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 15, 0, 0, 0)
        )

        ids = [b.id for b in await time_block_service.get_by_date(day)]

        assert ids == [late.id, at_midnight.id]
        assert before.id not in ids
        assert next_day.id not in ids

    async def test_get_by_date_empty(self, time_block_service: TimeBlockService):
        assert await time_block_service.get_by_date(date(2020, 1, 1)) == []

    async def test_get_by_date_string_variants(
        self, time_block_service: TimeBlockService, project_id
    ):
        block = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 14, 10, 30)
        )

        by_date = await time_block_service.get_by_date_string("2025-03-14")
        by_timestamp = await time_block_service.get_by_date_string("2025-03-14T18:00:00")

        assert [b.id for b in by_date] == [block.id]
        assert [b.id for b in by_timestamp] == [block.id]

    async def test_get_by_date_string_malformed(self, time_block_service: TimeBlockService):
        with pytest.raises(DateParseError):
            await time_block_service.get_by_date_string("14.03.2025")

    async def test_get_by_date_range_inclusive(
        self, time_block_service: TimeBlockService, project_id
    ):
        start = datetime(2025, 3, 10, 9, 0)
        end = datetime(2025, 3, 12, 9, 0)
        at_start = await create_time_block(time_block_service, project_id, start_time=start)
        middle = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 11, 12, 0)
        )
        at_end = await create_time_block(time_block_service, project_id, start_time=end)
        await create_time_block(
            time_block_service, project_id, start_time=end + timedelta(seconds=1)
        )

        blocks = await time_block_service.get_by_date_range(start, end)

        assert [b.id for b in blocks] == [at_end.id, middle.id, at_start.id]

    async def test_get_by_date_range_string_bare_end_is_midnight(
        self, time_block_service: TimeBlockService, project_id
    ):
        first = await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 10, 8, 0)
        )
        await create_time_block(
            time_block_service, project_id, start_time=datetime(2025, 3, 12, 8, 0)
        )

        blocks = await time_block_service.get_by_date_range_string("2025-03-10", "2025-03-12")

        assert [b.id for b in blocks] == [first.id]

    async def test_get_by_date_range_string_malformed(
        self, time_block_service: TimeBlockService
    ):
        with pytest.raises(DateParseError):
            await time_block_service.get_by_date_range_string("2025-03-10", "soon")


class TestUpdateAndDelete:
    async def test_partial_update(
        self, time_block_service: TimeBlockService, project_id, clock: FakeClock
    ):
        block = await create_time_block(time_block_service, project_id, description="Old")
        clock.advance(seconds=30)

        updated = await time_block_service.update(block.id, TimeBlockUpdate(description="New"))

        assert updated.description == "New"
        assert updated.start_time == block.start_time
        assert updated.end_time == block.end_time
        assert updated.duration == block.duration
        assert updated.updated_at > block.updated_at

    async def test_update_duration_and_end(
        self, time_block_service: TimeBlockService, project_id
    ):
        block = await create_time_block(time_block_service, project_id)
        end = block.start_time + timedelta(minutes=45)

        updated = await time_block_service.update(
            block.id, TimeBlockUpdate(end_time=end, duration=2700)
        )

        assert updated.end_time == end
        assert updated.duration == 2700

    async def test_update_not_found(self, time_block_service: TimeBlockService):
        with pytest.raises(NotFoundError):
            await time_block_service.update(77, TimeBlockUpdate())

    async def test_delete(self, time_block_service: TimeBlockService, project_id):
        block = await create_time_block(time_block_service, project_id)

        await time_block_service.delete(block.id)
        await time_block_service.delete(block.id)

        with pytest.raises(NotFoundError):
            await time_block_service.get_by_id(block.id)


class TestTimerStop:
    async def test_stop_running_computes_elapsed(
        self, time_block_service: TimeBlockService, project_id, clock: FakeClock
    ):
        block = await create_time_block(time_block_service, project_id, start_time=clock.now)
        clock.advance(minutes=25, seconds=3, microseconds=900000)

        stopped = await time_block_service.stop_running(block.id)

        assert stopped.duration == 25 * 60 + 3
        assert stopped.end_time == clock.now
        assert not stopped.is_running
        assert stopped.updated_at == clock.now

    async def test_stop_running_logs_duration(
        self, time_block_service: TimeBlockService, project_id, clock: FakeClock, log_events
    ):
        block = await create_time_block(time_block_service, project_id, start_time=clock.now)
        clock.advance(minutes=2)

        await time_block_service.stop_running(block.id)

        [event] = [e for e in log_events if e["event"] == "Timer stopped"]
        assert event["time_block_id"] == block.id
        assert event["duration"] == 120

    async def test_stop_running_twice_recomputes_from_now(
        self, time_block_service: TimeBlockService, project_id, clock: FakeClock
    ):
        block = await create_time_block(time_block_service, project_id, start_time=clock.now)
        clock.advance(seconds=60)
        await time_block_service.stop_running(block.id)
        clock.advance(seconds=60)

        again = await time_block_service.stop_running(block.id)

        assert again.duration == 120
        assert again.end_time == clock.now

    async def test_stop_with_duration_is_authoritative(
        self, time_block_service: TimeBlockService, project_id, clock: FakeClock
    ):
        block = await create_time_block(time_block_service, project_id, start_time=clock.now)
        clock.advance(hours=2)

        stopped = await time_block_service.stop_with_duration(block.id, 1500)

        assert stopped.duration == 1500
        assert stopped.end_time == clock.now
        assert stopped.start_time == block.start_time

    async def test_stop_unknown_block(self, time_block_service: TimeBlockService):
        with pytest.raises(NotFoundError):
            await time_block_service.stop_running(5)
        with pytest.raises(NotFoundError):
            await time_block_service.stop_with_duration(5, 10)

    async def test_stop_running_with_offset_start_time(
        self,
        time_block_service: TimeBlockService,
        engine: AsyncEngine,
        project_id,
        clock: FakeClock,
    ):
        # Older releases wrote timestamps with a UTC offset
        started = (clock.now - timedelta(minutes=5)).astimezone().isoformat(sep=" ")
        async with engine.begin() as conn:
            result = await conn.execute(
                text(
                    "INSERT INTO time_blocks "
                    "(project_id, start_time, duration, is_manual, created_at, updated_at) "
                    "VALUES (:project_id, :started, 0, 0, :started, :started)"
                ),
                {"project_id": project_id, "started": started},
            )
        block_id = result.lastrowid

        stopped = await time_block_service.stop_running(block_id)

        assert stopped.duration == 300
        assert stopped.end_time == clock.now


class TestTotalDuration:
    async def test_zero_without_blocks(self, time_block_service: TimeBlockService, project_id):
        assert await time_block_service.get_total_duration_for_project(project_id) == 0

    async def test_zero_for_unknown_project(self, time_block_service: TimeBlockService):
        assert await time_block_service.get_total_duration_for_project(31337) == 0

    async def test_sum_of_durations(
        self,
        time_block_service: TimeBlockService,
        project_service: ProjectService,
        project_id,
    ):
        start = datetime(2025, 3, 14, 9, 0)
        for duration in (100, 200, 300):
            await time_block_service.create(
                TimeBlockCreateFactory.manual(project_id, start, duration)
            )
        other = await create_project(project_service)
        await time_block_service.create(TimeBlockCreateFactory.manual(other.id, start, 999))

        assert await time_block_service.get_total_duration_for_project(project_id) == 600
