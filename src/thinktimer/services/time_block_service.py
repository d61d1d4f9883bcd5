"""Time block record store and timer-stop logic."""

from collections.abc import Callable
from datetime import date, datetime

from sqlalchemy.ext.asyncio import AsyncSession

from src.thinktimer.core.dates import day_bounds, elapsed_seconds, parse_date_string
from src.thinktimer.core.exceptions import NotFoundError
from src.thinktimer.core.logging import get_logger
from src.thinktimer.models import TimeBlock
from src.thinktimer.models.base import local_now, to_local_naive
from src.thinktimer.repositories import TimeBlockRepository, build_assignments
from src.thinktimer.repositories.partial_update import UPDATED_AT
from src.thinktimer.schemas.time_block import TimeBlockCreate, TimeBlockRead, TimeBlockUpdate

logger = get_logger(__name__)


class TimeBlockService:
    """Time block CRUD, date queries and the running/stopped transition.

    A block is running while end_time is NULL. There are two ways to stop it:

    - ``stop_running`` derives duration from the wall-clock delta since
      start_time.
    - ``stop_with_duration`` takes the total from the caller, for timers that
      were paused and resumed and so accumulated time across intervals.

    Neither guards against stopping an already-stopped block; end_time is
    simply moved to now.
    """

    def __init__(
        self,
        time_block_repo: TimeBlockRepository,
        session: AsyncSession,
        clock: Callable[[], datetime] = local_now,
    ):
        self.time_block_repo = time_block_repo
        self.session = session
        self.clock = clock

    async def create(self, data: TimeBlockCreate) -> TimeBlockRead:
        """Insert a block and return it joined with its project name.

        Raises:
            IntegrityError: If project_id does not reference a project.
        """
        now = self.clock()
        block = TimeBlock(**data.model_dump(), created_at=now, updated_at=now)
        try:
            self.time_block_repo.add(block)
            await self.session.commit()
            await self.session.refresh(block)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Time block created",
            time_block_id=block.id,
            project_id=block.project_id,
            running=block.is_running,
        )
        return await self.get_by_id(block.id)  # type: ignore[arg-type]

    async def get_by_id(self, time_block_id: int) -> TimeBlockRead:
        """Get a block with its project name or raise NotFoundError."""
        row = await self.time_block_repo.get_with_project_name(time_block_id)
        if row is None:
            raise NotFoundError("TimeBlock", time_block_id)
        return TimeBlockRead.from_row(*row)

    async def get_by_date(self, day: date | datetime) -> list[TimeBlockRead]:
        """Blocks starting within the local calendar day of ``day``, newest first."""
        start, end = day_bounds(day)
        rows = await self.time_block_repo.list_started_between(start, end)
        return [TimeBlockRead.from_row(*row) for row in rows]

    async def get_by_date_string(self, value: str) -> list[TimeBlockRead]:
        """Like get_by_date, accepting a timestamp or bare date string."""
        return await self.get_by_date(parse_date_string(value))

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[TimeBlockRead]:
        """Blocks with start <= start_time <= end, newest first."""
        rows = await self.time_block_repo.list_started_between(
            to_local_naive(start), to_local_naive(end), include_end=True
        )
        return [TimeBlockRead.from_row(*row) for row in rows]

    async def get_by_date_range_string(self, start: str, end: str) -> list[TimeBlockRead]:
        """Like get_by_date_range, accepting timestamp or bare date strings.

        A bare end date means that day's midnight.
        """
        return await self.get_by_date_range(parse_date_string(start), parse_date_string(end))

    async def update(self, time_block_id: int, data: TimeBlockUpdate) -> TimeBlockRead:
        """Write only the fields present in data, refresh updated_at, reload."""
        assignments = build_assignments(data, self.clock())
        await self._apply(time_block_id, assignments)
        logger.info(
            "Time block updated",
            time_block_id=time_block_id,
            fields=[column for column, _ in assignments],
        )
        return await self.get_by_id(time_block_id)

    async def delete(self, time_block_id: int) -> None:
        """Delete a block. Deleting an id that does not exist is a no-op."""
        try:
            await self.time_block_repo.delete_by_id(time_block_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def stop_running(self, time_block_id: int) -> TimeBlockRead:
        """Stop a running block: end_time = now, duration = floor(now - start_time)."""
        block = await self.get_by_id(time_block_id)
        now = self.clock()
        duration = elapsed_seconds(block.start_time, now)
        await self._apply(
            time_block_id,
            [("end_time", now), ("duration", duration), (UPDATED_AT, now)],
        )
        logger.info("Timer stopped", time_block_id=time_block_id, duration=duration)
        return await self.get_by_id(time_block_id)

    async def stop_with_duration(self, time_block_id: int, duration: int) -> TimeBlockRead:
        """Stop a block with a caller-supplied duration; start_time is not consulted."""
        now = self.clock()
        await self._apply(
            time_block_id,
            [("end_time", now), ("duration", duration), (UPDATED_AT, now)],
        )
        logger.info(
            "Timer stopped with duration", time_block_id=time_block_id, duration=duration
        )
        return await self.get_by_id(time_block_id)

    async def get_total_duration_for_project(self, project_id: int) -> int:
        """Sum of durations across a project's blocks; 0 when there are none."""
        return await self.time_block_repo.total_duration_for_project(project_id)

    async def _apply(self, time_block_id: int, assignments: list) -> None:
        try:
            matched = await self.time_block_repo.update_by_id(time_block_id, assignments)
            if matched == 0:
                raise NotFoundError("TimeBlock", time_block_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
