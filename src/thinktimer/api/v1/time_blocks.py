"""Time block endpoints, including the timer stop transitions."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.thinktimer.api.dependencies import TimeBlockServiceDep
from src.thinktimer.schemas.time_block import (
    TimeBlockCreate,
    TimeBlockRead,
    TimeBlockStop,
    TimeBlockUpdate,
)

router = APIRouter(prefix="/time-blocks", tags=["time-blocks"])


@router.get(
    "",
    response_model=list[TimeBlockRead],
    summary="List time blocks by day or range",
    description=(
        "Pass `date` for one local calendar day, or `start` and `end` for an "
        "inclusive range. Values may be ISO-8601 timestamps or YYYY-MM-DD."
    ),
    responses={
        400: {"description": "Neither date nor start/end given"},
        422: {"description": "Unparseable date"},
    },
)
async def list_time_blocks(
    service: TimeBlockServiceDep,
    date: Annotated[str | None, Query(description="Day to list")] = None,
    start: Annotated[str | None, Query(description="Range start (inclusive)")] = None,
    end: Annotated[str | None, Query(description="Range end (inclusive)")] = None,
) -> list[TimeBlockRead]:
    if date is not None:
        return await service.get_by_date_string(date)
    if start is not None and end is not None:
        return await service.get_by_date_range_string(start, end)
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Provide either 'date' or both 'start' and 'end'",
    )


@router.get(
    "/{time_block_id}",
    response_model=TimeBlockRead,
    summary="Get time block",
    responses={404: {"description": "Time block not found"}},
)
async def get_time_block(time_block_id: int, service: TimeBlockServiceDep) -> TimeBlockRead:
    return await service.get_by_id(time_block_id)


@router.post(
    "",
    response_model=TimeBlockRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create time block",
    description="Omit end_time to start a running timer.",
    responses={409: {"description": "Project does not exist"}},
)
async def create_time_block(
    request: TimeBlockCreate, service: TimeBlockServiceDep
) -> TimeBlockRead:
    return await service.create(request)


@router.patch(
    "/{time_block_id}",
    response_model=TimeBlockRead,
    summary="Update time block",
    description="Partial update of start_time, end_time, duration and description.",
    responses={404: {"description": "Time block not found"}},
)
async def update_time_block(
    time_block_id: int,
    request: TimeBlockUpdate,
    service: TimeBlockServiceDep,
) -> TimeBlockRead:
    return await service.update(time_block_id, request)


@router.delete(
    "/{time_block_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete time block",
)
async def delete_time_block(time_block_id: int, service: TimeBlockServiceDep) -> None:
    await service.delete(time_block_id)


@router.post(
    "/{time_block_id}/stop",
    response_model=TimeBlockRead,
    summary="Stop running timer",
    description="Set end_time to now and duration to the elapsed seconds since start_time.",
    responses={404: {"description": "Time block not found"}},
)
async def stop_time_block(time_block_id: int, service: TimeBlockServiceDep) -> TimeBlockRead:
    return await service.stop_running(time_block_id)


@router.post(
    "/{time_block_id}/stop-with-duration",
    response_model=TimeBlockRead,
    summary="Stop paused timer",
    description="Set end_time to now and duration to the accumulated total supplied.",
    responses={404: {"description": "Time block not found"}},
)
async def stop_time_block_with_duration(
    time_block_id: int,
    request: TimeBlockStop,
    service: TimeBlockServiceDep,
) -> TimeBlockRead:
    return await service.stop_with_duration(time_block_id, request.duration)
