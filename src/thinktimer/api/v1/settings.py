"""Settings endpoints."""

from fastapi import APIRouter

from src.thinktimer.api.dependencies import SettingsServiceDep
from src.thinktimer.schemas.settings import SettingsRead, SettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsRead, summary="Get settings")
async def get_settings(service: SettingsServiceDep) -> SettingsRead:
    return await service.get()


@router.patch(
    "",
    response_model=SettingsRead,
    summary="Update settings",
    description="Partial update: only fields present in the body are changed.",
)
async def update_settings(request: SettingsUpdate, service: SettingsServiceDep) -> SettingsRead:
    return await service.update(request)
