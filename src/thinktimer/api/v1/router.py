from fastapi import APIRouter, Depends

from src.thinktimer.api.dependencies import bind_path_ids
from src.thinktimer.api.v1 import projects, settings, system, time_blocks

api_router = APIRouter(prefix="/api/v1", dependencies=[Depends(bind_path_ids)])
api_router.include_router(projects.router)
api_router.include_router(time_blocks.router)
api_router.include_router(settings.router)
api_router.include_router(system.router)
