"""OS integration endpoints for the desktop shell."""

from fastapi import APIRouter, status

from src.thinktimer.core import platform
from src.thinktimer.schemas.system import OpenDirectoryRequest, OpenUrlRequest

router = APIRouter(prefix="/system", tags=["system"])


@router.post(
    "/open-directory",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Open directory in file explorer",
)
async def open_directory(request: OpenDirectoryRequest) -> None:
    platform.open_directory(request.path)


@router.post(
    "/open-url",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Open URL with default handler",
)
async def open_url(request: OpenUrlRequest) -> None:
    platform.open_url(request.url)
