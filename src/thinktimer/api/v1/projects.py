"""Project endpoints."""

from fastapi import APIRouter, status

from src.thinktimer.api.dependencies import ProjectServiceDep, TimeBlockServiceDep
from src.thinktimer.schemas.project import (
    ProjectCreate,
    ProjectRead,
    ProjectTotalDuration,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List all projects, newest first.",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    projects = await service.list_all()
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: int, service: ProjectServiceDep) -> ProjectRead:
    """Get a project by ID."""
    project = await service.get_by_id(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
    },
)
async def create_project(request: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    """Create a new project with status 'active'."""
    project = await service.create(request)
    return ProjectRead.model_validate(project)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Partial update: only fields present in the body are changed.",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: int,
    request: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update(project_id, request)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project and all of its time blocks. Unknown ids are ignored.",
)
async def delete_project(project_id: int, service: ProjectServiceDep) -> None:
    await service.delete(project_id)


@router.get(
    "/{project_id}/total-duration",
    response_model=ProjectTotalDuration,
    summary="Total tracked time",
    description="Sum of time block durations in seconds; 0 when the project has none.",
)
async def get_total_duration(
    project_id: int,
    service: TimeBlockServiceDep,
) -> ProjectTotalDuration:
    total = await service.get_total_duration_for_project(project_id)
    return ProjectTotalDuration(project_id=project_id, total_seconds=total)
