"""Project API routes (parts travel inside the project body)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentProfile
from api.dependencies.services import get_project_service
from api.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.project_service import ProjectService

router = APIRouter(prefix="/me/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List my projects",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_projects(
    request: Request,
    profile: CurrentProfile,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """Projects of the caller's profile in display order, parts nested."""
    projects = await service.list_for_profile(profile.id)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a project",
    responses={
        201: {"description": "Project created"},
        400: {"description": "title missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_project(
    request: Request,
    body: ProjectCreate,
    profile: CurrentProfile,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Add a project, optionally with parts.

    Without `order_index` it is placed after the current last project;
    parts without `order_index` are numbered by list position.
    """
    project = await service.create(
        profile_id=profile.id,
        title=body.title,
        subtitle=body.subtitle,
        cover_image_url=body.cover_image_url,
        order_index=body.order_index,
        parts=[part.model_dump() for part in body.parts],
    )
    return ProjectResponse.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_project(
    request: Request,
    project_id: UUID,
    body: ProjectUpdate,
    profile: CurrentProfile,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Partial update of a project.

    A `parts` array replaces all existing parts (`[]` removes them);
    leaving `parts` out keeps them as they are.
    """
    changes = body.model_dump(exclude_unset=True, exclude={"parts"})
    parts = [part.model_dump() for part in body.parts] if body.parts is not None else None
    project = await service.update(project_id, profile.id, changes, parts=parts)
    return ProjectResponse.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    responses={
        204: {"description": "Project and its parts deleted"},
        404: {"description": "Project not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_project(
    request: Request,
    project_id: UUID,
    profile: CurrentProfile,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete one of the caller's projects together with its parts."""
    await service.delete(project_id, profile.id)
    return None
