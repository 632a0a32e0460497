"""Experience API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentProfile
from api.dependencies.services import get_experience_service
from api.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.experience_service import ExperienceService

router = APIRouter(prefix="/me/experiences", tags=["experiences"])


@router.get(
    "",
    response_model=list[ExperienceResponse],
    summary="List my experiences",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_experiences(
    request: Request,
    profile: CurrentProfile,
    service: ExperienceService = Depends(get_experience_service),
) -> list[ExperienceResponse]:
    """Experiences of the caller's profile in display order."""
    experiences = await service.list_for_profile(profile.id)
    return [ExperienceResponse.model_validate(e) for e in experiences]


@router.post(
    "",
    response_model=ExperienceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an experience",
    responses={
        201: {"description": "Experience created"},
        400: {"description": "company or role missing"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_experience(
    request: Request,
    body: ExperienceCreate,
    profile: CurrentProfile,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """
    Add an experience to the caller's profile.

    Without `order_index` it is placed after the current last experience.
    """
    experience = await service.create(
        profile_id=profile.id,
        company=body.company,
        role=body.role,
        start_date=body.start_date,
        end_date=body.end_date,
        description=body.description,
        order_index=body.order_index,
    )
    return ExperienceResponse.model_validate(experience)


@router.put(
    "/{experience_id}",
    response_model=ExperienceResponse,
    summary="Update an experience",
    responses={404: {"description": "Experience not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_experience(
    request: Request,
    experience_id: UUID,
    body: ExperienceUpdate,
    profile: CurrentProfile,
    service: ExperienceService = Depends(get_experience_service),
) -> ExperienceResponse:
    """Partial update: fields left out of the body keep their values."""
    experience = await service.update(
        experience_id, profile.id, body.model_dump(exclude_unset=True)
    )
    return ExperienceResponse.model_validate(experience)


@router.delete(
    "/{experience_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an experience",
    responses={
        204: {"description": "Experience deleted"},
        404: {"description": "Experience not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_experience(
    request: Request,
    experience_id: UUID,
    profile: CurrentProfile,
    service: ExperienceService = Depends(get_experience_service),
) -> None:
    """Delete one of the caller's experiences."""
    await service.delete(experience_id, profile.id)
    return None
