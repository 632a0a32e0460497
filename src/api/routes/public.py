"""Unauthenticated portfolio browsing."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.services import get_portfolio_service, get_profile_service
from api.schemas.experience import ExperienceResponse
from api.schemas.portfolio import PortfolioResponse
from api.schemas.profile import PortfolioDirectoryResponse, ProfileResponse
from api.schemas.project import ProjectResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.services.portfolio_service import PortfolioService
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/public/portfolios", tags=["public"])


@router.get(
    "",
    response_model=PortfolioDirectoryResponse,
    summary="List portfolios",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_portfolios(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> PortfolioDirectoryResponse:
    """
    List public profiles.

    `featured` holds the five most recently updated featured profiles;
    `list` holds every profile, most recently updated first.
    """
    directory = await service.get_directory()
    return PortfolioDirectoryResponse(
        featured=[ProfileResponse.model_validate(p) for p in directory.featured],
        profiles=[ProfileResponse.model_validate(p) for p in directory.profiles],
    )


@router.get(
    "/{profile_id}",
    response_model=PortfolioResponse,
    summary="Get a portfolio",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_portfolio(
    request: Request,
    profile_id: UUID,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """Profile with ordered experiences and projects (parts nested)."""
    portfolio = await service.get_public(profile_id)
    return PortfolioResponse.model_validate(portfolio)


@router.get(
    "/{profile_id}/experiences",
    response_model=list[ExperienceResponse],
    summary="List a portfolio's experiences",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_portfolio_experiences(
    request: Request,
    profile_id: UUID,
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[ExperienceResponse]:
    """Experiences of a profile in display order."""
    experiences = await service.list_experiences(profile_id)
    return [ExperienceResponse.model_validate(e) for e in experiences]


@router.get(
    "/{profile_id}/projects",
    response_model=list[ProjectResponse],
    summary="List a portfolio's projects",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_portfolio_projects(
    request: Request,
    profile_id: UUID,
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[ProjectResponse]:
    """Projects of a profile in display order, each with its parts."""
    projects = await service.list_projects(profile_id)
    return [ProjectResponse.model_validate(p) for p in projects]
