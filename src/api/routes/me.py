"""The caller's own portfolio and profile."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentProfile, CurrentUser
from api.dependencies.services import get_portfolio_service, get_profile_service
from api.schemas.portfolio import PortfolioResponse
from api.schemas.profile import ProfileResponse, ProfileUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.portfolio_service import PortfolioService
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/me", tags=["me"])


@router.get(
    "/portfolio",
    response_model=PortfolioResponse,
    summary="Get my portfolio",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_portfolio(
    request: Request,
    user: CurrentUser,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioResponse:
    """
    Full portfolio of the authenticated user.

    The profile is created empty on first access.
    """
    portfolio = await service.get_for_user(user.id)
    return PortfolioResponse.model_validate(portfolio)


@router.get("/profile", response_model=ProfileResponse, summary="Get my profile")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(request: Request, profile: CurrentProfile) -> ProfileResponse:
    """Profile of the authenticated user."""
    return ProfileResponse.model_validate(profile)


@router.put(
    "/profile",
    response_model=ProfileResponse,
    summary="Update my profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_my_profile(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Partial update: fields left out of the body keep their values."""
    profile = await service.update(user.id, body.model_dump(exclude_unset=True))
    return ProfileResponse.model_validate(profile)
