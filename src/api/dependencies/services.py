"""Dependency injection factories.

The engine/session factory and the auth provider are created once in the
application lifespan and stored on ``app.state``; services are cheap and
built per request around them.
"""

from collections.abc import Callable

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.config import settings
from domain.services.auth_service import AuthService
from domain.services.experience_service import ExperienceService
from domain.services.portfolio_service import PortfolioService
from domain.services.profile_service import ProfileService
from domain.services.project_service import ProjectService
from infrastructure.auth.provider import IAuthProvider
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

UowFactory = Callable[[], SQLAlchemyUnitOfWork]


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Session factory built at startup."""
    return request.app.state.session_factory  # type: ignore[no-any-return]


def get_auth_provider(request: Request) -> IAuthProvider:
    """Auth provider client built at startup."""
    return request.app.state.auth_provider  # type: ignore[no-any-return]


def get_uow_factory(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> UowFactory:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


def get_profile_service(uow_factory: UowFactory = Depends(get_uow_factory)) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(uow_factory)


def get_portfolio_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
    profile_service: ProfileService = Depends(get_profile_service),
) -> PortfolioService:
    """Get Portfolio service instance."""
    return PortfolioService(uow_factory, profile_service)


def get_experience_service(
    uow_factory: UowFactory = Depends(get_uow_factory),
) -> ExperienceService:
    """Get Experience service instance."""
    return ExperienceService(uow_factory)


def get_project_service(uow_factory: UowFactory = Depends(get_uow_factory)) -> ProjectService:
    """Get Project service instance."""
    return ProjectService(uow_factory)


def get_auth_service(
    auth_provider: IAuthProvider = Depends(get_auth_provider),
    profile_service: ProfileService = Depends(get_profile_service),
) -> AuthService:
    """Get Auth service instance."""
    return AuthService(
        auth_provider,
        profile_service,
        password_reset_redirect_url=settings.password_reset_redirect_url,
    )
