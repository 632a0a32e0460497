"""Authentication dependencies for FastAPI."""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.dependencies.services import get_auth_provider, get_profile_service
from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.profile import Profile
from domain.services.profile_service import ProfileService
from infrastructure.auth.provider import IAuthProvider, TokenUser

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    The token is checked against the hosted auth service on every call.

    Raises:
        AuthenticationError: If no token provided or the service rejects it
    """
    if not credentials:
        raise AuthenticationError(
            message="Authorization header required",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = await auth_provider.get_user(credentials.credentials)

    if not user:
        raise AuthenticationError(
            message="Invalid or expired token",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    request.state.user = user
    structlog.contextvars.bind_contextvars(user_id=str(user.id))
    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]


async def get_current_profile(
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> Profile:
    """The caller's profile, created on first access."""
    return await profile_service.get_or_create(user.id)


CurrentProfile = Annotated[Profile, Depends(get_current_profile)]
