"""Auth API routes (delegated to the hosted auth service)."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_auth_service
from api.schemas.auth import (
    AuthResponse,
    AuthUserResponse,
    CredentialsRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
)
from api.schemas.common import SuccessResponse
from core.rate_limit import AUTH_LIMIT, WRITE_LIMIT, limiter
from domain.services.auth_service import AuthService
from infrastructure.auth.provider import AuthSession

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(session: AuthSession) -> AuthResponse:
    return AuthResponse(
        token=session.access_token,
        user=AuthUserResponse(id=session.user.id, email=session.user.email),
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    summary="Register a new account",
    responses={
        200: {"description": "Registered; token is null while e-mail confirmation is pending"},
        400: {"description": "Missing fields or registration rejected"},
        500: {"description": "Registered but no session could be established"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def register(
    request: Request,
    body: CredentialsRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Create an account with e-mail and password and provision its profile."""
    session = await service.register(body.email, body.password)
    return _auth_response(session)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    responses={401: {"description": "Invalid credentials"}},
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: CredentialsRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange e-mail and password for an access token."""
    session = await service.login(body.email, body.password)
    return _auth_response(session)


@router.post("/logout", response_model=SuccessResponse, summary="Log out")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def logout(request: Request, user: CurrentUser) -> SuccessResponse:
    """Stateless: the client discards its token."""
    return SuccessResponse()


@router.post(
    "/reset-password-request",
    response_model=SuccessResponse,
    summary="Request a password-reset e-mail",
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def reset_password_request(
    request: Request,
    body: PasswordResetRequest,
    service: AuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """Always succeeds, whether or not the address has an account."""
    await service.request_password_reset(body.email)
    return SuccessResponse()


@router.post(
    "/reset-password",
    response_model=SuccessResponse,
    summary="Set a new password",
    responses={401: {"description": "Reset token does not resolve to a user"}},
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def reset_password(
    request: Request,
    body: PasswordResetConfirm,
    service: AuthService = Depends(get_auth_service),
) -> SuccessResponse:
    """Set a new password using the access token from the reset link."""
    await service.reset_password(body.access_token, body.new_password)
    return SuccessResponse()
