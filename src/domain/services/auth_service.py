"""Auth service: thin orchestration over the hosted auth provider."""

import structlog

from core.exceptions import (
    AppException,
    AuthenticationError,
    ErrorCode,
    SessionUnavailableError,
)
from domain.services.profile_service import ProfileService
from infrastructure.auth.provider import AuthSession, IAuthProvider

logger = structlog.get_logger()


class AuthService:
    """Registration, login and password reset.

    Credentials, sessions and tokens live entirely in the auth provider.
    """

    def __init__(
        self,
        auth_provider: IAuthProvider,
        profile_service: ProfileService,
        password_reset_redirect_url: str = "",
    ) -> None:
        self._provider = auth_provider
        self._profiles = profile_service
        self._reset_redirect = password_reset_redirect_url or None

    async def register(self, email: str, password: str) -> AuthSession:
        """Register a user and return a session.

        When the provider requires e-mail confirmation the session has no
        token. Provisioning the profile is best effort.
        """
        session = await self._provider.sign_up(email, password)

        if not session.access_token and not session.confirmation_pending:
            try:
                session = await self._provider.sign_in_with_password(email, password)
            except AppException as exc:
                logger.error(
                    "post_registration_sign_in_failed",
                    user_id=str(session.user.id),
                    error=exc.message,
                )
                raise SessionUnavailableError() from exc

        try:
            await self._profiles.get_or_create(session.user.id)
        except Exception:
            logger.exception("profile_provision_failed", user_id=str(session.user.id))

        logger.info(
            "user_registered",
            user_id=str(session.user.id),
            confirmation_pending=session.confirmation_pending,
        )
        return session

    async def login(self, email: str, password: str) -> AuthSession:
        """Sign in with e-mail and password."""
        return await self._provider.sign_in_with_password(email, password)

    async def request_password_reset(self, email: str) -> None:
        """Send a reset e-mail. Never reveals whether the address is known."""
        try:
            await self._provider.send_password_reset(email, redirect_to=self._reset_redirect)
        except AppException as exc:
            logger.warning("password_reset_request_failed", error=exc.message)

    async def reset_password(self, access_token: str, new_password: str) -> None:
        """Set a new password for the user the recovery token belongs to."""
        user = await self._provider.get_user(access_token)
        if not user:
            raise AuthenticationError(
                message="Invalid or expired reset token",
                error_code=ErrorCode.INVALID_TOKEN,
            )
        await self._provider.update_password(user.id, new_password)
        logger.info("password_reset", user_id=str(user.id))
