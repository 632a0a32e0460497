"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Represents a user resolved by the auth provider."""

    id: UUID
    email: str


@dataclass
class AuthSession:
    """Outcome of a sign-up or sign-in.

    ``access_token`` is None when the provider created the user but is
    waiting for e-mail confirmation before issuing a session.
    """

    user: TokenUser
    access_token: Optional[str] = None
    confirmation_pending: bool = False


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def get_user(self, token: str) -> Optional[TokenUser]:
        """
        Resolve an access token to its user.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if the provider accepts the token, None if it rejects it
        """
        ...

    async def sign_up(self, email: str, password: str) -> AuthSession:
        """Register a new user."""
        ...

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""
        ...

    async def send_password_reset(self, email: str, redirect_to: str | None = None) -> None:
        """Ask the provider to e-mail a password-reset link."""
        ...

    async def update_password(self, user_id: UUID, new_password: str) -> None:
        """Set a user's password (privileged)."""
        ...

    async def aclose(self) -> None:
        """Release network resources."""
        ...
