"""Supabase Auth (GoTrue) provider implementation.

Every call goes to the hosted auth service; nothing is verified or cached
locally. Endpoints used, relative to ``<SUPABASE_URL>/auth/v1``:

    GET  /user                      resolve an access token
    POST /signup                    register
    POST /token?grant_type=password sign in
    POST /recover                   send password-reset e-mail
    PUT  /admin/users/{id}          set password (service role)
"""

from typing import Any, Optional
from uuid import UUID

import httpx
import structlog

from core.config import Settings
from core.exceptions import (
    AuthenticationError,
    ErrorCode,
    RegistrationError,
    UpstreamServiceError,
)
from infrastructure.auth.provider import AuthSession, TokenUser

logger = structlog.get_logger()


def _error_message(response: httpx.Response) -> str:
    """Pull the human-readable message out of a GoTrue error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        for key in ("msg", "message", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase


def _to_token_user(data: dict[str, Any]) -> Optional[TokenUser]:
    user_id = data.get("id")
    if not user_id:
        return None
    return TokenUser(id=UUID(str(user_id)), email=data.get("email") or "")


class SupabaseAuthProvider:
    """Auth provider backed by the Supabase Auth REST API."""

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._service_role_key = service_role_key
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"apikey": service_role_key},
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseAuthProvider":
        """Build the provider from application settings."""
        return cls(
            base_url=settings.supabase_auth_url,
            service_role_key=settings.supabase_service_role_key,
            timeout=settings.auth_timeout_seconds,
        )

    async def get_user(self, token: str) -> Optional[TokenUser]:
        """Resolve an access token via ``GET /user``.

        Returns None when the service rejects the token.
        """
        response = await self._request("GET", "/user", token=token)
        if response.is_client_error:
            return None
        self._raise_for_server_error(response)
        return _to_token_user(response.json())

    async def sign_up(self, email: str, password: str) -> AuthSession:
        """Register a user via ``POST /signup``.

        Raises:
            RegistrationError: The service refused the registration
        """
        response = await self._request(
            "POST",
            "/signup",
            json={"email": email, "password": password},
        )
        if response.is_client_error:
            raise RegistrationError(_error_message(response))
        self._raise_for_server_error(response)

        body = response.json()
        # With auto-confirm the body is a session; otherwise it is the bare user.
        user_data = body.get("user") or body
        user = _to_token_user(user_data)
        if user is None:
            raise UpstreamServiceError("Auth service returned no user for sign-up")

        access_token = body.get("access_token")
        confirmation_pending = (
            not access_token
            and bool(user_data.get("confirmation_sent_at"))
            and not user_data.get("email_confirmed_at")
        )
        return AuthSession(
            user=user,
            access_token=access_token,
            confirmation_pending=confirmation_pending,
        )

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session via the password grant.

        Raises:
            AuthenticationError: Credentials were rejected
        """
        response = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        if response.is_client_error:
            raise AuthenticationError(
                message=_error_message(response),
                error_code=ErrorCode.INVALID_CREDENTIALS,
            )
        self._raise_for_server_error(response)

        body = response.json()
        user = _to_token_user(body.get("user") or {})
        if user is None or not body.get("access_token"):
            raise UpstreamServiceError("Auth service returned an incomplete session")
        return AuthSession(user=user, access_token=body["access_token"])

    async def send_password_reset(self, email: str, redirect_to: str | None = None) -> None:
        """Trigger the recovery e-mail via ``POST /recover``."""
        params = {"redirect_to": redirect_to} if redirect_to else None
        response = await self._request(
            "POST",
            "/recover",
            params=params,
            json={"email": email},
        )
        if response.is_error:
            raise UpstreamServiceError(_error_message(response), response.status_code)

    async def update_password(self, user_id: UUID, new_password: str) -> None:
        """Set a password through the admin API (service role key)."""
        response = await self._request(
            "PUT",
            f"/admin/users/{user_id}",
            json={"password": new_password},
        )
        if response.is_error:
            raise UpstreamServiceError(_error_message(response), response.status_code)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        token: str | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token or self._service_role_key}"}
        try:
            return await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("auth_service_unreachable", path=path, error=str(exc))
            raise UpstreamServiceError(f"Auth service unreachable: {exc}") from exc

    @staticmethod
    def _raise_for_server_error(response: httpx.Response) -> None:
        if response.is_server_error:
            raise UpstreamServiceError(_error_message(response), response.status_code)
