"""Unit tests for authentication dependencies."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies.auth import get_current_profile, get_current_user
from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.profile import Profile
from infrastructure.auth.provider import TokenUser


@pytest.fixture
def test_token_user() -> TokenUser:
    return TokenUser(id=uuid4(), email="test@example.com")


@pytest.fixture
def mock_auth_provider() -> AsyncMock:
    return AsyncMock()


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


# --- get_current_user ---


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_returns_user_for_accepted_token(
        self, mock_auth_provider: AsyncMock, test_token_user: TokenUser
    ):
        mock_auth_provider.get_user.return_value = test_token_user
        request = MagicMock()

        result = await get_current_user(request, _bearer("good-token"), mock_auth_provider)

        assert result == test_token_user
        assert request.state.user == test_token_user
        mock_auth_provider.get_user.assert_called_once_with("good-token")

    @pytest.mark.asyncio
    async def test_raises_when_no_credentials(self, mock_auth_provider: AsyncMock):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(MagicMock(), None, mock_auth_provider)

        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED
        assert exc_info.value.status_code == 401
        mock_auth_provider.get_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_when_provider_rejects_token(self, mock_auth_provider: AsyncMock):
        mock_auth_provider.get_user.return_value = None

        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(MagicMock(), _bearer("revoked"), mock_auth_provider)

        assert exc_info.value.error_code == ErrorCode.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_token_is_checked_on_every_call(
        self, mock_auth_provider: AsyncMock, test_token_user: TokenUser
    ):
        mock_auth_provider.get_user.side_effect = [test_token_user, None]

        await get_current_user(MagicMock(), _bearer("token"), mock_auth_provider)
        with pytest.raises(AuthenticationError):
            await get_current_user(MagicMock(), _bearer("token"), mock_auth_provider)

        assert mock_auth_provider.get_user.call_count == 2


# --- get_current_profile ---


class TestGetCurrentProfile:
    @pytest.mark.asyncio
    async def test_provisions_profile_for_user(self, test_token_user: TokenUser):
        profile = Profile(user_id=test_token_user.id)
        profile_service = AsyncMock()
        profile_service.get_or_create.return_value = profile

        result = await get_current_profile(test_token_user, profile_service)

        assert result is profile
        profile_service.get_or_create.assert_called_once_with(test_token_user.id)
