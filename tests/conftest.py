"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any, Optional
from uuid import UUID, uuid4

# Settings are read at import time: fill the required Supabase values and
# disable rate limiting before anything from src is imported.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.exceptions import AuthenticationError, ErrorCode, RegistrationError
from infrastructure.auth.provider import AuthSession, TokenUser
from infrastructure.database.models import Base

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

TEST_USER_ID = uuid4()
OTHER_USER_ID = uuid4()
TEST_TOKEN = "test-access-token"
OTHER_TOKEN = "other-access-token"


class FakeAuthProvider:
    """In-memory stand-in for the hosted auth service."""

    def __init__(self) -> None:
        self.tokens: dict[str, TokenUser] = {}
        self.accounts: dict[str, tuple[TokenUser, str]] = {}
        self.require_confirmation = False
        self.reset_requests: list[tuple[str, Optional[str]]] = []

    def issue_token(self, user: TokenUser) -> str:
        token = f"token-{uuid4().hex}"
        self.tokens[token] = user
        return token

    async def get_user(self, token: str) -> Optional[TokenUser]:
        return self.tokens.get(token)

    async def sign_up(self, email: str, password: str) -> AuthSession:
        if email in self.accounts:
            raise RegistrationError("User already registered")
        user = TokenUser(id=uuid4(), email=email)
        self.accounts[email] = (user, password)
        if self.require_confirmation:
            return AuthSession(user=user, confirmation_pending=True)
        return AuthSession(user=user, access_token=self.issue_token(user))

    async def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email)
        if account is None or account[1] != password:
            raise AuthenticationError(
                message="Invalid login credentials",
                error_code=ErrorCode.INVALID_CREDENTIALS,
            )
        return AuthSession(user=account[0], access_token=self.issue_token(account[0]))

    async def send_password_reset(self, email: str, redirect_to: str | None = None) -> None:
        self.reset_requests.append((email, redirect_to))

    async def update_password(self, user_id: UUID, new_password: str) -> None:
        for email, (user, _) in list(self.accounts.items()):
            if user.id == user_id:
                self.accounts[email] = (user, new_password)

    async def aclose(self) -> None:
        pass


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # pysqlite's own transaction handling breaks SAVEPOINT; emit BEGIN ourselves.
    @event.listens_for(engine.sync_engine, "connect")
    def _do_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _do_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
def test_user() -> TokenUser:
    """The user behind TEST_TOKEN."""
    return TokenUser(id=TEST_USER_ID, email="test@example.com")


@pytest.fixture
def other_user() -> TokenUser:
    """A second user, for ownership checks."""
    return TokenUser(id=OTHER_USER_ID, email="other@example.com")


@pytest.fixture
def auth_provider(test_user: TokenUser, other_user: TokenUser) -> FakeAuthProvider:
    """Fake auth service that knows both test users' tokens."""
    provider = FakeAuthProvider()
    provider.tokens[TEST_TOKEN] = test_user
    provider.tokens[OTHER_TOKEN] = other_user
    return provider


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization headers for the test user."""
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def other_auth_headers() -> dict[str, str]:
    """Authorization headers for the other user."""
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: FakeAuthProvider,
) -> FastAPI:
    """
    Application wired to the test database and the fake auth service.

    The lifespan does not run under ASGITransport, so the clients it would
    put on app.state are supplied as dependency overrides instead.
    """
    from api.dependencies.services import get_auth_provider, get_session_factory
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def authenticated_client(
    app: FastAPI, auth_headers: dict[str, str]
) -> AsyncGenerator[AsyncClient, None]:
    """Client sending the test user's bearer token on every request."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers=auth_headers
    ) as c:
        yield c
