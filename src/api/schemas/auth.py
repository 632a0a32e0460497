"""Pydantic schemas for the auth endpoints."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _normalize_email(v: str) -> str:
    v = v.strip().lower()
    if "@" not in v or "." not in v.split("@")[-1]:
        raise ValueError("Invalid email address")
    return v


class CredentialsRequest(BaseModel):
    """E-mail and password, used by register and login."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        return _normalize_email(v)


class PasswordResetRequest(BaseModel):
    """Ask for a password-reset e-mail."""

    email: str = Field(..., min_length=3, max_length=255)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Basic email validation."""
        return _normalize_email(v)


class PasswordResetConfirm(BaseModel):
    """Set a new password using the token from the reset e-mail."""

    access_token: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=128)


class AuthUserResponse(BaseModel):
    """The authenticated principal."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str


class AuthResponse(BaseModel):
    """Token plus user. ``token`` is null while e-mail confirmation is pending."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "email": "ada@example.com",
                },
            }
        },
    )

    token: str | None
    user: AuthUserResponse
