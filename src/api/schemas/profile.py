"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdate(BaseModel):
    """Schema for updating the caller's profile (all fields optional)."""

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=5000)
    avatar_url: str | None = Field(None, max_length=500)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "9b2f4b8e-7c57-4c8e-9a53-1f0e0c6f4a11",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "bio": "Analyst of engines.",
                "avatar_url": None,
                "is_featured": False,
                "updated_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user_id: UUID
    first_name: str
    last_name: str
    bio: str
    avatar_url: str | None
    is_featured: bool
    created_at: datetime
    updated_at: datetime


class PortfolioDirectoryResponse(BaseModel):
    """Public listing of profiles."""

    model_config = ConfigDict(populate_by_name=True)

    featured: list[ProfileResponse]
    profiles: list[ProfileResponse] = Field(alias="list")
