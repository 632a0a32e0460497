"""Pydantic schemas for Experience API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ExperienceCreate(BaseModel):
    """Schema for creating an Experience."""

    company: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = Field(None, max_length=5000)
    order_index: int | None = None


class ExperienceUpdate(BaseModel):
    """Schema for updating an Experience (all fields optional)."""

    company: str | None = Field(None, min_length=1, max_length=255)
    role: str | None = Field(None, min_length=1, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    description: str | None = Field(None, max_length=5000)
    order_index: int | None = None


class ExperienceResponse(BaseModel):
    """Schema for Experience response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "5d0c9a4e-2a9b-4d43-8a57-0d9b4f0c3e21",
                "profile_id": "9b2f4b8e-7c57-4c8e-9a53-1f0e0c6f4a11",
                "company": "Analytical Engines Ltd",
                "role": "Programmer",
                "start_date": "1842-01-01",
                "end_date": None,
                "description": "Wrote the first published algorithm.",
                "order_index": 1,
            }
        },
    )

    id: UUID
    profile_id: UUID
    company: str
    role: str
    start_date: date | None
    end_date: date | None
    description: str | None
    order_index: int
    created_at: datetime
    updated_at: datetime
