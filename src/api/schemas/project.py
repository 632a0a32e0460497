"""Pydantic schemas for Project API (parts are nested)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProjectPartInput(BaseModel):
    """A part as sent by the client. Every field is optional."""

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    image_url: str | None = Field(None, max_length=500)
    link_url: str | None = Field(None, max_length=500)
    kind: str | None = Field(None, max_length=50, description="Type tag, e.g. text/image/link")
    order_index: int | None = None


class ProjectCreate(BaseModel):
    """Schema for creating a Project."""

    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=500)
    cover_image_url: str | None = Field(None, max_length=500)
    order_index: int | None = None
    parts: list[ProjectPartInput] = Field(default_factory=list)


class ProjectUpdate(BaseModel):
    """Schema for updating a Project.

    Sending ``parts`` replaces all parts; leaving it out keeps them.
    """

    title: str | None = Field(None, min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=500)
    cover_image_url: str | None = Field(None, max_length=500)
    order_index: int | None = None
    parts: list[ProjectPartInput] | None = None


class ProjectPartResponse(BaseModel):
    """Schema for ProjectPart response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    title: str | None
    content: str | None
    image_url: str | None
    link_url: str | None
    kind: str | None
    order_index: int


class ProjectResponse(BaseModel):
    """Schema for Project response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0e6f1f58-3d8e-4c51-b1a0-4f2b3f7d9c10",
                "profile_id": "9b2f4b8e-7c57-4c8e-9a53-1f0e0c6f4a11",
                "title": "Note G",
                "subtitle": "Bernoulli numbers on the Analytical Engine",
                "cover_image_url": None,
                "order_index": 1,
                "parts": [
                    {
                        "id": "7a1c2b3d-4e5f-4a6b-8c9d-0e1f2a3b4c5d",
                        "project_id": "0e6f1f58-3d8e-4c51-b1a0-4f2b3f7d9c10",
                        "title": "Diagram",
                        "content": None,
                        "image_url": "https://example.com/diagram.png",
                        "link_url": None,
                        "kind": "image",
                        "order_index": 1,
                    }
                ],
            }
        },
    )

    id: UUID
    profile_id: UUID
    title: str
    subtitle: str | None
    cover_image_url: str | None
    order_index: int
    created_at: datetime
    updated_at: datetime
    parts: list[ProjectPartResponse] = Field(default_factory=list)
