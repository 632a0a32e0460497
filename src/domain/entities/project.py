"""Project and ProjectPart domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class ProjectPart:
    """A content block of a project (text, image, link...)."""

    project_id: UUID
    id: UUID = field(default_factory=uuid4)
    title: str | None = None
    content: str | None = None
    image_url: str | None = None
    link_url: str | None = None
    kind: str | None = None
    order_index: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Project:
    """Domain entity for a portfolio project.

    ``parts`` is filled by the service layer; repositories never load it.
    """

    profile_id: UUID
    title: str
    id: UUID = field(default_factory=uuid4)
    subtitle: str | None = None
    cover_image_url: str | None = None
    order_index: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    parts: list[ProjectPart] = field(default_factory=list)
