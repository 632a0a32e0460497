"""Project and ProjectPart repository protocols."""

from typing import Protocol
from uuid import UUID

from domain.entities.project import Project, ProjectPart


class IProjectRepository(Protocol):
    """Repository interface for Project entities (scoped by profile)."""

    async def list_for_profile(self, profile_id: UUID) -> list[Project]:
        """Projects of a profile, ascending order_index, listing columns only."""
        ...

    async def get(self, id: UUID, profile_id: UUID) -> Project | None:
        """Get a project owned by the profile."""
        ...

    async def get_max_order_index(self, profile_id: UUID) -> int | None:
        """Highest order_index in the profile, None when it has none."""
        ...

    async def create(self, project: Project) -> Project:
        """Create a new project (parts are not written)."""
        ...

    async def update(self, project: Project) -> Project:
        """Update an existing project (parts are not written)."""
        ...

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete a project owned by the profile."""
        ...


class IProjectPartRepository(Protocol):
    """Repository interface for ProjectPart entities (scoped by project)."""

    async def list_for_projects(self, project_ids: list[UUID]) -> list[ProjectPart]:
        """Parts of the given projects, ascending order_index."""
        ...

    async def add_many(self, parts: list[ProjectPart]) -> list[ProjectPart]:
        """Bulk insert parts."""
        ...

    async def delete_for_project(self, project_id: UUID) -> int:
        """Delete every part of a project and return how many were removed."""
        ...
