"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_by_user_id(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by an auth user."""
        ...

    async def list_featured(self, limit: int) -> list[Profile]:
        """Most recently updated featured profiles."""
        ...

    async def list_all(self) -> list[Profile]:
        """All profiles, most recently updated first."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a profile. Raises IntegrityError if the user already has one."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Persist the mutable fields of a profile."""
        ...
