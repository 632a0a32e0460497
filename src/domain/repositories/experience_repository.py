"""Experience repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.experience import Experience


class IExperienceRepository(Protocol):
    """Repository interface for Experience entities.

    Lookups and deletes take the owning profile ID so rows of other
    profiles are never reachable.
    """

    async def list_for_profile(self, profile_id: UUID) -> list[Experience]:
        """Experiences of a profile, ascending order_index."""
        ...

    async def get(self, id: UUID, profile_id: UUID) -> Experience | None:
        """Get an experience owned by the profile."""
        ...

    async def get_max_order_index(self, profile_id: UUID) -> int | None:
        """Highest order_index in the profile, None when it has none."""
        ...

    async def create(self, experience: Experience) -> Experience:
        """Create a new experience."""
        ...

    async def update(self, experience: Experience) -> Experience:
        """Update an existing experience."""
        ...

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete an experience owned by the profile."""
        ...
