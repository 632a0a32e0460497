"""Experience service layer with business logic."""

from collections.abc import Callable
from datetime import date, datetime
from typing import Any
from uuid import UUID

from core.exceptions import ExperienceNotFoundError
from domain.entities.experience import Experience
from domain.repositories.unit_of_work import IUnitOfWork

UPDATABLE_FIELDS = frozenset(
    {"company", "role", "start_date", "end_date", "description", "order_index"}
)
_NON_NULLABLE = frozenset({"company", "role", "order_index"})


class ExperienceService:
    """Service layer for Experience business logic.

    Every operation is scoped to the caller's profile ID.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_profile(self, profile_id: UUID) -> list[Experience]:
        """Experiences of the profile in display order."""
        async with self._uow_factory() as uow:
            return await uow.experiences.list_for_profile(profile_id)

    async def create(
        self,
        profile_id: UUID,
        company: str,
        role: str,
        start_date: date | None = None,
        end_date: date | None = None,
        description: str | None = None,
        order_index: int | None = None,
    ) -> Experience:
        """Create an experience, appending it after the current last one
        when no order_index is given."""
        async with self._uow_factory() as uow:
            if order_index is None:
                current_max = await uow.experiences.get_max_order_index(profile_id)
                order_index = (current_max or 0) + 1

            experience = Experience(
                profile_id=profile_id,
                company=company,
                role=role,
                start_date=start_date,
                end_date=end_date,
                description=description,
                order_index=order_index,
            )

            created = await uow.experiences.create(experience)
            await uow.commit()
            return created

    async def update(
        self, experience_id: UUID, profile_id: UUID, changes: dict[str, Any]
    ) -> Experience:
        """Apply a partial update. Keys absent from ``changes`` are left alone."""
        async with self._uow_factory() as uow:
            experience = await uow.experiences.get(experience_id, profile_id)
            if not experience:
                raise ExperienceNotFoundError(str(experience_id))

            for name, value in changes.items():
                if name not in UPDATABLE_FIELDS:
                    continue
                if value is None and name in _NON_NULLABLE:
                    continue
                setattr(experience, name, value)

            experience.updated_at = datetime.utcnow()
            updated = await uow.experiences.update(experience)
            await uow.commit()
            return updated

    async def delete(self, experience_id: UUID, profile_id: UUID) -> None:
        """Delete an experience owned by the profile."""
        async with self._uow_factory() as uow:
            deleted = await uow.experiences.delete(experience_id, profile_id)
            if not deleted:
                raise ExperienceNotFoundError(str(experience_id))
            await uow.commit()
