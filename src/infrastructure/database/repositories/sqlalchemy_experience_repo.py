"""SQLAlchemy implementation of Experience repository."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.experience import Experience
from infrastructure.database.models import ExperienceModel


class SQLAlchemyExperienceRepository:
    """SQLAlchemy implementation of IExperienceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_profile(self, profile_id: UUID) -> list[Experience]:
        """Experiences of a profile in display order."""
        stmt = (
            select(ExperienceModel)
            .where(ExperienceModel.profile_id == profile_id)
            .order_by(ExperienceModel.order_index, ExperienceModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get(self, id: UUID, profile_id: UUID) -> Experience | None:
        """Get an experience owned by the profile."""
        model = await self._get_model(id, profile_id)
        return self._to_entity(model) if model else None

    async def get_max_order_index(self, profile_id: UUID) -> int | None:
        """Highest order_index in the profile."""
        stmt = select(func.max(ExperienceModel.order_index)).where(
            ExperienceModel.profile_id == profile_id
        )
        result = await self._session.execute(stmt)
        return result.scalar()

    async def create(self, experience: Experience) -> Experience:
        """Create a new experience."""
        model = self._to_model(experience)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, experience: Experience) -> Experience:
        """Update an existing experience."""
        model = await self._get_model(experience.id, experience.profile_id)

        if not model:
            raise ValueError(f"Experience {experience.id} not found")

        model.company = experience.company
        model.role = experience.role
        model.start_date = experience.start_date
        model.end_date = experience.end_date
        model.description = experience.description
        model.order_index = experience.order_index
        model.updated_at = experience.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete an experience owned by the profile."""
        stmt = delete(ExperienceModel).where(
            ExperienceModel.id == id,
            ExperienceModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def _get_model(self, id: UUID, profile_id: UUID) -> ExperienceModel | None:
        stmt = select(ExperienceModel).where(
            ExperienceModel.id == id,
            ExperienceModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ExperienceModel) -> Experience:
        """Convert ORM model to domain entity."""
        return Experience(
            id=model.id,
            profile_id=model.profile_id,
            company=model.company,
            role=model.role,
            start_date=model.start_date,
            end_date=model.end_date,
            description=model.description,
            order_index=model.order_index,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Experience) -> ExperienceModel:
        """Convert domain entity to ORM model."""
        return ExperienceModel(
            id=entity.id,
            profile_id=entity.profile_id,
            company=entity.company,
            role=entity.role,
            start_date=entity.start_date,
            end_date=entity.end_date,
            description=entity.description,
            order_index=entity.order_index,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
