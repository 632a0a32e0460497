"""SQLAlchemy implementations of Project and ProjectPart repositories."""

from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project import Project, ProjectPart
from infrastructure.database.models import ProjectModel, ProjectPartModel

# Columns served in listings; relationships are never loaded here.
_LISTING_COLUMNS = (
    ProjectModel.id,
    ProjectModel.profile_id,
    ProjectModel.title,
    ProjectModel.subtitle,
    ProjectModel.cover_image_url,
    ProjectModel.order_index,
    ProjectModel.created_at,
    ProjectModel.updated_at,
)


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_profile(self, profile_id: UUID) -> list[Project]:
        """Projects of a profile in display order."""
        stmt = (
            select(*_LISTING_COLUMNS)
            .where(ProjectModel.profile_id == profile_id)
            .order_by(ProjectModel.order_index, ProjectModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [
            Project(
                id=row.id,
                profile_id=row.profile_id,
                title=row.title,
                subtitle=row.subtitle,
                cover_image_url=row.cover_image_url,
                order_index=row.order_index,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
            for row in result
        ]

    async def get(self, id: UUID, profile_id: UUID) -> Project | None:
        """Get a project owned by the profile."""
        model = await self._get_model(id, profile_id)
        return self._to_entity(model) if model else None

    async def get_max_order_index(self, profile_id: UUID) -> int | None:
        """Highest order_index in the profile."""
        stmt = select(func.max(ProjectModel.order_index)).where(
            ProjectModel.profile_id == profile_id
        )
        result = await self._session.execute(stmt)
        return result.scalar()

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        model = self._to_model(project)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, project: Project) -> Project:
        """Update an existing project."""
        model = await self._get_model(project.id, project.profile_id)

        if not model:
            raise ValueError(f"Project {project.id} not found")

        model.title = project.title
        model.subtitle = project.subtitle
        model.cover_image_url = project.cover_image_url
        model.order_index = project.order_index
        model.updated_at = project.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: UUID, profile_id: UUID) -> bool:
        """Delete a project owned by the profile."""
        stmt = delete(ProjectModel).where(
            ProjectModel.id == id,
            ProjectModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def _get_model(self, id: UUID, profile_id: UUID) -> ProjectModel | None:
        stmt = select(ProjectModel).where(
            ProjectModel.id == id,
            ProjectModel.profile_id == profile_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return Project(
            id=model.id,
            profile_id=model.profile_id,
            title=model.title,
            subtitle=model.subtitle,
            cover_image_url=model.cover_image_url,
            order_index=model.order_index,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        """Convert domain entity to ORM model."""
        return ProjectModel(
            id=entity.id,
            profile_id=entity.profile_id,
            title=entity.title,
            subtitle=entity.subtitle,
            cover_image_url=entity.cover_image_url,
            order_index=entity.order_index,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )


class SQLAlchemyProjectPartRepository:
    """SQLAlchemy implementation of IProjectPartRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_projects(self, project_ids: list[UUID]) -> list[ProjectPart]:
        """Parts of the given projects in display order."""
        if not project_ids:
            return []

        stmt = (
            select(ProjectPartModel)
            .where(ProjectPartModel.project_id.in_(project_ids))
            .order_by(ProjectPartModel.order_index, ProjectPartModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def add_many(self, parts: list[ProjectPart]) -> list[ProjectPart]:
        """Bulk insert parts in a single statement."""
        if not parts:
            return []

        await self._session.execute(
            insert(ProjectPartModel),
            [
                {
                    "id": part.id,
                    "project_id": part.project_id,
                    "title": part.title,
                    "content": part.content,
                    "image_url": part.image_url,
                    "link_url": part.link_url,
                    "kind": part.kind,
                    "order_index": part.order_index,
                    "created_at": part.created_at,
                }
                for part in parts
            ],
        )
        await self._session.flush()
        return sorted(parts, key=lambda part: part.order_index)

    async def delete_for_project(self, project_id: UUID) -> int:
        """Delete every part of a project."""
        stmt = delete(ProjectPartModel).where(ProjectPartModel.project_id == project_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount or 0

    def _to_entity(self, model: ProjectPartModel) -> ProjectPart:
        """Convert ORM model to domain entity."""
        return ProjectPart(
            id=model.id,
            project_id=model.project_id,
            title=model.title,
            content=model.content,
            image_url=model.image_url,
            link_url=model.link_url,
            kind=model.kind,
            order_index=model.order_index,
            created_at=model.created_at,
        )
