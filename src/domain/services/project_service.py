"""Project service layer with business logic."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import ProjectNotFoundError
from domain.entities.project import Project, ProjectPart
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.portfolio_service import attach_parts

logger = structlog.get_logger()

UPDATABLE_FIELDS = frozenset({"title", "subtitle", "cover_image_url", "order_index"})
_NON_NULLABLE = frozenset({"title", "order_index"})
PART_FIELDS = ("title", "content", "image_url", "link_url", "kind")


def build_parts(project_id: UUID, items: list[dict[str, Any]]) -> list[ProjectPart]:
    """Turn request items into parts; missing order_index = 1-based position."""
    parts = []
    for position, item in enumerate(items, start=1):
        order_index = item.get("order_index")
        parts.append(
            ProjectPart(
                project_id=project_id,
                order_index=position if order_index is None else order_index,
                **{name: item.get(name) for name in PART_FIELDS},
            )
        )
    return parts


class ProjectService:
    """Service layer for Project business logic.

    Projects are scoped to the caller's profile; parts are scoped to their
    project and always handled as a whole set.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_for_profile(self, profile_id: UUID) -> list[Project]:
        """Projects of the profile in display order, parts attached."""
        async with self._uow_factory() as uow:
            projects = await uow.projects.list_for_profile(profile_id)
            if not projects:
                return []
            parts = await uow.project_parts.list_for_projects([p.id for p in projects])
            return attach_parts(projects, parts)

    async def create(
        self,
        profile_id: UUID,
        title: str,
        subtitle: str | None = None,
        cover_image_url: str | None = None,
        order_index: int | None = None,
        parts: list[dict[str, Any]] | None = None,
    ) -> Project:
        """Create a project, optionally with its parts, in one transaction."""
        async with self._uow_factory() as uow:
            if order_index is None:
                current_max = await uow.projects.get_max_order_index(profile_id)
                order_index = (current_max or 0) + 1

            project = Project(
                profile_id=profile_id,
                title=title,
                subtitle=subtitle,
                cover_image_url=cover_image_url,
                order_index=order_index,
            )

            created = await uow.projects.create(project)
            created.parts = await uow.project_parts.add_many(
                build_parts(created.id, parts or [])
            )
            await uow.commit()
            return created

    async def update(
        self,
        project_id: UUID,
        profile_id: UUID,
        changes: dict[str, Any],
        parts: list[dict[str, Any]] | None = None,
    ) -> Project:
        """Partially update a project.

        A ``parts`` list replaces every existing part (an empty list clears
        them); None leaves the parts untouched. Deletion and re-insert share
        the project update's transaction.
        """
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id, profile_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))

            for name, value in changes.items():
                if name not in UPDATABLE_FIELDS:
                    continue
                if value is None and name in _NON_NULLABLE:
                    continue
                setattr(project, name, value)

            project.updated_at = datetime.utcnow()
            updated = await uow.projects.update(project)

            if parts is not None:
                removed = await uow.project_parts.delete_for_project(project_id)
                updated.parts = await uow.project_parts.add_many(
                    build_parts(project_id, parts)
                )
                logger.info(
                    "project_parts_replaced",
                    project_id=str(project_id),
                    removed=removed,
                    inserted=len(updated.parts),
                )
            else:
                updated.parts = await uow.project_parts.list_for_projects([project_id])

            await uow.commit()
            return updated

    async def delete(self, project_id: UUID, profile_id: UUID) -> None:
        """Delete a project owned by the profile, parts first.

        Failing to delete the parts is logged and does not stop the project
        from being deleted.
        """
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id, profile_id)
            if not project:
                raise ProjectNotFoundError(str(project_id))

            try:
                async with uow.savepoint():
                    await uow.project_parts.delete_for_project(project_id)
            except SQLAlchemyError as exc:
                logger.warning(
                    "project_parts_delete_failed",
                    project_id=str(project_id),
                    error=str(exc),
                )

            deleted = await uow.projects.delete(project_id, profile_id)
            if not deleted:
                raise ProjectNotFoundError(str(project_id))
            await uow.commit()
