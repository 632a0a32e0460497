"""Portfolio aggregation: profile + experiences + projects with parts."""

from collections import defaultdict
from collections.abc import Callable
from uuid import UUID

from core.exceptions import ProfileNotFoundError
from domain.entities.experience import Experience
from domain.entities.portfolio import Portfolio
from domain.entities.profile import Profile
from domain.entities.project import Project, ProjectPart
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_service import ProfileService


def attach_parts(projects: list[Project], parts: list[ProjectPart]) -> list[Project]:
    """Group parts by project and hang each group on its project.

    Parts keep the order they arrive in; projects without parts get an
    empty list.
    """
    parts_by_project: dict[UUID, list[ProjectPart]] = defaultdict(list)
    for part in parts:
        parts_by_project[part.project_id].append(part)

    for project in projects:
        project.parts = parts_by_project.get(project.id, [])
    return projects


class PortfolioService:
    """Read-side service assembling whole portfolios.

    The reads below are independent statements, not one snapshot: a
    project removed between the project and part queries simply comes
    back with no parts.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        profile_service: ProfileService,
    ) -> None:
        self._uow_factory = uow_factory
        self._profiles = profile_service

    async def build_portfolio(self, profile: Profile) -> Portfolio:
        """Assemble the full portfolio of a profile."""
        async with self._uow_factory() as uow:
            experiences = await uow.experiences.list_for_profile(profile.id)
            projects = await self._load_projects(uow, profile.id)
            return Portfolio(profile=profile, experiences=experiences, projects=projects)

    async def get_for_user(self, user_id: UUID) -> Portfolio:
        """Portfolio of the authenticated user, provisioning the profile if needed."""
        profile = await self._profiles.get_or_create(user_id)
        return await self.build_portfolio(profile)

    async def get_public(self, profile_id: UUID) -> Portfolio:
        """Portfolio of any profile by ID."""
        profile = await self._profiles.get_by_id(profile_id)
        return await self.build_portfolio(profile)

    async def list_experiences(self, profile_id: UUID) -> list[Experience]:
        """Ordered experiences of an existing profile."""
        async with self._uow_factory() as uow:
            await self._require_profile(uow, profile_id)
            return await uow.experiences.list_for_profile(profile_id)

    async def list_projects(self, profile_id: UUID) -> list[Project]:
        """Ordered projects (with parts) of an existing profile."""
        async with self._uow_factory() as uow:
            await self._require_profile(uow, profile_id)
            return await self._load_projects(uow, profile_id)

    async def _load_projects(self, uow: IUnitOfWork, profile_id: UUID) -> list[Project]:
        projects = await uow.projects.list_for_profile(profile_id)
        if not projects:
            return []
        parts = await uow.project_parts.list_for_projects([p.id for p in projects])
        return attach_parts(projects, parts)

    async def _require_profile(self, uow: IUnitOfWork, profile_id: UUID) -> None:
        if not await uow.profiles.get(profile_id):
            raise ProfileNotFoundError(str(profile_id))
