"""Unit tests for PortfolioService and part grouping."""

from uuid import UUID, uuid4

import pytest

from core.exceptions import ProfileNotFoundError
from domain.entities.experience import Experience
from domain.entities.profile import Profile
from domain.entities.project import Project, ProjectPart
from domain.services.portfolio_service import PortfolioService, attach_parts
from domain.services.profile_service import ProfileService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> PortfolioService:
    return PortfolioService(lambda: uow, ProfileService(lambda: uow))


class TestAttachParts:
    def test_groups_parts_by_project(self, profile_id: UUID):
        first = Project(profile_id=profile_id, title="First")
        second = Project(profile_id=profile_id, title="Second")
        parts = [
            ProjectPart(project_id=second.id, title="b1", order_index=1),
            ProjectPart(project_id=first.id, title="a1", order_index=1),
            ProjectPart(project_id=first.id, title="a2", order_index=2),
        ]

        result = attach_parts([first, second], parts)

        assert [p.title for p in result[0].parts] == ["a1", "a2"]
        assert [p.title for p in result[1].parts] == ["b1"]

    def test_project_without_parts_gets_empty_list(self, profile_id: UUID):
        project = Project(profile_id=profile_id, title="Lonely")

        result = attach_parts([project], [ProjectPart(project_id=uuid4())])

        assert result[0].parts == []


class TestBuildPortfolio:
    @pytest.mark.asyncio
    async def test_assembles_profile_experiences_projects(
        self, service: PortfolioService, uow: FakeUnitOfWork, user_id: UUID
    ):
        profile = Profile(user_id=user_id)
        experience = Experience(profile_id=profile.id, company="Acme", role="Dev")
        project = Project(profile_id=profile.id, title="Engine")
        part = ProjectPart(project_id=project.id, title="Diagram")
        uow.experiences.list_for_profile.return_value = [experience]
        uow.projects.list_for_profile.return_value = [project]
        uow.project_parts.list_for_projects.return_value = [part]

        result = await service.build_portfolio(profile)

        assert result.profile is profile
        assert result.experiences == [experience]
        assert result.projects[0].parts == [part]
        uow.project_parts.list_for_projects.assert_called_once_with([project.id])

    @pytest.mark.asyncio
    async def test_skips_parts_query_without_projects(
        self, service: PortfolioService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.experiences.list_for_profile.return_value = []
        uow.projects.list_for_profile.return_value = []

        result = await service.build_portfolio(Profile(user_id=user_id))

        assert result.projects == []
        uow.project_parts.list_for_projects.assert_not_called()


class TestGetForUser:
    @pytest.mark.asyncio
    async def test_provisions_profile_on_first_access(
        self, service: PortfolioService, uow: FakeUnitOfWork, user_id: UUID
    ):
        uow.profiles.get_by_user_id.return_value = None
        uow.profiles.create.side_effect = lambda profile: profile
        uow.experiences.list_for_profile.return_value = []
        uow.projects.list_for_profile.return_value = []

        result = await service.get_for_user(user_id)

        assert result.profile.user_id == user_id
        assert result.experiences == []
        assert result.projects == []
        uow.profiles.create.assert_called_once()


class TestPublicReads:
    @pytest.mark.asyncio
    async def test_get_public_unknown_profile(
        self, service: PortfolioService, uow: FakeUnitOfWork, profile_id: UUID
    ):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.get_public(profile_id)

    @pytest.mark.asyncio
    async def test_list_experiences_requires_profile(
        self, service: PortfolioService, uow: FakeUnitOfWork, profile_id: UUID
    ):
        uow.profiles.get.return_value = None

        with pytest.raises(ProfileNotFoundError):
            await service.list_experiences(profile_id)

        uow.experiences.list_for_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_projects_attaches_parts(
        self, service: PortfolioService, uow: FakeUnitOfWork, user_id: UUID
    ):
        profile = Profile(user_id=user_id)
        project = Project(profile_id=profile.id, title="Engine")
        uow.profiles.get.return_value = profile
        uow.projects.list_for_profile.return_value = [project]
        uow.project_parts.list_for_projects.return_value = [
            ProjectPart(project_id=project.id, title="Only part")
        ]

        result = await service.list_projects(profile.id)

        assert result[0].parts[0].title == "Only part"
