"""Integration tests for the public portfolio API."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.models import ProfileModel


async def _seed_profiles(
    session_factory: async_sessionmaker[AsyncSession], count: int, featured: bool
) -> list[ProfileModel]:
    base = datetime(2026, 1, 1)
    models = [
        ProfileModel(
            id=uuid4(),
            user_id=uuid4(),
            first_name=f"Person {i}",
            is_featured=featured,
            created_at=base,
            updated_at=base + timedelta(days=i),
        )
        for i in range(count)
    ]
    async with session_factory() as session:
        session.add_all(models)
        await session.commit()
    return models


class TestPortfolioDirectory:
    @pytest.mark.asyncio
    async def test_empty_directory(self, client: AsyncClient):
        response = await client.get("/public/portfolios")

        assert response.status_code == 200
        assert response.json() == {"featured": [], "list": []}

    @pytest.mark.asyncio
    async def test_featured_capped_at_five_newest_first(
        self, client: AsyncClient, session_factory: async_sessionmaker[AsyncSession]
    ):
        await _seed_profiles(session_factory, 7, featured=True)
        await _seed_profiles(session_factory, 2, featured=False)

        data = (await client.get("/public/portfolios")).json()

        assert len(data["featured"]) == 5
        assert [p["first_name"] for p in data["featured"]] == [
            "Person 6",
            "Person 5",
            "Person 4",
            "Person 3",
            "Person 2",
        ]
        assert all(p["is_featured"] for p in data["featured"])
        assert len(data["list"]) == 9

    @pytest.mark.asyncio
    async def test_list_is_newest_first(
        self, client: AsyncClient, session_factory: async_sessionmaker[AsyncSession]
    ):
        await _seed_profiles(session_factory, 3, featured=False)

        data = (await client.get("/public/portfolios")).json()

        assert [p["first_name"] for p in data["list"]] == ["Person 2", "Person 1", "Person 0"]
        assert data["featured"] == []


class TestPublicPortfolio:
    @pytest.mark.asyncio
    async def test_unknown_profile_is_404(self, client: AsyncClient):
        response = await client.get(f"/public/portfolios/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "PROFILE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_malformed_id_is_400(self, client: AsyncClient):
        response = await client.get("/public/portfolios/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_shows_owner_content(
        self, client: AsyncClient, authenticated_client: AsyncClient
    ):
        await authenticated_client.post(
            "/me/experiences", json={"company": "Second", "role": "Dev", "order_index": 2}
        )
        await authenticated_client.post(
            "/me/experiences", json={"company": "First", "role": "Dev", "order_index": 1}
        )
        await authenticated_client.post(
            "/me/projects",
            json={"title": "Engine", "parts": [{"title": "p1"}, {"title": "p2"}]},
        )
        profile_id = (await authenticated_client.get("/me/profile")).json()["id"]

        response = await client.get(f"/public/portfolios/{profile_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["id"] == profile_id
        assert [e["company"] for e in data["experiences"]] == ["First", "Second"]
        assert data["projects"][0]["title"] == "Engine"
        assert [p["title"] for p in data["projects"][0]["parts"]] == ["p1", "p2"]

    @pytest.mark.asyncio
    async def test_empty_portfolio_has_empty_lists(
        self, client: AsyncClient, authenticated_client: AsyncClient
    ):
        profile_id = (await authenticated_client.get("/me/profile")).json()["id"]

        data = (await client.get(f"/public/portfolios/{profile_id}")).json()

        assert data["experiences"] == []
        assert data["projects"] == []


class TestProjectDisplayOrder:
    """Projects and parts follow order_index, not insertion order."""

    @pytest.mark.asyncio
    async def test_projects_and_parts_sorted_by_order_index(
        self, client: AsyncClient, authenticated_client: AsyncClient
    ):
        await authenticated_client.post(
            "/me/projects",
            json={
                "title": "B",
                "order_index": 5,
                "parts": [
                    {"title": "z", "order_index": 9},
                    {"title": "a", "order_index": 1},
                ],
            },
        )
        await authenticated_client.post("/me/projects", json={"title": "A", "order_index": 2})
        profile_id = (await authenticated_client.get("/me/profile")).json()["id"]

        own = (await authenticated_client.get("/me/portfolio")).json()
        public = (await client.get(f"/public/portfolios/{profile_id}")).json()

        for data in (own, public):
            assert [p["title"] for p in data["projects"]] == ["A", "B"]
            assert [p["order_index"] for p in data["projects"][1]["parts"]] == [1, 9]
            assert [p["title"] for p in data["projects"][1]["parts"]] == ["a", "z"]

    @pytest.mark.asyncio
    async def test_created_project_returns_parts_in_order(
        self, authenticated_client: AsyncClient
    ):
        response = await authenticated_client.post(
            "/me/projects",
            json={
                "title": "B",
                "parts": [
                    {"title": "z", "order_index": 9},
                    {"title": "a", "order_index": 1},
                ],
            },
        )

        assert [p["order_index"] for p in response.json()["parts"]] == [1, 9]


class TestPublicSections:
    @pytest.mark.asyncio
    async def test_experiences_of_profile(
        self, client: AsyncClient, authenticated_client: AsyncClient
    ):
        await authenticated_client.post("/me/experiences", json={"company": "Acme", "role": "Dev"})
        profile_id = (await authenticated_client.get("/me/profile")).json()["id"]

        response = await client.get(f"/public/portfolios/{profile_id}/experiences")

        assert response.status_code == 200
        assert [e["company"] for e in response.json()] == ["Acme"]

    @pytest.mark.asyncio
    async def test_projects_of_profile(
        self, client: AsyncClient, authenticated_client: AsyncClient
    ):
        await authenticated_client.post(
            "/me/projects", json={"title": "Engine", "parts": [{"content": "text"}]}
        )
        profile_id = (await authenticated_client.get("/me/profile")).json()["id"]

        response = await client.get(f"/public/portfolios/{profile_id}/projects")

        assert response.status_code == 200
        assert response.json()[0]["parts"][0]["content"] == "text"

    @pytest.mark.asyncio
    async def test_sections_of_unknown_profile_are_404(self, client: AsyncClient):
        missing = uuid4()

        experiences = await client.get(f"/public/portfolios/{missing}/experiences")
        projects = await client.get(f"/public/portfolios/{missing}/projects")

        assert experiences.status_code == 404
        assert projects.status_code == 404
