"""Profile service layer: provisioning, updates and public listing."""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import ProfileNotFoundError
from domain.entities.portfolio import PortfolioDirectory
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

FEATURED_LIMIT = 5

# Fields a user may change on their own profile. is_featured is curated.
EDITABLE_FIELDS = frozenset({"first_name", "last_name", "bio", "avatar_url"})
_NON_NULLABLE = frozenset({"first_name", "last_name", "bio"})


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_or_create(self, user_id: UUID) -> Profile:
        """Return the user's profile, creating an empty one on first access.

        Two first requests racing each other both try the insert; the loser
        hits the unique constraint on user_id, rolls back and reads the
        winner's row.
        """
        async with self._uow_factory() as uow:
            existing = await uow.profiles.get_by_user_id(user_id)
            if existing:
                return existing

            try:
                created = await uow.profiles.create(Profile(user_id=user_id))
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Only unique-constraint violations mean "someone else won".
                if not _is_unique_violation(exc):
                    raise
                winner = await uow.profiles.get_by_user_id(user_id)
                if winner is None:
                    raise
                logger.debug("profile_create_race_resolved", user_id=str(user_id))
                return winner

            logger.info("profile_created", user_id=str(user_id), profile_id=str(created.id))
            return created

    async def get_by_id(self, profile_id: UUID) -> Profile:
        """Get a profile by ID."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))
            return profile

    async def update(self, user_id: UUID, changes: dict[str, Any]) -> Profile:
        """Apply a partial update to the caller's profile.

        Only keys present in ``changes`` are touched. Explicit None on a
        text field that cannot be null is ignored.
        """
        profile = await self.get_or_create(user_id)

        async with self._uow_factory() as uow:
            for name, value in changes.items():
                if name not in EDITABLE_FIELDS:
                    continue
                if value is None and name in _NON_NULLABLE:
                    continue
                setattr(profile, name, value)

            profile.updated_at = datetime.utcnow()
            updated = await uow.profiles.update(profile)
            await uow.commit()
            return updated

    async def get_directory(self) -> PortfolioDirectory:
        """Featured profiles (newest first, at most five) plus all profiles."""
        async with self._uow_factory() as uow:
            featured = await uow.profiles.list_featured(FEATURED_LIMIT)
            profiles = await uow.profiles.list_all()
            return PortfolioDirectory(featured=featured, profiles=profiles)
