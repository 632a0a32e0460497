"""Unit of Work protocol."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from domain.repositories.experience_repository import IExperienceRepository
from domain.repositories.profile_repository import IProfileRepository
from domain.repositories.project_repository import (
    IProjectPartRepository,
    IProjectRepository,
)


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    profiles: IProfileRepository
    experiences: IExperienceRepository
    projects: IProjectRepository
    project_parts: IProjectPartRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Nested transaction; an error inside rolls back only this block."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
