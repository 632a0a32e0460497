"""Read-only aggregates returned by the portfolio service."""

from dataclasses import dataclass, field

from domain.entities.experience import Experience
from domain.entities.profile import Profile
from domain.entities.project import Project


@dataclass(frozen=True, slots=True)
class Portfolio:
    """A profile with its ordered experiences and projects (parts attached)."""

    profile: Profile
    experiences: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class PortfolioDirectory:
    """Public listing: curated featured profiles plus everyone."""

    featured: list[Profile]
    profiles: list[Profile]
