"""Pydantic schema for the aggregated portfolio document."""

from pydantic import BaseModel, ConfigDict

from api.schemas.experience import ExperienceResponse
from api.schemas.profile import ProfileResponse
from api.schemas.project import ProjectResponse


class PortfolioResponse(BaseModel):
    """Profile with ordered experiences and ordered projects (parts nested)."""

    model_config = ConfigDict(from_attributes=True)

    profile: ProfileResponse
    experiences: list[ExperienceResponse]
    projects: list[ProjectResponse]
