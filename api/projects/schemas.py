from typing import Literal

from pydantic import Field

from api.common import CamelModel, UpdateModel

ProjectStatus = Literal["completed", "in-progress", "planned"]


class ProjectRequest(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    detailed_content: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    images: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    status: ProjectStatus = "completed"


class ProjectUpdateRequest(UpdateModel):
    create_schema = ProjectRequest

    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    detailed_content: str | None = None
    image: str | None = Field(default=None, min_length=1)
    images: list[str] | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool | None = None
    status: ProjectStatus | None = None
