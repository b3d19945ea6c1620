from datetime import date

from pydantic import Field

from api.common import CamelModel, UpdateModel


class ExperienceRequest(CamelModel):
    company: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    start_date: date
    end_date: date | None = Field(default=None, description="Ignored when current is true")
    current: bool = False
    description: str = Field(..., min_length=1)
    location: str | None = None
    technologies: list[str] = Field(default_factory=list)


class ExperienceUpdateRequest(UpdateModel):
    create_schema = ExperienceRequest

    company: str | None = Field(default=None, min_length=1)
    role: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None
    description: str | None = Field(default=None, min_length=1)
    location: str | None = None
    technologies: list[str] | None = None
