from pydantic import Field

from api.common import CamelModel, UpdateModel


class SkillRequest(CamelModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, description="Free-form label used to group skills")
    proficiency: int = Field(..., ge=1, le=100)
    icon: str = Field(..., min_length=1, description="Icon identifier")


class SkillUpdateRequest(UpdateModel):
    create_schema = SkillRequest

    name: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    proficiency: int | None = Field(default=None, ge=1, le=100)
    icon: str | None = Field(default=None, min_length=1)
