from datetime import date

from pydantic import Field

from api.common import CamelModel, UpdateModel


class EducationRequest(CamelModel):
    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    field: str = Field(..., min_length=1)
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str | None = None
    gpa: str | None = Field(default=None, description="Free-form, e.g. '3.8/4.0'")


class EducationUpdateRequest(UpdateModel):
    create_schema = EducationRequest

    school: str | None = Field(default=None, min_length=1)
    degree: str | None = Field(default=None, min_length=1)
    field: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None
    description: str | None = None
    gpa: str | None = None
