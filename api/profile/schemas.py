from pydantic import Field

from api.common import CamelModel


class ProfileRequest(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    bio: str = Field(..., min_length=1, description="Long-form biography")
    short_bio: str = Field(..., min_length=1, description="Excerpt shown on the homepage")
    location: str = Field(..., min_length=1)
    profile_image: str = Field(..., min_length=1, description="Profile image URL")
    resume_url: str | None = Field(default=None, description="Optional resume URL")
