from pydantic import Field

from api.common import CamelModel, UpdateModel


class SocialLinkRequest(CamelModel):
    platform: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1)
    order: int = 0


class SocialLinkUpdateRequest(UpdateModel):
    create_schema = SocialLinkRequest

    platform: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)
    icon: str | None = Field(default=None, min_length=1)
    order: int | None = None
