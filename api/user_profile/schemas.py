from pydantic import Field

from api.common import CamelModel

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class ColorSchemeRequest(CamelModel):
    primary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    secondary: str = Field(..., pattern=HEX_COLOR_PATTERN)
    accent: str = Field(..., pattern=HEX_COLOR_PATTERN)


class LayoutRequest(CamelModel):
    show_blog: bool = False
    show_testimonials: bool = False
    show_certifications: bool = False


class CustomizationsRequest(CamelModel):
    color_scheme: ColorSchemeRequest | None = None
    layout: LayoutRequest | None = None


class SeoSettingsRequest(CamelModel):
    title: str = ""
    description: str = ""
    keywords: list[str] = Field(default_factory=list)


class UserProfileRequest(CamelModel):
    selected_template: str = Field(..., description="One of the ids listed by /api/templates")
    customizations: CustomizationsRequest | None = None
    seo_settings: SeoSettingsRequest | None = None
    username: str | None = Field(default=None, min_length=1, max_length=64, pattern=r"^[\w.+-]+$")
