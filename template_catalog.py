"""
Catalog of the portfolio layouts a tenant can pick from.

The catalog is fixed at import time. Adding a layout means adding a
``TemplateId`` member, a descriptor below and a layout function in
``portfolio_renderer``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TemplateId(str, Enum):
    DEVELOPER = "developer"
    DESIGNER = "designer"
    FINANCE = "finance"
    PROFESSIONAL = "professional"


class ColorScheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str


class TemplateDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: TemplateId
    display_name: str
    target_role: str
    description: str
    default_color_scheme: ColorScheme
    section_list: tuple[str, ...] = Field(default_factory=tuple)
    feature_list: tuple[str, ...] = Field(default_factory=tuple)
    preview: str


_CATALOG: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        id=TemplateId.DEVELOPER,
        display_name="Developer Portfolio",
        target_role="Software Developer",
        description="Perfect for developers, engineers, and tech professionals",
        default_color_scheme=ColorScheme(primary="#3B82F6", secondary="#1E293B", accent="#10B981"),
        section_list=("Hero", "Skills", "Projects", "Experience", "Education", "Blog", "Contact"),
        feature_list=("GitHub Integration", "Code Snippets", "Tech Stack Display", "Project Demos"),
        preview="/templates/developer-preview.jpg",
    ),
    TemplateDescriptor(
        id=TemplateId.DESIGNER,
        display_name="Designer Portfolio",
        target_role="UI/UX Designer",
        description="Showcase your creative work and design process",
        default_color_scheme=ColorScheme(primary="#8B5CF6", secondary="#F3F4F6", accent="#F59E0B"),
        section_list=("Hero", "About", "Case Studies", "Gallery", "Tools", "Testimonials", "Contact"),
        feature_list=("Case Study Layouts", "Image Galleries", "Design Process", "Tool Showcase"),
        preview="/templates/designer-preview.jpg",
    ),
    TemplateDescriptor(
        id=TemplateId.FINANCE,
        display_name="Finance Professional",
        target_role="Accountant / Finance",
        description="Professional template for finance and accounting experts",
        default_color_scheme=ColorScheme(primary="#1E40AF", secondary="#F8FAFC", accent="#059669"),
        section_list=("Summary", "Certifications", "Services", "Experience", "Industries", "Achievements", "Contact"),
        feature_list=("Certification Display", "Service Listings", "Industry Experience", "Professional Summary"),
        preview="/templates/finance-preview.jpg",
    ),
    TemplateDescriptor(
        id=TemplateId.PROFESSIONAL,
        display_name="General Professional",
        target_role="Marketing / Manager / Consultant",
        description="Versatile template for various professional roles",
        default_color_scheme=ColorScheme(primary="#DC2626", secondary="#F9FAFB", accent="#7C3AED"),
        section_list=("Overview", "Expertise", "Case Studies", "History", "Testimonials", "Contact"),
        feature_list=("Case Studies", "Testimonials", "Achievement Highlights", "Professional Timeline"),
        preview="/templates/professional-preview.jpg",
    ),
)

_BY_ID: dict[TemplateId, TemplateDescriptor] = {descriptor.id: descriptor for descriptor in _CATALOG}

if set(_BY_ID) != set(TemplateId) or len(_BY_ID) != len(_CATALOG):
    raise RuntimeError("Template catalog must describe every TemplateId exactly once")


def list_templates() -> list[TemplateDescriptor]:
    return list(_CATALOG)


def is_known_template(template_id: str) -> bool:
    return template_id in {member.value for member in TemplateId}


def get_template(template_id: str | TemplateId) -> TemplateDescriptor:
    """Return the descriptor for ``template_id``.

    Raises:
        KeyError: if the id is not part of the catalog.
    """
    try:
        return _BY_ID[TemplateId(template_id)]
    except ValueError as exc:
        raise KeyError(template_id) from exc


def default_template() -> TemplateDescriptor:
    return _BY_ID[TemplateId.DEVELOPER]
