"""
Turns a tenant's template choice plus the shared portfolio content into a
rendered page.

Each layout is a pure function of ``(user_profile, domain_data)`` that
returns the hero block and the ordered sections of the page. ``render``
dispatches on the tenant's ``selectedTemplate`` and ``render_html`` feeds the
result through the Jinja2 template of the chosen layout. Nothing in this
module reads from or writes to the store.
"""

import logging
from datetime import date, datetime
from functools import lru_cache
from itertools import groupby
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel, ConfigDict, Field

from template_catalog import ColorScheme, TemplateId, get_template

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "https://images.pexels.com/photos/220453/pexels-photo-220453.jpeg"
# Read from the source checkout; the service is installed editable (`pip install -e .`).
LAYOUTS_DIR = Path(__file__).with_name("layouts")


class DomainData(BaseModel):
    """Portfolio content shared by every layout, loaded once per request."""

    model_config = ConfigDict(frozen=True)

    profile: dict[str, Any] | None = None
    skills: tuple[dict[str, Any], ...] = ()
    projects: tuple[dict[str, Any], ...] = ()
    experience: tuple[dict[str, Any], ...] = ()
    education: tuple[dict[str, Any], ...] = ()
    social_links: tuple[dict[str, Any], ...] = ()


class LayoutFlags(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_blog: bool = False
    show_testimonials: bool = False
    show_certifications: bool = False


class SeoMeta(BaseModel):
    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)


class Hero(BaseModel):
    name: str
    role: str
    tagline: str
    bio: str
    location: str
    image: str
    image_alt: str
    resume_url: str | None = None
    badge: str = ""


class SectionItem(BaseModel):
    title: str
    subtitle: str = ""
    meta: str = ""
    body: str = ""
    group: str = ""
    tags: list[str] = Field(default_factory=list)
    level: int | None = None
    image: str | None = None
    link: str | None = None
    link_label: str = ""


class Section(BaseModel):
    key: str
    heading: str
    intro: str = ""
    items: list[SectionItem] = Field(default_factory=list)


class RenderedPortfolio(BaseModel):
    template_id: TemplateId
    display_name: str
    theme: ColorScheme
    seo: SeoMeta
    hero: Hero
    sections: list[Section]

    def section(self, key: str) -> Section | None:
        for section in self.sections:
            if section.key == key:
                return section
        return None

    @property
    def section_headings(self) -> list[str]:
        return [section.heading for section in self.sections]


LayoutResult = tuple[Hero, list[Section]]
Layout = Callable[[DomainData, LayoutFlags], LayoutResult]


# -----------------------------------------------------------------------------
# Shared helpers
# -----------------------------------------------------------------------------
def _text(source: dict[str, Any] | None, key: str, placeholder: str) -> str:
    if not source:
        return placeholder
    value = source.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return placeholder


def _hero(profile: dict[str, Any] | None, *, name: str, role: str, tagline: str, bio: str,
          location: str, image_alt: str, badge: str = "") -> Hero:
    resume_url = (profile or {}).get("resumeUrl") or None
    return Hero(
        name=_text(profile, "name", name),
        role=_text(profile, "role", role),
        tagline=_text(profile, "shortBio", tagline),
        bio=_text(profile, "bio", bio),
        location=_text(profile, "location", location),
        image=_text(profile, "profileImage", PLACEHOLDER_IMAGE),
        image_alt=_text(profile, "name", image_alt),
        resume_url=resume_url,
        badge=badge,
    )


def _as_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def format_period(start: Any, end: Any, current: bool) -> str:
    start_date = _as_date(start)
    end_date = _as_date(end)
    start_label = start_date.strftime("%b %Y") if start_date else ""
    if current:
        end_label = "Present"
    else:
        end_label = end_date.strftime("%b %Y") if end_date else ""
    return " - ".join(part for part in [start_label, end_label] if part)


def _skill_items(skills: tuple[dict[str, Any], ...]) -> list[SectionItem]:
    return [
        SectionItem(
            title=str(skill.get("name") or ""),
            group=str(skill.get("category") or "Other"),
            level=skill.get("proficiency"),
            meta=str(skill.get("icon") or ""),
        )
        for skill in skills
    ]


def _project_items(projects: tuple[dict[str, Any], ...], link_label: str) -> list[SectionItem]:
    items = []
    for project in projects:
        link = project.get("liveUrl") or project.get("githubUrl")
        items.append(
            SectionItem(
                title=str(project.get("title") or ""),
                body=str(project.get("description") or ""),
                meta=str(project.get("status") or ""),
                tags=list(project.get("technologies") or []),
                image=project.get("image"),
                link=link,
                link_label=link_label if link else "",
            )
        )
    return items


def _experience_items(experience: tuple[dict[str, Any], ...]) -> list[SectionItem]:
    return [
        SectionItem(
            title=str(entry.get("role") or ""),
            subtitle=str(entry.get("company") or ""),
            meta=" | ".join(
                part
                for part in [
                    format_period(entry.get("startDate"), entry.get("endDate"), bool(entry.get("current"))),
                    str(entry.get("location") or ""),
                ]
                if part
            ),
            body=str(entry.get("description") or ""),
            tags=list(entry.get("technologies") or []),
        )
        for entry in experience
    ]


def _education_items(education: tuple[dict[str, Any], ...]) -> list[SectionItem]:
    items = []
    for entry in education:
        degree = str(entry.get("degree") or "")
        field = str(entry.get("field") or "")
        gpa = str(entry.get("gpa") or "")
        items.append(
            SectionItem(
                title=f"{degree} in {field}" if degree and field else degree or field,
                subtitle=str(entry.get("school") or ""),
                meta=" | ".join(
                    part
                    for part in [
                        format_period(entry.get("startDate"), entry.get("endDate"), bool(entry.get("current"))),
                        f"GPA {gpa}" if gpa else "",
                    ]
                    if part
                ),
                body=str(entry.get("description") or ""),
            )
        )
    return items


def _contact_section(data: DomainData, heading: str, intro: str) -> Section:
    links = [
        SectionItem(
            title=str(link.get("platform") or ""),
            meta=str(link.get("icon") or ""),
            link=link.get("url"),
            link_label=str(link.get("platform") or ""),
        )
        for link in data.social_links
    ]
    return Section(key="contact", heading=heading, intro=intro, items=links)


def _blog_section(heading: str) -> Section:
    return Section(key="blog", heading=heading, intro="New articles are on their way. Check back soon.")


def _static_items(entries: list[tuple[str, str]]) -> list[SectionItem]:
    return [SectionItem(title=title, body=body) for title, body in entries]


# -----------------------------------------------------------------------------
# Layouts
# -----------------------------------------------------------------------------
def _developer_layout(data: DomainData, flags: LayoutFlags) -> LayoutResult:
    hero = _hero(
        data.profile,
        name="Developer",
        role="Full Stack Developer",
        tagline="Passionate about creating amazing digital experiences with modern technologies.",
        bio="I build reliable software and enjoy turning hard problems into simple products.",
        location="Available for work",
        image_alt="Profile",
    )
    featured_first = sorted(data.projects, key=lambda project: not project.get("featured"))
    sections = [
        Section(
            key="skills",
            heading="Technical Skills",
            intro="Technologies and tools I use to bring ideas to life",
            items=_skill_items(data.skills),
        ),
        Section(
            key="projects",
            heading="Featured Projects",
            intro="A showcase of my recent work and technical achievements",
            items=_project_items(tuple(featured_first), "View Details"),
        ),
        Section(key="experience", heading="Experience", items=_experience_items(data.experience)),
        Section(key="education", heading="Education", items=_education_items(data.education)),
    ]
    if flags.show_blog:
        sections.append(_blog_section("Blog"))
    sections.append(
        _contact_section(
            data,
            "Let's Build Something Amazing",
            "I'm always interested in new opportunities and exciting projects. "
            "Let's discuss how we can work together.",
        )
    )
    return hero, sections


DESIGNER_TESTIMONIALS = [
    ("John Doe, CEO at TechCorp",
     "Working with this designer was an absolute pleasure. The attention to detail and creative vision "
     "exceeded our expectations."),
    ("Maria Lopez, Product Lead",
     "Every screen felt considered. Our users noticed the difference in the first week."),
    ("Sam Patel, Founder",
     "A rare mix of craft and pragmatism. The redesign paid for itself."),
]


def _designer_layout(data: DomainData, flags: LayoutFlags) -> LayoutResult:
    hero = _hero(
        data.profile,
        name="Creative Designer",
        role="UI/UX Designer & Creative Director",
        tagline="Crafting beautiful, intuitive experiences that delight users and drive business success "
                "through thoughtful design and creative innovation.",
        bio="I believe in creating designs that not only look beautiful but also solve real problems. "
            "With over 5 years of experience in UI/UX design, I've helped startups and established "
            "companies create digital experiences that users love.",
        location="Open to collaborations",
        image_alt="Designer",
    )
    sections = [
        Section(
            key="about",
            heading="Design is not just what it looks like, it's how it works",
            intro=hero.bio,
        ),
        Section(
            key="works",
            heading="Selected Works",
            intro="A curated collection of my recent design projects and case studies",
            items=_project_items(data.projects, "View Case Study"),
        ),
        Section(
            key="tools",
            heading="Design Tools",
            intro="The creative arsenal I use to bring ideas to life",
            items=_skill_items(data.skills),
        ),
    ]
    if flags.show_testimonials:
        sections.append(
            Section(key="testimonials", heading="Client Love", items=_static_items(DESIGNER_TESTIMONIALS))
        )
    sections.append(
        _contact_section(
            data,
            "Let's Create Something Beautiful",
            "Ready to bring your vision to life? I'd love to hear about your project and explore how we can "
            "work together.",
        )
    )
    return hero, sections


FINANCE_SERVICES = [
    ("Tax Planning & Preparation", "Comprehensive tax strategies to minimize liability and maximize savings"),
    ("Financial Analysis", "In-depth financial analysis and reporting for informed decision making"),
    ("Risk Management", "Identify and mitigate financial risks to protect your assets"),
    ("Audit & Compliance", "Ensure regulatory compliance and prepare for audits"),
]

FINANCE_INDUSTRIES = ["Healthcare", "Technology", "Manufacturing", "Real Estate", "Non-Profit", "Retail"]


def _finance_layout(data: DomainData, flags: LayoutFlags) -> LayoutResult:
    hero = _hero(
        data.profile,
        name="Financial Expert",
        role="Certified Public Accountant & Financial Advisor",
        tagline="Providing comprehensive financial services and strategic guidance to help individuals and "
                "businesses achieve their financial goals with confidence and clarity.",
        bio="With over 15 years of experience in accounting and financial management, I provide "
            "comprehensive financial services to help clients navigate complex financial landscapes. My "
            "expertise spans tax planning, financial analysis, and strategic business consulting.",
        location="Available for Consultation",
        image_alt="Financial Professional",
        badge="Available for Consultation",
    )
    sections = [
        Section(key="summary", heading="Professional Summary", intro=hero.bio),
        Section(
            key="services",
            heading="Professional Services",
            intro="Comprehensive financial solutions tailored to your specific needs",
            items=_static_items(FINANCE_SERVICES),
        ),
    ]
    if flags.show_certifications:
        sections.append(
            Section(
                key="certifications",
                heading="Certifications & Licenses",
                items=_education_items(data.education),
            )
        )
    sections.extend(
        [
            Section(key="experience", heading="Professional Experience", items=_experience_items(data.experience)),
            Section(
                key="industries",
                heading="Industries Served",
                intro="Extensive experience across diverse industry sectors",
                items=[SectionItem(title=industry) for industry in FINANCE_INDUSTRIES],
            ),
            _contact_section(
                data,
                "Ready to Secure Your Financial Future?",
                "Let's discuss your financial goals and create a customized strategy for success.",
            ),
        ]
    )
    return hero, sections


PROFESSIONAL_TESTIMONIALS = [
    ("Operations Director, Northwind",
     "Brought clarity to a messy programme and delivered ahead of schedule."),
    ("VP Marketing, Contoso",
     "Our campaigns finally had a strategy behind them. Results followed."),
    ("Managing Partner, Fabrikam",
     "Trusted advisor, sharp thinker, and great to work with."),
]


def _professional_layout(data: DomainData, flags: LayoutFlags) -> LayoutResult:
    hero = _hero(
        data.profile,
        name="Professional",
        role="Consultant & Strategic Advisor",
        tagline="Helping organizations grow through clear strategy, strong execution and lasting client "
                "relationships.",
        bio="I partner with teams to turn ambitious goals into measurable results, bringing experience "
            "across strategy, marketing and operations.",
        location="Available for new engagements",
        image_alt="Professional",
    )
    history = _experience_items(data.experience) + _education_items(data.education)
    sections = [
        Section(key="overview", heading="Overview", intro=hero.bio),
        Section(
            key="expertise",
            heading="Areas of Expertise",
            intro="Capabilities I bring to every engagement",
            items=_skill_items(data.skills),
        ),
        Section(
            key="case-studies",
            heading="Case Studies",
            intro="Selected engagements and the outcomes they delivered",
            items=_project_items(data.projects, "Read Case Study"),
        ),
        Section(key="history", heading="Career History", items=history),
    ]
    if flags.show_testimonials:
        sections.append(
            Section(key="testimonials", heading="Testimonials", items=_static_items(PROFESSIONAL_TESTIMONIALS))
        )
    if flags.show_blog:
        sections.append(_blog_section("Insights"))
    sections.append(
        _contact_section(
            data,
            "Let's Work Together",
            "Have a challenge in mind? Get in touch and let's talk about how I can help.",
        )
    )
    return hero, sections


_LAYOUTS: dict[TemplateId, Layout] = {
    TemplateId.DEVELOPER: _developer_layout,
    TemplateId.DESIGNER: _designer_layout,
    TemplateId.FINANCE: _finance_layout,
    TemplateId.PROFESSIONAL: _professional_layout,
}

if set(_LAYOUTS) != set(TemplateId):
    raise RuntimeError("Every TemplateId needs a layout")


# -----------------------------------------------------------------------------
# Dispatch
# -----------------------------------------------------------------------------
def resolve_template_id(selected_template: str | None) -> TemplateId:
    """Map a stored template id onto a layout, falling back to developer."""
    try:
        return TemplateId(selected_template)
    except ValueError:
        logger.warning("Unknown template id %r, falling back to %s", selected_template, TemplateId.DEVELOPER.value)
        return TemplateId.DEVELOPER


def _theme(template_id: TemplateId, user_profile: dict[str, Any] | None) -> ColorScheme:
    defaults = get_template(template_id).default_color_scheme
    custom = ((user_profile or {}).get("customizations") or {}).get("colorScheme") or {}
    return ColorScheme(
        primary=custom.get("primary") or defaults.primary,
        secondary=custom.get("secondary") or defaults.secondary,
        accent=custom.get("accent") or defaults.accent,
    )


def _flags(user_profile: dict[str, Any] | None) -> LayoutFlags:
    layout = ((user_profile or {}).get("customizations") or {}).get("layout") or {}
    return LayoutFlags(
        show_blog=bool(layout.get("showBlog")),
        show_testimonials=bool(layout.get("showTestimonials")),
        show_certifications=bool(layout.get("showCertifications")),
    )


def _seo(user_profile: dict[str, Any] | None, hero: Hero) -> SeoMeta:
    settings = (user_profile or {}).get("seoSettings") or {}
    return SeoMeta(
        title=settings.get("title") or f"{hero.name} | {hero.role}",
        description=settings.get("description") or hero.tagline,
        keywords=[str(keyword) for keyword in settings.get("keywords") or []],
    )


def render(
    selected_template: str | None,
    user_profile: dict[str, Any] | None,
    domain_data: DomainData,
) -> RenderedPortfolio:
    template_id = resolve_template_id(selected_template)
    hero, sections = _LAYOUTS[template_id](domain_data, _flags(user_profile))
    return RenderedPortfolio(
        template_id=template_id,
        display_name=get_template(template_id).display_name,
        theme=_theme(template_id, user_profile),
        seo=_seo(user_profile, hero),
        hero=hero,
        sections=sections,
    )


# -----------------------------------------------------------------------------
# HTML output
# -----------------------------------------------------------------------------
def _group_items(items: list[SectionItem]) -> list[tuple[str, list[SectionItem]]]:
    return [(group, list(members)) for group, members in groupby(items, key=lambda item: item.group)]


@lru_cache(maxsize=1)
def _jinja_env() -> Environment:
    if not LAYOUTS_DIR.is_dir():
        raise RuntimeError(f"Layout templates not found in {LAYOUTS_DIR}")
    env = Environment(
        loader=FileSystemLoader(str(LAYOUTS_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["grouped"] = _group_items
    return env


def render_html(rendered: RenderedPortfolio) -> str:
    template = _jinja_env().get_template(f"{rendered.template_id.value}.html")
    return template.render(portfolio=rendered)


def render_not_found_html(username: str) -> str:
    template = _jinja_env().get_template("not_found.html")
    return template.render(username=username)
