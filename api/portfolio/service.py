import logging
from typing import Any

from api.content import ContentService
from api.education.service import education_entries
from api.experience.service import experiences
from api.projects.service import projects
from api.skills.service import skills
from api.social_links.service import social_links
from errors import NotFoundError, StoreFailure
from portfolio_renderer import DomainData, RenderedPortfolio, render
from portfolio_store import USER_PROFILES, find_document, get_profile

logger = logging.getLogger(__name__)


def resolve(username: str) -> dict[str, Any]:
    """Look up the tenant whose public username is exactly ``username``."""
    user_profile = find_document(USER_PROFILES, {"username": username})
    if user_profile is None:
        logger.info("No portfolio for username %r", username)
        raise NotFoundError("Portfolio not found")
    return user_profile


def _tolerant_list(service: ContentService) -> tuple[dict[str, Any], ...]:
    try:
        return tuple(service.list())
    except StoreFailure:
        logger.warning("Could not load %s, rendering without it", service.collection)
        return ()


def load_domain_data() -> DomainData:
    try:
        profile = get_profile()
    except StoreFailure:
        logger.warning("Could not load profile, rendering placeholders")
        profile = None

    return DomainData(
        profile=profile,
        skills=_tolerant_list(skills),
        projects=_tolerant_list(projects),
        experience=_tolerant_list(experiences),
        education=_tolerant_list(education_entries),
        social_links=_tolerant_list(social_links),
    )


def render_portfolio(username: str) -> RenderedPortfolio:
    user_profile = resolve(username)
    return render(user_profile.get("selectedTemplate"), user_profile, load_domain_data())
