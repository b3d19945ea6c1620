from pymongo import ASCENDING

from api.content import ContentService
from api.social_links.schemas import SocialLinkRequest, SocialLinkUpdateRequest
from portfolio_store import SOCIAL_LINKS

social_links = ContentService(SOCIAL_LINKS, "Social link", [("order", ASCENDING)])


def list_social_links() -> list[dict]:
    return social_links.list()


def create_social_link(request: SocialLinkRequest) -> dict:
    return social_links.create(request)


def update_social_link(link_id: str, request: SocialLinkUpdateRequest) -> dict:
    return social_links.update(link_id, request)


def delete_social_link(link_id: str) -> None:
    social_links.delete(link_id)
