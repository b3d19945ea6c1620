"""
Self-service tenant profile: which layout a signed-in user picked and how
it is themed. Records are keyed by the session's user id and created on
first access with the developer layout's defaults.
"""

import logging
from typing import Any

from api.security import Session
from api.user_profile.schemas import LayoutRequest, UserProfileRequest
from errors import ConflictError, InvalidTemplateError, UnauthorizedError
from portfolio_store import USER_PROFILES, find_document, upsert_document
from template_catalog import default_template, get_template, is_known_template

logger = logging.getLogger(__name__)

DEFAULT_SEO_TITLE = "Professional Portfolio"
DEFAULT_SEO_DESCRIPTION = "Welcome to my professional portfolio"
CREATE_ATTEMPTS = 3


def _default_username(email: str | None) -> str:
    local_part = (email or "").split("@")[0].strip()
    return local_part or "user"


def _free_username(base: str, user_id: str) -> str:
    """Return ``base`` or the first ``base-N`` not held by another tenant."""
    candidate, suffix = base, 1
    while True:
        owner = find_document(USER_PROFILES, {"username": candidate})
        if owner is None or owner.get("userId") == user_id:
            return candidate
        suffix += 1
        candidate = f"{base}-{suffix}"


def default_user_profile(session: Session) -> dict[str, Any]:
    template = default_template()
    return {
        "selectedTemplate": template.id.value,
        "username": _free_username(_default_username(session.email), session.user_id),
        "customizations": {
            "colorScheme": template.default_color_scheme.model_dump(),
            "layout": LayoutRequest().to_document(),
        },
        "seoSettings": {
            "title": DEFAULT_SEO_TITLE,
            "description": DEFAULT_SEO_DESCRIPTION,
            "keywords": [],
        },
    }


def _require(session: Session | None) -> Session:
    if session is None:
        raise UnauthorizedError("Unauthorized")
    return session


def get_or_create_own(session: Session | None) -> dict[str, Any]:
    session = _require(session)
    existing = find_document(USER_PROFILES, {"userId": session.user_id})
    if existing:
        return existing

    # A concurrent request can claim the chosen username before the insert lands.
    for attempt in range(1, CREATE_ATTEMPTS + 1):
        try:
            profile = upsert_document(
                USER_PROFILES,
                {"userId": session.user_id},
                {},
                set_on_insert=default_user_profile(session),
            )
        except ConflictError:
            existing = find_document(USER_PROFILES, {"userId": session.user_id})
            if existing:
                return existing
            if attempt == CREATE_ATTEMPTS:
                raise
            logger.warning("Default username for user %s was taken, retrying", session.user_id)
            continue
        logger.info("Created user profile %s for user %s", profile["id"], session.user_id)
        return profile


def _ensure_username_available(username: str, user_id: str) -> None:
    owner = find_document(USER_PROFILES, {"username": username})
    if owner and owner.get("userId") != user_id:
        raise ConflictError(f"Username '{username}' is already taken")


def update_selection(session: Session | None, request: UserProfileRequest) -> dict[str, Any]:
    """Save the tenant's template choice, theme and SEO settings.

    Submitted top-level fields replace the stored ones; anything not
    submitted keeps its stored value or, on first save, the defaults.

    Raises:
        UnauthorizedError: no session.
        InvalidTemplateError: ``selectedTemplate`` is not in the catalog.
        ConflictError: the requested username belongs to another tenant.
    """
    session = _require(session)
    if not is_known_template(request.selected_template):
        raise InvalidTemplateError(request.selected_template)

    fields: dict[str, Any] = {"selectedTemplate": request.selected_template}

    if request.customizations is not None:
        color_scheme = (
            request.customizations.color_scheme
            or get_template(request.selected_template).default_color_scheme
        )
        layout = request.customizations.layout or LayoutRequest()
        fields["customizations"] = {
            "colorScheme": color_scheme.model_dump(),
            "layout": layout.to_document(),
        }

    if request.seo_settings is not None:
        fields["seoSettings"] = request.seo_settings.to_document()

    if request.username is not None:
        _ensure_username_available(request.username, session.user_id)
        fields["username"] = request.username

    defaults = default_user_profile(session)
    set_on_insert = {key: value for key, value in defaults.items() if key not in fields}

    profile = upsert_document(USER_PROFILES, {"userId": session.user_id}, fields, set_on_insert)
    logger.info("Saved user profile %s (template %s)", profile["id"], profile.get("selectedTemplate"))
    return profile
