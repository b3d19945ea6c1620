from api.profile.schemas import ProfileRequest
from portfolio_store import get_profile, save_profile


def get_portfolio_profile() -> dict | None:
    return get_profile()


def save_portfolio_profile(request: ProfileRequest) -> dict:
    return save_profile(request.to_document())
