import logging

from fastapi import APIRouter, Depends, HTTPException

from api.profile.schemas import ProfileRequest
from api.security import Session, require_session
from .service import get_portfolio_profile, save_portfolio_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile")


@router.get("")
def get_profile_route():
    try:
        return get_portfolio_profile()
    except Exception as exc:
        logger.exception("Failed to fetch profile")
        raise HTTPException(status_code=500, detail="Failed to fetch profile") from exc


@router.post("")
def save_profile_route(request: ProfileRequest, _: Session = Depends(require_session)):
    try:
        return save_portfolio_profile(request)
    except Exception as exc:
        logger.exception("Failed to save profile")
        raise HTTPException(status_code=500, detail="Failed to save profile") from exc
