import logging

from fastapi import APIRouter, Depends, HTTPException

from api.security import Session, current_session
from api.user_profile.schemas import UserProfileRequest
from errors import ConflictError, UnauthorizedError, ValidationFailedError
from .service import get_or_create_own, update_selection

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user-profile")


@router.get("")
def get_user_profile_route(session: Session | None = Depends(current_session)):
    try:
        return get_or_create_own(session)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail="Unauthorized") from exc
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to fetch user profile")
        raise HTTPException(status_code=500, detail="Failed to fetch user profile") from exc


@router.post("")
def save_user_profile_route(request: UserProfileRequest, session: Session | None = Depends(current_session)):
    try:
        return update_selection(session, request)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail="Unauthorized") from exc
    except ValidationFailedError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to save user profile")
        raise HTTPException(status_code=500, detail="Failed to save user profile") from exc
