import logging

from fastapi import APIRouter, Depends, HTTPException

from api.auth.schemas import ChangePasswordRequest, LoginRequest, TokenResponse
from api.common import MessageResponse
from api.security import Session, require_session
from errors import NotFoundError, UnauthorizedError, ValidationFailedError
from .service import change_password, login, seed_admin_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/auth/login", response_model=TokenResponse)
def login_route(request: LoginRequest):
    try:
        return login(request)
    except UnauthorizedError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail="Failed to log in") from exc


@router.post("/auth/change-password", response_model=MessageResponse)
def change_password_route(request: ChangePasswordRequest, session: Session = Depends(require_session)):
    try:
        change_password(session, request)
        return MessageResponse(message="Password updated successfully")
    except ValidationFailedError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Password change failed")
        raise HTTPException(status_code=500, detail="Failed to update password") from exc


@router.get("/setup", response_model=MessageResponse)
def setup_route():
    try:
        seed_admin_user()
        return MessageResponse(message="Setup completed successfully")
    except Exception as exc:
        logger.exception("Setup failed")
        raise HTTPException(status_code=500, detail="Setup failed") from exc
