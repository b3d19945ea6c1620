import logging

from fastapi import APIRouter, Depends, HTTPException

from api.common import MessageResponse
from api.experience.schemas import ExperienceRequest, ExperienceUpdateRequest
from api.security import Session, require_session
from errors import NotFoundError
from .service import create_experience, delete_experience, list_experience, update_experience

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/experience")


@router.get("")
def list_experience_route():
    try:
        return list_experience()
    except Exception as exc:
        logger.exception("Failed to fetch experiences")
        raise HTTPException(status_code=500, detail="Failed to fetch experiences") from exc


@router.post("")
def create_experience_route(request: ExperienceRequest, _: Session = Depends(require_session)):
    try:
        return create_experience(request)
    except Exception as exc:
        logger.exception("Failed to create experience")
        raise HTTPException(status_code=500, detail="Failed to create experience") from exc


@router.put("/{experience_id}")
def update_experience_route(
    experience_id: str,
    request: ExperienceUpdateRequest,
    _: Session = Depends(require_session),
):
    try:
        return update_experience(experience_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to update experience %s", experience_id)
        raise HTTPException(status_code=500, detail="Failed to update experience") from exc


@router.delete("/{experience_id}", response_model=MessageResponse)
def delete_experience_route(experience_id: str, _: Session = Depends(require_session)):
    try:
        delete_experience(experience_id)
        return MessageResponse(message="Experience deleted successfully")
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete experience %s", experience_id)
        raise HTTPException(status_code=500, detail="Failed to delete experience") from exc
