import logging

from fastapi import APIRouter, Depends, HTTPException

from api.common import MessageResponse
from api.education.schemas import EducationRequest, EducationUpdateRequest
from api.security import Session, require_session
from errors import NotFoundError
from .service import create_education, delete_education, list_education, update_education

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/education")


@router.get("")
def list_education_route():
    try:
        return list_education()
    except Exception as exc:
        logger.exception("Failed to fetch education")
        raise HTTPException(status_code=500, detail="Failed to fetch education") from exc


@router.post("")
def create_education_route(request: EducationRequest, _: Session = Depends(require_session)):
    try:
        return create_education(request)
    except Exception as exc:
        logger.exception("Failed to create education")
        raise HTTPException(status_code=500, detail="Failed to create education") from exc


@router.put("/{education_id}")
def update_education_route(
    education_id: str,
    request: EducationUpdateRequest,
    _: Session = Depends(require_session),
):
    try:
        return update_education(education_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to update education %s", education_id)
        raise HTTPException(status_code=500, detail="Failed to update education") from exc


@router.delete("/{education_id}", response_model=MessageResponse)
def delete_education_route(education_id: str, _: Session = Depends(require_session)):
    try:
        delete_education(education_id)
        return MessageResponse(message="Education deleted successfully")
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete education %s", education_id)
        raise HTTPException(status_code=500, detail="Failed to delete education") from exc
