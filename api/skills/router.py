import logging

from fastapi import APIRouter, Depends, HTTPException

from api.common import MessageResponse
from api.security import Session, require_session
from api.skills.schemas import SkillRequest, SkillUpdateRequest
from errors import NotFoundError
from .service import create_skill, delete_skill, list_skills, update_skill

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/skills")


@router.get("")
def list_skills_route():
    try:
        return list_skills()
    except Exception as exc:
        logger.exception("Failed to fetch skills")
        raise HTTPException(status_code=500, detail="Failed to fetch skills") from exc


@router.post("")
def create_skill_route(request: SkillRequest, _: Session = Depends(require_session)):
    try:
        return create_skill(request)
    except Exception as exc:
        logger.exception("Failed to create skill")
        raise HTTPException(status_code=500, detail="Failed to create skill") from exc


@router.put("/{skill_id}")
def update_skill_route(skill_id: str, request: SkillUpdateRequest, _: Session = Depends(require_session)):
    try:
        return update_skill(skill_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to update skill %s", skill_id)
        raise HTTPException(status_code=500, detail="Failed to update skill") from exc


@router.delete("/{skill_id}", response_model=MessageResponse)
def delete_skill_route(skill_id: str, _: Session = Depends(require_session)):
    try:
        delete_skill(skill_id)
        return MessageResponse(message="Skill deleted successfully")
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete skill %s", skill_id)
        raise HTTPException(status_code=500, detail="Failed to delete skill") from exc
