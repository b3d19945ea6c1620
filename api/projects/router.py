import logging

from fastapi import APIRouter, Depends, HTTPException

from api.common import MessageResponse
from api.projects.schemas import ProjectRequest, ProjectUpdateRequest
from api.security import Session, require_session
from errors import NotFoundError
from .service import create_project, delete_project, get_project, list_projects, update_project

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects")


@router.get("")
def list_projects_route():
    try:
        return list_projects()
    except Exception as exc:
        logger.exception("Failed to fetch projects")
        raise HTTPException(status_code=500, detail="Failed to fetch projects") from exc


@router.get("/{project_id}")
def get_project_route(project_id: str):
    try:
        return get_project(project_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to fetch project %s", project_id)
        raise HTTPException(status_code=500, detail="Failed to fetch project") from exc


@router.post("")
def create_project_route(request: ProjectRequest, _: Session = Depends(require_session)):
    try:
        return create_project(request)
    except Exception as exc:
        logger.exception("Failed to create project")
        raise HTTPException(status_code=500, detail="Failed to create project") from exc


@router.put("/{project_id}")
def update_project_route(
    project_id: str,
    request: ProjectUpdateRequest,
    _: Session = Depends(require_session),
):
    try:
        return update_project(project_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to update project %s", project_id)
        raise HTTPException(status_code=500, detail="Failed to update project") from exc


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project_route(project_id: str, _: Session = Depends(require_session)):
    try:
        delete_project(project_id)
        return MessageResponse(message="Project deleted successfully")
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete project %s", project_id)
        raise HTTPException(status_code=500, detail="Failed to delete project") from exc
