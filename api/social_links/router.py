import logging

from fastapi import APIRouter, Depends, HTTPException

from api.common import MessageResponse
from api.security import Session, require_session
from api.social_links.schemas import SocialLinkRequest, SocialLinkUpdateRequest
from errors import NotFoundError
from .service import create_social_link, delete_social_link, list_social_links, update_social_link

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/social-links")


@router.get("")
def list_social_links_route():
    try:
        return list_social_links()
    except Exception as exc:
        logger.exception("Failed to fetch social links")
        raise HTTPException(status_code=500, detail="Failed to fetch social links") from exc


@router.post("")
def create_social_link_route(request: SocialLinkRequest, _: Session = Depends(require_session)):
    try:
        return create_social_link(request)
    except Exception as exc:
        logger.exception("Failed to create social link")
        raise HTTPException(status_code=500, detail="Failed to create social link") from exc


@router.put("/{link_id}")
def update_social_link_route(
    link_id: str,
    request: SocialLinkUpdateRequest,
    _: Session = Depends(require_session),
):
    try:
        return update_social_link(link_id, request)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to update social link %s", link_id)
        raise HTTPException(status_code=500, detail="Failed to update social link") from exc


@router.delete("/{link_id}", response_model=MessageResponse)
def delete_social_link_route(link_id: str, _: Session = Depends(require_session)):
    try:
        delete_social_link(link_id)
        return MessageResponse(message="Social link deleted successfully")
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to delete social link %s", link_id)
        raise HTTPException(status_code=500, detail="Failed to delete social link") from exc
