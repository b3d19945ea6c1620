import logging

from fastapi import APIRouter, HTTPException

from api.common import MessageResponse
from api.contact.schemas import ContactRequest
from .service import submit_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact")


@router.post("", response_model=MessageResponse)
def contact_route(request: ContactRequest):
    try:
        submit_contact(request)
        return MessageResponse(message="Message sent successfully!")
    except Exception as exc:
        logger.exception("Contact form submission failed")
        raise HTTPException(status_code=500, detail="Failed to send message") from exc
