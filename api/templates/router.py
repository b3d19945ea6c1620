import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from template_catalog import TemplateDescriptor
from errors import NotFoundError
from .service import get_catalog_entry, list_catalog, render_preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates")


@router.get("", response_model=list[TemplateDescriptor])
def list_templates_route():
    return list_catalog()


@router.get("/{template_id}", response_model=TemplateDescriptor)
def get_template_route(template_id: str):
    try:
        return get_catalog_entry(template_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/{template_id}/preview", response_class=HTMLResponse)
def preview_template_route(template_id: str):
    try:
        return HTMLResponse(content=render_preview(template_id))
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to render preview for %s", template_id)
        raise HTTPException(status_code=500, detail="Failed to render template preview") from exc
