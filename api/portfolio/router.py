import logging

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from errors import NotFoundError
from portfolio_renderer import render_not_found_html
from utils import EXPORT_FORMATS, render_portfolio_response
from .service import render_portfolio, resolve

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/portfolio/{username}")
def get_portfolio_route(username: str):
    try:
        return resolve(username)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to fetch portfolio %s", username)
        raise HTTPException(status_code=500, detail="Failed to fetch portfolio") from exc


@router.get("/portfolio/{username}")
def render_portfolio_route(
    username: str,
    format: str = Query(default="html", description="Output format: 'html', 'pdf' or 'docx'"),
):
    output_format = format.lower()
    if output_format not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported format '{format}'. Use one of: html, pdf, docx.")

    try:
        rendered = render_portfolio(username)
        return render_portfolio_response(rendered, output_format)
    except NotFoundError as exc:
        if output_format == "html":
            return HTMLResponse(content=render_not_found_html(username), status_code=404)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to render portfolio %s", username)
        raise HTTPException(status_code=500, detail="Failed to render portfolio") from exc
