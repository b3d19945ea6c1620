import re

from fastapi.responses import HTMLResponse, Response

from portfolio_export import create_docx_from_portfolio, create_pdf_from_portfolio
from portfolio_renderer import RenderedPortfolio, render_html

EXPORT_FORMATS = {"html", "pdf", "docx"}


def _sanitize_filename(value: str) -> str:
    value = re.sub(r'[\\/:*?"<>|]+', "-", value)
    value = re.sub(r"\s+", " ", value).strip(" .")
    return value or "portfolio"


def render_portfolio_response(rendered: RenderedPortfolio, output_format: str = "html") -> Response:
    output_format = output_format.lower()
    if output_format not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported format '{output_format}'. Use one of: html, pdf, docx.")

    if output_format == "html":
        return HTMLResponse(content=render_html(rendered))

    title_like = f"{rendered.hero.name} portfolio | {rendered.display_name}"

    if output_format == "docx":
        file_name = f"{_sanitize_filename(title_like)}.docx"
        return Response(
            content=create_docx_from_portfolio(rendered),
            media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
        )

    file_name = f"{_sanitize_filename(title_like)}.pdf"
    return Response(
        content=create_pdf_from_portfolio(rendered),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )
