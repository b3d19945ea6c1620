import logging

from errors import NotFoundError
from portfolio_renderer import DomainData, render, render_html
from template_catalog import TemplateDescriptor, get_template, list_templates

logger = logging.getLogger(__name__)


def list_catalog() -> list[TemplateDescriptor]:
    return list_templates()


def get_catalog_entry(template_id: str) -> TemplateDescriptor:
    try:
        return get_template(template_id)
    except KeyError as exc:
        raise NotFoundError("Template not found") from exc


def render_preview(template_id: str) -> str:
    """Render a layout with placeholder copy, empty content and its default colors."""
    descriptor = get_catalog_entry(template_id)
    rendered = render(descriptor.id.value, None, DomainData())
    return render_html(rendered)
