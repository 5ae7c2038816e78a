"""Jinja2 environment shared by page routes and template-part rendering."""

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateNotFound

from theme_header.config import WEB_TEMPLATES_DIR

templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


def template_part_names(slug: str, name: str = "") -> list[str]:
    """Candidate template files for a part, most specific first."""
    names = []
    if name:
        names.append(f"{slug}-{name}.html")
    names.append(f"{slug}.html")
    return names


def render_template_part(slug: str, name: str = "", context: dict | None = None) -> str:
    """Render ``<slug>-<name>.html``, falling back to ``<slug>.html``.

    Returns "" when neither template exists.
    """
    try:
        template = templates.env.select_template(template_part_names(slug, name))
    except TemplateNotFound:
        return ""
    return template.render(**(context or {}))
