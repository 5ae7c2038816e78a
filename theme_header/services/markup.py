"""Page header markup — picks and renders the header template parts."""

from __future__ import annotations

from markupsafe import Markup

from theme_header.content import QueryContext, get_field
from theme_header.hooks import apply_filters
from theme_header.services.header import HeaderSpec, hook, resolve_header
from theme_header.services.media import (
    HEADER_HEIGHT_DEFAULT,
    get_header_media_picture_srcs,
    picture_sources,
)
from theme_header.services.nav import get_nav_markup
from theme_header.templating import render_template_part

TEMPLATE_PARTS_DIR = "parts"


def get_template_part_slug(subpath: str) -> str:
    """Template path (without name or extension) for a header part."""
    return apply_filters(hook("get_template_part_slug"), f"{TEMPLATE_PARTS_DIR}/{subpath}", subpath)


def get_template_part(slug: str, name: str = "", context: dict | None = None) -> str:
    """Render a header part, preferring the named variant."""
    return render_template_part(slug, name, context)


def _part_context(ctx: QueryContext, spec: HeaderSpec) -> dict:
    obj = ctx.object
    return {
        "obj": obj,
        "header": spec,
        "title": Markup(spec.title),
        "subtitle": Markup(spec.subtitle),
        "h1": spec.h1,
        "header_height": get_field("page_header_height", obj) or HEADER_HEIGHT_DEFAULT,
    }


def get_header_content_markup(ctx: QueryContext, spec: HeaderSpec | None = None) -> str:
    """Inner header content (title/subtitle) for the header's content type."""
    if spec is None:
        spec = resolve_header(ctx)
    return get_template_part(
        get_template_part_slug("header_content"),
        spec.content_type,
        _part_context(ctx, spec),
    )


def get_header_markup(ctx: QueryContext) -> str:
    """Full page header markup for the queried object."""
    obj = ctx.object
    spec = resolve_header(ctx)
    part_ctx = _part_context(ctx, spec)

    srcs = {}
    if spec.images:
        srcs = get_header_media_picture_srcs(part_ctx["header_height"], spec.images)

    part_ctx.update({
        "nav": Markup(get_nav_markup(ctx, image=spec.has_media)),
        "header_content": Markup(get_header_content_markup(ctx, spec)),
        "picture_sources": picture_sources(srcs),
        "videos": spec.videos or {},
    })

    markup = get_template_part(get_template_part_slug("header"), spec.header_type, part_ctx)

    return apply_filters(hook("get_header_markup"), markup, obj)
