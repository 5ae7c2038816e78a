"""Preview pages — GET /preview/... renders a full page with header and subnav."""

from fastapi import APIRouter, Depends, Request
from markupsafe import Markup

from theme_header.content import ContentStore, QueryContext, get_content_store
from theme_header.routers.header_api import lookup_context
from theme_header.services.header import get_header_title
from theme_header.services.markup import get_header_markup
from theme_header.services.nav import get_subnav_markup
from theme_header.templating import templates

router = APIRouter(prefix="/preview")


def _render(request: Request, store: ContentStore, ctx: QueryContext):
    body_class = " ".join(sorted(ctx.flags))
    if ctx.object is not None:
        body_class = f"{body_class} {ctx.object.kind}-{ctx.object.slug}".strip()

    return templates.TemplateResponse(request, "preview.html", {
        "site_name": store.site_name,
        "page_title": Markup(get_header_title(ctx)),
        "body_class": body_class,
        "header_markup": Markup(get_header_markup(ctx)),
        "subnav_markup": Markup(get_subnav_markup(ctx)),
        "customizing": ctx.customizing,
    })


@router.get("/front")
def preview_front(
    request: Request,
    customize: bool = False,
    store: ContentStore = Depends(get_content_store),
):
    return _render(request, store, store.front_page_context(customizing=customize))


@router.get("/{kind}/{slug}")
def preview_object(
    request: Request,
    kind: str,
    slug: str,
    customize: bool = False,
    store: ContentStore = Depends(get_content_store),
):
    return _render(request, store, lookup_context(store, kind, slug, customizing=customize))
