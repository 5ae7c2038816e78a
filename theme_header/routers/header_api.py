"""Header API — resolved header specs and nav markup as JSON.

Lets non-Python front ends (static site builds, edge workers) render the
same header the preview pages do.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Query

from theme_header.config import ADMIN_SECRET
from theme_header.content import OBJECT_KINDS, ContentStore, QueryContext, get_content_store
from theme_header.services.header import resolve_header
from theme_header.services.nav import flush_mainsite_nav_cache, get_nav_markup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")


def lookup_context(
    store: ContentStore, kind: str, slug: str, customizing: bool = False
) -> QueryContext:
    """Query context for kind/slug. Raises 400 for unknown kinds, 404 for missing objects."""
    if kind not in OBJECT_KINDS:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown kind '{kind}'. Expected one of: {', '.join(OBJECT_KINDS)}",
        )
    ctx = store.context_for(kind, slug, customizing=customizing)
    if ctx is None:
        raise HTTPException(status_code=404, detail=f"No {kind} found for '{slug}'")
    return ctx


@router.get("/header/front", tags=["Header"], summary="Header for the front page")
async def front_page_header(store: ContentStore = Depends(get_content_store)):
    ctx = store.front_page_context()
    return resolve_header(ctx).to_dict()


@router.get("/header/{kind}/{slug}", tags=["Header"], summary="Header for a content object")
async def object_header(
    kind: str,
    slug: str,
    store: ContentStore = Depends(get_content_store),
):
    ctx = lookup_context(store, kind, slug)
    return resolve_header(ctx).to_dict()


@router.get("/nav", tags=["Navigation"], summary="Primary site navigation markup")
def nav(
    image: bool = Query(True, description="Whether a media background sits behind the nav"),
    kind: str | None = Query(None, description="Object kind, for h1 placement"),
    slug: str | None = Query(None, description="Object slug, for h1 placement"),
    customize: bool = Query(False, description="Bypass the mainsite nav cache"),
    store: ContentStore = Depends(get_content_store),
):
    if bool(kind) != bool(slug):
        raise HTTPException(status_code=400, detail="kind and slug must be given together")

    if kind and slug:
        ctx = lookup_context(store, kind, slug, customizing=customize)
    else:
        ctx = store.front_page_context(customizing=customize)
    return {"html": get_nav_markup(ctx, image=image)}


@router.delete("/nav/cache", tags=["Navigation"], summary="Flush the cached mainsite nav")
async def flush_nav_cache(authorization: str = Header("")):
    if ADMIN_SECRET:
        expected = f"Bearer {ADMIN_SECRET}"
        if authorization != expected:
            raise HTTPException(status_code=401, detail="Invalid admin secret")

    flushed = flush_mainsite_nav_cache()
    logger.info("Mainsite nav cache flush requested (flushed=%s)", flushed)
    return {"status": "ok", "flushed": flushed}
