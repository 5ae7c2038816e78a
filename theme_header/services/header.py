"""Header resolution — media, title/subtitle text, h1 target, header type.

Each lookup runs ``<hook>_before -> field lookup -> <hook>_after``. A
non-empty value from the ``before`` filter short-circuits the lookup; the
``after`` filter gets the last word.
"""

from __future__ import annotations

import html
from dataclasses import asdict, dataclass
from typing import Optional

from theme_header import content
from theme_header.content import ContentObject, QueryContext, get_field
from theme_header.hooks import apply_filters
from theme_header.services.text import do_shortcode, texturize

HOOK_PREFIX = "theme_header_"

H1_TITLE = "title"
H1_SUBTITLE = "subtitle"
HEADER_TYPE_MEDIA = "media"


def hook(name: str) -> str:
    """Full filter name for a header hook."""
    return f"{HOOK_PREFIX}{name}"


@dataclass
class HeaderSpec:
    """Everything needed to render a page header."""
    title: str = ""
    subtitle: str = ""
    images: Optional[dict] = None
    videos: Optional[dict] = None
    header_type: str = ""
    content_type: str = ""
    h1: str = H1_TITLE

    @property
    def has_media(self) -> bool:
        return self.header_type == HEADER_TYPE_MEDIA

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------

def get_header_images(obj: ContentObject | None) -> Optional[dict]:
    """Attachment ids for the header image (-sm+ screens) and its -xs variant.

    Returns None unless a ``header_image`` is available.
    """
    images = {"header_image": "", "header_image_xs": ""}

    images = dict(apply_filters(hook("get_header_images_before"), images, obj) or {})
    if images.get("header_image"):
        return images

    image = get_field("page_header_image", obj)
    if image:
        images["header_image"] = image
    image_xs = get_field("page_header_image_xs", obj)
    if image_xs:
        images["header_image_xs"] = image_xs

    images = dict(apply_filters(hook("get_header_images_after"), images, obj) or {})

    if images.get("header_image"):
        return images
    return None


def get_header_videos(obj: ContentObject | None) -> Optional[dict]:
    """Header video urls by file type. Returns None unless an mp4 is available."""
    videos = {"webm": "", "mp4": ""}

    videos = dict(apply_filters(hook("get_header_videos_before"), videos, obj) or {})
    videos = {k: v for k, v in videos.items() if v}
    if videos.get("mp4"):
        return videos

    mp4 = get_field("page_header_mp4", obj)
    if mp4:
        videos["mp4"] = mp4
    webm = get_field("page_header_webm", obj)
    if webm:
        videos["webm"] = webm

    videos = dict(apply_filters(hook("get_header_videos_after"), videos, obj) or {})
    videos = {k: v for k, v in videos.items() if v}

    # MP4 is the only format every browser plays
    if videos.get("mp4"):
        return videos
    return None


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def _format_date(d, fmt: str) -> str:
    if d is None:
        return ""
    if fmt == "Y":
        return str(d.year)
    if fmt == "F Y":
        return f"{d.strftime('%B')} {d.year}"
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _computed_title(ctx: QueryContext, obj: ContentObject) -> str:
    """Title by page type, first match wins."""
    store = content.get_content_store()

    if ctx.is_("search"):
        return f"Search Results for &#8220;{html.escape(ctx.search_query)}&#8221;"
    if ctx.is_("front_page"):
        return store.site_name
    if ctx.is_("post_type_archive"):
        return obj.title
    if ctx.is_("tax"):
        return obj.title
    if ctx.is_("home") or ctx.is_("singular"):
        return obj.title
    if ctx.is_("category") or ctx.is_("tag"):
        return obj.title
    if ctx.is_("author"):
        return obj.display_name or obj.title

    archive_date = ctx.date or obj.date
    if ctx.is_("year"):
        return _format_date(archive_date, "Y")
    if ctx.is_("month"):
        return _format_date(archive_date, "F Y")
    if ctx.is_("day"):
        return _format_date(archive_date, "F j, Y")
    return ""


def get_header_title(ctx: QueryContext, obj: ContentObject | None = None) -> str:
    """Texturized header title for ``obj`` (defaults to the queried object)."""
    if obj is None:
        obj = ctx.object

    title = str(apply_filters(hook("get_header_title_before"), "", obj) or "")
    if title:
        return texturize(title)

    if obj is None:
        # No fallback on 404s so the 404 template can supply its own h1
        if not ctx.is_("404"):
            title = content.get_content_store().site_name
    else:
        title = _computed_title(ctx, obj)

    custom_title = get_field("page_header_title", obj)
    if custom_title:
        title = do_shortcode(custom_title)

    title = str(apply_filters(hook("get_header_title_after"), title, obj) or "")

    return texturize(title)


def get_header_subtitle(obj: ContentObject | None) -> str:
    """Texturized header subtitle text."""
    subtitle = str(apply_filters(hook("get_header_subtitle_before"), "", obj) or "")
    if subtitle:
        return texturize(subtitle)

    subtitle = do_shortcode(get_field("page_header_subtitle", obj))

    subtitle = str(apply_filters(hook("get_header_subtitle_after"), subtitle, obj) or "")

    return texturize(subtitle)


def get_header_h1_option(obj: ContentObject | None) -> str:
    """Whether the title or subtitle is the page's h1. Defaults to the title.

    A "subtitle" choice with no subtitle text falls back to "title".
    """
    subtitle = get_field("page_header_subtitle", obj) or ""
    h1 = get_field("page_header_h1", obj) or H1_TITLE

    if h1 == H1_SUBTITLE and str(subtitle).strip() == "":
        h1 = H1_TITLE

    return h1


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def get_header_type(obj: ContentObject | None) -> str:
    """Header template part name: "media" when the header has media, else ""."""
    header_type = ""

    videos = get_header_videos(obj)
    images = get_header_images(obj)
    if videos or images:
        header_type = HEADER_TYPE_MEDIA

    return apply_filters(hook("get_header_type"), header_type, obj)


def get_header_content_type(obj: ContentObject | None) -> str:
    """Header content template part name for ``obj``."""
    content_type = get_field("page_header_content_type", obj) or ""
    header_type = get_header_type(obj)

    # Text-only headers always use the default content part
    if header_type == "" and content_type == "title_subtitle":
        content_type = ""

    return apply_filters(hook("get_header_content_type"), content_type, obj)


def resolve_header(ctx: QueryContext) -> HeaderSpec:
    """Resolve the full header spec for the queried object."""
    obj = ctx.object
    return HeaderSpec(
        title=get_header_title(ctx, obj),
        subtitle=get_header_subtitle(obj),
        images=get_header_images(obj),
        videos=get_header_videos(obj),
        header_type=get_header_type(obj),
        content_type=get_header_content_type(obj),
        h1=get_header_h1_option(obj),
    )
