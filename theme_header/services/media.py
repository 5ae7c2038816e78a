"""Header media backgrounds — responsive <picture> sources by breakpoint."""

from __future__ import annotations

from typing import Any, Optional

from theme_header import content

HEADER_HEIGHT_DEFAULT = "header-media-default"
HEADER_HEIGHT_FULLSCREEN = "header-media-fullscreen"

# Largest first; used for <source> ordering
BREAKPOINTS = ("xl", "lg", "md", "sm", "xs")
BREAKPOINT_MIN_WIDTHS = {"xl": 1200, "lg": 992, "md": 768, "sm": 576, "xs": 0}


def get_attachment_src_by_size(attachment_id: Any, size: str) -> Optional[str]:
    """Image url for an attachment at a named size.

    Falls back to the full-size url when the size was never generated.
    """
    attachment = content.get_content_store().get_attachment(attachment_id)
    if not attachment:
        return None
    return attachment.get("sizes", {}).get(size) or attachment.get("url") or None


def get_media_background_picture_srcs(
    attachment_xs_id: Any, attachment_sm_id: Any, img_size_prefix: str
) -> dict[str, str]:
    """Map breakpoint name → image url for a media background."""
    bg_images: dict[str, Optional[str]] = {}

    if attachment_sm_id:
        bg_images.update({
            "xl": get_attachment_src_by_size(attachment_sm_id, img_size_prefix),
            "lg": get_attachment_src_by_size(attachment_sm_id, f"{img_size_prefix}-lg"),
            "md": get_attachment_src_by_size(attachment_sm_id, f"{img_size_prefix}-md"),
            "sm": get_attachment_src_by_size(attachment_sm_id, f"{img_size_prefix}-sm"),
        })

        # Fall back to the sm image at -xs size when there's no dedicated xs image
        if not attachment_xs_id:
            bg_images["xs"] = get_attachment_src_by_size(attachment_sm_id, f"{img_size_prefix}-xs")

        # Drop duplicate urls (sizes that were never resized), keeping the largest breakpoint
        seen: set[str] = set()
        unique: dict[str, Optional[str]] = {}
        for bp, src in bg_images.items():
            if src in seen:
                continue
            seen.add(src)
            unique[bp] = src
        bg_images = unique

    if attachment_xs_id:
        bg_images["xs"] = get_attachment_src_by_size(attachment_xs_id, f"{img_size_prefix}-xs")

    return {bp: src for bp, src in bg_images.items() if src}


def get_header_media_picture_srcs(header_height: str, images: dict) -> dict[str, str]:
    """Picture sources for a page header, which vary with the header's height."""
    if header_height == HEADER_HEIGHT_FULLSCREEN:
        bg_image_srcs = get_media_background_picture_srcs(
            None, images.get("header_image"), "bg-img"
        )
        bg_image_src_xs = get_media_background_picture_srcs(
            images.get("header_image_xs"), None, "header-img"
        )
        if "xs" in bg_image_src_xs:
            bg_image_srcs["xs"] = bg_image_src_xs["xs"]
        return bg_image_srcs

    return get_media_background_picture_srcs(
        images.get("header_image_xs"), images.get("header_image"), "header-img"
    )


def picture_sources(srcs: dict[str, str]) -> list[dict]:
    """Order picture srcs largest breakpoint first with their media queries.

    The smallest source carries no media query and renders as the <img>.
    """
    sources = []
    for bp in BREAKPOINTS:
        if bp not in srcs:
            continue
        min_width = BREAKPOINT_MIN_WIDTHS[bp]
        sources.append({
            "breakpoint": bp,
            "src": srcs[bp],
            "media": f"(min-width: {min_width}px)" if min_width else "",
        })
    if sources:
        sources[-1]["media"] = ""
    return sources
