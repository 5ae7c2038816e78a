"""Site navigation — the site's header menu, or the remote mainsite menu as fallback."""

from __future__ import annotations

import html
import logging

from theme_header import content
from theme_header.config import MAINSITE_NAV_CACHE_TTL, MAINSITE_NAV_URL
from theme_header.content import QueryContext, get_field
from theme_header.hooks import apply_filters
from theme_header.services import transient
from theme_header.services.nav_feed import fetch_json
from theme_header.services.text import do_shortcode, shortcode_exists
from theme_header.templating import render_template_part

logger = logging.getLogger(__name__)

HEADER_MENU_LOCATION = "header-menu"
MAINSITE_NAV_TRANSIENT = "theme_header_mainsite_nav_json"
MENU_DEPTH = 2


def get_mainsite_nav_json(customizing: bool = False):
    """The mainsite menu document, from cache or the remote feed.

    The cache is bypassed (read and write) while customizing.
    """
    store = content.get_content_store()
    feed_url = apply_filters(
        "theme_header_mainsite_nav_url",
        store.setting("mainsite_nav_url") or MAINSITE_NAV_URL,
    )
    result = transient.get(MAINSITE_NAV_TRANSIENT)

    if not result or customizing:
        result = fetch_json(feed_url)

        # Configured feed failed, retry with the default
        if not result and feed_url != MAINSITE_NAV_URL:
            logger.info("Falling back to default nav feed %s", MAINSITE_NAV_URL)
            result = fetch_json(MAINSITE_NAV_URL)

        if not customizing:
            transient.set(MAINSITE_NAV_TRANSIENT, result, MAINSITE_NAV_CACHE_TTL)

    return result


def flush_mainsite_nav_cache() -> bool:
    return transient.delete(MAINSITE_NAV_TRANSIENT)


def get_mainsite_menu(image: bool = True, customizing: bool = False) -> str:
    """Inner navbar markup for the remote primary site navigation."""
    menu = get_mainsite_nav_json(customizing)
    if not menu:
        return ""

    if image:
        nav_class = " py-sm-4 navbar-inverse header-gradient"
    else:
        nav_class = " navbar-inverse bg-inverse-t-3 py-lg-4"

    items = []
    for item in menu.get("items", []) if isinstance(menu, dict) else []:
        url = html.escape(str(item.get("url", "")))
        target = html.escape(str(item.get("target", "") or ""))
        title = html.escape(str(item.get("title", "")))
        items.append(f'''
          <li class="menu-item nav-item">
            <a href="{url}" target="{target}" class="nav-link">
              {title}
            </a>
          </li>''')

    return f'''<nav class="navbar navbar-toggleable-md navbar-mainsite py-2{nav_class}" role="navigation" aria-label="Site navigation">
  <div class="container">
    <button class="navbar-toggler ml-auto collapsed" type="button" data-toggle="collapse" data-target="#header-menu" aria-controls="header-menu" aria-expanded="false" aria-label="Toggle navigation">
      <span class="navbar-toggler-text">Navigation</span>
      <span class="navbar-toggler-icon"></span>
    </button>
    <div class="collapse navbar-collapse" id="header-menu">
      <ul id="menu-header-menu" class="nav navbar-nav nav-fill">{"".join(items)}
      </ul>
    </div>
  </div>
</nav>'''


def _menu_items(items: list, depth: int = 1) -> list[dict]:
    """Normalize menu items, trimming children past MENU_DEPTH."""
    normalized = []
    for item in items or []:
        children = item.get("children", []) if depth < MENU_DEPTH else []
        normalized.append({
            "title": item.get("title", ""),
            "url": item.get("url", "#"),
            "target": item.get("target", "") or "",
            "classes": " ".join(item.get("classes", [])),
            "children": _menu_items(children, depth + 1),
        })
    return normalized


def get_nav_markup(ctx: QueryContext, image: bool = True) -> str:
    """Primary site navigation markup.

    Uses the menu assigned to the header-menu location, falling back to the
    remote mainsite menu when none is assigned.
    """
    store = content.get_content_store()

    if not store.has_nav_menu(HEADER_MENU_LOCATION):
        return get_mainsite_menu(image, ctx.customizing)

    menu = store.get_menu(HEADER_MENU_LOCATION) or {}
    container_class = "collapse navbar-collapse"
    if not image:
        container_class = f"{container_class} align-self-lg-stretch"

    return render_template_part("parts/nav", "", {
        "image": image,
        "title_elem": "h1" if (ctx.is_("home") or ctx.is_("front_page")) else "span",
        "site_name": store.site_name,
        "home_url": store.home_url,
        "container_class": container_class,
        "menu_items": _menu_items(menu.get("items", [])),
    })


def get_subnav_markup(ctx: QueryContext) -> str:
    """Section subnavigation for the queried object, if enabled and available."""
    include_subnav = get_field("page_header_include_subnav", ctx.object)

    if include_subnav and shortcode_exists("section-menu"):
        return do_shortcode("[section-menu]")
    return ""
