"""Content store — site settings, queried objects, attachments and menus.

Loads a single JSON document (``content/site.json`` by default) once and
answers the lookups the header code needs: custom fields on an object,
attachment image sources, nav menu locations, and the query classification
for a request.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Optional

from theme_header.config import CONTENT_PATH

logger = logging.getLogger(__name__)

OBJECT_KINDS = ("page", "post", "term", "author", "post_type_archive")


@dataclass
class ContentObject:
    """A queried object: page, post, taxonomy term, author or archive."""
    kind: str
    slug: str
    id: int = 0
    title: str = ""
    taxonomy: str = ""
    display_name: str = ""
    date: Optional[date] = None
    fields: dict = field(default_factory=dict)


@dataclass
class QueryContext:
    """What the current request is looking at.

    ``flags`` holds the conditional tags that apply (``"search"``,
    ``"front_page"``, ``"singular"``, ``"404"``, ...).
    """
    object: Optional[ContentObject] = None
    flags: frozenset = frozenset()
    search_query: str = ""
    date: Optional[date] = None
    customizing: bool = False

    def is_(self, flag: str) -> bool:
        return flag in self.flags


def get_field(name: str, obj: ContentObject | None) -> Any:
    """Return a custom field value for ``obj``, or None."""
    if obj is None:
        return None
    return obj.fields.get(name)


def _parse_date(value: str | None) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning("Ignoring invalid date %r", value)
        return None


class ContentStore:
    """Singleton content store loaded from a static JSON file."""

    def __init__(self) -> None:
        self._site: dict = {}
        self._objects: dict[tuple[str, str], ContentObject] = {}
        self._attachments: dict[str, dict] = {}
        self._menus: dict[str, dict] = {}
        self._loaded = False

    def load(self, path: Path | None = None) -> None:
        """Load content from disk. Safe to call multiple times (no-ops after first)."""
        if self._loaded:
            return

        src = path or CONTENT_PATH
        if src.exists():
            self.load_data(json.loads(src.read_text()))
            logger.info(
                "Loaded %d objects, %d attachments, %d menus from %s",
                len(self._objects), len(self._attachments), len(self._menus), src,
            )
        else:
            logger.warning("Content file not found at %s", src)

        self._loaded = True

    def load_data(self, data: dict) -> None:
        """Populate the store from an already-decoded content document."""
        self._site = dict(data.get("site", {}))
        self._objects = {}
        for raw in data.get("objects", []):
            kind = raw.get("kind", "")
            if kind not in OBJECT_KINDS:
                logger.warning("Skipping object with unknown kind %r", kind)
                continue
            obj = ContentObject(
                kind=kind,
                slug=raw.get("slug", ""),
                id=raw.get("id", 0),
                title=raw.get("title", ""),
                taxonomy=raw.get("taxonomy", ""),
                display_name=raw.get("display_name", ""),
                date=_parse_date(raw.get("date")),
                fields=dict(raw.get("fields", {})),
            )
            self._objects[(obj.kind, obj.slug)] = obj
        self._attachments = {str(k): v for k, v in data.get("attachments", {}).items()}
        self._menus = dict(data.get("menus", {}))
        self._loaded = True

    # -- site settings -------------------------------------------------

    @property
    def site_name(self) -> str:
        self.load()
        return self._site.get("name", "")

    @property
    def home_url(self) -> str:
        self.load()
        return self._site.get("home_url", "/")

    def setting(self, name: str, default: Any = None) -> Any:
        """Return a site setting (theme mod); empty values read as ``default``."""
        self.load()
        return self._site.get(name) or default

    # -- lookups -------------------------------------------------------

    def get_object(self, kind: str, slug: str) -> Optional[ContentObject]:
        self.load()
        return self._objects.get((kind, slug))

    def get_attachment(self, attachment_id: Any) -> Optional[dict]:
        self.load()
        if attachment_id in (None, "", 0):
            return None
        return self._attachments.get(str(attachment_id))

    def get_menu(self, location: str) -> Optional[dict]:
        self.load()
        return self._menus.get(location)

    def has_nav_menu(self, location: str) -> bool:
        return self.get_menu(location) is not None

    # -- query classification -----------------------------------------

    def front_page_context(self, customizing: bool = False) -> QueryContext:
        """Context for the site front page (a static page or the posts index)."""
        front_slug = self.setting("front_page")
        obj = self.get_object("page", front_slug) if front_slug else None
        if obj is not None:
            flags = {"front_page", "singular"}
        else:
            flags = {"front_page", "home"}
        return QueryContext(object=obj, flags=frozenset(flags), customizing=customizing)

    def context_for(self, kind: str, slug: str, customizing: bool = False) -> Optional[QueryContext]:
        """Build the query context for an object, or None if it doesn't exist."""
        obj = self.get_object(kind, slug)
        if obj is None:
            return None

        flags: set[str] = set()
        if kind in ("page", "post"):
            flags.add("singular")
            if kind == "page" and slug == self.setting("front_page"):
                flags.add("front_page")
            if kind == "page" and slug == self.setting("posts_page"):
                flags = {"home"}
        elif kind == "term":
            if obj.taxonomy == "category":
                flags.add("category")
            elif obj.taxonomy == "post_tag":
                flags.add("tag")
            else:
                flags.add("tax")
        elif kind == "author":
            flags.add("author")
        elif kind == "post_type_archive":
            flags.add("post_type_archive")

        return QueryContext(object=obj, flags=frozenset(flags), customizing=customizing)


# Module-level singleton
_store: ContentStore | None = None


def get_content_store() -> ContentStore:
    """FastAPI dependency — returns the singleton ContentStore instance."""
    global _store
    if _store is None:
        _store = ContentStore()
        _store.load()
    return _store
