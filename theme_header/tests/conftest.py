"""Shared fixtures for Theme Header tests.

Provides:
- store: a ContentStore preloaded with SAMPLE_CONTENT and installed as the singleton
- client: TestClient wired to the full app
- ctx: factory for QueryContext objects
- a clean filter/shortcode/transient registry for every test
"""

import os
from datetime import date

import pytest

os.environ.setdefault("ADMIN_SECRET", "")

from theme_header import content, hooks
from theme_header.content import ContentObject, ContentStore, QueryContext
from theme_header.services import text, transient

SITE_NAME = "Test Site"

SAMPLE_CONTENT = {
    "site": {
        "name": SITE_NAME,
        "home_url": "https://test.example.edu/",
        "front_page": "home",
        "posts_page": "news",
    },
    "objects": [
        {"kind": "page", "id": 1, "slug": "home", "title": "Home", "fields": {}},
        {"kind": "page", "id": 2, "slug": "news", "title": "News", "fields": {}},
        {
            "kind": "page",
            "id": 3,
            "slug": "about",
            "title": "About Us",
            "fields": {
                "page_header_image": 10,
                "page_header_image_xs": 11,
                "page_header_subtitle": "Who we are",
                "page_header_h1": "subtitle",
                "page_header_content_type": "title_subtitle",
                "page_header_include_subnav": True,
            },
        },
        {
            "kind": "page",
            "id": 4,
            "slug": "plain",
            "title": "Plain Page",
            "fields": {
                "page_header_content_type": "title_subtitle",
                "page_header_subtitle": "   ",
                "page_header_h1": "subtitle",
            },
        },
        {
            "kind": "page",
            "id": 5,
            "slug": "video",
            "title": "Video Page",
            "fields": {
                "page_header_mp4": "https://test.example.edu/v.mp4",
                "page_header_webm": "https://test.example.edu/v.webm",
            },
        },
        {
            "kind": "page",
            "id": 6,
            "slug": "fullscreen",
            "title": "Fullscreen",
            "fields": {
                "page_header_image": 13,
                "page_header_image_xs": 11,
                "page_header_height": "header-media-fullscreen",
                "page_header_content_type": "centered",
            },
        },
        {"kind": "post", "id": 7, "slug": "hello", "title": "Hello World", "fields": {}},
        {
            "kind": "term",
            "id": 8,
            "slug": "physics",
            "title": "Physics",
            "taxonomy": "category",
            "fields": {},
        },
        {"kind": "term", "id": 9, "slug": "featured", "title": "Featured", "taxonomy": "post_tag"},
        {"kind": "term", "id": 10, "slug": "labs", "title": "Labs", "taxonomy": "lab_type"},
        {"kind": "author", "id": 11, "slug": "jdoe", "title": "jdoe", "display_name": "Jane Doe"},
        {"kind": "post_type_archive", "id": 0, "slug": "event", "title": "Events"},
    ],
    "attachments": {
        "10": {
            "url": "https://test.example.edu/about.jpg",
            "sizes": {
                "header-img": "https://test.example.edu/about-xl.jpg",
                "header-img-lg": "https://test.example.edu/about-lg.jpg",
                "header-img-md": "https://test.example.edu/about-md.jpg",
                "header-img-sm": "https://test.example.edu/about-sm.jpg",
                "header-img-xs": "https://test.example.edu/about-xs.jpg",
            },
        },
        "11": {
            "url": "https://test.example.edu/mobile.jpg",
            "sizes": {"header-img-xs": "https://test.example.edu/mobile-xs.jpg"},
        },
        "12": {"url": "https://test.example.edu/unsized.jpg", "sizes": {}},
        "13": {
            "url": "https://test.example.edu/full.jpg",
            "sizes": {
                "bg-img": "https://test.example.edu/bg-xl.jpg",
                "bg-img-lg": "https://test.example.edu/bg-lg.jpg",
                "bg-img-md": "https://test.example.edu/bg-md.jpg",
                "bg-img-sm": "https://test.example.edu/bg-sm.jpg",
                "bg-img-xs": "https://test.example.edu/bg-xs.jpg",
            },
        },
    },
    "menus": {
        "header-menu": {
            "name": "Header Menu",
            "items": [
                {"title": "About", "url": "https://test.example.edu/about/"},
                {
                    "title": "Academics",
                    "url": "https://test.example.edu/academics/",
                    "children": [
                        {
                            "title": "Graduate",
                            "url": "https://test.example.edu/graduate/",
                            "children": [
                                {"title": "Too Deep", "url": "https://test.example.edu/deep/"},
                            ],
                        },
                    ],
                },
                {"title": "Give", "url": "https://give.example.edu/", "target": "_blank"},
            ],
        },
    },
}

MAINSITE_MENU = {
    "name": "Main Site Navigation",
    "items": [
        {"title": "Academics", "url": "https://www.example.edu/academics/", "target": "_self"},
        {"title": "Admissions", "url": "https://www.example.edu/admissions/", "target": "_self"},
        {"title": "Research & Labs", "url": "https://www.example.edu/research/", "target": "_blank"},
    ],
}


@pytest.fixture(autouse=True)
def clean_registries():
    """Every test starts with no filters, no shortcodes and an empty cache."""
    hooks.remove_all_filters()
    text.remove_all_shortcodes()
    transient.flush()
    yield
    hooks.remove_all_filters()
    text.remove_all_shortcodes()
    transient.flush()


def make_store(data: dict | None = None) -> ContentStore:
    store = ContentStore()
    store.load_data(data if data is not None else SAMPLE_CONTENT)
    return store


@pytest.fixture
def store():
    """ContentStore with sample data, installed as the module singleton."""
    previous = content._store
    content._store = make_store()
    yield content._store
    content._store = previous


@pytest.fixture
def menuless_store():
    """Sample store without a header-menu assignment."""
    data = dict(SAMPLE_CONTENT, menus={})
    previous = content._store
    content._store = make_store(data)
    yield content._store
    content._store = previous


@pytest.fixture
def ctx():
    """Factory: ctx(obj, "singular", search_query=...) -> QueryContext."""

    def _make(obj: ContentObject | None = None, *flags: str, **kwargs) -> QueryContext:
        return QueryContext(object=obj, flags=frozenset(flags), **kwargs)

    return _make


@pytest.fixture
def archive_date():
    return date(2024, 3, 5)


@pytest.fixture
def client(store):
    """TestClient for the full app, backed by the sample store."""
    from fastapi.testclient import TestClient

    from theme_header.app import create_app

    with TestClient(create_app()) as c:
        yield c
