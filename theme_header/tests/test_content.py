"""Tests for the content store and query classification."""

import json
import logging

import pytest

from theme_header.content import ContentStore, get_field
from theme_header.tests.conftest import SAMPLE_CONTENT, make_store


class TestLoad:
    def test_load_from_file(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text(json.dumps(SAMPLE_CONTENT))
        store = ContentStore()
        store.load(path)
        assert store.site_name == "Test Site"
        assert store.get_object("page", "about").title == "About Us"

    def test_load_is_idempotent(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text(json.dumps(SAMPLE_CONTENT))
        store = ContentStore()
        store.load(path)
        path.write_text(json.dumps({"site": {"name": "Changed"}}))
        store.load(path)
        assert store.site_name == "Test Site"

    def test_missing_file_leaves_store_empty(self, tmp_path, caplog):
        store = ContentStore()
        with caplog.at_level(logging.WARNING):
            store.load(tmp_path / "missing.json")
        assert "Content file not found" in caplog.text
        assert store.site_name == ""
        assert store.get_object("page", "about") is None
        assert not store.has_nav_menu("header-menu")

    def test_unknown_kind_skipped(self):
        store = make_store({"objects": [{"kind": "widget", "slug": "x"}]})
        assert store.get_object("widget", "x") is None

    def test_dates_parsed(self):
        store = make_store({"objects": [
            {"kind": "post", "slug": "a", "date": "2024-03-05"},
            {"kind": "post", "slug": "b", "date": "not a date"},
        ]})
        assert store.get_object("post", "a").date.year == 2024
        assert store.get_object("post", "b").date is None


class TestLookups:
    def test_get_field(self, store):
        about = store.get_object("page", "about")
        assert get_field("page_header_subtitle", about) == "Who we are"
        assert get_field("missing", about) is None
        assert get_field("page_header_subtitle", None) is None

    def test_attachment_ids_are_normalized(self, store):
        assert store.get_attachment(10) == store.get_attachment("10")
        assert store.get_attachment(0) is None
        assert store.get_attachment(None) is None

    def test_setting_empty_reads_default(self, store):
        store._site["mainsite_nav_url"] = ""
        assert store.setting("mainsite_nav_url", "fallback") == "fallback"

    def test_menus(self, store):
        assert store.has_nav_menu("header-menu")
        assert not store.has_nav_menu("footer-menu")
        assert store.get_menu("header-menu")["name"] == "Header Menu"


class TestContextFor:
    @pytest.mark.parametrize("kind,slug,flags", [
        ("page", "about", {"singular"}),
        ("post", "hello", {"singular"}),
        ("page", "home", {"singular", "front_page"}),
        ("page", "news", {"home"}),
        ("term", "physics", {"category"}),
        ("term", "featured", {"tag"}),
        ("term", "labs", {"tax"}),
        ("author", "jdoe", {"author"}),
        ("post_type_archive", "event", {"post_type_archive"}),
    ])
    def test_flags(self, store, kind, slug, flags):
        ctx = store.context_for(kind, slug)
        assert set(ctx.flags) == flags
        assert ctx.object.slug == slug

    def test_missing_object(self, store):
        assert store.context_for("page", "nope") is None

    def test_customizing_passed_through(self, store):
        assert store.context_for("page", "about", customizing=True).customizing

    def test_front_page_static(self, store):
        ctx = store.front_page_context()
        assert ctx.object.slug == "home"
        assert set(ctx.flags) == {"front_page", "singular"}

    def test_front_page_posts_index(self):
        store = make_store({"site": {"name": "Blog"}})
        ctx = store.front_page_context()
        assert ctx.object is None
        assert set(ctx.flags) == {"front_page", "home"}
