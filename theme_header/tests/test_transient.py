"""Tests for the TTL transient store."""

from unittest.mock import patch

from theme_header.services import transient


class TestTransient:
    def test_set_and_get(self):
        transient.set("k", {"a": 1}, 60)
        assert transient.get("k") == {"a": 1}

    def test_missing(self):
        assert transient.get("nope") is None

    def test_expires(self):
        with patch("theme_header.services.transient.time.monotonic", return_value=1000.0):
            transient.set("k", "v", 60)
        with patch("theme_header.services.transient.time.monotonic", return_value=1059.0):
            assert transient.get("k") == "v"
        with patch("theme_header.services.transient.time.monotonic", return_value=1060.0):
            assert transient.get("k") is None

    def test_zero_ttl_never_expires(self):
        with patch("theme_header.services.transient.time.monotonic", return_value=0.0):
            transient.set("k", "v")
        with patch("theme_header.services.transient.time.monotonic", return_value=10**9):
            assert transient.get("k") == "v"

    def test_delete(self):
        transient.set("k", "v", 60)
        assert transient.delete("k") is True
        assert transient.get("k") is None
        assert transient.delete("k") is False

    def test_flush(self):
        transient.set("a", 1, 60)
        transient.set("b", 2, 60)
        transient.flush()
        assert transient.get("a") is None
        assert transient.get("b") is None
