"""Transient store — named values that expire after a TTL (in-process)."""

from __future__ import annotations

import threading
import time
from typing import Any

_store: dict[str, tuple[float | None, Any]] = {}
_lock = threading.Lock()


def get(name: str) -> Any:
    """Return the stored value, or None if missing or expired."""
    with _lock:
        entry = _store.get(name)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del _store[name]
            return None
        return value


def set(name: str, value: Any, ttl: float = 0) -> None:
    """Store ``value`` for ``ttl`` seconds. A ttl of 0 never expires."""
    expires_at = time.monotonic() + ttl if ttl else None
    with _lock:
        _store[name] = (expires_at, value)


def delete(name: str) -> bool:
    """Delete a transient. Returns True if it existed."""
    with _lock:
        return _store.pop(name, None) is not None


def flush() -> None:
    with _lock:
        _store.clear()
