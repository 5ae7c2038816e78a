"""Filter hooks — named extension points that transform a value in order.

Every header lookup is bracketed by a ``*_before`` and ``*_after`` filter so
child sites can short-circuit or override a value without forking the
resolution code:

    from theme_header import hooks

    hooks.add_filter("theme_header_get_header_title_before",
                     lambda title, obj: "Welcome" if obj is None else title)
"""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable

DEFAULT_PRIORITY = 10

Callback = Callable[..., Any]


class FilterRegistry:
    """Ordered registry of filter callbacks keyed by hook name."""

    def __init__(self) -> None:
        # hook name -> [(priority, seq, callback)]
        self._filters: dict[str, list[tuple[int, int, Callback]]] = {}
        self._seq = itertools.count()
        self._lock = threading.Lock()

    def add(self, name: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
        with self._lock:
            entries = self._filters.setdefault(name, [])
            entries.append((priority, next(self._seq), callback))
            entries.sort(key=lambda e: (e[0], e[1]))

    def remove(self, name: str, callback: Callback, priority: int | None = None) -> bool:
        """Remove a callback. Returns True if anything was removed."""
        with self._lock:
            entries = self._filters.get(name, [])
            kept = [
                e for e in entries
                if not (e[2] == callback and (priority is None or e[0] == priority))
            ]
            removed = len(kept) != len(entries)
            if kept:
                self._filters[name] = kept
            else:
                self._filters.pop(name, None)
            return removed

    def remove_all(self, name: str | None = None) -> None:
        with self._lock:
            if name is None:
                self._filters.clear()
            else:
                self._filters.pop(name, None)

    def has(self, name: str, callback: Callback | None = None) -> bool:
        entries = self._filters.get(name, [])
        if callback is None:
            return bool(entries)
        return any(e[2] == callback for e in entries)

    def apply(self, name: str, value: Any, *args: Any) -> Any:
        """Pass ``value`` through every callback registered for ``name``.

        Each callback receives the current value followed by ``args`` and
        returns the replacement value.
        """
        # Snapshot so callbacks may add/remove filters while running
        entries = list(self._filters.get(name, []))
        for _priority, _seq, callback in entries:
            value = callback(value, *args)
        return value


# Module-level registry used by the services
filters = FilterRegistry()


def add_filter(name: str, callback: Callback, priority: int = DEFAULT_PRIORITY) -> None:
    filters.add(name, callback, priority)


def remove_filter(name: str, callback: Callback, priority: int | None = None) -> bool:
    return filters.remove(name, callback, priority)


def remove_all_filters(name: str | None = None) -> None:
    filters.remove_all(name)


def has_filter(name: str, callback: Callback | None = None) -> bool:
    return filters.has(name, callback)


def apply_filters(name: str, value: Any, *args: Any) -> Any:
    return filters.apply(name, value, *args)
