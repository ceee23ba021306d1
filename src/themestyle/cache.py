"""
Per-theme resolution cache.

Every Theme instance gets its own ThemeCache, created lazily on first
resolution and dropped when the theme is garbage collected. Caches are keyed
by theme identity, never by theme content: two equal themes never share
entries.

A ThemeCache is split into namespaces (one per prop generator or resolver),
each mapping an exact raw prop value to its resolved result. Without a theme
(or with one that cannot be weakly referenced) lookups go to a no-op
namespace: nothing is stored and every lookup misses.

Concurrent resolutions for the same theme may race to fill a namespace. That
is harmless: recomputation is idempotent, so the last writer wins.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Final

logger = logging.getLogger(__name__)

# Returned by CacheNamespace.lookup() on a miss; None is a valid cached result
MISSING: Final = object()


@dataclass(frozen=True)
class CacheStats:
    """Hit/miss counters for a cache or namespace."""

    hits: int = 0
    misses: int = 0

    def __add__(self, other: CacheStats) -> CacheStats:
        return CacheStats(hits=self.hits + other.hits, misses=self.misses + other.misses)


class CacheNamespace:
    """Raw value -> resolved result, for one prop generator or resolver."""

    def __init__(self, name: str):
        self.name = name
        self.hits = 0
        self.misses = 0
        self._entries: dict[tuple[type, Hashable], Any] = {}
        self._derived: dict[str, Any] = {}

    @staticmethod
    def _key(value: Hashable) -> tuple[type, Hashable]:
        # True == 1 == 1.0 in Python; the raw value's type keeps them apart
        return (type(value), value)

    def lookup(self, value: Hashable) -> Any:
        """Return the cached result for value, or MISSING."""
        result = self._entries.get(self._key(value), MISSING)
        if result is MISSING:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def store(self, value: Hashable, result: Any) -> None:
        self._entries[self._key(value)] = result

    def derived(self, key: str, factory: Callable[[], Any]) -> Any:
        """Return per-theme derived data (e.g. "_medias"), computing it once.

        Derived entries live apart from raw-value entries so a prop value can
        never collide with them.
        """
        if key in self._derived:
            return self._derived[key]
        value = factory()
        self._derived[key] = value
        return value

    def stats(self) -> CacheStats:
        return CacheStats(hits=self.hits, misses=self.misses)

    def __len__(self) -> int:
        return len(self._entries)


class NoopCacheNamespace(CacheNamespace):
    """Namespace used when no theme is available: stores nothing."""

    def __init__(self) -> None:
        super().__init__("__noop")

    def lookup(self, value: Hashable) -> Any:
        return MISSING

    def store(self, value: Hashable, result: Any) -> None:
        pass

    def derived(self, key: str, factory: Callable[[], Any]) -> Any:
        return factory()


NOOP_NAMESPACE: Final = NoopCacheNamespace()


class ThemeCache:
    """All namespaces belonging to one theme instance."""

    def __init__(self) -> None:
        self._namespaces: dict[str, CacheNamespace] = {}

    def namespace(self, name: str) -> CacheNamespace:
        namespace = self._namespaces.get(name)
        if namespace is None:
            # setdefault keeps the first namespace if two threads race here
            namespace = self._namespaces.setdefault(name, CacheNamespace(name))
        return namespace

    def namespaces(self) -> list[str]:
        return list(self._namespaces)

    def stats(self) -> CacheStats:
        total = CacheStats()
        for namespace in self._namespaces.values():
            total = total + namespace.stats()
        return total


_caches: dict[int, ThemeCache] = {}
_caches_lock = threading.Lock()


def _drop_cache(key: int) -> None:
    _caches.pop(key, None)


def get_theme_cache(theme: Any) -> ThemeCache | None:
    """
    Get (or lazily create) the cache attached to a theme instance.

    Args:
        theme: Theme instance, or None

    Returns:
        ThemeCache for this exact instance, or None when caching is unavailable
    """
    if theme is None:
        return None
    key = id(theme)
    cache = _caches.get(key)
    if cache is not None:
        return cache

    with _caches_lock:
        cache = _caches.get(key)
        if cache is not None:
            return cache
        try:
            weakref.finalize(theme, _drop_cache, key)
        except TypeError:
            logger.debug(f"Theme of type {type(theme).__name__} is not weak-referenceable, caching disabled")
            return None
        cache = ThemeCache()
        _caches[key] = cache
        logger.debug(f"Created resolution cache for theme {getattr(theme, 'name', key)!r}")
        return cache


def get_cache_namespace(theme: Any, namespace: str) -> CacheNamespace:
    """Namespace of a theme's cache; the no-op namespace when uncached."""
    cache = get_theme_cache(theme)
    if cache is None:
        return NOOP_NAMESPACE
    return cache.namespace(namespace)


def cached_theme_count() -> int:
    """Number of live theme caches (themes not yet collected)."""
    return len(_caches)


__all__ = [
    "MISSING",
    "CacheStats",
    "CacheNamespace",
    "NoopCacheNamespace",
    "NOOP_NAMESPACE",
    "ThemeCache",
    "get_theme_cache",
    "get_cache_namespace",
    "cached_theme_count",
]
