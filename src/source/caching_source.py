# src/source/caching_source.py — v1
"""Caching decorator around a BaseSourceAdapter.

Every operation maps to one namespaced cache key (``search:<term>``,
``details:<id>``, ``paradigm:<id>``). With a cache and no refresh, each key
is fetched from upstream at most once. Cache failures are logged and counted
but never fail a call; upstream failures propagate unchanged and are never
cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sonaveeb.cache.base_cache_store import BaseCacheStore
from sonaveeb.core.errors import CacheUnavailable
from sonaveeb.logging.context import set_operation_context
from sonaveeb.source.base_source import BaseSourceAdapter

logger = logging.getLogger(__name__)


def search_key(term: str) -> str:
    return f"search:{term}"


def details_key(word_id: int) -> str:
    return f"details:{word_id}"


def paradigm_key(word_id: int) -> str:
    return f"paradigm:{word_id}"


@dataclass
class CacheStats:
    """Counters for one decorator's lifetime."""

    hits: int = 0
    misses: int = 0
    read_errors: int = 0
    write_errors: int = 0
    upstream_calls: int = 0


class CachingSourceAdapter(BaseSourceAdapter):
    """Consults the cache before delegating to upstream, populates it after.

    Args:
        upstream: Source answering cache misses.
        cache: Cache store. None makes this a pure passthrough.
        refresh: Skip cache reads but still write fresh results.
    """

    def __init__(
        self,
        upstream: BaseSourceAdapter,
        cache: BaseCacheStore | None = None,
        refresh: bool = False,
    ) -> None:
        self._upstream = upstream
        self._cache = cache
        self._refresh = refresh
        self.stats = CacheStats()

    @property
    def source_name(self) -> str:
        return self._upstream.source_name

    def search(self, term: str) -> bytes:
        return self._cached_fetch(search_key(term), lambda: self._upstream.search(term))

    def details(self, word_id: int) -> bytes:
        return self._cached_fetch(
            details_key(word_id), lambda: self._upstream.details(word_id)
        )

    def paradigm(self, word_id: int) -> bytes:
        return self._cached_fetch(
            paradigm_key(word_id), lambda: self._upstream.paradigm(word_id)
        )

    def close(self) -> None:
        self._upstream.close()

    def _cached_fetch(self, key: str, fetch: Callable[[], bytes]) -> bytes:
        set_operation_context(key.split(":", 1)[0])
        try:
            if self._cache is None:
                return self._call_upstream(fetch)

            if not self._refresh:
                cached = self._read(key)
                if cached is not None:
                    self.stats.hits += 1
                    logger.debug("Cache hit: %s", key)
                    return cached
                self.stats.misses += 1
                logger.debug("Cache miss: %s", key)

            data = self._call_upstream(fetch)
            self._write(key, data)
            return data
        finally:
            set_operation_context(None)

    def _call_upstream(self, fetch: Callable[[], bytes]) -> bytes:
        self.stats.upstream_calls += 1
        return fetch()

    def _read(self, key: str) -> bytes | None:
        assert self._cache is not None
        try:
            entry = self._cache.get(key)
        except CacheUnavailable as e:
            self.stats.read_errors += 1
            logger.warning("Cache read failed, fetching from upstream: %s", e)
            return None
        return None if entry is None else entry.value

    def _write(self, key: str, data: bytes) -> None:
        assert self._cache is not None
        try:
            self._cache.set(key, data)
        except CacheUnavailable as e:
            self.stats.write_errors += 1
            logger.warning("Cache write failed for %s: %s", key, e)
