# src/cache/base_cache_store.py — v2
"""Abstract cache store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from sonaveeb.cache.models import CacheEntry


class BaseCacheStore(ABC):
    """Durable key -> (bytes, timestamp) store.

    All methods raise CacheUnavailable on storage failure. A missing key is
    not a failure: get() returns None.
    """

    @abstractmethod
    def get(self, key: str) -> CacheEntry | None:
        """Retrieve the entry stored under key."""

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store value under key (upsert), stamping the current time."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove one entry."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying storage."""

    def __enter__(self) -> BaseCacheStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
