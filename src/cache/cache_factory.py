# src/cache/cache_factory.py — v3
"""Factory for cache store instantiation.

The default location follows the XDG cache convention:
``$XDG_CACHE_HOME/sonaveeb/cache.db``, falling back to
``~/.cache/sonaveeb/cache.db``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sonaveeb.cache.base_cache_store import BaseCacheStore
from sonaveeb.config.settings import APP_NAME, Settings

logger = logging.getLogger(__name__)

CACHE_FILENAME = "cache.db"


def resolve_default_cache_path(settings: Settings | None = None) -> Path | None:
    """Resolve the per-user cache file path.

    Returns:
        The cache file path, or None when no cache root can be determined
        (no XDG_CACHE_HOME and no resolvable home directory).
    """
    cache_root = None if settings is None else settings.xdg_cache_home
    if cache_root is None:
        try:
            cache_root = Path.home() / ".cache"
        except RuntimeError as e:
            logger.warning("Cannot resolve a cache directory, caching disabled: %s", e)
            return None
    return Path(cache_root).expanduser() / APP_NAME / CACHE_FILENAME


def create_cache_store(
    settings: Settings | None = None, path: Path | str | None = None
) -> BaseCacheStore | None:
    """Open the configured cache store.

    Args:
        settings: Application settings. Defaults apply when None.
        path: Explicit cache file, overriding settings and the default location.

    Returns:
        An open BaseCacheStore, or None when caching is disabled or no default
        path can be resolved.

    Raises:
        CacheUnavailable: If the cache directory or database cannot be opened.
    """
    if settings is not None and not settings.cache_enabled:
        logger.debug("Cache disabled by configuration")
        return None

    if path is None and settings is not None:
        path = settings.cache_path
    if path is None:
        path = resolve_default_cache_path(settings)
    if path is None:
        return None

    from sonaveeb.cache.sqlite_store import SqliteCacheStore

    logger.debug("Opening cache at %s", path)
    return SqliteCacheStore(db_path=path)
