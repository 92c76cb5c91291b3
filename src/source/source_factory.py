# src/source/source_factory.py — v1
"""Factory: instantiate the upstream source adapter from settings."""

from __future__ import annotations

import logging

from sonaveeb.config.settings import ConfigurationError, Settings
from sonaveeb.source.base_source import BaseSourceAdapter

logger = logging.getLogger(__name__)


def create_source_adapter(
    settings: Settings, api_key: str | None = None
) -> BaseSourceAdapter:
    """Build the Ekilex adapter.

    Args:
        settings: Application settings (base URL, timeout, retries).
        api_key: Key overriding settings.ekilex_api_key (e.g. read from a key file).

    Raises:
        ConfigurationError: If no API key is available.
    """
    key = api_key or settings.ekilex_api_key
    if not key:
        raise ConfigurationError(
            "EKILEX_API_KEY not set (use the env var or ~/.config/sonaveeb/config)"
        )

    from sonaveeb.source.adapters.ekilex_adapter import EkilexAdapter

    logger.debug("Creating source adapter: base_url=%s", settings.ekilex_base_url)
    return EkilexAdapter(
        api_key=key,
        base_url=settings.ekilex_base_url,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
