# src/source/adapters/ekilex_adapter.py — v1
"""Ekilex REST API adapter implementing BaseSourceAdapter.

Uses requests. Authentication is a single ``ekilex-api-key`` header.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from sonaveeb.config.settings import DEFAULT_BASE_URL
from sonaveeb.core.errors import TransportError
from sonaveeb.source.base_source import BaseSourceAdapter
from sonaveeb.source.retry import retry_configs_for, with_retry
from sonaveeb.version import __version__

logger = logging.getLogger(__name__)

API_KEY_HEADER = "ekilex-api-key"


class EkilexAdapter(BaseSourceAdapter):
    """Ekilex lexical database adapter."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        max_retries: int = 2,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._retry_configs = retry_configs_for(max_retries)
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": f"sonaveeb/{__version__}"})

    def search(self, term: str) -> bytes:
        return self._get(f"/word/search/{quote(term, safe='')}")

    def details(self, word_id: int) -> bytes:
        return self._get(f"/word/details/{word_id}")

    def paradigm(self, word_id: int) -> bytes:
        return self._get(f"/paradigm/details/{word_id}")

    @property
    def source_name(self) -> str:
        return "ekilex"

    def close(self) -> None:
        self._session.close()

    def _get(self, path: str) -> bytes:
        return with_retry(
            self._request, path,
            operation=f"GET {path}",
            retry_configs=self._retry_configs,
        )

    def _request(self, path: str) -> bytes:
        url = self._base_url + path
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(
                url,
                headers={API_KEY_HEADER: self._api_key},
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise TransportError(f"network timeout: {e}") from e
        except requests.RequestException as e:
            raise TransportError(f"network error: {e}") from e

        if resp.status_code != 200:
            raise TransportError(
                f"API error: {resp.status_code} {resp.reason}".rstrip(),
                status_code=resp.status_code,
            )
        return resp.content
