# src/source/retry.py — v1
"""Retry policy with exponential backoff for transient transport failures."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Callable

from sonaveeb.core.errors import RetryExhausted, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    """Retry configuration for a specific error type."""

    max_retries: int
    base_delay_s: float
    backoff_factor: float = 2.0
    jitter: bool = True


DEFAULT_RETRY_CONFIGS: dict[str, RetryConfig] = {
    "rate_limit": RetryConfig(max_retries=2, base_delay_s=2.0),
    "timeout": RetryConfig(max_retries=2, base_delay_s=1.0, backoff_factor=1.0),
    "server_error": RetryConfig(max_retries=2, base_delay_s=1.0),
}


def retry_configs_for(max_retries: int) -> dict[str, RetryConfig]:
    """Default configs with every retry budget capped to max_retries."""
    return {
        name: RetryConfig(
            max_retries=min(cfg.max_retries, max_retries),
            base_delay_s=cfg.base_delay_s,
            backoff_factor=cfg.backoff_factor,
            jitter=cfg.jitter,
        )
        for name, cfg in DEFAULT_RETRY_CONFIGS.items()
    }


def classify_error(error: TransportError) -> str:
    """Classify a transport error into a retry error type."""
    status = error.status_code
    if status == 429:
        return "rate_limit"
    if status is not None and 500 <= status < 600:
        return "server_error"
    if status is None and "timeout" in str(error).lower():
        return "timeout"
    return "permanent"


def _compute_delay(config: RetryConfig, attempt: int) -> float:
    """Compute delay for a given attempt (0-based)."""
    delay = config.base_delay_s * (config.backoff_factor ** attempt)
    if config.jitter:
        delay *= 0.5 + random.random()  # noqa: S311
    return delay


def with_retry(
    fn: Callable[..., bytes],
    *args: Any,
    operation: str = "request",
    retry_configs: dict[str, RetryConfig] | None = None,
    sleep: Callable[[float], None] | None = None,
    **kwargs: Any,
) -> bytes:
    """Call fn, retrying transient TransportErrors.

    Permanent errors (4xx other than 429, plain network failures) are
    re-raised unchanged on the first attempt.

    Raises:
        RetryExhausted: If a transient failure outlives its retry budget.
    """
    configs = DEFAULT_RETRY_CONFIGS if retry_configs is None else retry_configs
    sleep = sleep or time.sleep
    attempts = 0

    while True:
        try:
            return fn(*args, **kwargs)
        except TransportError as e:
            error_type = classify_error(e)
            attempts += 1
            config = configs.get(error_type)

            if config is None:
                raise
            if attempts > config.max_retries:
                if attempts == 1:
                    raise
                raise RetryExhausted(operation, attempts, e) from e

            delay = _compute_delay(config, attempts - 1)
            logger.warning(
                "%s: %s (attempt %d/%d), retrying in %.1fs",
                operation, error_type, attempts, config.max_retries, delay,
            )
            sleep(delay)
