# src/core/errors.py — v1
"""Error taxonomy for the lookup pipeline.

Transport, payload and selection errors abort a run. CacheUnavailable is
raised by cache stores but never escapes the pipeline: callers degrade to
no-cache mode instead.
"""

from __future__ import annotations


class SonaveebError(Exception):
    """Base class for all pipeline errors."""


class TransportError(SonaveebError):
    """Network or HTTP status failure reported by a source adapter."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RetryExhausted(TransportError):
    """A transient transport failure persisted through every retry."""

    def __init__(self, operation: str, attempts: int, last_error: TransportError) -> None:
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"{operation} failed after {attempts} attempts: {last_error}",
            status_code=last_error.status_code,
        )


class MalformedPayload(SonaveebError):
    """Payload is not valid JSON or does not match the expected shape."""


class NotFound(SonaveebError):
    """No word matched the query."""


class NoMatches(NotFound):
    """Homonym selection was attempted on an empty match list."""


class IndexOutOfRange(SonaveebError):
    """Requested homonym index is outside [1, number of matches]."""

    def __init__(self, index: int, available: int) -> None:
        self.index = index
        self.available = available
        super().__init__(f"homonym {index} not found (have {available})")


class CacheUnavailable(SonaveebError):
    """Cache storage could not be created, opened or queried."""
