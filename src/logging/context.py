# src/logging/context.py — v2
"""Contextual logging support: attach the looked-up word, word id and
current source operation to log records.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per lookup.
_word: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "word", default=None
)
_word_id: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "word_id", default=None
)
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    word: str | None = None
    word_id: int | None = None
    operation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        word=_word.get(),
        word_id=_word_id.get(),
        operation=_operation.get(),
    )


def set_lookup_context(word: str, word_id: int | None = None) -> None:
    """Set lookup-level context (called once per word and again once resolved)."""
    _word.set(word)
    _word_id.set(word_id)


def set_operation_context(operation: str | None) -> None:
    """Set the source operation currently in flight (search, details, paradigm)."""
    _operation.set(operation)


def clear_context() -> None:
    """Reset all context variables."""
    _word.set(None)
    _word_id.set(None)
    _operation.set(None)
