# src/source/base_source.py — v1
"""Abstract lexical source interface.

A source answers three queries and returns raw serialized payloads. It knows
nothing about caching or parsing, so fakes can stand in for the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSourceAdapter(ABC):
    """Unified interface for lexical data sources."""

    @abstractmethod
    def search(self, term: str) -> bytes:
        """Search words by term."""

    @abstractmethod
    def details(self, word_id: int) -> bytes:
        """Word details (word class, lexemes) by word id."""

    @abstractmethod
    def paradigm(self, word_id: int) -> bytes:
        """Inflection paradigms by word id."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Source identifier (ekilex, ...)."""

    def close(self) -> None:
        """Release transport resources. No-op by default."""
