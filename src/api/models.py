# src/api/models.py — v2
"""API-level models: LookupOptions."""

from __future__ import annotations

from pydantic import BaseModel


class LookupOptions(BaseModel):
    """Per-lookup options provided by the caller."""

    homonym: int = 1
    show_all: bool = False
    quiet: bool = False
    raw_json: bool = False
    refresh: bool = False
