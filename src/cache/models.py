# src/cache/models.py — v2
"""Cache domain models: CacheEntry, SchemaStatus."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

SchemaStatus = Literal["compatible", "rebuild"]


class CacheEntry(BaseModel):
    """Opaque cached payload and the time it was last written."""

    key: str
    value: bytes
    created_at: datetime
