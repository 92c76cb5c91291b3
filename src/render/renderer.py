# src/render/renderer.py — v1
"""Render a DisplayModel as text.

Quiet mode is tab-separated ``code<TAB>value`` lines for scripts; normal mode
is a header, an optional translations line and aligned ``label: value`` rows.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Mapping

from sonaveeb.core.errors import MalformedPayload
from sonaveeb.core.models import DisplayModel

LABEL_WIDTH = 45

_LANGUAGE_NAMES: Mapping[str, str] = MappingProxyType({
    "eng": "English",
    "rus": "Russian",
    "fin": "Finnish",
    "deu": "German",
    "ger": "German",
    "fra": "French",
    "fre": "French",
    "lav": "Latvian",
    "ukr": "Ukrainian",
})


def language_name(code: str) -> str:
    return _LANGUAGE_NAMES.get(code, code)


def render(model: DisplayModel, quiet: bool = False) -> str:
    """Render the model. Pure: returns the text, writes nothing."""
    out: list[str] = []

    if not quiet:
        if model.header:
            out.append(f"{model.header}\n")
        if model.translations:
            out.append(
                f"  {language_name(model.translation_lang)}: "
                f"{', '.join(model.translations)}\n"
            )

    for line in model.lines:
        if quiet:
            out.append(f"{line.code}\t{line.value}\n")
        else:
            out.append(f"  {line.label + ':':<{LABEL_WIDTH}} {line.value}\n")

    return "".join(out)


def render_raw_json(payload: bytes) -> str:
    """Re-serialize a raw JSON payload with stable 2-space indentation.

    Raises:
        MalformedPayload: If payload is not valid JSON.
    """
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedPayload(f"failed to parse response: {e}") from e
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
