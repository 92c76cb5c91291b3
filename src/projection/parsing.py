# src/projection/parsing.py — v1
"""Parse raw Ekilex payloads into domain records and pick a homonym.

Pure functions: no I/O, no logging.
"""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from sonaveeb.core.errors import IndexOutOfRange, MalformedPayload, NoMatches
from sonaveeb.core.models import Paradigm, WordDetails, WordMatch, WordSearchResult

_PARADIGM_LIST = TypeAdapter(list[Paradigm])


def _is_null(data: bytes) -> bool:
    return data.strip() == b"null"


def parse_search(data: bytes) -> WordSearchResult:
    """Parse a word search response.

    A JSON null is read as a result without words.

    Raises:
        MalformedPayload: If data is not JSON or not a search result object.
    """
    try:
        if _is_null(data):
            return WordSearchResult()
        return WordSearchResult.model_validate_json(data)
    except ValidationError as e:
        raise MalformedPayload(f"failed to parse search response: {e}") from e


def parse_details(data: bytes) -> WordDetails:
    """Parse a word details response.

    A JSON null is read as details without lexemes.

    Raises:
        MalformedPayload: If data is not JSON or not a details object.
    """
    try:
        if _is_null(data):
            return WordDetails()
        return WordDetails.model_validate_json(data)
    except ValidationError as e:
        raise MalformedPayload(f"failed to parse details response: {e}") from e


def parse_paradigms(data: bytes) -> list[Paradigm]:
    """Parse a paradigm details response (a JSON array of paradigms).

    A JSON null is read as an empty list.

    Raises:
        MalformedPayload: If data is not JSON or not a list of paradigms.
    """
    try:
        if _is_null(data):
            return []
        return _PARADIGM_LIST.validate_json(data)
    except ValidationError as e:
        raise MalformedPayload(f"failed to parse paradigm response: {e}") from e


def filter_by_language(matches: list[WordMatch], lang: str) -> list[WordMatch]:
    """Keep matches whose language equals lang, preserving order."""
    return [m for m in matches if m.lang == lang]


def select_homonym(matches: list[WordMatch], index: int) -> WordMatch:
    """Pick a match by its 1-based homonym index.

    Raises:
        NoMatches: If matches is empty.
        IndexOutOfRange: If index is outside [1, len(matches)].
    """
    if not matches:
        raise NoMatches("no words available")
    if index < 1 or index > len(matches):
        raise IndexOutOfRange(index, len(matches))
    return matches[index - 1]
