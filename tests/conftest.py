# tests/conftest.py — v2
"""Shared test fixtures for all unit and integration tests.

Provides sample Ekilex payloads and a recording fake source.
No network access: every source is a fake.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from sonaveeb.cache.sqlite_store import SqliteCacheStore
from sonaveeb.core.errors import TransportError
from sonaveeb.source.base_source import BaseSourceAdapter


def as_payload(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False).encode("utf-8")


# === SAMPLE PAYLOADS ===


PUU_SEARCH = {
    "words": [
        {"wordId": 101, "wordValue": "puu", "lang": "est"},
        {"wordId": 900, "wordValue": "puu", "lang": "eng"},
    ]
}

PUU_DETAILS = {
    "wordClass": None,
    "lexemes": [
        {
            "pos": [{"code": "s", "value": "nimisõna"}],
            "synonymLangGroups": [
                {
                    "lang": "eng",
                    "synonyms": [
                        {"words": [
                            {"wordValue": "tree", "lang": "eng"},
                            {"wordValue": "wood", "lang": "eng"},
                        ]},
                        {"words": [{"wordValue": "tree", "lang": "eng"}]},
                    ],
                },
                {
                    "lang": "rus",
                    "synonyms": [{"words": [{"wordValue": "дерево", "lang": "rus"}]}],
                },
            ],
        }
    ],
}

PUU_PARADIGMS = [
    {
        "title": "puu",
        "inflectionTypeNr": "26",
        "inflectionType": "26",
        "wordClass": "noomen",
        "paradigmForms": [
            {"morphCode": "SgN", "value": "puu"},
            {"morphCode": "SgG", "value": "puu"},
            {"morphCode": "SgP", "value": "puud"},
            {"morphCode": "PlN", "value": "puud"},
            {"morphCode": "PlP", "value": "puid"},
        ],
    }
]

TEGEMA_SEARCH = {"words": [{"wordId": 303, "wordValue": "tegema", "lang": "est"}]}

TEGEMA_DETAILS = {
    "wordClass": "verb",
    "lexemes": [
        {
            "pos": [{"code": "v", "value": "tegusõna"}],
            "synonymLangGroups": [
                {
                    "lang": "eng",
                    "synonyms": [{"words": [
                        {"wordValue": "do", "lang": "eng"},
                        {"wordValue": "make", "lang": "eng"},
                    ]}],
                }
            ],
        }
    ],
}

TEGEMA_PARADIGMS = [
    {
        "inflectionTypeNr": "33",
        "paradigmForms": [
            {"morphCode": "Sup", "value": "tegema"},
            {"morphCode": "Inf", "value": "teha"},
            {"morphCode": "IndPrSg3", "value": "teeb"},
            {"morphCode": "PtsPtIps", "value": "tehtud"},
        ],
    }
]


# === FAKE SOURCE ===


class RecordingSource(BaseSourceAdapter):
    """Fake source serving canned payloads and recording every call.

    Missing payloads raise TransportError("API error: 404 Not Found").
    """

    def __init__(
        self,
        searches: dict[str, bytes] | None = None,
        details_payloads: dict[int, bytes] | None = None,
        paradigm_payloads: dict[int, bytes] | None = None,
    ) -> None:
        self.searches = dict(searches or {})
        self.details_payloads = dict(details_payloads or {})
        self.paradigm_payloads = dict(paradigm_payloads or {})
        self.calls: list[tuple[str, Any]] = []
        self.closed = False

    def search(self, term: str) -> bytes:
        self.calls.append(("search", term))
        return self._serve(self.searches, term)

    def details(self, word_id: int) -> bytes:
        self.calls.append(("details", word_id))
        return self._serve(self.details_payloads, word_id)

    def paradigm(self, word_id: int) -> bytes:
        self.calls.append(("paradigm", word_id))
        return self._serve(self.paradigm_payloads, word_id)

    @property
    def source_name(self) -> str:
        return "fake"

    def close(self) -> None:
        self.closed = True

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    @staticmethod
    def _serve(payloads: dict[Any, bytes], key: Any) -> bytes:
        if key not in payloads:
            raise TransportError("API error: 404 Not Found", status_code=404)
        return payloads[key]


# === FIXTURES ===


@pytest.fixture
def puu_source() -> RecordingSource:
    """Source knowing the noun 'puu' (one Estonian match)."""
    return RecordingSource(
        searches={"puu": as_payload(PUU_SEARCH)},
        details_payloads={101: as_payload(PUU_DETAILS)},
        paradigm_payloads={101: as_payload(PUU_PARADIGMS)},
    )


@pytest.fixture
def tegema_source() -> RecordingSource:
    """Source knowing the verb 'tegema'."""
    return RecordingSource(
        searches={"tegema": as_payload(TEGEMA_SEARCH)},
        details_payloads={303: as_payload(TEGEMA_DETAILS)},
        paradigm_payloads={303: as_payload(TEGEMA_PARADIGMS)},
    )


@pytest.fixture
def cache_store(tmp_path: Path):
    """Fresh on-disk SQLite cache, closed after the test."""
    store = SqliteCacheStore(db_path=tmp_path / "cache.db")
    yield store
    store.close()
