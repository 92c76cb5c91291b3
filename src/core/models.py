# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

Wire models mirror the Ekilex JSON payloads (camelCase aliases). JSON nulls
are treated as absent fields so that every list and string has a usable
default, and surrounding whitespace is stripped from all strings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _ApiModel(BaseModel):
    """Base for models validated from Ekilex payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# === SEARCH ===


class WordMatch(_ApiModel):
    """One search-result candidate. Homonyms share word_value but not word_id."""

    word_id: int = Field(alias="wordId")
    word_value: str = Field(default="", alias="wordValue")
    lang: str = ""


class WordSearchResult(_ApiModel):
    """Response of the word search endpoint."""

    words: list[WordMatch] = Field(default_factory=list)


# === WORD DETAILS ===


class PosInfo(_ApiModel):
    code: str = ""
    value: str = ""


class SynonymWord(_ApiModel):
    word_value: str = Field(default="", alias="wordValue")
    lang: str = ""


class Synonym(_ApiModel):
    words: list[SynonymWord] = Field(default_factory=list)


class SynonymLangGroup(_ApiModel):
    """Synonyms of a lexeme grouped by language."""

    lang: str = ""
    synonyms: list[Synonym] = Field(default_factory=list)


class Lexeme(_ApiModel):
    """Part-of-speech hints and cross-language synonyms of one word sense."""

    pos: list[PosInfo] = Field(default_factory=list)
    synonym_lang_groups: list[SynonymLangGroup] = Field(
        default_factory=list, alias="synonymLangGroups"
    )


class Form(_ApiModel):
    """One inflected surface form tagged by a morphological code."""

    morph_code: str = Field(default="", alias="morphCode")
    value: str = ""


class Paradigm(_ApiModel):
    """One inflection pattern of a word. A word may have several."""

    title: str = ""
    inflection_type_nr: str = Field(default="", alias="inflectionTypeNr")
    inflection_type: str = Field(default="", alias="inflectionType")
    word_class: str = Field(default="", alias="wordClass")
    forms: list[Form] = Field(default_factory=list, alias="paradigmForms")


class WordDetails(_ApiModel):
    """Word details; paradigms are merged in from a separate fetch."""

    word_class: str = Field(default="", alias="wordClass")
    lexemes: list[Lexeme] = Field(default_factory=list)
    paradigms: list[Paradigm] = Field(default_factory=list)


# === PRESENTATION ===


class FormLine(BaseModel):
    """One rendered row: morph code, human-readable label and merged value."""

    code: str
    label: str
    value: str


class DisplayModel(BaseModel):
    """Normalized, render-ready view of a word's paradigms."""

    header: str
    translations: list[str] = Field(default_factory=list)
    translation_lang: str = "eng"
    lines: list[FormLine] = Field(default_factory=list)
