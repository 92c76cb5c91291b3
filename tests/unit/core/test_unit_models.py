# tests/unit/core/test_unit_models.py — v1
"""Tests for core/models.py — alias handling, null tolerance, stripping."""

from __future__ import annotations

from sonaveeb.core.models import DisplayModel, Form, Paradigm, WordDetails, WordMatch


class TestWireModels:
    def test_aliases(self):
        m = WordMatch.model_validate({"wordId": 5, "wordValue": "maja", "lang": "est"})
        assert (m.word_id, m.word_value, m.lang) == (5, "maja", "est")

    def test_field_names_accepted(self):
        m = WordMatch(word_id=5, word_value="maja", lang="est")
        assert m.word_id == 5

    def test_nulls_become_defaults(self):
        d = WordDetails.model_validate(
            {"wordClass": None, "lexemes": None, "paradigms": None}
        )
        assert d.word_class == ""
        assert d.lexemes == []
        assert d.paradigms == []

    def test_unknown_fields_ignored(self):
        p = Paradigm.model_validate({"paradigmForms": [], "comment": "x"})
        assert p.forms == []

    def test_strings_stripped(self):
        f = Form.model_validate({"morphCode": " SgN ", "value": "puu\n"})
        assert f.morph_code == "SgN"
        assert f.value == "puu"


class TestDisplayModel:
    def test_defaults(self):
        m = DisplayModel(header="h")
        assert m.translations == []
        assert m.lines == []
        assert m.translation_lang == "eng"
