# tests/unit/render/test_unit_renderer.py — v1
"""Tests for render/renderer.py — quiet, normal and raw JSON output."""

from __future__ import annotations

import json

import pytest

from sonaveeb.core.errors import MalformedPayload
from sonaveeb.core.models import DisplayModel, FormLine
from sonaveeb.render.renderer import _LANGUAGE_NAMES, language_name, render, render_raw_json


def _model(**kwargs) -> DisplayModel:
    defaults = dict(
        header="puu (noun, type 26)",
        translations=["tree", "wood"],
        lines=[FormLine(code="SgN", label="ainsuse nimetav", value="puu")],
    )
    defaults.update(kwargs)
    return DisplayModel(**defaults)


class TestQuiet:
    def test_single_line_exact(self):
        assert render(_model(), quiet=True) == "SgN\tpuu\n"

    def test_omits_header_and_translations(self):
        out = render(_model(), quiet=True)
        assert "puu (noun" not in out
        assert "tree" not in out

    def test_no_lines(self):
        assert render(_model(lines=[]), quiet=True) == ""


class TestNormal:
    def test_begins_with_header(self):
        assert render(_model()).startswith("puu (noun, type 26)\n")

    def test_translations_line(self):
        lines = render(_model()).splitlines()
        assert lines[1] == "  English: tree, wood"

    def test_no_translations_line_when_empty(self):
        lines = render(_model(translations=[])).splitlines()
        assert len(lines) == 2
        assert "English" not in lines[1]

    def test_fixed_width_label(self):
        line = render(_model(translations=[])).splitlines()[1]
        assert line == "  " + "ainsuse nimetav:".ljust(45) + " puu"

    def test_other_translation_language(self):
        out = render(_model(translation_lang="rus", translations=["дерево"]))
        assert "  Russian: дерево\n" in out

    def test_no_data_model(self):
        assert render(DisplayModel(header="no data available")) == "no data available\n"

    def test_default_is_not_quiet(self):
        assert render(_model()) == render(_model(), quiet=False)


class TestLanguageName:
    def test_known(self):
        assert language_name("eng") == "English"

    def test_unknown_uses_code(self):
        assert language_name("xyz") == "xyz"

    def test_table_read_only(self):
        with pytest.raises(TypeError):
            _LANGUAGE_NAMES["eng"] = "Englisch"  # type: ignore[index]


class TestRenderRawJson:
    def test_indented(self):
        out = render_raw_json(b'[{"morphCode":"SgN","value":"puu"}]')
        assert out.endswith("\n")
        assert json.loads(out) == [{"morphCode": "SgN", "value": "puu"}]
        assert '\n  {\n    "morphCode": "SgN"' in out

    def test_stable(self):
        payload = b'{"b": 1, "a": [1, 2]}'
        assert render_raw_json(payload) == render_raw_json(payload)

    def test_keeps_non_ascii(self):
        assert "tõlge" in render_raw_json('{"v": "tõlge"}'.encode())

    def test_malformed(self):
        with pytest.raises(MalformedPayload):
            render_raw_json(b"{oops")
