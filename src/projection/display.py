# src/projection/display.py — v1
"""Build the display model from word details.

All paradigms of a word are merged: for every morph code the distinct values
are kept in order of first appearance across paradigms.
"""

from __future__ import annotations

from sonaveeb.core.models import DisplayModel, FormLine, Paradigm, WordDetails
from sonaveeb.projection.morphology import (
    determine_part_of_speech,
    get_morph_label,
    select_display_codes,
)

NO_DATA_HEADER = "no data available"
MISSING_FORM = "-"
VALUE_SEPARATOR = ", "


def extract_translations(details: WordDetails, lang: str = "eng") -> list[str]:
    """Collect distinct synonym words in lang, in first-seen order."""
    seen: set[str] = set()
    translations: list[str] = []
    for lexeme in details.lexemes:
        for group in lexeme.synonym_lang_groups:
            if group.lang != lang:
                continue
            for synonym in group.synonyms:
                for word in synonym.words:
                    if word.lang != lang or not word.word_value:
                        continue
                    if word.word_value not in seen:
                        seen.add(word.word_value)
                        translations.append(word.word_value)
    return translations


def merge_paradigm_forms(paradigms: list[Paradigm]) -> dict[str, list[str]]:
    """Merge forms of all paradigms into code -> distinct values.

    Codes keep their first-appearance order. A code whose values are all
    empty maps to an empty list.
    """
    merged: dict[str, list[str]] = {}
    for paradigm in paradigms:
        for form in paradigm.forms:
            if not form.morph_code:
                continue
            values = merged.setdefault(form.morph_code, [])
            if form.value and form.value not in values:
                values.append(form.value)
    return merged


def collect_inflection_types(paradigms: list[Paradigm]) -> list[str]:
    """Distinct non-empty inflection type numbers, in first-seen order."""
    types: list[str] = []
    for paradigm in paradigms:
        nr = paradigm.inflection_type_nr
        if nr and nr not in types:
            types.append(nr)
    return types


def _format_header(
    word: str,
    pos_label: str,
    inflection_types: list[str],
    homonym_index: int,
    total_homonyms: int,
) -> str:
    descriptor = pos_label
    if inflection_types:
        descriptor += f", type {', '.join(inflection_types)}"
    header = f"{word} ({descriptor})"
    if total_homonyms > 1:
        header += (
            f"  [{homonym_index} of {total_homonyms}, use --homonym=N for others]"
        )
    return header


def _line(code: str, values: list[str] | None) -> FormLine:
    value = VALUE_SEPARATOR.join(values) if values else MISSING_FORM
    return FormLine(code=code, label=get_morph_label(code), value=value)


def build_display_model(
    word: str,
    details: WordDetails,
    homonym_index: int,
    total_homonyms: int,
    show_all: bool,
    translation_lang: str = "eng",
) -> DisplayModel:
    """Project word details into a render-ready DisplayModel.

    Args:
        word: Word as returned by the search (lemma).
        details: Word details with paradigms already merged in.
        homonym_index: 1-based index of the selected homonym.
        total_homonyms: Number of homonyms available for the term.
        show_all: Every morph code present instead of the curated four.
        translation_lang: Language of the translations to extract.

    Returns:
        DisplayModel. Without paradigms, a "no data" header and no lines.
    """
    if not details.paradigms:
        return DisplayModel(header=NO_DATA_HEADER, translation_lang=translation_lang)

    pos_label, is_verb = determine_part_of_speech(details)
    header = _format_header(
        word,
        pos_label,
        collect_inflection_types(details.paradigms),
        homonym_index,
        total_homonyms,
    )

    merged = merge_paradigm_forms(details.paradigms)
    codes = list(merged) if show_all else select_display_codes(is_verb)

    return DisplayModel(
        header=header,
        translations=extract_translations(details, translation_lang),
        translation_lang=translation_lang,
        lines=[_line(code, merged.get(code)) for code in codes],
    )
