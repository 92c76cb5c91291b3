# src/projection/morphology.py — v1
"""Static morphology tables and part-of-speech resolution.

Tables are read-only mappings built once at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from sonaveeb.core.models import WordDetails

MORPH_LABELS: Mapping[str, str] = MappingProxyType({
    # Singular noun cases
    "SgN": "ainsuse nimetav",
    "SgG": "ainsuse omastav",
    "SgP": "ainsuse osastav",
    "SgAdt": "ainsuse lühike sisseütlev",
    "SgIll": "ainsuse sisseütlev",
    "SgIn": "ainsuse seesütlev",
    "SgEl": "ainsuse seestütlev",
    "SgAll": "ainsuse alaleütlev",
    "SgAd": "ainsuse alalütlev",
    "SgAbl": "ainsuse alaltütlev",
    "SgTr": "ainsuse saav",
    "SgTer": "ainsuse rajav",
    "SgEs": "ainsuse olev",
    "SgAb": "ainsuse ilmaütlev",
    "SgKom": "ainsuse kaasaütlev",
    # Plural noun cases
    "PlN": "mitmuse nimetav",
    "PlG": "mitmuse omastav",
    "PlP": "mitmuse osastav",
    "PlIll": "mitmuse sisseütlev",
    "PlIn": "mitmuse seesütlev",
    "PlEl": "mitmuse seestütlev",
    "PlAll": "mitmuse alaleütlev",
    "PlAd": "mitmuse alalütlev",
    "PlAbl": "mitmuse alaltütlev",
    "PlTr": "mitmuse saav",
    "PlTer": "mitmuse rajav",
    "PlEs": "mitmuse olev",
    "PlAb": "mitmuse ilmaütlev",
    "PlKom": "mitmuse kaasaütlev",
    "Rpl": "mitmuse tüvi",
    # Verb forms
    "Sup": "ma-tegevusnimi",
    "SupAb": "ma-tegevusnimi ilmaütlev",
    "SupIn": "ma-tegevusnimi seesütlev",
    "SupEl": "ma-tegevusnimi seestütlev",
    "SupTr": "ma-tegevusnimi saav",
    "SupIps": "ma-tegevusnimi umbisikuline",
    "Inf": "da-tegevusnimi",
    "Ger": "des-vorm",
    "PtsPrPs": "oleviku kesksõna isikuline",
    "PtsPrIps": "oleviku kesksõna umbisikuline",
    "PtsPtPs": "mineviku kesksõna isikuline",
    "PtsPtPsNeg": "mineviku kesksõna isikuline eitav",
    "PtsPtIps": "mineviku kesksõna umbisikuline",
    "PtsPtIpsNeg": "mineviku kesksõna umbisikuline eitav",
    "IndPrSg1": "kindel kõneviis olevikus 1.p ainsus",
    "IndPrSg2": "kindel kõneviis olevikus 2.p ainsus",
    "IndPrSg3": "kindel kõneviis olevikus 3.p ainsus",
    "IndPrPl1": "kindel kõneviis olevikus 1.p mitmus",
    "IndPrPl2": "kindel kõneviis olevikus 2.p mitmus",
    "IndPrPl3": "kindel kõneviis olevikus 3.p mitmus",
    "IndPrIps": "kindel kõneviis olevikus umbisikuline",
    "IndPrIpsNeg": "kindel kõneviis olevikus umbisikuline eitav",
    "IndIpfSg1": "kindel kõneviis minevikus 1.p ainsus",
    "IndIpfSg2": "kindel kõneviis minevikus 2.p ainsus",
    "IndIpfSg3": "kindel kõneviis minevikus 3.p ainsus",
    "IndIpfPl1": "kindel kõneviis minevikus 1.p mitmus",
    "IndIpfPl2": "kindel kõneviis minevikus 2.p mitmus",
    "IndIpfPl3": "kindel kõneviis minevikus 3.p mitmus",
    "IndIpfIps": "kindel kõneviis minevikus umbisikuline",
    "KndPrSg1": "tingiv kõneviis olevikus 1.p ainsus",
    "KndPrSg2": "tingiv kõneviis olevikus 2.p ainsus",
    "KndPrSg3": "tingiv kõneviis olevikus 3.p ainsus",
    "KndPrPl1": "tingiv kõneviis olevikus 1.p mitmus",
    "KndPrPl2": "tingiv kõneviis olevikus 2.p mitmus",
    "KndPrPl3": "tingiv kõneviis olevikus 3.p mitmus",
    "KndPrIps": "tingiv kõneviis olevikus umbisikuline",
    "KndPtSg1": "tingiv kõneviis minevikus 1.p ainsus",
    "KndPtSg2": "tingiv kõneviis minevikus 2.p ainsus",
    "KndPtSg3": "tingiv kõneviis minevikus 3.p ainsus",
    "KndPtPl1": "tingiv kõneviis minevikus 1.p mitmus",
    "KndPtPl2": "tingiv kõneviis minevikus 2.p mitmus",
    "KndPtPl3": "tingiv kõneviis minevikus 3.p mitmus",
    "KndPtIps": "tingiv kõneviis minevikus umbisikuline",
    "KvtPrSg2": "käskiv kõneviis 2.p ainsus",
    "KvtPrPl1": "käskiv kõneviis 1.p mitmus",
    "KvtPrPl2": "käskiv kõneviis 2.p mitmus",
    "KvtPrIps": "käskiv kõneviis umbisikuline",
    "Neg": "eitav vorm",
})

# Concise view: four principal forms per part of speech.
NOUN_DISPLAY_CODES: tuple[str, ...] = ("SgN", "SgG", "SgP", "PlP")
VERB_DISPLAY_CODES: tuple[str, ...] = ("Sup", "Inf", "IndPrSg3", "PtsPtIps")

# Lexeme POS code -> (label, is_verb)
_POS_CODES: Mapping[str, tuple[str, bool]] = MappingProxyType({
    "adj": ("adj", False),
    "s": ("noun", False),
    "v": ("verb", True),
})


def get_morph_label(code: str) -> str:
    """Human-readable label for a morph code; unknown codes label themselves."""
    return MORPH_LABELS.get(code, code)


def determine_part_of_speech(details: WordDetails) -> tuple[str, bool]:
    """Resolve (label, is_verb) for a word.

    wordClass "verb" wins; otherwise the first POS code of the first lexeme
    decides. Anything unrecognized is a noun.
    """
    if details.word_class == "verb":
        return "verb", True
    if details.lexemes and details.lexemes[0].pos:
        code = details.lexemes[0].pos[0].code
        return _POS_CODES.get(code, ("noun", False))
    return "noun", False


def select_display_codes(is_verb: bool) -> tuple[str, ...]:
    """Curated morph codes for the concise view."""
    return VERB_DISPLAY_CODES if is_verb else NOUN_DISPLAY_CODES
