# src/api/facade.py — v2
"""Public API facade: single entry point for a word lookup.

Usage:
    from sonaveeb.api.facade import run
    text = run("puu", LookupOptions(), source=adapter, cache=store)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sonaveeb.api.models import LookupOptions
from sonaveeb.config.settings import Settings
from sonaveeb.core.errors import NotFound
from sonaveeb.logging.context import clear_context, set_lookup_context
from sonaveeb.projection.display import build_display_model
from sonaveeb.projection.parsing import (
    filter_by_language,
    parse_details,
    parse_paradigms,
    parse_search,
    select_homonym,
)
from sonaveeb.render.renderer import render, render_raw_json
from sonaveeb.source.caching_source import CachingSourceAdapter

if TYPE_CHECKING:
    from sonaveeb.cache.base_cache_store import BaseCacheStore
    from sonaveeb.source.base_source import BaseSourceAdapter

logger = logging.getLogger(__name__)


def run(
    word: str,
    options: LookupOptions | None = None,
    *,
    source: BaseSourceAdapter,
    cache: BaseCacheStore | None = None,
    settings: Settings | None = None,
) -> str:
    """Look a word up and return the rendered text.

    Stages run in order, each feeding the next:
      1. search the term, keep matches in the source language
      2. select the requested homonym
      3. fetch details, then paradigms
      4. raw JSON passthrough of the paradigm payload, or merge + render

    Args:
        word: Term to look up.
        options: Lookup options. Defaults when None.
        source: Upstream source adapter. Not closed here.
        cache: Cache store. None = no caching. Not closed here.
        settings: Language settings. Loaded from the environment when None.

    Raises:
        NotFound: No word, or none in the source language.
        NoMatches, IndexOutOfRange: Bad homonym selection.
        MalformedPayload: A payload could not be parsed.
        TransportError: The source failed.
    """
    options = options or LookupOptions()
    settings = settings or Settings()
    fetcher = CachingSourceAdapter(source, cache=cache, refresh=options.refresh)

    set_lookup_context(word)
    try:
        result = parse_search(fetcher.search(word))
        if not result.words:
            raise NotFound(f"word not found: {word}")

        matches = filter_by_language(result.words, settings.source_language)
        if not matches:
            raise NotFound(
                f"word not found: {word} (no {settings.source_language} entries)"
            )

        match = select_homonym(matches, options.homonym)
        set_lookup_context(word, match.word_id)
        logger.info(
            "Selected homonym %d of %d: word_id=%d",
            options.homonym, len(matches), match.word_id,
        )

        details = parse_details(fetcher.details(match.word_id))
        paradigm_payload = fetcher.paradigm(match.word_id)

        if options.raw_json:
            return render_raw_json(paradigm_payload)

        details = details.model_copy(
            update={"paradigms": parse_paradigms(paradigm_payload)}
        )
        model = build_display_model(
            match.word_value or word,
            details,
            homonym_index=options.homonym,
            total_homonyms=len(matches),
            show_all=options.show_all,
            translation_lang=settings.translation_language,
        )
        return render(model, quiet=options.quiet)
    finally:
        logger.debug("Source stats: %s", fetcher.stats)
        clear_context()
