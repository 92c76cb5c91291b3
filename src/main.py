# src/main.py — v2
"""CLI entry point: look up Estonian word forms.

Usage:
    sonaveeb <word> [options]
    sonaveeb --clear-cache

Exit status: 0 success, 1 word or homonym not found, 2 usage or configuration
error, 3 any other failure.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from sonaveeb.api.facade import run
from sonaveeb.api.models import LookupOptions
from sonaveeb.cache.base_cache_store import BaseCacheStore
from sonaveeb.cache.cache_factory import create_cache_store
from sonaveeb.config.settings import (
    ConfigurationError,
    Settings,
    load_settings,
    resolve_api_key,
)
from sonaveeb.core.errors import (
    CacheUnavailable,
    IndexOutOfRange,
    NotFound,
    SonaveebError,
)
from sonaveeb.logging.logger import setup_logging
from sonaveeb.source.source_factory import create_source_adapter
from sonaveeb.version import __version__

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2
EXIT_ERROR = 3
EXIT_INTERRUPTED = 130

_EPILOG = """\
environment:
  EKILEX_API_KEY    API key (or first line of ./config or ~/.config/sonaveeb/config)
  XDG_CACHE_HOME    cache root (default ~/.cache)

examples:
  sonaveeb puu
  sonaveeb --all tegema
  sonaveeb --json puu
"""


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except (ConfigurationError, ValidationError) as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_USAGE

    _setup_logging(settings, args.verbose)

    if args.word is None and not args.clear_cache:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    cache = None if args.no_cache else _open_cache(settings)
    try:
        if args.clear_cache:
            _clear_cache(cache)
            if args.word is None:
                return EXIT_OK
        return _lookup(args, settings, cache)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED
    finally:
        if cache is not None:
            cache.close()


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="sonaveeb",
        description="Query Estonian word forms from the Ekilex API",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("word", nargs="?", help="Word to look up")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--json", dest="raw_json", action="store_true",
        help="Output the raw paradigm JSON",
    )
    parser.add_argument(
        "-a", "--all", dest="show_all", action="store_true",
        help="Show all forms",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Minimal output: code<TAB>value lines",
    )
    parser.add_argument(
        "-n", "--homonym", type=int, default=1, metavar="N",
        help="Select homonym N (default: 1)",
    )
    parser.add_argument(
        "--refresh", action="store_true",
        help="Bypass cached data and re-fetch (the cache is still updated)",
    )
    parser.add_argument(
        "--clear-cache", action="store_true",
        help="Remove all cached responses",
    )
    parser.add_argument(
        "--no-cache", action="store_true",
        help="Do not read or write the cache",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def _lookup(
    args: argparse.Namespace, settings: Settings, cache: BaseCacheStore | None
) -> int:
    """Run one lookup and print the result."""
    api_key = resolve_api_key(settings)
    try:
        source = create_source_adapter(settings, api_key=api_key)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    options = LookupOptions(
        homonym=args.homonym,
        show_all=args.show_all,
        quiet=args.quiet,
        raw_json=args.raw_json,
        refresh=args.refresh,
    )
    try:
        output = run(args.word, options, source=source, cache=cache, settings=settings)
    except (NotFound, IndexOutOfRange) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except SonaveebError as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    finally:
        source.close()

    sys.stdout.write(output)
    return EXIT_OK


def _open_cache(settings: Settings) -> BaseCacheStore | None:
    """Open the cache, degrading to no cache on failure."""
    try:
        return create_cache_store(settings)
    except CacheUnavailable as exc:
        logger.warning("Cache unavailable, continuing without it: %s", exc)
        return None


def _clear_cache(cache: BaseCacheStore | None) -> None:
    if cache is None:
        logger.warning("No cache to clear")
        return
    try:
        cache.clear()
    except CacheUnavailable as exc:
        logger.warning("Failed to clear cache: %s", exc)
        return
    logger.info("Cache cleared")


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
    )
    # Quiet noisy libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
