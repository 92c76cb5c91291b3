"""Estonian word forms from the Ekilex lexical database."""

from sonaveeb.version import __version__

__all__ = ["__version__"]
