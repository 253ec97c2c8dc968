"""
Shakespeare Search Module

This module answers two kinds of queries over the Complete Works of
Shakespeare:

- substring queries against the full text, returning the passage around
  the first occurrence;
- whole-word queries against a table of attributed quotes, returning every
  quote that uses the word.

The module is designed with a clean separation of concerns:
- Source loading and row validation (loader)
- Substring indexing and context windows (index, indexer)
- Whole-word quote matching (quotes)
- Result models and configuration

Main Classes:
    Engine: holds one instance of each matcher and dispatches queries
    SubstringIndexer, StructuredQuoteMatcher: the two matchers

Example Usage:
    from shakesearch import Engine

    engine = Engine()
    engine.load("completeworks.txt", "completeworkssorted.csv")

    for r in engine.search("love", mode="both"):
        print(r.to_dict())
"""

# src/shakesearch/__init__.py
from .engine import Engine, Mode  # re-export
from .errors import LoadError
from .indexer import SubstringIndexer
from .models import ContextResult, QuoteRecord, QuoteResult, SearchResult
from .quotes import StructuredQuoteMatcher

__version__ = "1.0.0"
__all__ = [
    "Engine", "Mode", "LoadError",
    "SubstringIndexer", "StructuredQuoteMatcher",
    "QuoteRecord", "ContextResult", "QuoteResult", "SearchResult",
]
