# shakesearch/engine.py
from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Dict, Iterable, List, Optional

from . import config as CFG
from .indexer import SubstringIndexer
from .models import QuoteRecord, SearchResult
from .quotes import StructuredQuoteMatcher

log = logging.getLogger(__name__)


class Mode(str, Enum):
    """Which matcher a query is dispatched to."""
    QUOTES = "quotes"
    CONTEXT = "context"
    BOTH = "both"


class Engine:
    """
    Thin orchestration layer that holds one instance of each matcher:
      - SubstringIndexer over the complete-works text,
      - StructuredQuoteMatcher over the quote table.

    Public API (used by CLI/Flask):
      * load(corpus_path, quotes_path): read both sources from disk
      * build(text, records):           index in-memory sources
      * search(query, mode):            dispatch to one matcher or both
      * shutdown():                     drop the loaded data

    Both matchers are built before they are attached, so a failed load never
    leaves a half-initialized engine behind. After that they are read-only
    and safe to share between request threads.
    """

    def __init__(self,
                 indexer: Optional[SubstringIndexer] = None,
                 matcher: Optional[StructuredQuoteMatcher] = None) -> None:
        self.indexer = indexer
        self.matcher = matcher

    # ------------- lifecycle -------------

    def load(
        self,
        corpus_path: Optional[str] = None,
        quotes_path: Optional[str] = None,
        *,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True

        corpus_path = corpus_path or CFG.DEFAULT_CORPUS_PATH
        quotes_path = quotes_path or CFG.DEFAULT_QUOTES_PATH

        t0 = time.perf_counter()
        log.info("Loading quote table from %s", quotes_path)
        matcher = StructuredQuoteMatcher.from_file(quotes_path)
        log.info("Loading corpus text from %s", corpus_path)
        indexer = SubstringIndexer.from_file(corpus_path)

        self.indexer, self.matcher = indexer, matcher
        log.info("Engine load() complete in %.2fs: quotes=%d chars=%d",
                 time.perf_counter() - t0, len(matcher), len(indexer.text))

    def build(self, text: str = "", records: Iterable[QuoteRecord] = ()) -> None:
        indexer = SubstringIndexer(text)
        matcher = StructuredQuoteMatcher(records)
        self.indexer, self.matcher = indexer, matcher
        log.info("Engine build() complete: quotes=%d chars=%d", len(matcher), len(text))

    @property
    def ready(self) -> bool:
        return self.indexer is not None and self.matcher is not None

    def stats(self) -> Dict[str, int]:
        return {
            "quotes": len(self.matcher) if self.matcher else 0,
            "corpus_chars": len(self.indexer.text) if self.indexer else 0,
        }

    # ------------- query -------------

    def search_quotes(self, query: str) -> List[SearchResult]:
        self._require_ready()
        return list(self.matcher.search(query))  # type: ignore[union-attr]

    def search_context(self, query: str) -> List[SearchResult]:
        self._require_ready()
        return list(self.indexer.search(query))  # type: ignore[union-attr]

    def search(self, query: str, mode: Mode | str = Mode.QUOTES) -> List[SearchResult]:
        """Run query against the matcher(s) selected by mode. Context results come first."""
        mode = Mode(mode)
        results: List[SearchResult] = []
        if mode in (Mode.CONTEXT, Mode.BOTH):
            results.extend(self.search_context(query))
        if mode in (Mode.QUOTES, Mode.BOTH):
            results.extend(self.search_quotes(query))
        return results

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.indexer = None
        self.matcher = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_ready(self) -> None:
        if not self.ready:
            raise RuntimeError("Engine not initialized. Call build() or load() first.")
