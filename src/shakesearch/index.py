from __future__ import annotations
import bisect
import heapq
import logging
import time
from array import array
from collections import defaultdict
from typing import Dict, Iterator, List, Optional

from . import config as CFG
from .config import GRAM
from .normalize import positional_kgrams

log = logging.getLogger(__name__)


class SubstringIndex:
    """
    Positional k-gram index over one immutable text.

    Every offset of the text is filed under the k characters starting there
    (shorter grams at the tail). Postings are ascending arrays of offsets, so
    lookups yield occurrences in text order and never rescan the text; a
    candidate is only confirmed with a single startswith() at its offset.
    """

    def __init__(self, text: str, *, k: int = GRAM) -> None:
        if k < 1:
            raise ValueError("SubstringIndex: k must be >= 1")
        self.text = text
        self.k = k
        self._postings: Dict[str, array] = {}
        self._lex: List[str] = []  # sorted grams, for prefix scans of short queries
        self._build()

    # ---- Build ----
    def _build(self) -> None:
        t0 = time.perf_counter()
        buckets: Dict[str, array] = defaultdict(lambda: array("q"))
        for off, gram in positional_kgrams(self.text, self.k):
            buckets[gram].append(off)
        self._postings = dict(buckets)
        self._lex = sorted(self._postings)
        log.info("Substring index built: chars=%d grams=%d in %.2fs",
                 len(self.text), len(self._lex), time.perf_counter() - t0)
        if CFG.VERBOSE:
            print(f"[indexing done] chars={len(self.text):,} grams={len(self._lex):,}")

    def __len__(self) -> int:
        return len(self.text)

    # ---- Query ----
    def iter_offsets(self, query: str) -> Iterator[int]:
        """Yield every offset where query occurs, in ascending order."""
        if not query:
            return iter(())
        if len(query) < self.k:
            return self._iter_short(query)
        return self._iter_long(query)

    def lookup(self, query: str, n: int = -1) -> List[int]:
        """
        Return occurrence offsets of query, ascending.
        n < 0 returns all of them; otherwise at most n.
        """
        out: List[int] = []
        if n == 0:
            return out
        for off in self.iter_offsets(query):
            out.append(off)
            if n > 0 and len(out) >= n:
                break
        return out

    def first(self, query: str) -> Optional[int]:
        """Lowest offset of query, or None when it does not occur."""
        return next(self.iter_offsets(query), None)

    # ---- internals ----
    def _iter_long(self, query: str) -> Iterator[int]:
        # anchor on the rarest gram of the query
        best_j = -1
        best: Optional[array] = None
        for j in range(len(query) - self.k + 1):
            posting = self._postings.get(query[j:j + self.k])
            if posting is None:
                return
            if best is None or len(posting) < len(best):
                best_j, best = j, posting
        assert best is not None
        text = self.text
        for off in best:
            start = off - best_j
            if start >= 0 and text.startswith(query, start):
                yield start

    def _iter_short(self, query: str) -> Iterator[int]:
        # every gram that starts with the query marks one occurrence
        L = self._lex
        lo = bisect.bisect_left(L, query)
        hits: List[array] = []
        while lo < len(L) and L[lo].startswith(query):
            hits.append(self._postings[L[lo]])
            lo += 1
        # offsets are unique across grams; merge keeps them ascending
        yield from heapq.merge(*hits)
