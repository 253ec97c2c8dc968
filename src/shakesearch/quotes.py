from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from .loader import load_source, records_from_rows
from .models import QuoteRecord, QuoteResult
from .normalize import fold, folded_words

log = logging.getLogger(__name__)


class StructuredQuoteMatcher:
    """
    Whole-word, case-insensitive search over quote records.

    A record is reported once per matching word, so a quote that uses the
    word twice shows up twice. Results keep record order, then word order.
    """

    def __init__(self, records: Iterable[QuoteRecord]) -> None:
        self.records: List[QuoteRecord] = list(records)
        # folded word -> record positions, one entry per occurrence
        self._postings: Dict[str, List[int]] = {}
        self._build()

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "StructuredQuoteMatcher":
        return cls(records_from_rows(rows))

    @classmethod
    def from_file(cls, path: str) -> "StructuredQuoteMatcher":
        return cls(load_source(path, expect=".csv"))  # type: ignore[arg-type]

    def _build(self) -> None:
        buckets: Dict[str, List[int]] = defaultdict(list)
        for pos, rec in enumerate(self.records):
            for word in folded_words(rec.quote):
                buckets[word].append(pos)
        self._postings = dict(buckets)
        log.info("Quote index built: records=%d words=%d", len(self.records), len(self._postings))

    def __len__(self) -> int:
        return len(self.records)

    def match_whole_word(self, query: str) -> List[QuoteRecord]:
        if not query:
            return []
        return [self.records[pos] for pos in self._postings.get(fold(query), ())]

    def search(self, query: str) -> List[QuoteResult]:
        return [QuoteResult.from_record(r) for r in self.match_whole_word(query)]
