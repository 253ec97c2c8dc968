from __future__ import annotations
import logging
from typing import List, Optional

from .config import CONTEXT_RADIUS
from .index import SubstringIndex
from .loader import load_source
from .models import ContextResult

log = logging.getLogger(__name__)


class SubstringIndexer:
    """
    Substring search over the complete-works text.

    Only the first (lowest offset) occurrence of a query is reported, even
    though the index can list all of them.
    """

    def __init__(self, text: str, *, radius: int = CONTEXT_RADIUS) -> None:
        self.radius = radius
        self.index = SubstringIndex(text)

    @classmethod
    def from_file(cls, path: str) -> "SubstringIndexer":
        return cls(load_source(path, expect=".txt"))  # type: ignore[arg-type]

    @property
    def text(self) -> str:
        return self.index.text

    def context_window(self, offset: int) -> str:
        """Slice [offset - radius, offset + radius), clamped to the text."""
        start = max(0, offset - self.radius)
        end = min(len(self.text), offset + self.radius)
        return self.text[start:end]

    def lookup_first_occurrence_context(self, query: str) -> Optional[ContextResult]:
        offset = self.index.first(query)
        if offset is None:
            return None
        return ContextResult(context=self.context_window(offset))

    def search(self, query: str) -> List[ContextResult]:
        hit = self.lookup_first_occurrence_context(query)
        log.debug("context search %r -> %s", query, "hit" if hit else "miss")
        return [hit] if hit is not None else []
