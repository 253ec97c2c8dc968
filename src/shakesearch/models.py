# src/shakesearch/models.py
"""
Data models for the search service.

This module defines small, focused data containers:

- QuoteRecord: one attributed line of dialogue from the quote table.
- ContextResult: a slice of the corpus surrounding a substring match.
- QuoteResult: a quote record as returned to callers.

ContextResult and QuoteResult form the SearchResult union. Each carries an
explicit ``kind`` tag so callers can dispatch on it instead of probing
which fields are present. ``to_dict()`` produces the JSON wire shape.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Dict, Union


@dataclass(frozen=True, slots=True)
class QuoteRecord:
    """
    One row of the quote table.

    Attributes
    ----------
    title : str
        Name of the work (e.g. "Hamlet").
    speaker : str
        The character speaking the line.
    location : str
        Act/scene/line identifier, e.g. "3.1.64".
    quote : str
        The dialogue text, verbatim.
    """
    title: str
    speaker: str
    location: str
    quote: str


@dataclass(frozen=True, slots=True)
class ContextResult:
    """A window of corpus text around the first occurrence of a query."""
    kind: ClassVar[str] = "context"

    context: str

    def to_dict(self) -> Dict[str, str]:
        return {"Context": self.context}


@dataclass(frozen=True, slots=True)
class QuoteResult:
    """A quote whose text contains the query as a whole word."""
    kind: ClassVar[str] = "quote"

    title: str
    player: str
    quote: str
    act_scene_line: str

    @classmethod
    def from_record(cls, rec: QuoteRecord) -> "QuoteResult":
        return cls(
            title=rec.title,
            player=rec.speaker,
            quote=rec.quote,
            act_scene_line=rec.location,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "Title": self.title,
            "Player": self.player,
            "Quote": self.quote,
            "ActSceneLine": self.act_scene_line,
        }


SearchResult = Union[ContextResult, QuoteResult]
