from __future__ import annotations
from typing import Iterator, List, Tuple


def fold(text: str) -> str:
    """Unicode case folding used for whole-word comparison."""
    return text.casefold()

def split_words(text: str) -> List[str]:
    """
    Split on runs of whitespace, the way a standard word tokenizer does.
    Punctuation stays attached: "be," and "be" are different words.
    """
    return text.split()

def folded_words(text: str) -> List[str]:
    """Whitespace tokens of text, case-folded, in order."""
    return [fold(w) for w in split_words(text)]

def positional_kgrams(text: str, k: int) -> Iterator[Tuple[int, str]]:
    """
    Yield (offset, gram) for every offset of text.
    Grams starting in the last k-1 characters are shorter than k, so that
    short queries can still reach the tail of the text.
    """
    if k <= 0:
        return
    for i in range(len(text)):
        yield i, text[i:i + k]
