"""
Shared helpers for the letter-coverage analysis.

- unique_letters:       distinct letters of a word, in first-seen order.
- sort_by_value_desc:   stable descending sort of (key, value) pairs.

Both the letter distribution and the word ranking are "sort a mapping by
its values, biggest first, ties keep insertion order". Python's `sorted`
is documented stable (also with reverse=True), so that contract is explicit
here rather than left to whatever order a dict happened to end up in.
"""

from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Tuple, TypeVar

# letter -> ascending list of word indices containing that letter
LetterDistribution = Dict[str, List[int]]
# word -> coverage score, ordered best first
RankedWords = Dict[str, int]

K = TypeVar("K")
V = TypeVar("V")


def unique_letters(word: str) -> List[str]:
    """
    Distinct letters of `word` in the order they first appear.
    Example: unique_letters("sleet") -> ["s", "l", "e", "t"]
    """
    return list(dict.fromkeys(word))


def sort_by_value_desc(pairs: Iterable[Tuple[K, V]], key: Callable[[V], int]) -> List[Tuple[K, V]]:
    """
    Sort (k, v) pairs by key(v), largest first. Equal keys keep input order.
    """
    return sorted(pairs, key=lambda kv: key(kv[1]), reverse=True)
