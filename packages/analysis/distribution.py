"""
Letter distribution over a word list.

For every letter, collect the indices of the words containing it (a letter
repeated inside one word counts once for that word), then order letters by
how many WORDS contain them, not by raw occurrence count.

Example:
    build_distribution(["cat", "dog", "ant"])
      -> {"a": [0, 2], "t": [0, 2], "c": [0], "d": [1], "o": [1], "g": [1], "n": [2]}
"""

from __future__ import annotations
from typing import Dict, List, Sequence

from .letters import LetterDistribution, sort_by_value_desc, unique_letters


def build_distribution(words: Sequence[str]) -> LetterDistribution:
    """
    Map letter -> word indices, ordered by descending number of words.

    Index lists are ascending by construction. Ties between letters keep the
    order in which the letters were first encountered. An empty word
    contributes nothing; an empty list yields an empty distribution.
    """
    index: Dict[str, List[int]] = {}
    for i, word in enumerate(words):
        for letter in unique_letters(word):
            index.setdefault(letter, []).append(i)

    return dict(sort_by_value_desc(index.items(), key=len))


def letter_counts(distribution: LetterDistribution) -> Dict[str, int]:
    """Letter -> number of words containing it, in distribution order."""
    return {letter: len(indices) for letter, indices in distribution.items()}
