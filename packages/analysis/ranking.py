"""
Word ranking by letter coverage.

A guess word's coverage score is the number of DISTINCT words (from the list
the distribution was built on) that share at least one letter with it:

    score(w) = | union of distribution[ch] for ch in unique_letters(w) |

The guessable list may be larger than the playable list, but it must not use
letters the playable list never does. That is a caller error and fails loudly
(AlphabetError), never defaulted to an empty index list.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Set

from .letters import LetterDistribution, RankedWords, sort_by_value_desc, unique_letters


class AlphabetError(ValueError):
    """A word uses a letter that has no entry in the letter distribution."""

    def __init__(self, word: str, letter: str, missing: Optional[List[str]] = None):
        msg = (f"letter {letter!r} of word {word!r} does not occur in the distribution "
               f"(word lists must share an alphabet)")
        if missing:
            msg += f"; all missing letters: {missing}"
        super().__init__(msg)
        self.word = word
        self.letter = letter
        self.missing = list(missing or [letter])


def check_alphabet(words: Iterable[str], distribution: LetterDistribution) -> List[str]:
    """
    Return the letters used by `words` that are missing from `distribution`
    (sorted, empty when the alphabets are consistent).
    """
    used: Set[str] = set()
    for w in words:
        used.update(w)
    return sorted(used.difference(distribution))


def coverage_score(word: str, distribution: LetterDistribution) -> int:
    """
    Number of distinct word indices reachable through the word's unique letters.
    Raises AlphabetError on the first letter absent from the distribution.
    """
    reached: Set[int] = set()
    for ch in unique_letters(word):
        try:
            indices = distribution[ch]
        except KeyError:
            raise AlphabetError(word, ch) from None
        reached.update(indices)
    return len(reached)


def rank_words(words: Iterable[str], distribution: LetterDistribution) -> RankedWords:
    """
    Score every word and order them by descending coverage.

    Ties keep the order of `words`. A word listed twice keeps its first
    position. `words` is consumed once, so a progress wrapper (tqdm) works.
    """
    scores: Dict[str, int] = {}
    for w in words:
        scores[w] = coverage_score(w, distribution)

    return dict(sort_by_value_desc(scores.items(), key=int))
