"""
Greedy selection of near-disjoint top words.

Walk the ranked words best first, keeping a running set of letters already
used. A word is accepted when at most `overlap_tolerance` of its unique
letters are already used; its letters then join the used set. Rejected
words are skipped for good (single pass, no backtracking). This is a greedy
heuristic, not an optimal set cover.

Example (tolerance 0) over ["cat", "dog", "tan"]:
    cat -> accepted (used = {c, a, t})
    dog -> accepted (no overlap)
    tan -> rejected (t, a already used; 2 > 0)
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Set

from .letters import unique_letters

# Overlap tolerances reported for every run: none, single, double.
SELECTION_TOLERANCES = (0, 1, 2)


def select_disjoint(ranked_words: Iterable[str], overlap_tolerance: int = 0) -> List[str]:
    """
    Pick words in rank order whose repeated-letter count stays within tolerance.

    Args:
      ranked_words      : words best first (a RankedWords dict iterates its keys;
                          only the order matters, scores are not re-read)
      overlap_tolerance : max number of already-used letters a word may repeat

    Returns:
      Accepted words, in the order encountered.
    """
    if overlap_tolerance < 0:
        raise ValueError(f"overlap_tolerance must be >= 0; got {overlap_tolerance}")

    used: Set[str] = set()
    chosen: List[str] = []

    for word in ranked_words:
        letters = unique_letters(word)
        repeated = sum(1 for ch in letters if ch in used)
        if repeated <= overlap_tolerance:
            chosen.append(word)
            used.update(letters)

    return chosen


def select_tiers(ranked_words: Iterable[str], tolerances: Iterable[int] = SELECTION_TOLERANCES) -> Dict[int, List[str]]:
    """
    Run select_disjoint once per tolerance, each call independent of the others.
    """
    ordered = list(ranked_words)
    return {t: select_disjoint(ordered, t) for t in tolerances}
