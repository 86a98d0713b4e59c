"""
Opener analysis pipeline.

- run_analysis: distribution over the playable list -> coverage ranking of
  the guessable list -> one greedy selection per overlap tolerance.

Pure in-memory computation; printing and CSV export live in
packages.reporting so the same result can feed a CLI, a notebook or a test.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from tqdm import tqdm

from packages.analysis import (
    SELECTION_TOLERANCES,
    AlphabetError,
    LetterDistribution,
    RankedWords,
    build_distribution,
    check_alphabet,
    letter_counts,
    rank_words,
    select_tiers,
)

log = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    distribution: LetterDistribution
    ranked: RankedWords
    selections: Dict[int, List[str]] = field(default_factory=dict)

    def letter_counts(self) -> Dict[str, int]:
        return letter_counts(self.distribution)


def run_analysis(
        playable: Sequence[str],
        guessable: Sequence[str],
        *,
        tolerances: Iterable[int] = SELECTION_TOLERANCES,
        validate: bool = True,
        progress: bool = False,
) -> AnalysisResult:
    """
    Build the full analysis for one pair of word lists.

    Args:
        playable:   words the letter distribution is built from
        guessable:  words to rank and select from
        tolerances: overlap tolerances, one independent selection each
        validate:   check the alphabet up front and report every missing
                    letter at once (otherwise ranking stops at the first)
        progress:   show a tqdm bar over the ranking pass

    Raises:
        AlphabetError if guessable uses a letter playable never does.
    """
    distribution = build_distribution(playable)
    log.debug("distribution: %d letters over %d words", len(distribution), len(playable))

    if validate:
        missing = check_alphabet(guessable, distribution)
        if missing:
            bad = next(w for w in guessable if any(ch in missing for ch in w))
            letter = next(ch for ch in bad if ch in missing)
            raise AlphabetError(bad, letter, missing)

    words = tqdm(guessable, ncols=80, desc="Ranking", unit="word", disable=not progress)
    ranked = rank_words(words, distribution)
    log.debug("ranked %d guessable words", len(ranked))

    selections = select_tiers(ranked, tolerances)
    for t, chosen in selections.items():
        log.debug("tolerance %d: %d words selected", t, len(chosen))

    return AnalysisResult(distribution=distribution, ranked=ranked, selections=selections)
