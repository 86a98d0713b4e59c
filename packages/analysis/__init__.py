from .letters import LetterDistribution, RankedWords, unique_letters
from .distribution import build_distribution, letter_counts
from .ranking import AlphabetError, check_alphabet, coverage_score, rank_words
from .selection import SELECTION_TOLERANCES, select_disjoint, select_tiers

__all__ = [
    "LetterDistribution", "RankedWords", "unique_letters",
    "build_distribution", "letter_counts",
    "AlphabetError", "check_alphabet", "coverage_score", "rank_words",
    "SELECTION_TOLERANCES", "select_disjoint", "select_tiers",
]
