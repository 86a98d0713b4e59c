"""
Console rendering of an analysis: the letter distribution and the
tolerance-bucketed word lists. Functions return lines; callers print.
"""

from __future__ import annotations
from typing import Dict, List

from packages.analysis import LetterDistribution

# Headings per overlap tolerance, shared with the CSV export.
SELECTION_HEADINGS: Dict[int, str] = {
    0: "Unique Optimal Words (No Overlap)",
    1: "Unique Optimal Words (Single Overlap)",
    2: "Unique Optimal Words (Double Overlap)",
}


def selection_heading(tolerance: int) -> str:
    return SELECTION_HEADINGS.get(tolerance, f"Unique Optimal Words ({tolerance} Overlaps)")


def format_letter_distribution(distribution: LetterDistribution) -> List[str]:
    """'Letter Distribution' followed by one 'E: 1056' line per letter."""
    lines = ["Letter Distribution"]
    lines += [f"{letter.upper()}: {len(indices)}" for letter, indices in distribution.items()]
    return lines


def format_selections(selections: Dict[int, List[str]]) -> List[str]:
    lines: List[str] = []
    for tolerance, words in selections.items():
        lines += ["", selection_heading(tolerance)]
        lines += words
    return lines
