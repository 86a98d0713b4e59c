"""
CSV export of an analysis.

Files (under the output directory):
  - letter-distribution.csv : Letter,Occurrences  (uppercase letter, word count)
  - optimal-words.csv       : Word,Rank           (ranked order)
  - unique-optimal-words.csv: one section per tolerance, 'heading,' then
                              'word,' rows, sections separated by a blank line

Each file is written once: if it already exists it is left untouched.
Creation uses exclusive mode ("x"), so check and create are one step.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from packages.analysis import LetterDistribution, RankedWords
from .console import selection_heading

log = logging.getLogger(__name__)

OUT_DIR = "out"
LETTER_DISTRIBUTION_FILE = "letter-distribution.csv"
OPTIMAL_WORDS_FILE = "optimal-words.csv"
UNIQUE_OPTIMAL_WORDS_FILE = "unique-optimal-words.csv"


def write_csv_if_absent(path: Path | str, rows: Iterable[Sequence], headings: Optional[Sequence[str]] = None) -> Optional[str]:
    """
    Create `path` and write `headings` (if any) plus `rows` as CSV.

    Returns:
      The path written, or None when the file already existed (skipped,
      contents unchanged).
    """
    p = Path(path)
    try:
        f = p.open("x", newline="", encoding="utf-8")
    except FileExistsError:
        log.info("skipping %s: already exists", p)
        return None

    with f:
        w = csv.writer(f, lineterminator="\n")
        if headings:
            w.writerow(headings)
        w.writerows(rows)

    return str(p)


def export_letter_distribution(distribution: LetterDistribution, outdir: Path | str = OUT_DIR) -> Optional[str]:
    rows = [(letter.upper(), len(indices)) for letter, indices in distribution.items()]
    return write_csv_if_absent(Path(outdir) / LETTER_DISTRIBUTION_FILE, rows, ["Letter", "Occurrences"])


def export_optimal_words(ranked: RankedWords, outdir: Path | str = OUT_DIR) -> Optional[str]:
    return write_csv_if_absent(Path(outdir) / OPTIMAL_WORDS_FILE, ranked.items(), ["Word", "Rank"])


def export_unique_optimal_words(selections: Dict[int, List[str]], outdir: Path | str = OUT_DIR) -> Optional[str]:
    rows: List[Sequence[str]] = []
    for i, (tolerance, words) in enumerate(selections.items()):
        if i > 0:
            rows.append([])  # blank separator line
        rows.append([selection_heading(tolerance), ""])
        rows += [[word, ""] for word in words]
    return write_csv_if_absent(Path(outdir) / UNIQUE_OPTIMAL_WORDS_FILE, rows)


def export_all(result, outdir: Path | str = OUT_DIR) -> List[str]:
    """
    Write all three files for an AnalysisResult. Returns the paths actually
    written (existing files are skipped).
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    written = [
        export_letter_distribution(result.distribution, outdir),
        export_optimal_words(result.ranked, outdir),
        export_unique_optimal_words(result.selections, outdir),
    ]
    return [p for p in written if p is not None]
