# apps/cli/run.py
"""
CLI entry point for the opener analysis.

This script:
  1) Validates the word lists (prints counts + SHA, checks the guessable
     alphabet is covered by the playable list).
  2) Builds the letter distribution, ranks the guessable words by coverage
     and selects near-disjoint openers at overlap tolerance 0, 1 and 2.
  3) Prints the distribution and the three selections, then writes:
       - out/letter-distribution.csv
       - out/optimal-words.csv
       - out/unique-optimal-words.csv
     Files that already exist are left untouched.

Every flag has a default, so `python -m apps.cli.run` runs with no arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.datasets import GUESSABLE_PATH, PLAYABLE_PATH, load_words, validate_wordlists, pretty_summary
from packages.pipeline import run_analysis
from packages.reporting import OUT_DIR, export_all, format_letter_distribution, format_selections

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-openers — rank opening guesses by letter coverage")
    ap.add_argument("--playable", default=str(PLAYABLE_PATH),
                    help="path to the playable list (letter distribution source)")
    ap.add_argument("--guessable", default=str(GUESSABLE_PATH),
                    help="path to the guessable list (words to rank)")
    ap.add_argument("--N", type=int, default=5, help="word length checked by the validator")
    ap.add_argument("--outdir", default=OUT_DIR, help="directory for the CSV files")
    ap.add_argument("--strict", action="store_true",
                    help="abort before computing if the word lists fail validation")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="Show a progress bar while ranking (auto=bar when stderr is a terminal)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    """
    Parse args, validate the lists, run the analysis, print and export.
    Returns the process exit code.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if args.verbose else logging.INFO)

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.N, args.playable, args.guessable)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("word lists: %s", issue)
    if args.strict and not rep["passed"]:
        log.error("validation failed; fix the word lists before running")
        return 2

    # 2) Load lists into memory (lowercased, no blanks, file order kept)
    playable = load_words(args.playable)
    guessable = load_words(args.guessable)

    progress = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())

    # 3) Compute (AlphabetError propagates: inconsistent lists abort the run)
    result = run_analysis(playable, guessable, progress=progress)

    # 4) Report
    for line in format_letter_distribution(result.distribution):
        print(line)
    for line in format_selections(result.selections):
        print(line)

    for path in export_all(result, args.outdir):
        print(f"Wrote: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
