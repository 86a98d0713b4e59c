"""
Word-list validator for the opener analysis.

What this module does:
- Validate the pair of input lists: playable_N.txt (words the letter
  distribution is built from) and guessable_N.txt (words that get ranked).
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check the alphabet: every letter used by guessable must occur in playable,
  otherwise ranking would abort on the missing letter.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists(5, "packages/datasets/data/playable_5.txt",
                                "packages/datasets/data/guessable_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (playable, guessable) pair."""
    N: int
    playable: FileReport
    guessable: FileReport
    alphabet_ok: bool
    missing_letters: List[str]   # guessable letters never seen in playable
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(N: int, playable_path: str, guessable_path: str) -> Dict:
    """
    Validate the playable/guessable word lists for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` requires both files present and non-empty, no invalid
        lines, and a consistent alphabet. Duplicates only add an issue.
    """
    issues: List[str] = []

    play_p = Path(playable_path)
    guess_p = Path(guessable_path)

    if not play_p.exists() or not guess_p.exists():
        if not play_p.exists():
            issues.append(f"playable file not found: {playable_path}")
        if not guess_p.exists():
            issues.append(f"guessable file not found: {guessable_path}")
        rep = ValidationReport(
            N=N,
            playable=FileReport(playable_path, play_p.exists(), 0, "", 0, 0),
            guessable=FileReport(guessable_path, guess_p.exists(), 0, "", 0, 0),
            alphabet_ok=False,
            missing_letters=[],
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    playable, play_invalid = _load_and_check(play_p, N)
    guessable, guess_invalid = _load_and_check(guess_p, N)
    play_report = _file_report(play_p, playable, play_invalid)
    guess_report = _file_report(guess_p, guessable, guess_invalid)

    # Alphabet consistency: ranking looks every guessable letter up
    play_letters = set("".join(playable))
    missing = sorted(set("".join(guessable)) - play_letters)
    if missing:
        issues.append(f"guessable uses letters absent from playable: {missing}")

    if play_report.count == 0:
        issues.append("playable file contains 0 valid words")
    if guess_report.count == 0:
        issues.append("guessable file contains 0 valid words")

    if play_invalid:
        issues.append(f"playable has {play_invalid} invalid line(s)")
    if guess_invalid:
        issues.append(f"guessable has {guess_invalid} invalid line(s)")

    if play_report.count != play_report.unique_count:
        issues.append("playable contains duplicate lines")
    if guess_report.count != guess_report.unique_count:
        issues.append("guessable contains duplicate lines")

    passed = (
            not missing
            and play_invalid == 0
            and guess_invalid == 0
            and play_report.count > 0
            and guess_report.count > 0
    )

    rep = ValidationReport(
        N=N,
        playable=play_report,
        guessable=guess_report,
        alphabet_ok=not missing,
        missing_letters=missing,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        N=5 | playable=2315 (uniq=2315, sha=abc123...) | guessable=12972 (uniq=12972, sha=def456...) | alphabet=True | OK
    """
    a = report["playable"]
    b = report["guessable"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | playable={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guessable={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| alphabet={report['alphabet_ok']} | {status}"
    )
