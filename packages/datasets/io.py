from __future__ import annotations
from pathlib import Path
from typing import List

# Bundled sample lists, resolved against the installed package
DATA_DIR = Path(__file__).resolve().parent / "data"
PLAYABLE_PATH = DATA_DIR / "playable_5.txt"
GUESSABLE_PATH = DATA_DIR / "guessable_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    File order is kept: a word's position is its index in the analysis.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]

