from .validator import validate_wordlists, pretty_summary
from .io import DATA_DIR, GUESSABLE_PATH, PLAYABLE_PATH, read_lines, load_words

__all__ = [
    "validate_wordlists", "pretty_summary", "read_lines", "load_words",
    "DATA_DIR", "PLAYABLE_PATH", "GUESSABLE_PATH",
]
