from pathlib import Path
import pytest
from packages.datasets import load_words, read_lines, validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    play = tmp_path / "playable_5.txt"
    guess = tmp_path / "guessable_5.txt"
    _write(play, ["crane", "raise", "stare"])
    _write(guess, ["crane", "raise", "stare", "trace", "rates", "aster"])

    rep = validate_wordlists(5, str(play), str(guess))
    assert rep["passed"] is True
    assert rep["alphabet_ok"] is True
    assert rep["guessable"]["count"] == 6
    s = pretty_summary(rep)
    assert "N=5" in s and "alphabet=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_invalid_lines(tmp_path: Path):
    play = tmp_path / "playable_6.txt"
    guess = tmp_path / "guessable_6.txt"
    # 'crane' is too short for N=6, '???' has bad chars, 'RAISER' is not lowercase
    play.write_text("raiser\ncrane\n???\nRAISER\n", encoding="utf-8")
    guess.write_text("raiser\nsierra\n", encoding="utf-8")

    rep = validate_wordlists(6, str(play), str(guess))
    assert rep["passed"] is False
    assert rep["playable"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_alphabet_violation(tmp_path: Path):
    play = tmp_path / "playable_5.txt"
    guess = tmp_path / "guessable_5.txt"
    _write(play, ["crane", "stare"])
    _write(guess, ["crane", "jazzy"])

    rep = validate_wordlists(5, str(play), str(guess))
    assert rep["passed"] is False
    assert rep["alphabet_ok"] is False
    assert rep["missing_letters"] == ["j", "y", "z"]


def test_validate_wordlists_duplicates_are_reported_not_fatal(tmp_path: Path):
    play = tmp_path / "playable_5.txt"
    guess = tmp_path / "guessable_5.txt"
    _write(play, ["crane", "crane"])
    _write(guess, ["crane"])

    rep = validate_wordlists(5, str(play), str(guess))
    assert rep["passed"] is True
    assert "playable contains duplicate lines" in rep["issues"]


def test_validate_wordlists_missing_file(tmp_path: Path):
    guess = tmp_path / "guessable_5.txt"
    _write(guess, ["crane"])

    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(guess))
    assert rep["passed"] is False
    assert rep["playable"]["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_words_normalizes_and_keeps_order(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\r\n\n  stare \nRAISE\n", encoding="utf-8")
    assert load_words(p) == ["crane", "stare", "raise"]
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")
