import pytest
from packages.analysis import (
    AlphabetError, build_distribution, check_alphabet, coverage_score, rank_words,
)

PLAYABLE = ["cat", "dog", "ant"]


def test_coverage_example_scenario():
    dist = build_distribution(PLAYABLE)
    assert coverage_score("cat", dist) == 2
    assert rank_words(["cat"], dist) == {"cat": 2}


def test_shared_indices_counted_once():
    dist = build_distribution(["ab", "ab", "cd"])
    # 'a' and 'b' both reach words 0 and 1
    assert coverage_score("ab", dist) == 2
    assert coverage_score("ac", dist) == 3


def test_ranking_order_and_stable_ties():
    dist = build_distribution(PLAYABLE)
    ranked = rank_words(["dog", "god", "tan", "cat", "nag"], dist)
    assert list(ranked.items()) == [
        ("nag", 3), ("tan", 2), ("cat", 2), ("dog", 1), ("god", 1),
    ]


def test_duplicate_word_keeps_single_entry():
    dist = build_distribution(PLAYABLE)
    ranked = rank_words(["dog", "cat", "dog"], dist)
    assert list(ranked) == ["cat", "dog"]


@pytest.mark.parametrize("guessable", [
    ["crane", "raise", "stare", "trace", "cared", "acres"],
    ["arise", "aside", "ideas"],
])
def test_ranking_bound_and_ordering(guessable):
    playable = ["crane", "raise", "stare", "trace", "cared", "aside", "ideas"]
    dist = build_distribution(playable)
    ranked = rank_words(guessable, dist)
    scores = list(ranked.values())
    assert all(s <= len(playable) for s in scores)
    assert scores == sorted(scores, reverse=True)


def test_missing_letter_fails_loudly():
    dist = build_distribution(PLAYABLE)
    with pytest.raises(AlphabetError) as exc:
        rank_words(["cat", "zap"], dist)
    assert exc.value.word == "zap"
    assert exc.value.letter == "z"
    assert isinstance(exc.value, ValueError)


def test_check_alphabet_lists_missing_letters():
    dist = build_distribution(PLAYABLE)
    assert check_alphabet(["cat", "tag"], dist) == []
    assert check_alphabet(["zap", "quiz"], dist) == ["i", "p", "q", "u", "z"]
