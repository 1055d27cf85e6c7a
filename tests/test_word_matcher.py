import pytest

from reading_coach.matching import is_match, levenshtein, match_threshold, phonetic_key


@pytest.mark.parametrize("a,b,expected", [
    ("", "", 0),
    ("cat", "cat", 0),
    ("", "abc", 3),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("ab", "ba", 2),
])
def test_levenshtein_classic_values(a, b, expected):
    assert levenshtein(a, b) == expected
    assert levenshtein(b, a) == expected


def test_levenshtein_triangle_inequality():
    words = ["cat", "cut", "cart", "scat", ""]
    for a in words:
        for b in words:
            for c in words:
                assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


@pytest.mark.parametrize("word", ["a", "cat", "elephant", "don't", "butterfly"])
def test_word_matches_itself(word):
    assert is_match(word, word)


def test_normalizes_case_whitespace_and_punctuation():
    assert is_match("  CAT! ", "cat")
    assert is_match("Dog.", "dog")


def test_target_inside_spoken_phrase():
    assert is_match("the word is cat", "cat")


def test_threshold_depends_on_target_length():
    assert match_threshold("cat") == 1
    assert match_threshold("a") == 1
    assert match_threshold("plant") == 2


def test_short_target_boundary():
    assert levenshtein("cut", "cat") == 1
    assert is_match("cut", "cat")
    assert levenshtein("cub", "cat") == 2
    assert not is_match("cub", "cat")


def test_long_target_boundary():
    assert levenshtein("blank", "plant") == 2
    assert is_match("blank", "plant")
    assert levenshtein("glance", "plant") == 3
    assert not is_match("glance", "plant")


def test_distance_checked_against_each_spoken_word():
    # the whole phrase is far from the target, one of its words is close
    assert is_match("i said elefant", "elephant")


def test_phonetic_substitution_rescues_large_edit_distance():
    assert levenshtein("fum", "thumb") == 3
    assert phonetic_key("thumb") == phonetic_key("fum")
    assert is_match("fum", "thumb")


def test_empty_input():
    assert is_match("", "")
    assert not is_match("", "cat")
    assert not is_match("cat", "")
    # a one-letter target is within one edit of nothing at all
    assert is_match("", "a")


def test_unrelated_words_do_not_match():
    assert not is_match("dog", "banana")
    assert not is_match("big", "red")


def test_matching_is_deterministic():
    results = {is_match("wabbit", "rabbit") for _ in range(5)}
    assert results == {True}
