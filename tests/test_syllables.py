import pytest

from reading_coach.syllables import format_syllables, is_consonant, is_vowel, normalize_word, syllabify


@pytest.mark.parametrize("word,expected", [
    ("cat", ["cat"]),
    ("tree", ["tree"]),
    ("strength", ["strength"]),
    ("rabbit", ["rab", "bit"]),
    ("happy", ["hap", "py"]),
    ("open", ["o", "pen"]),
    ("about", ["a", "bout"]),
    ("banana", ["ba", "na", "na"]),
    ("rainbow", ["rainbow"]),
    ("mountain", ["mountain"]),
    ("beautiful", ["beau", "ti", "ful"]),
    ("children", ["chil", "dren"]),
    ("jumping", ["jum", "ping"]),
    ("elephant", ["e", "le", "phant"]),
    ("butterfly", ["but", "ter", "fly"]),
])
def test_syllabify_examples(word, expected):
    assert syllabify(word) == expected


def test_syllabify_lowercases():
    assert syllabify("Rabbit") == ["rab", "bit"]
    assert syllabify("  CAT ") == ["cat"]


@pytest.mark.parametrize("word", [
    "rabbit", "Elephant", "butterfly", "strength", "rhythm", "children",
    "yellow", "dinosaur", "playground", "don't", "understanding", "queen",
    "a", "spaghetti", "xylophone", "beautiful",
])
def test_syllables_rebuild_the_word(word):
    syllables = syllabify(word)
    assert len(syllables) >= 1
    assert "".join(syllables) == word.lower()
    assert all(syllables)


@pytest.mark.parametrize("word", ["beautiful", "understanding", "dinosaur", "spaghetti"])
def test_every_syllable_of_a_split_word_has_a_vowel(word):
    syllables = syllabify(word)
    assert len(syllables) > 1
    assert all(any(is_vowel(c) for c in s) for s in syllables)


def test_syllabify_is_deterministic():
    assert syllabify("butterfly") == syllabify("butterfly")


def test_letter_classes():
    assert is_vowel("y")
    assert is_vowel("E")
    assert is_consonant("b")
    assert not is_consonant("a")
    assert not is_consonant("'")


def test_format_syllables():
    assert format_syllables(["rab", "bit"]) == "rab • bit"
    assert format_syllables(["rab", "bit"], separator="-") == "rab-bit"


def test_normalize_word():
    assert normalize_word("  Don't! ") == "don't"
    assert normalize_word("Cat3") == "cat"
    assert normalize_word("123") == ""
