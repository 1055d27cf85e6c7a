import pytest

from reading_coach.models import SentenceScore, WordVerdict
from reading_coach.scorer import accuracy_percent, check_word, is_passing, score_sentence


def test_full_match():
    result = score_sentence("the cat sat", "the cat sat")
    assert result.accuracy_percent == 100
    assert [v.is_correct for v in result.word_verdicts] == [True, True, True]
    assert [v.position for v in result.word_verdicts] == [0, 1, 2]


def test_omission():
    result = score_sentence("the sat", "the cat sat")
    assert result.accuracy_percent == 67
    incorrect = [v for v in result.word_verdicts if not v.is_correct]
    assert len(incorrect) == 1
    assert incorrect[0].position == 1
    assert incorrect[0].target_word == "cat"
    assert incorrect[0].spoken_word is None
    assert result.missed_words == ["cat"]


def test_repetition_is_not_penalized():
    assert score_sentence("the the cat sat", "the cat sat").accuracy_percent == 100


@pytest.mark.parametrize("spoken", [
    "um the cat sat",
    "the um cat uh sat",
    "hmm the cat sat oh",
])
def test_fillers_are_ignored(spoken):
    assert score_sentence(spoken, "the cat sat").accuracy_percent == 100


def test_punctuation_and_case_ignored():
    result = score_sentence("The cat sat", "The cat, sat.")
    assert result.accuracy_percent == 100
    assert [v.target_word for v in result.word_verdicts] == ["the", "cat", "sat"]


def test_accented_words_are_kept_whole():
    result = score_sentence("café", "café")
    assert result.accuracy_percent == 100
    assert result.word_verdicts[0].target_word == "café"
    assert result.word_verdicts[0].spoken_word == "café"


def test_wrong_word_is_recorded():
    result = score_sentence("i see big apples", "I see red apples")
    assert result.accuracy_percent == 75
    wrong = result.word_verdicts[2]
    assert wrong.target_word == "red"
    assert wrong.spoken_word == "big"
    assert not wrong.is_correct
    assert result.incorrect_words == ["red"]
    assert result.correct_count == 3


def test_empty_target():
    result = score_sentence("the cat", "")
    assert result == SentenceScore(accuracy_percent=0, word_verdicts=())
    assert score_sentence("the cat", " ?! ").word_verdicts == ()


def test_empty_spoken():
    result = score_sentence("", "the cat sat")
    assert result.accuracy_percent == 0
    assert all(v.spoken_word is None for v in result.word_verdicts)


@pytest.mark.parametrize("spoken,target", [
    ("", "one two three"),
    ("one", "one two three"),
    ("one one one two two three three four", "one two three"),
    ("something else entirely", "a"),
    ("um uh", "the cat sat on the mat"),
])
@pytest.mark.parametrize("strategy", ["greedy", "dp"])
def test_one_verdict_per_target_word(spoken, target, strategy):
    result = score_sentence(spoken, target, strategy=strategy)
    assert len(result.word_verdicts) == len(target.split())


def test_dp_strategy_scores_omission():
    result = score_sentence("the sat", "the cat sat", strategy="dp")
    assert result.accuracy_percent == 67
    assert result.word_verdicts[1].spoken_word is None


def test_unknown_strategy():
    with pytest.raises(ValueError):
        score_sentence("the cat", "the cat", strategy="fastest")


def test_scoring_is_deterministic():
    runs = {score_sentence("the the dog ran", "the dog ran home") for _ in range(5)}
    assert len(runs) == 1


@pytest.mark.parametrize("correct,total,expected", [
    (2, 3, 67),
    (1, 3, 33),
    (1, 8, 13),
    (1, 2, 50),
    (0, 5, 0),
    (5, 5, 100),
    (0, 0, 0),
])
def test_accuracy_rounds_half_up(correct, total, expected):
    assert accuracy_percent(correct, total) == expected


def test_is_passing_uses_threshold():
    perfect = score_sentence("the cat sat", "the cat sat")
    partial = score_sentence("the sat", "the cat sat")
    assert is_passing(perfect)
    assert not is_passing(partial, threshold=80)
    assert is_passing(partial, threshold=60)


def test_check_word():
    verdict = check_word("The word is CAT", "cat")
    assert verdict == WordVerdict(position=0, target_word="cat", spoken_word="the word is cat", is_correct=True)

    missed = check_word("", "cat")
    assert missed.spoken_word is None
    assert not missed.is_correct
    assert missed.is_missed


def test_to_dict_shape():
    data = score_sentence("the sat", "the cat sat").to_dict()
    assert data["accuracy"] == 67
    assert data["word_results"][1] == {"word": "cat", "spoken": None, "correct": False, "position": 1}
