import pytest
import requests

from reading_coach.spelling import spellcheck
from reading_coach.spelling import COMMON_ENGLISH_WORDS, free_dictionary_lookup, is_valid_english_word, validate_word


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


def _never_called(word):
    raise AssertionError(f"dictionary lookup should not run for {word!r}")


def test_common_words_skip_the_dictionary():
    assert "the" in COMMON_ENGLISH_WORDS
    assert "don't" in COMMON_ENGLISH_WORDS
    assert is_valid_english_word("The", lookup=_never_called)
    assert is_valid_english_word("don't", lookup=_never_called)


def test_single_letters():
    assert is_valid_english_word("a", lookup=_never_called)
    assert is_valid_english_word("I", lookup=_never_called)
    assert not is_valid_english_word("x", lookup=_never_called)


def test_empty_word_is_invalid():
    assert not is_valid_english_word("   ", lookup=_never_called)


def test_uncommon_words_use_the_lookup():
    seen = []

    def lookup(word):
        seen.append(word)
        return word == "zebra"

    assert is_valid_english_word("Zebra", lookup=lookup)
    assert not is_valid_english_word("zebrq", lookup=lookup)
    assert seen == ["zebra", "zebrq"]


def test_validate_word_messages():
    assert validate_word("", lookup=_never_called) == "Please enter a word"
    assert validate_word("cat5", lookup=_never_called) == "Words can only contain letters"
    assert validate_word("cat", lookup=_never_called) is None
    message = validate_word("blorf", lookup=lambda w: False)
    assert message == '"blorf" doesn\'t appear to be a valid English word. Please check the spelling.'


def test_free_dictionary_lookup_found(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(200)

    monkeypatch.setattr(spellcheck.requests, "get", fake_get)
    assert free_dictionary_lookup("zebra")
    assert calls[0].endswith("/zebra")


def test_free_dictionary_lookup_not_found(monkeypatch):
    monkeypatch.setattr(spellcheck.requests, "get", lambda url, timeout: FakeResponse(404))
    assert not free_dictionary_lookup("blorf")


def test_free_dictionary_lookup_server_error_warns(monkeypatch):
    monkeypatch.setattr(spellcheck.requests, "get", lambda url, timeout: FakeResponse(500))
    with pytest.warns(UserWarning):
        assert not free_dictionary_lookup("blorf")


def test_free_dictionary_lookup_fails_open(monkeypatch):
    def unreachable(url, timeout):
        raise requests.exceptions.ConnectionError("no route to host")

    monkeypatch.setattr(spellcheck.requests, "get", unreachable)
    with pytest.warns(UserWarning, match="accepting word"):
        assert free_dictionary_lookup("zebra")
