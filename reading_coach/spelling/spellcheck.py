"""Word validity checks for words added to a child's practice list."""
import re
import warnings
from typing import Callable, Optional
from urllib.parse import quote

import requests

from ..config import DICTIONARY_API_URL, DICTIONARY_TIMEOUT
from .common_words import COMMON_ENGLISH_WORDS

# Lookup capability: returns True if the dictionary knows the word
DictionaryLookup = Callable[[str], bool]

_LETTERS_ONLY = re.compile(r"^[a-z']+$")
_SINGLE_LETTER_WORDS = {"a", "i"}


def free_dictionary_lookup(word: str) -> bool:
    """
    Look the word up in the Free Dictionary API.

    Fails open: if the service cannot be reached the word is accepted, so a
    dictionary outage never blocks a parent from adding a word.

    Args:
        word: Normalized word to look up.

    Returns:
        True if the service knows the word (HTTP 200) or is unreachable.
    """
    try:
        response = requests.get(
            f"{DICTIONARY_API_URL}/{quote(word)}",
            timeout=DICTIONARY_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        warnings.warn(f"Dictionary lookup failed for {word!r}, accepting word: {e}")
        return True

    if response.status_code == 200:
        return True
    if response.status_code != 404:
        warnings.warn(f"Dictionary service returned {response.status_code} for {word!r}")
    return False


def is_valid_english_word(word: str, lookup: DictionaryLookup = free_dictionary_lookup) -> bool:
    """
    Check a word against the common-word list, then the dictionary lookup.

    Args:
        word: The word to check (any case).
        lookup: Dictionary capability used for words outside the common list.

    Returns:
        True if the word is accepted.
    """
    normalized = word.lower().strip()
    if not normalized:
        return False

    if normalized in COMMON_ENGLISH_WORDS:
        return True

    if len(normalized) == 1:
        return normalized in _SINGLE_LETTER_WORDS

    return lookup(normalized)


def validate_word(word: str, lookup: DictionaryLookup = free_dictionary_lookup) -> Optional[str]:
    """
    Validate a word before it is added to a practice list.

    Returns:
        None if the word is valid, otherwise a message to show the parent.
    """
    normalized = word.lower().strip()

    if not normalized:
        return "Please enter a word"

    if not _LETTERS_ONLY.match(normalized):
        return "Words can only contain letters"

    if not is_valid_english_word(normalized, lookup=lookup):
        return f'"{word}" doesn\'t appear to be a valid English word. Please check the spelling.'

    return None
