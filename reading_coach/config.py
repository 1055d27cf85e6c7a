"""Runtime configuration read from the environment."""
import os

# Sentence attempts at or above this accuracy (percent) count as read correctly
SENTENCE_ACCURACY_THRESHOLD = int(os.getenv("READING_COACH_SENTENCE_THRESHOLD", "80"))

# Free Dictionary API, used as the fallback for words outside the common-word list
DICTIONARY_API_URL = os.getenv(
    "READING_COACH_DICTIONARY_URL", "https://api.dictionaryapi.dev/api/v2/entries/en"
)
DICTIONARY_TIMEOUT = float(os.getenv("READING_COACH_DICTIONARY_TIMEOUT", "5.0"))
