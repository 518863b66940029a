"""Word validation and filtering utilities."""

import re

CANDIDATE_PATTERN = re.compile(r'[a-z0-9]+')
DIGITS_ONLY = re.compile(r'[0-9]+')


class WordValidator:
    """Validates candidate names for domain suitability."""

    def __init__(self, min_length: int = 4, max_length: int = 15):
        self.min_length = min_length
        self.max_length = max_length

    def is_valid(self, word: str) -> bool:
        """Check if word passes all validation criteria."""
        if not self._check_length(word):
            return False
        if not self._check_characters(word):
            return False
        if self._is_numeric(word):
            return False
        return True

    def filter(self, words):
        """Yield the words that pass validation, in order."""
        return (w for w in words if self.is_valid(w))

    def _check_length(self, word: str) -> bool:
        return self.min_length <= len(word) <= self.max_length

    def _check_characters(self, word: str) -> bool:
        """Only lowercase ASCII letters and digits."""
        return bool(CANDIDATE_PATTERN.fullmatch(word))

    def _is_numeric(self, word: str) -> bool:
        return bool(DIGITS_ONLY.fullmatch(word))
