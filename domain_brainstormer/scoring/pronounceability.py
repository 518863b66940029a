"""Pronounceability scoring based on vowel/consonant structure."""

import re


class PronounceabilityScorer:
    """Scores how easy a word is to say out loud, from 0 to 100."""

    VOWELS = set('aeiouy')
    CONSONANTS = set('bcdfghjklmnpqrstvwxz')

    GOOD_PATTERNS = [
        re.compile(r'^[bcdfghjklmnpqrstvwxz][aeiou]', re.IGNORECASE),  # consonant-vowel start
        re.compile(r'[aeiou][bcdfghjklmnpqrstvwxz]$', re.IGNORECASE),  # vowel-consonant end
        re.compile(r'[aeiou]{2}', re.IGNORECASE),                      # 'ea', 'oo'
    ]

    BAD_PATTERNS = [
        re.compile(r'[bcdfghjklmnpqrstvwxz]{4,}', re.IGNORECASE),
        re.compile(r'[^aeiou]{5,}', re.IGNORECASE),
        re.compile(r'^[bcdfghjklmnpqrstvwxz]{3}', re.IGNORECASE),
    ]

    VOWEL_CLUSTER = re.compile(r'[aeiouy]+', re.IGNORECASE)

    PRONOUNCEABLE_THRESHOLD = 60

    def vowel_consonant_ratio(self, word: str) -> float:
        """Ratio of vowels to consonants; 0 when the word has no consonants."""
        vowel_count = 0
        consonant_count = 0

        for c in word.lower():
            if c in self.VOWELS:
                vowel_count += 1
            elif c in self.CONSONANTS:
                consonant_count += 1

        if consonant_count == 0:
            return 0.0
        return vowel_count / consonant_count

    def has_good_pattern(self, word: str) -> bool:
        """At most 3 consonants and at most 2 vowels in a row."""
        max_consonants = 0
        max_vowels = 0
        current_consonants = 0
        current_vowels = 0

        for c in word.lower():
            if c in self.VOWELS:
                current_vowels += 1
                max_consonants = max(max_consonants, current_consonants)
                current_consonants = 0
            elif c in self.CONSONANTS:
                current_consonants += 1
                max_vowels = max(max_vowels, current_vowels)
                current_vowels = 0

        max_consonants = max(max_consonants, current_consonants)
        max_vowels = max(max_vowels, current_vowels)

        return max_consonants <= 3 and max_vowels <= 2

    def has_syllable_structure(self, word: str) -> bool:
        """Check the vowel-cluster count is plausible for the word length."""
        syllables = len(self.VOWEL_CLUSTER.findall(word))
        if syllables == 0:
            return False

        if 6 <= len(word) <= 12:
            return 2 <= syllables <= 4
        return 1 <= syllables <= 3

    def score(self, word: str) -> int:
        """Score pronounceability from 0-100."""
        if len(word) < 3:
            return 20
        if len(word) > 20:
            return 10

        score = 50

        ratio = self.vowel_consonant_ratio(word)
        if 0.4 <= ratio <= 0.8:
            score += 20
        elif 0.3 <= ratio <= 1.0:
            score += 10
        else:
            score -= 15

        if self.has_good_pattern(word):
            score += 15
        else:
            score -= 20

        if self.has_syllable_structure(word):
            score += 15

        for pattern in self.GOOD_PATTERNS:
            if pattern.search(word):
                score += 5

        # Penalties stack: each matched pattern counts separately
        for pattern in self.BAD_PATTERNS:
            if pattern.search(word):
                score -= 25

        if 6 <= len(word) <= 10:
            score += 10
        elif 11 <= len(word) <= 12:
            score += 5

        return max(0, min(100, score))

    def is_pronounceable(self, word: str) -> bool:
        return self.score(word) >= self.PRONOUNCEABLE_THRESHOLD
