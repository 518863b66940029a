"""Prefix, suffix and spelling-variation generator for domain names."""

import re
from typing import List, Optional, Sequence, Set


class AffixGenerator:
    """Generates keyword variations with brand-friendly prefixes and suffixes."""

    PREFIXES = [
        'get', 'try', 'use', 'my', 'go', 'the', 'app', 'hey', 'do', 'be',
        'one', 'pro', 'new', 'now', 'next', 'best', 'top', 'super', 'ultra', 'mega'
    ]

    SUFFIXES = [
        'app', 'hq', 'hub', 'labs', 'dev', 'pro', 'box', 'kit', 'io', 'ly',
        'base', 'zone', 'spot', 'space', 'place', 'cloud', 'ware', 'tech',
        'flow', 'wave', 'sync', 'link', 'verse', 'ify', 'able', 'ful'
    ]

    KEYWORD_LIMIT = 6
    PREFIX_LIMIT = 10
    SUFFIX_LIMIT = 12

    _LAST_VOWEL = re.compile(r'[aeiou]([^aeiou]*)$')

    def __init__(
        self,
        max_length: int = 12,
        prefixes: Optional[Sequence[str]] = None,
        suffixes: Optional[Sequence[str]] = None,
    ):
        self.max_length = max_length
        self.prefixes = list(self.PREFIXES if prefixes is None else prefixes)
        self.suffixes = list(self.SUFFIXES if suffixes is None else suffixes)

    def generate_with_affixes(self, keywords: Sequence[str]) -> List[str]:
        """Attach prefixes and suffixes to the leading keywords."""
        candidates: Set[str] = set()

        for keyword in keywords[:self.KEYWORD_LIMIT]:
            for prefix in self.prefixes[:self.PREFIX_LIMIT]:
                if len(prefix) + len(keyword) <= self.max_length:
                    candidates.add(prefix + keyword)

            for suffix in self.suffixes[:self.SUFFIX_LIMIT]:
                if len(keyword) + len(suffix) <= self.max_length:
                    candidates.add(keyword + suffix)

        return list(candidates)

    def drop_last_vowel(self, word: str) -> Optional[str]:
        """Remove the last vowel of a long word, e.g. 'manager' -> 'managr'."""
        if len(word) < 6:
            return None

        vowel_count = sum(1 for c in word if c in 'aeiou')
        if vowel_count < 2:
            return None

        shortened = self._LAST_VOWEL.sub(r'\1', word, count=1)
        if len(shortened) < 5:
            return None
        return shortened

    def generate_variations(self, word: str) -> List[str]:
        """Spelling variations of a single keyword, the keyword included."""
        variations = [word]

        shortened = self.drop_last_vowel(word)
        if shortened:
            variations.append(shortened)

        if 4 <= len(word) <= 8:
            variations.append(word + 'ify')

        if 4 <= len(word) <= 7:
            variations.append(word + 'ly')

        return variations
