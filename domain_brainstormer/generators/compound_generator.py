"""Compound and blended word generator for domain names."""

import math
from typing import List, Optional, Sequence, Set

from .keywords import ACTION_WORDS, TECH_TERMS


class CompoundGenerator:
    """Generates compounds, portmanteaus and tech-term combinations from keywords."""

    VOWELS = set('aeiou')

    # How many keywords take part in pairing
    PAIR_FIRST_LIMIT = 4
    PAIR_SECOND_LIMIT = 5

    ACTION_LIMIT = 5
    TECH_KEYWORD_LIMIT = 4
    TECH_TERM_LIMIT = 6

    def __init__(
        self,
        pair_max_length: int = 14,
        combo_max_length: int = 12,
        blend_min_length: int = 5,
        blend_max_length: int = 12,
        action_words: Optional[Sequence[str]] = None,
        tech_terms: Optional[Sequence[str]] = None,
    ):
        self.pair_max_length = pair_max_length
        self.combo_max_length = combo_max_length
        self.blend_min_length = blend_min_length
        self.blend_max_length = blend_max_length
        self.action_words = list(ACTION_WORDS if action_words is None else action_words)
        self.tech_terms = list(TECH_TERMS if tech_terms is None else tech_terms)

    def _pairs(self, keywords: Sequence[str]):
        """Yield (first, second) keyword pairs, i < j, from the head of the list."""
        first_limit = min(len(keywords), self.PAIR_FIRST_LIMIT)
        second_limit = min(len(keywords), self.PAIR_SECOND_LIMIT)
        for i in range(first_limit):
            for j in range(i + 1, second_limit):
                yield keywords[i], keywords[j]

    def _blend_fits(self, blend: str) -> bool:
        return self.blend_min_length <= len(blend) <= self.blend_max_length

    def generate_compounds(self, keywords: Sequence[str]) -> List[str]:
        """Join keyword pairs in both orders, plus keyword + action word."""
        candidates: Set[str] = set()

        for word1, word2 in self._pairs(keywords):
            if len(word1) + len(word2) <= self.pair_max_length:
                candidates.add(word1 + word2)
                candidates.add(word2 + word1)

            for action in self.action_words[:self.ACTION_LIMIT]:
                if len(action) + len(word1) <= self.combo_max_length:
                    candidates.add(action + word1)
                    candidates.add(word1 + action)

        return list(candidates)

    def create_portmanteau(self, word1: str, word2: str) -> List[str]:
        """Blend two words three ways, keeping blends of acceptable length.

        1. Vowel boundary: word1 up to and including its last vowel, then
           word2 from its first vowel.
        2. Overlap: merge where a 2-4 letter ending of word1 equals the start
           of word2.
        3. Fixed ratio: first 60% of word1 plus last 40% of word2.
        """
        blends: List[str] = []

        word1_vowels = [i for i, c in enumerate(word1) if c in self.VOWELS]
        word2_vowels = [i for i, c in enumerate(word2) if c in self.VOWELS]

        if word1_vowels and word2_vowels:
            blend = word1[:word1_vowels[-1] + 1] + word2[word2_vowels[0]:]
            if self._blend_fits(blend):
                blends.append(blend)

        max_overlap = min(4, len(word1) - 2, len(word2) - 2)
        for overlap in range(2, max_overlap + 1):
            if word1[-overlap:] == word2[:overlap]:
                blend = word1 + word2[overlap:]
                if self._blend_fits(blend):
                    blends.append(blend)

        head = math.ceil(len(word1) * 0.6)
        tail = math.floor(len(word2) * 0.4)
        # word2[-0:] would be the whole word
        blend = word1[:head] + (word2[-tail:] if tail else '')
        if self._blend_fits(blend):
            blends.append(blend)

        return blends

    def generate_portmanteaus(self, keywords: Sequence[str]) -> List[str]:
        candidates: Set[str] = set()
        for word1, word2 in self._pairs(keywords):
            candidates.update(self.create_portmanteau(word1, word2))
        return list(candidates)

    def generate_tech_combos(self, keywords: Sequence[str]) -> List[str]:
        """Combine keywords with tech terms in both orders."""
        candidates: Set[str] = set()

        for keyword in keywords[:self.TECH_KEYWORD_LIMIT]:
            for term in self.tech_terms[:self.TECH_TERM_LIMIT]:
                if keyword == term:
                    continue
                if len(keyword) + len(term) <= self.combo_max_length:
                    candidates.add(keyword + term)
                    candidates.add(term + keyword)

        return list(candidates)

    def generate_all(self, keywords: Sequence[str]) -> List[str]:
        """Generate all compound-style candidates."""
        candidates: Set[str] = set()

        candidates.update(self.generate_compounds(keywords))
        candidates.update(self.generate_portmanteaus(keywords))
        candidates.update(self.generate_tech_combos(keywords))

        return list(candidates)
