"""Keyword extraction from free-text project descriptions."""

import re
from typing import List, Optional, Set

STOP_WORDS = {
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'that', 'this', 'is', 'are', 'was', 'were', 'be', 'been',
    'being', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'should', 'could', 'may', 'might', 'can', 'must', 'shall'
}

# Tech vocabulary, in priority order (generators use the head of the list)
TECH_TERMS = [
    'cloud', 'node', 'stack', 'code', 'dev', 'tech', 'digital', 'smart',
    'quick', 'fast', 'auto', 'sync', 'real', 'live', 'instant', 'rapid',
    'data', 'info', 'net', 'web', 'cyber', 'core', 'prime', 'flex'
]

# Verbs that suit SaaS and tooling names
ACTION_WORDS = [
    'build', 'create', 'make', 'share', 'send', 'track', 'manage', 'plan',
    'ship', 'launch', 'boost', 'grow', 'scale', 'connect', 'link', 'sync',
    'flow', 'stream', 'push', 'pull', 'merge', 'split', 'join', 'unite'
]

_STRIP_CHARS = re.compile(r'[^\w\s-]', re.ASCII)
_SPLIT = re.compile(r'[\s-]+')


class NoKeywordsError(ValueError):
    """Raised when a description contains no usable keywords."""

    def __init__(self, description: str):
        super().__init__('Could not extract meaningful keywords from description')
        self.description = description


class KeywordExtractor:
    """Turns a description into an ordered list of candidate keywords."""

    def __init__(
        self,
        stop_words: Optional[Set[str]] = None,
        priority_words: Optional[Set[str]] = None,
        prioritize: bool = True,
    ):
        self.stop_words = STOP_WORDS if stop_words is None else stop_words
        self.priority_words = set(TECH_TERMS) | set(ACTION_WORDS) if priority_words is None else priority_words
        self.prioritize = prioritize

    def tokenize(self, description: str) -> List[str]:
        """Lowercase, strip punctuation and split on whitespace and hyphens."""
        text = _STRIP_CHARS.sub(' ', description.lower())
        return [token for token in _SPLIT.split(text) if token]

    def is_keyword(self, token: str) -> bool:
        return len(token) > 2 and token not in self.stop_words

    def extract(self, description: str) -> List[str]:
        """Extract unique keywords, tech and action words first.

        Order within each group follows first occurrence. No stemming is
        applied, so "teams" stays "teams".
        """
        words = [w for w in self.tokenize(description) if self.is_keyword(w)]

        if self.prioritize:
            prioritized = [w for w in words if w in self.priority_words]
            regular = [w for w in words if w not in self.priority_words]
            words = prioritized + regular

        return list(dict.fromkeys(words))

    def require(self, description: str) -> List[str]:
        """Like extract(), but raise NoKeywordsError when nothing is left."""
        keywords = self.extract(description)
        if not keywords:
            raise NoKeywordsError(description)
        return keywords
