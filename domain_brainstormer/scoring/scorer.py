"""Domain scoring system - weighted quality score and letter grade.

The sub-scores are heuristics over the name string alone. They are not
validated against real-world domain success data; use them as a guide.
"""

import re
from dataclasses import dataclass
from typing import Dict, Any, Iterable, List, Tuple

from .pronounceability import PronounceabilityScorer


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor sub-scores, each in [0, 100]."""
    pronounceability: int
    length: int
    brandability: int
    memorability: int
    typing_ease: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'pronounceability': self.pronounceability,
            'length': self.length,
            'brandability': self.brandability,
            'memorability': self.memorability,
            'typingEase': self.typing_ease,
        }


@dataclass(frozen=True)
class ScoringResult:
    """Overall score, grade and the breakdown it was computed from."""
    overall: int
    grade: str
    breakdown: ScoreBreakdown

    def to_dict(self) -> Dict[str, Any]:
        return {
            'overall': self.overall,
            'grade': self.grade,
            'breakdown': self.breakdown.to_dict(),
        }


@dataclass(frozen=True)
class DomainSuggestion:
    """A scored candidate name."""
    name: str
    score: int
    scoring: ScoringResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'score': self.score,
            'scoring': self.scoring.to_dict(),
        }


class DomainScorer:
    """Scores names on pronounceability, length, brandability, memorability and typing ease."""

    WEIGHTS = {
        'pronounceability': 0.30,
        'length': 0.25,
        'brandability': 0.20,
        'memorability': 0.15,
        'typing_ease': 0.10,
    }

    # Lower bound of each grade, highest first
    GRADES: List[Tuple[int, str]] = [
        (95, 'A+'),
        (90, 'A'),
        (85, 'A-'),
        (80, 'B+'),
        (75, 'B'),
        (70, 'B-'),
        (65, 'C+'),
        (60, 'C'),
        (55, 'C-'),
        (50, 'D'),
    ]
    FAILING_GRADE = 'F'

    BRANDABLE_SUFFIXES = ('ify', 'ly', 'io', 'app', 'hub', 'kit', 'box', 'base', 'flow')
    MEMORABLE_ENDINGS = re.compile(r'(ing|er|ly|ed|ify)$')

    AWKWARD_BIGRAMS = ('qz', 'xz', 'zx', 'qx')

    LEFT_HAND = set('qwertasdfgzxcvb')
    RIGHT_HAND = set('yuiophjklnm')

    def __init__(self):
        self.pronounceability_scorer = PronounceabilityScorer()

    def score_pronounceability(self, name: str) -> int:
        return self.pronounceability_scorer.score(name)

    def score_length(self, name: str) -> int:
        """Score based on length - 6 to 8 characters is the sweet spot."""
        length = len(name)

        if 6 <= length <= 8:
            return 100
        elif length in (9, 10):
            return 90
        elif length in (5, 11):
            return 75
        elif length in (4, 12):
            return 60
        elif length == 13:
            return 45
        elif length == 14:
            return 30
        elif length >= 15:
            return 20
        else:  # 3 or less
            return 40

    def score_brandability(self, name: str) -> int:
        """Score how much the name looks like a product brand."""
        score = 50

        if name.endswith(self.BRANDABLE_SUFFIXES):
            score += 20

        if name == name.lower():
            score += 10

        if name and len(set(name)) / len(name) >= 0.6:
            score += 15

        if re.search(r'\d', name):
            score -= 20

        if '-' in name:
            score -= 15

        return max(0, min(100, score))

    def score_memorability(self, name: str) -> int:
        """Score memorability - some repetition helps, too much hurts."""
        if re.fullmatch(r'(.)\1+', name):
            return 0

        score = 50

        if re.search(r'(.)\1', name):
            score += 15

        if re.search(r'(.)\1{2,}', name):
            score -= 25

        if self.MEMORABLE_ENDINGS.search(name):
            score += 15

        return max(0, min(100, score))

    def score_typing_ease(self, name: str) -> int:
        """Score typing ease from hand alternation and awkward key pairs."""
        score = 70
        name_lower = name.lower()

        alternations = 0
        last_hand = None
        for c in name_lower:
            if c in self.LEFT_HAND:
                hand = 'left'
            elif c in self.RIGHT_HAND:
                hand = 'right'
            else:
                hand = None
            if hand and last_hand and hand != last_hand:
                alternations += 1
            last_hand = hand

        alternation_ratio = alternations / max(1, len(name) - 1)
        if alternation_ratio >= 0.5:
            score += 20
        elif alternation_ratio >= 0.3:
            score += 10

        if any(bigram in name_lower for bigram in self.AWKWARD_BIGRAMS):
            score -= 30

        return max(0, min(100, score))

    def get_grade(self, score: float) -> str:
        """Convert an overall score to a letter grade."""
        for threshold, grade in self.GRADES:
            if score >= threshold:
                return grade
        return self.FAILING_GRADE

    def score(self, name: str) -> ScoringResult:
        """Score a name on all factors."""
        breakdown = ScoreBreakdown(
            pronounceability=self.score_pronounceability(name),
            length=self.score_length(name),
            brandability=self.score_brandability(name),
            memorability=self.score_memorability(name),
            typing_ease=self.score_typing_ease(name),
        )

        total = sum(getattr(breakdown, factor) * weight for factor, weight in self.WEIGHTS.items())
        # Round half up
        overall = max(0, min(100, int(total + 0.5)))

        return ScoringResult(overall=overall, grade=self.get_grade(overall), breakdown=breakdown)

    def suggest(self, name: str) -> DomainSuggestion:
        scoring = self.score(name)
        return DomainSuggestion(name=name, score=scoring.overall, scoring=scoring)

    def rank_domains(self, names: Iterable[str], min_score: int = 50) -> List[DomainSuggestion]:
        """Score names, drop those below min_score and sort best first."""
        suggestions = [self.suggest(name) for name in names]
        ranked = [s for s in suggestions if s.score >= min_score]
        ranked.sort(key=lambda s: s.score, reverse=True)
        return ranked
