from .pronounceability import PronounceabilityScorer
from .scorer import DomainScorer, DomainSuggestion, ScoreBreakdown, ScoringResult

__all__ = ['PronounceabilityScorer', 'DomainScorer', 'DomainSuggestion', 'ScoreBreakdown', 'ScoringResult']
