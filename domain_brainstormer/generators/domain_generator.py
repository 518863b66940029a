"""Description-driven domain name generator with quality ranking."""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set

from ..scoring import DomainScorer, DomainSuggestion
from ..utils.word_validator import WordValidator
from .affix_generator import AffixGenerator
from .compound_generator import CompoundGenerator
from .keywords import KeywordExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorOptions:
    max_suggestions: int = 20
    min_score: int = 55


GENERATOR_PRESETS: Dict[str, GeneratorOptions] = {
    'standard': GeneratorOptions(max_suggestions=20, min_score=55),
    'quick': GeneratorOptions(max_suggestions=10, min_score=60),
    'thorough': GeneratorOptions(max_suggestions=50, min_score=50),
}


@dataclass
class GradedSuggestions:
    """Suggestions bucketed by the letter of their grade."""
    premium: List[DomainSuggestion] = field(default_factory=list)
    good: List[DomainSuggestion] = field(default_factory=list)
    acceptable: List[DomainSuggestion] = field(default_factory=list)
    all: List[DomainSuggestion] = field(default_factory=list)


class DomainGenerator:
    """Generates ranked domain name suggestions from a project description."""

    DIRECT_KEYWORD_LIMIT = 8
    DIRECT_MIN_LENGTH = 4
    DIRECT_MAX_LENGTH = 12
    VARIATION_KEYWORD_LIMIT = 5

    BY_GRADE_LIMIT = 100

    def __init__(
        self,
        scorer: Optional[DomainScorer] = None,
        extractor: Optional[KeywordExtractor] = None,
        compound_generator: Optional[CompoundGenerator] = None,
        affix_generator: Optional[AffixGenerator] = None,
        min_length: int = 4,
        max_length: int = 15,
    ):
        self.scorer = scorer or DomainScorer()
        self.extractor = extractor or KeywordExtractor()
        self.compound_generator = compound_generator or CompoundGenerator()
        self.affix_generator = affix_generator or AffixGenerator()
        self.validator = WordValidator(min_length=min_length, max_length=max_length)

    def extract_keywords(self, description: str) -> List[str]:
        return self.extractor.extract(description)

    def generate_candidates(self, keywords: List[str]) -> Set[str]:
        """Run every generation strategy and union the raw candidates."""
        candidates: Set[str] = set()

        for keyword in keywords[:self.DIRECT_KEYWORD_LIMIT]:
            if self.DIRECT_MIN_LENGTH <= len(keyword) <= self.DIRECT_MAX_LENGTH:
                candidates.add(keyword)

        candidates.update(self.compound_generator.generate_compounds(keywords))
        candidates.update(self.affix_generator.generate_with_affixes(keywords))
        candidates.update(self.compound_generator.generate_portmanteaus(keywords))
        candidates.update(self.compound_generator.generate_tech_combos(keywords))

        for keyword in keywords[:self.VARIATION_KEYWORD_LIMIT]:
            candidates.update(self.affix_generator.generate_variations(keyword))

        return candidates

    def generate(
        self,
        description: str,
        options: Optional[GeneratorOptions] = None,
        **overrides,
    ) -> List[DomainSuggestion]:
        """Generate scored suggestions for a description.

        Args:
            description: Free-text description of the project
            options: Limits to apply; defaults to the 'standard' preset
            **overrides: max_suggestions / min_score overriding options

        Raises:
            NoKeywordsError: if the description has no usable keywords
        """
        options = replace(options or GENERATOR_PRESETS['standard'], **overrides)

        keywords = self.extractor.require(description)
        candidates = self.generate_candidates(keywords)

        suggestions = [
            self.scorer.suggest(name)
            for name in self.validator.filter(candidates)
        ]
        suggestions = [s for s in suggestions if s.score >= options.min_score]
        suggestions.sort(key=lambda s: (-s.score, len(s.name), s.name))

        logger.debug(
            "Generated %d candidates from %d keywords, %d above score %d",
            len(candidates), len(keywords), len(suggestions), options.min_score
        )

        return suggestions[:options.max_suggestions]

    def generate_by_grade(self, description: str, options: Optional[GeneratorOptions] = None) -> GradedSuggestions:
        """Generate a wider set and bucket it by grade letter."""
        options = replace(options or GENERATOR_PRESETS['standard'], max_suggestions=self.BY_GRADE_LIMIT)
        suggestions = self.generate(description, options)

        return GradedSuggestions(
            premium=[s for s in suggestions if s.scoring.grade.startswith('A')],
            good=[s for s in suggestions if s.scoring.grade.startswith('B')],
            acceptable=[s for s in suggestions if s.scoring.grade.startswith('C')],
            all=suggestions,
        )
