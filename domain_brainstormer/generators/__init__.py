from .keywords import KeywordExtractor, NoKeywordsError
from .compound_generator import CompoundGenerator
from .affix_generator import AffixGenerator
from .domain_generator import DomainGenerator, GeneratorOptions, GradedSuggestions, GENERATOR_PRESETS

__all__ = [
    'KeywordExtractor', 'NoKeywordsError', 'CompoundGenerator', 'AffixGenerator',
    'DomainGenerator', 'GeneratorOptions', 'GradedSuggestions', 'GENERATOR_PRESETS'
]
