from .word_validator import WordValidator
from .cache import ResultCache

__all__ = ['WordValidator', 'ResultCache']
