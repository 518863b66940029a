"""End-to-end search: generate names, check availability, merge and summarise."""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from .checkers import AvailabilityService, DomainResult
from .checkers.availability_service import ProgressCallback, normalize_tld
from .config import Settings
from .generators import DomainGenerator, GeneratorOptions
from .scoring import DomainSuggestion
from .utils.cache import ResultCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPreset:
    generator: GeneratorOptions
    tlds: Optional[List[str]] = None
    max_concurrent: Optional[int] = None


SEARCH_PRESETS: Dict[str, SearchPreset] = {
    'standard': SearchPreset(generator=GeneratorOptions(max_suggestions=20, min_score=55)),
    'quick': SearchPreset(
        generator=GeneratorOptions(max_suggestions=10, min_score=60),
        tlds=['.com', '.io', '.dev'],
        max_concurrent=5,
    ),
}


@dataclass
class SearchResult:
    """A suggestion joined with the availability of one of its domains."""
    name: str
    tld: str
    score: int
    suggestion: DomainSuggestion
    availability: DomainResult

    @property
    def domain(self) -> str:
        return self.availability.domain

    def to_dict(self) -> Dict[str, Any]:
        data = self.availability.to_dict()
        data.update({
            'name': self.name,
            'tld': self.tld,
            'score': self.score,
            'scoring': self.suggestion.scoring.to_dict(),
        })
        return data


@dataclass
class SearchSummary:
    total_checked: int
    available: int
    registered: int
    unknown: int
    average_score: int
    duration: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_checked': self.total_checked,
            'available': self.available,
            'registered': self.registered,
            'unknown': self.unknown,
            'average_score': self.average_score,
            'duration': round(self.duration, 2),
        }


@dataclass
class SearchResults:
    query: str
    suggestions: List[DomainSuggestion]
    results: List[SearchResult]
    summary: SearchSummary
    timestamp: datetime = field(default_factory=datetime.now)

    def grouped(self) -> Dict[str, List[SearchResult]]:
        return {
            'available': [r for r in self.results if r.availability.available is True],
            'registered': [r for r in self.results if r.availability.available is False],
            'unknown': [r for r in self.results if r.availability.available is None],
        }


def merge_results(suggestions: Sequence[DomainSuggestion], tlds: Sequence[str],
                  availability: Sequence[DomainResult]) -> List[SearchResult]:
    """Pair each availability result with its suggestion, positionally.

    availability must be in the name-major order produced by
    AvailabilityService.check_availability.
    """
    normalized = [normalize_tld(t) for t in tlds]
    expected = len(suggestions) * len(normalized)
    if len(availability) != expected:
        raise ValueError(f"Expected {expected} availability results, got {len(availability)}")

    merged = []
    for index, result in enumerate(availability):
        suggestion = suggestions[index // len(normalized)]
        merged.append(SearchResult(
            name=suggestion.name,
            tld=normalized[index % len(normalized)],
            score=suggestion.score,
            suggestion=suggestion,
            availability=result,
        ))
    return merged


def build_availability_service(settings: Settings) -> AvailabilityService:
    """Create an AvailabilityService from loaded settings."""
    cache = None
    if settings.cache.enabled:
        cache = ResultCache(
            cache_file=settings.cache.file,
            ttl=settings.cache.ttl,
            flush_every=settings.cache.flush_every,
        )
    return AvailabilityService(
        max_concurrent=settings.checker.max_concurrent,
        timeout=settings.checker.timeout,
        max_retries=settings.checker.max_retries,
        retry_delay=settings.checker.retry_delay,
        batch_delay=settings.checker.batch_delay,
        use_cache=settings.cache.enabled,
        rdap_servers=settings.checker.rdap_servers,
        cache=cache,
    )


class DomainSearchService:
    """Runs the generate -> check -> merge workflow."""

    def __init__(self, generator: Optional[DomainGenerator] = None,
                 checker: Optional[AvailabilityService] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.generator = generator or DomainGenerator()
        self.checker = checker or self._build_checker(self.settings)

    @staticmethod
    def _build_checker(settings: Settings) -> AvailabilityService:
        return build_availability_service(settings)

    def search(
        self,
        description: str,
        tlds: Optional[Sequence[str]] = None,
        options: Optional[GeneratorOptions] = None,
        preset: str = 'standard',
        progress_callback: Optional[ProgressCallback] = None,
    ) -> SearchResults:
        """Generate suggestions for a description and check them under each TLD.

        Raises:
            NoKeywordsError: if the description has no usable keywords
        """
        search_preset = SEARCH_PRESETS[preset]
        start = time.monotonic()

        if options is None:
            if preset == 'standard':
                options = GeneratorOptions(
                    max_suggestions=self.settings.generator.max_suggestions,
                    min_score=self.settings.generator.min_score,
                )
            else:
                options = search_preset.generator
        tlds = list(tlds or search_preset.tlds or self.settings.tlds)

        logger.info("Starting domain search for %r", description)
        suggestions = self.generator.generate(description, options)
        logger.info("Generated %d suggestions", len(suggestions))

        checker = self.checker
        default_concurrency = checker.max_concurrent
        if search_preset.max_concurrent:
            checker.max_concurrent = search_preset.max_concurrent

        names = [s.name for s in suggestions]
        try:
            availability = checker.check_availability(names, tlds, progress_callback)
        finally:
            checker.max_concurrent = default_concurrency
        results = merge_results(suggestions, tlds, availability)

        groups = AvailabilityService.group_by_status(availability)
        average = round(sum(s.score for s in suggestions) / len(suggestions)) if suggestions else 0
        summary = SearchSummary(
            total_checked=len(results),
            available=len(groups['available']),
            registered=len(groups['registered']),
            unknown=len(groups['unknown']),
            average_score=average,
            duration=time.monotonic() - start,
        )

        logger.info(
            "Search completed in %.1fs: %d checked, %d available, %d registered, %d unknown",
            summary.duration, summary.total_checked, summary.available, summary.registered, summary.unknown
        )

        return SearchResults(query=description, suggestions=suggestions, results=results, summary=summary)
