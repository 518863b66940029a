"""Combined availability checking service."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..utils.cache import DEFAULT_TTL, ResultCache
from .lookup import LookupOutcome, LookupResult
from .rdap_checker import RDAPChecker
from .whois_checker import WhoisChecker

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

STATUS_AVAILABLE = 'available'
STATUS_REGISTERED = 'registered'
STATUS_UNKNOWN = 'unknown'
STATUS_ERROR = 'error'


def status_for(available: Optional[bool], error: Optional[str] = None) -> str:
    """Map a tri-state verdict to its status string."""
    if available is True:
        return STATUS_AVAILABLE
    if available is False:
        return STATUS_REGISTERED
    if error:
        return STATUS_ERROR
    return STATUS_UNKNOWN


def normalize_tld(tld: str) -> str:
    tld = tld.strip().lower()
    return tld if tld.startswith('.') else '.' + tld


def build_domains(names: Sequence[str], tlds: Sequence[str]) -> List[str]:
    """Expand names x TLDs, name-major: a.com, a.io, b.com, b.io."""
    normalized = [normalize_tld(t) for t in tlds]
    return [f"{name}{tld}" for name in names for tld in normalized]


@dataclass
class DomainResult:
    """Result of domain availability check."""
    domain: str
    available: Optional[bool]
    status: str
    method: str
    cached: bool = False
    error: Optional[str] = None

    def verdict(self) -> Dict[str, Any]:
        """The cacheable part of the result."""
        return {
            'available': self.available,
            'status': self.status,
            'method': self.method,
            'error': self.error,
        }

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'domain': self.domain,
            'available': self.available,
            'status': self.status,
            'method': self.method,
            'cached': self.cached
        }
        if self.error:
            result['error'] = self.error
        return result


class AvailabilityService:
    """Checks domains via RDAP with WHOIS fallback, retries and a result cache."""

    FAILED_METHOD = 'failed'

    def __init__(
        self,
        max_concurrent: int = 10,
        timeout: float = 8.0,
        max_retries: int = 3,
        retry_delay: float = 2.0,
        batch_delay: float = 0.2,
        use_cache: bool = True,
        cache_file: str = ".cache/availability-cache.json",
        cache_ttl: float = DEFAULT_TTL,
        rdap_servers: Optional[Dict[str, str]] = None,
        cache: Optional[ResultCache] = None,
        rdap_checker: Optional[RDAPChecker] = None,
        whois_checker: Optional[WhoisChecker] = None,
    ):
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")

        self.max_concurrent = max_concurrent
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.batch_delay = batch_delay
        self.rdap_checker = rdap_checker or RDAPChecker(timeout=timeout, servers=rdap_servers)
        self.whois_checker = whois_checker or WhoisChecker(timeout=timeout)

        if cache is not None:
            self.cache = cache
        elif use_cache:
            self.cache = ResultCache(cache_file=cache_file, ttl=cache_ttl)
        else:
            self.cache = None

    def get_backoff_delay(self, attempt: int) -> float:
        """Seconds to wait before retry number attempt + 1."""
        return self.retry_delay * (2 ** attempt)

    async def _attempt(self, domain: str) -> LookupResult:
        """One pass: RDAP, then WHOIS unless RDAP gave a verdict."""
        structured = await self.rdap_checker.lookup(domain)
        if structured.is_verdict:
            return structured

        if structured.outcome is LookupOutcome.FAILURE:
            logger.debug("RDAP failed for %s (%s), falling back to WHOIS", domain, structured.error)

        return await self.whois_checker.lookup(domain)

    async def check_domain_with_retry(self, domain: str, attempt: int = 0) -> LookupResult:
        """Resolve a domain, retrying failed attempts with exponential backoff.

        Returns a SUCCESS or INCONCLUSIVE result, or a FAILURE with method
        'failed' once max_retries retries have been used up.
        """
        while True:
            try:
                result = await self._attempt(domain)
            except Exception as e:
                logger.debug("Lookup attempt raised for %s: %r", domain, e)
                result = LookupResult.failure(self.FAILED_METHOD, str(e) or type(e).__name__)

            if result.outcome is not LookupOutcome.FAILURE:
                return result

            if attempt >= self.max_retries:
                logger.warning("Giving up on %s after %d attempts: %s", domain, attempt + 1, result.error)
                return LookupResult.failure(self.FAILED_METHOD, result.error or 'Unknown error')

            delay = self.get_backoff_delay(attempt)
            logger.info(
                "Lookup failed for %s (attempt %d/%d): %s; retrying in %.1fs",
                domain, attempt + 1, self.max_retries + 1, result.error, delay
            )
            await asyncio.sleep(delay)
            attempt += 1

    async def check_domain_async(self, domain: str) -> DomainResult:
        """Check a single domain's availability, serving from cache when possible."""
        if self.cache is not None:
            cached = self.cache.get(domain)
            if cached is not None:
                return DomainResult(
                    domain=domain,
                    available=cached.get('available'),
                    status=cached.get('status', status_for(cached.get('available'), cached.get('error'))),
                    method=cached.get('method', 'cache'),
                    cached=True,
                    error=cached.get('error'),
                )

        verdict = await self.check_domain_with_retry(domain)
        result = DomainResult(
            domain=domain,
            available=verdict.available,
            status=status_for(verdict.available, verdict.error),
            method=verdict.method,
            error=verdict.error,
        )

        # Failures are cached too, so a flaky domain is not hammered
        if self.cache is not None:
            self.cache.set(domain, result.verdict())

        return result

    def _error_result(self, domain: str, error: BaseException) -> DomainResult:
        logger.error("Unexpected error checking %s: %s", domain, error)
        return DomainResult(
            domain=domain,
            available=None,
            status=STATUS_ERROR,
            method=self.FAILED_METHOD,
            error=str(error) or type(error).__name__,
        )

    async def check_availability_async(
        self,
        names: Sequence[str],
        tlds: Sequence[str],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[DomainResult]:
        """Check every name under every TLD.

        Domains are processed in windows of max_concurrent. All checks in a
        window run concurrently and the next window starts only when all of
        them are done. Results keep the name-major input order.

        Args:
            names: Bare names without TLD
            tlds: TLDs such as '.com' (leading dot optional)
            progress_callback: Optional callback(completed, total) after each window
        """
        domains = build_domains(names, tlds)
        total = len(domains)
        results: List[DomainResult] = []

        logger.info("Checking %d domains (%d names x %d TLDs)", total, len(names), len(tlds))

        async with self.rdap_checker:
            for start in range(0, total, self.max_concurrent):
                window = domains[start:start + self.max_concurrent]

                outcomes = await asyncio.gather(
                    *(self.check_domain_async(domain) for domain in window),
                    return_exceptions=True
                )

                for domain, outcome in zip(window, outcomes):
                    if isinstance(outcome, Exception):
                        results.append(self._error_result(domain, outcome))
                    elif isinstance(outcome, BaseException):
                        raise outcome
                    else:
                        results.append(outcome)

                if progress_callback:
                    progress_callback(len(results), total)

                if start + self.max_concurrent < total:
                    await asyncio.sleep(self.batch_delay)

        self.save_cache()
        return results

    def check_availability(
        self,
        names: Sequence[str],
        tlds: Sequence[str],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[DomainResult]:
        """Synchronous wrapper for check_availability_async."""
        return asyncio.run(self.check_availability_async(names, tlds, progress_callback))

    def check_domain(self, domain: str) -> DomainResult:
        """Synchronous wrapper for check_domain_async."""
        return asyncio.run(self.check_domain_async(domain))

    @staticmethod
    def group_by_status(results: Sequence[DomainResult]) -> Dict[str, List[DomainResult]]:
        """Split results into available / registered / unknown."""
        return {
            'available': [r for r in results if r.available is True],
            'registered': [r for r in results if r.available is False],
            'unknown': [r for r in results if r.available is None],
        }

    def cache_stats(self) -> Optional[Dict[str, Any]]:
        return self.cache.stats() if self.cache is not None else None

    def clear_cache(self):
        if self.cache is not None:
            self.cache.clear()

    def save_cache(self):
        if self.cache is not None:
            self.cache.flush()
