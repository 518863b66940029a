"""WHOIS-based domain availability checker."""

import asyncio
import logging
from typing import Optional

import whois
from whois.exceptions import WhoisDomainNotFoundError

from .lookup import LookupResult

logger = logging.getLogger(__name__)


class WhoisChecker:
    """Unstructured availability lookup over WHOIS.

    The blocking python-whois query runs in a worker thread and is bounded
    by a hard timeout. The free-text response is classified by phrase
    matching; availability phrases are checked before registration phrases.
    """

    METHOD = 'whois'

    AVAILABLE_INDICATORS = [
        'no match',
        'not found',
        'no entries found',
        'no data found',
        'status: available',
        'no match for',
        'not registered',
        'no matching record',
        'available for registration',
    ]

    REGISTERED_INDICATORS = [
        'domain name:',
        'registrar:',
        'registered on',
        'creation date',
        'created:',
        'registered date',
        'domain status:',
    ]

    RATE_LIMIT_PATTERNS = ['rate limit', 'too many requests', 'quota exceeded', 'try again later']

    def __init__(self, timeout: float = 8.0):
        self.timeout = timeout

    def classify(self, text: str) -> Optional[bool]:
        """True if the response says available, False if registered, else None."""
        text_lower = text.lower()

        if any(i in text_lower for i in self.AVAILABLE_INDICATORS):
            return True
        if any(i in text_lower for i in self.REGISTERED_INDICATORS):
            return False
        return None

    def _query(self, domain: str) -> str:
        """Blocking WHOIS query returning the raw response text."""
        entry = whois.whois(domain)
        return getattr(entry, 'text', None) or ''

    async def lookup(self, domain: str) -> LookupResult:
        try:
            text = await asyncio.wait_for(asyncio.to_thread(self._query, domain), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.debug("WHOIS timeout for %s", domain)
            return LookupResult.failure(self.METHOD, 'WHOIS timeout')
        except WhoisDomainNotFoundError:
            return LookupResult.success(self.METHOD, True)
        except Exception as e:
            logger.debug("WHOIS query failed for %s: %s", domain, e)
            return LookupResult.failure(self.METHOD, str(e) or type(e).__name__)

        if any(p in text.lower() for p in self.RATE_LIMIT_PATTERNS):
            return LookupResult.failure(self.METHOD, 'WHOIS rate limited')

        available = self.classify(text)
        if available is None:
            return LookupResult.inconclusive(self.METHOD)
        return LookupResult.success(self.METHOD, available)
