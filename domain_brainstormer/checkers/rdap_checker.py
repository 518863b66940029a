"""RDAP-based domain availability checker."""

import logging
from typing import Any, Dict, Optional

import httpx

from .lookup import LookupResult

logger = logging.getLogger(__name__)

# Known RDAP domain endpoints by TLD; the domain name is appended
RDAP_SERVERS = {
    '.com': 'https://rdap.verisign.com/com/v1/domain/',
    '.net': 'https://rdap.verisign.com/net/v1/domain/',
    '.org': 'https://rdap.publicinterestregistry.org/rdap/domain/',
    '.io': 'https://rdap.identitydigital.services/rdap/domain/',
    '.dev': 'https://rdap.google.com/v1/domain/',
    '.app': 'https://rdap.google.com/v1/domain/',
    '.ai': 'https://rdap.identitydigital.services/rdap/domain/',
    '.co': 'https://rdap.identitydigital.services/rdap/domain/',
}

REGISTERED_STATUSES = ('active', 'ok', 'client transfer prohibited')


def get_tld(domain: str) -> str:
    """'example.com' -> '.com'"""
    if '.' not in domain:
        return ''
    return '.' + domain.rsplit('.', 1)[-1].lower()


class RDAPChecker:
    """Structured availability lookup over RDAP.

    Usage:
        async with RDAPChecker() as checker:
            result = await checker.lookup("example.com")

    lookup() also works outside the context manager, using a short-lived
    client per call.
    """

    METHOD = 'rdap'

    def __init__(
        self,
        timeout: float = 8.0,
        servers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.servers = dict(RDAP_SERVERS if servers is None else servers)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"Accept": "application/rdap+json"},
            follow_redirects=True,
            transport=self._transport,
        )

    async def __aenter__(self) -> "RDAPChecker":
        self._client = self._make_client()
        return self

    async def __aexit__(self, *args) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def server_for(self, domain: str) -> Optional[str]:
        return self.servers.get(get_tld(domain))

    async def _fetch(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with self._make_client() as client:
            return await client.get(url)

    async def lookup(self, domain: str) -> LookupResult:
        """Look up a domain; SKIPPED if its TLD has no known RDAP server."""
        server = self.server_for(domain)
        if server is None:
            return LookupResult.skipped(self.METHOD)

        try:
            response = await self._fetch(server + domain)
        except httpx.TimeoutException:
            logger.debug("RDAP timeout for %s", domain)
            return LookupResult.failure(self.METHOD, 'RDAP timeout')
        except httpx.HTTPError as e:
            logger.debug("RDAP request failed for %s: %s", domain, e)
            return LookupResult.failure(self.METHOD, str(e) or type(e).__name__)

        result = self.parse_response(response)
        logger.debug("RDAP %s -> %s (available=%s)", domain, result.outcome.value, result.available)
        return result

    def parse_response(self, response: httpx.Response) -> LookupResult:
        if response.status_code == 404:
            return LookupResult.success(self.METHOD, True)

        if response.status_code >= 400:
            return LookupResult.failure(self.METHOD, f"RDAP status {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            return LookupResult.failure(self.METHOD, 'Invalid RDAP response')

        if not isinstance(data, dict):
            return LookupResult.failure(self.METHOD, 'Invalid RDAP response')

        return self.parse_data(data)

    def parse_data(self, data: Dict[str, Any]) -> LookupResult:
        """Read a verdict from an RDAP domain object."""
        if data.get('errorCode') == 404:
            return LookupResult.success(self.METHOD, True)

        statuses = data.get('status')
        if isinstance(statuses, list):
            for status in statuses:
                if any(s in str(status).lower() for s in REGISTERED_STATUSES):
                    return LookupResult.success(self.METHOD, False)

        # Registration/expiration events only exist for registered domains
        if data.get('events'):
            return LookupResult.success(self.METHOD, False)

        return LookupResult.inconclusive(self.METHOD)
