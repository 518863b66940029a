from .lookup import LookupOutcome, LookupResult
from .rdap_checker import RDAPChecker, RDAP_SERVERS
from .whois_checker import WhoisChecker
from .availability_service import AvailabilityService, DomainResult, build_domains, status_for

__all__ = [
    'LookupOutcome', 'LookupResult', 'RDAPChecker', 'RDAP_SERVERS', 'WhoisChecker',
    'AvailabilityService', 'DomainResult', 'build_domains', 'status_for'
]
