"""Tagged outcome of a single availability lookup attempt."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LookupOutcome(Enum):
    """How a lookup attempt ended."""

    SUCCESS = "success"            # definite verdict
    INCONCLUSIVE = "inconclusive"  # answered, but no verdict could be read
    SKIPPED = "skipped"            # method not applicable (e.g. no RDAP server for the TLD)
    FAILURE = "failure"            # timeout, network or parse error - retryable


@dataclass(frozen=True)
class LookupResult:
    outcome: LookupOutcome
    method: str
    available: Optional[bool] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, method: str, available: bool) -> "LookupResult":
        return cls(LookupOutcome.SUCCESS, method, available=available)

    @classmethod
    def inconclusive(cls, method: str) -> "LookupResult":
        return cls(LookupOutcome.INCONCLUSIVE, method)

    @classmethod
    def skipped(cls, method: str) -> "LookupResult":
        return cls(LookupOutcome.SKIPPED, method)

    @classmethod
    def failure(cls, method: str, error: str) -> "LookupResult":
        return cls(LookupOutcome.FAILURE, method, error=error)

    @property
    def is_verdict(self) -> bool:
        return self.outcome is LookupOutcome.SUCCESS
