"""Caching utilities for domain check results."""

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TTL = 24 * 60 * 60


class ResultCache:
    """File-backed key-value cache with per-entry expiry.

    Entries live in memory and are written to a JSON file after every
    `flush_every` writes, or when flush() is called. Keys are lowercased.
    """

    def __init__(
        self,
        cache_file: str = ".cache/availability-cache.json",
        ttl: float = DEFAULT_TTL,
        flush_every: int = 10,
        clock: Callable[[], float] = time.time,
    ):
        self.cache_file = Path(cache_file)
        self.ttl = ttl
        self.flush_every = max(1, flush_every)
        self._clock = clock
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._pending_writes = 0
        self._expired_on_load = 0
        self._load()

    @staticmethod
    def _key(key: str) -> str:
        return key.lower()

    @staticmethod
    def _is_valid_entry(entry: Any) -> bool:
        if not isinstance(entry, dict) or 'data' not in entry:
            return False
        expires_at = entry.get('expires_at')
        return isinstance(expires_at, (int, float)) and not isinstance(expires_at, bool)

    def _is_expired(self, entry: Dict[str, Any], now: Optional[float] = None) -> bool:
        now = self._clock() if now is None else now
        return now > entry['expires_at']

    def _load(self):
        """Load unexpired entries from file; a bad file means an empty cache."""
        if not self.cache_file.exists():
            return

        try:
            with open(self.cache_file, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("cache file does not contain an object")

            now = self._clock()
            skipped = 0
            for key, entry in data.items():
                if not self._is_valid_entry(entry):
                    skipped += 1
                elif self._is_expired(entry, now):
                    self._expired_on_load += 1
                else:
                    self._cache[key] = entry

            if skipped:
                logger.warning("Skipped %d malformed cache entries in %s", skipped, self.cache_file)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Cache load failed, starting fresh: %s", e)
            self._cache = {}
            self._expired_on_load = 0

    def _save(self):
        """Save cache to file."""
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_file, 'w') as f:
                json.dump(self._cache, f, indent=2)
            self._pending_writes = 0
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Cache save failed: %s", e)

    def get(self, key: str) -> Optional[Any]:
        """Get cached value, or None if missing or expired."""
        key = self._key(key)
        entry = self._cache.get(key)
        if entry is None:
            return None

        if self._is_expired(entry):
            del self._cache[key]
            return None

        return entry['data']

    def set(self, key: str, value: Any, ttl: Optional[float] = None):
        """Cache a value for ttl seconds (default: the cache TTL)."""
        now = self._clock()
        self._cache[self._key(key)] = {
            'data': value,
            'expires_at': now + (self.ttl if ttl is None else ttl),
            'cached_at': now,
        }

        self._record_write()

    def _record_write(self):
        self._pending_writes += 1
        if self._pending_writes >= self.flush_every:
            self._save()

    def has(self, key: str) -> bool:
        """True for a live entry, even one whose value is None."""
        key = self._key(key)
        entry = self._cache.get(key)
        if entry is None:
            return False

        if self._is_expired(entry):
            del self._cache[key]
            return False
        return True

    def delete(self, key: str) -> bool:
        """Remove an entry; returns whether it existed."""
        removed = self._cache.pop(self._key(key), None) is not None
        if removed:
            self._record_write()
        return removed

    def clear(self):
        """Drop all entries and remove the cache file."""
        self._cache.clear()
        self._pending_writes = 0
        self._expired_on_load = 0
        try:
            if self.cache_file.exists():
                self.cache_file.unlink()
        except OSError as e:
            logger.warning("Cache clear failed: %s", e)

    def flush(self):
        """Write all entries to disk now."""
        self._save()

    def cleanup(self) -> int:
        """Remove expired entries."""
        now = self._clock()
        expired = [key for key, entry in self._cache.items() if self._is_expired(entry, now)]

        for key in expired:
            del self._cache[key]

        removed = len(expired) + self._expired_on_load
        self._expired_on_load = 0
        if removed:
            self._save()

        return removed

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        now = self._clock()
        expired = sum(1 for e in self._cache.values() if self._is_expired(e, now))
        return {
            'total': len(self._cache) + self._expired_on_load,
            'valid': len(self._cache) - expired,
            'expired': expired + self._expired_on_load,
            'cache_file': str(self.cache_file),
        }

    def __len__(self) -> int:
        return len(self._cache)
