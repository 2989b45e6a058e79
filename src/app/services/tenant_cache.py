"""
Tenant lookup cache

Keeps tenant rows for a short TTL so host/slug resolution does not hit the
database on every request. Entries carry tags; invalidating a tag drops every
entry that carries it. The cache is never authoritative.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Generic, Iterable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

TENANT_TAG = "tenant"


@dataclass
class CacheEntry(Generic[T]):
    """Cache entry with metadata"""

    value: Optional[T]
    stored_at: float
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def is_expired(self, now: float, ttl: float) -> bool:
        return now - self.stored_at >= ttl


class TenantCache(Generic[T]):
    DEFAULT_TTL = 60.0

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry[T]] = {}

    def get(self, key: str) -> Optional[CacheEntry[T]]:
        """Fresh entry for key, or None on miss or expiry"""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock(), self.ttl):
            del self._entries[key]
            logger.debug(f"Tenant cache entry expired: {key}")
            return None
        return entry

    def set(self, key: str, value: Optional[T], tags: Iterable[str] = (TENANT_TAG,)) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock(), tags=frozenset(tags))

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def invalidate_tag(self, tag: str) -> int:
        """Drop every entry carrying tag; returns how many were dropped"""
        keys = [k for k, entry in self._entries.items() if tag in entry.tags]
        for key in keys:
            del self._entries[key]
        if keys:
            logger.info(f"Invalidated {len(keys)} tenant cache entries for tag '{tag}'")
        return len(keys)

    def __len__(self) -> int:
        return len(self._entries)
