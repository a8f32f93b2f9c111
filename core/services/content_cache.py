"""
Content cache for public reads.

Public pages hit the same four tables over and over. Entries are keyed by
(table, variant), e.g. ("faqs", "en"), and dropped per table whenever a
realtime change arrives or an admin mutation goes through the services.
"""

import asyncio
import logging
import time
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]


class ContentCache:
    """TTL cache with per-table invalidation and single-flight loading."""

    def __init__(self, ttl_seconds: float = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self._clock = clock
        # {(table, variant): (expires_at, value)}
        self._entries: Dict[CacheKey, Tuple[float, Any]] = {}
        self._locks: Dict[CacheKey, asyncio.Lock] = defaultdict(asyncio.Lock)
        # Bumped on invalidate so a load that started before it is not stored
        self._generations: Dict[str, int] = defaultdict(int)
        # Bumped by invalidate_all, which also covers tables with nothing stored yet
        self._epoch = 0
        self.hits = 0
        self.misses = 0
        self.invalidations = 0

    def _fresh(self, key: CacheKey):
        entry = self._entries.get(key)
        if entry and entry[0] > self._clock():
            return entry
        return None

    async def get_or_load(self, table: str, variant: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        key = (table, variant)
        entry = self._fresh(key)
        if entry:
            self.hits += 1
            return entry[1]

        async with self._locks[key]:
            # Another coroutine may have filled it while we waited
            entry = self._fresh(key)
            if entry:
                self.hits += 1
                return entry[1]

            self.misses += 1
            generation = (self._epoch, self._generations[table])
            value = await loader()
            if self.ttl > 0 and generation == (self._epoch, self._generations[table]):
                self._entries[key] = (self._clock() + self.ttl, value)
            return value

    def invalidate(self, table: str) -> int:
        """Drop every variant cached for a table. Returns number of entries dropped."""
        self._generations[table] += 1
        keys = [k for k in self._entries if k[0] == table]
        for key in keys:
            del self._entries[key]
        self.invalidations += 1
        if keys:
            logger.debug(f"[CACHE] Invalidated {len(keys)} entries for '{table}'")
        return len(keys)

    def invalidate_all(self) -> None:
        self._epoch += 1
        self._entries.clear()
        self.invalidations += 1

    def stats(self) -> dict:
        return {
            "entries": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "invalidations": self.invalidations,
            "ttl_seconds": self.ttl,
        }
