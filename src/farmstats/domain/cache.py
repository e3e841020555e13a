"""In-process cache of analytics responses."""

import logging
import threading
from typing import Optional

from farmstats.domain.entities import AnalyticsResponse

logger = logging.getLogger(__name__)

CacheKey = tuple[str, int, str, str]


class AnalyticsCache:
    """Analytics responses keyed by (farm_id, year, period, sort_by).

    Entries never expire on their own. Register :meth:`invalidate_farm` as a
    database change listener so any write to a farm's records drops that
    farm's entries.

    Each farm carries a version number that every invalidation bumps. Callers
    read :meth:`version` before loading records and pass it to :meth:`put`;
    a response computed from records that changed meanwhile is not stored.
    """

    def __init__(self):
        self._entries: dict[CacheKey, AnalyticsResponse] = {}
        self._versions: dict[str, int] = {}
        self._lock = threading.Lock()

    def version(self, farm_id: str) -> int:
        """Return the current version of a farm's records."""
        with self._lock:
            return self._versions.get(farm_id, 0)

    def get(self, key: CacheKey) -> Optional[AnalyticsResponse]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: CacheKey, response: AnalyticsResponse, version: int) -> bool:
        """Store a response computed at ``version`` of its farm's records.

        Returns:
            False if the farm changed since ``version`` and nothing was stored
        """
        farm_id = key[0]
        with self._lock:
            if self._versions.get(farm_id, 0) != version:
                stored = False
            else:
                self._entries[key] = response
                stored = True
        if not stored:
            logger.debug("Discarded stale analytics response for %s", key)
        return stored

    def invalidate_farm(self, farm_id: str) -> None:
        """Drop every cached response of a farm."""
        with self._lock:
            self._versions[farm_id] = self._versions.get(farm_id, 0) + 1
            stale = [key for key in self._entries if key[0] == farm_id]
            for key in stale:
                del self._entries[key]
        if stale:
            logger.info("Invalidated %d cached analytics entries for farm %s", len(stale), farm_id)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
