"""Single-slot interaction cache with time-based invalidation.

The cache is advisory: a missing, stale or unreadable entry only forces the
orchestrator to recompute.
"""

import time
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from ..constants import INTERACTIONS_CACHE_KEY, INTERACTIONS_CACHE_TTL_MS
from ..utils.logging import logger
from ..utils.storage import KeyValueStore
from .fingerprint import fingerprint
from .models import CacheEntry, InteractionFinding


def now_ms() -> int:
    """Return the current time in epoch milliseconds."""
    return int(time.time() * 1000)


class InteractionCache:
    """Cache the findings of the most recent medication set."""

    def __init__(
        self,
        store: KeyValueStore,
        clock: Callable[[], int] = now_ms,
        ttl_ms: int = INTERACTIONS_CACHE_TTL_MS,
        key: str = INTERACTIONS_CACHE_KEY,
    ):
        """Initialize the cache over a key-value store."""
        self.backend = store
        self.clock = clock
        self.ttl_ms = ttl_ms
        self.key = key

    def _load_entry(self) -> CacheEntry | None:
        raw = self.backend.get(self.key)
        if raw is None:
            return None
        try:
            return CacheEntry.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable interaction cache entry: {e}")
            return None

    def lookup(self, names: Sequence[str]) -> list[InteractionFinding] | None:
        """Return cached findings for this medication set, or None on a miss."""
        key = fingerprint(names)
        if not key:
            return None

        entry = self._load_entry()
        if entry is None:
            return None

        if entry.fingerprint != key:
            logger.debug("Interaction cache miss: medication set changed")
            return None

        age = self.clock() - entry.timestamp
        if age > self.ttl_ms:
            logger.debug(f"Interaction cache miss: entry is {age} ms old")
            return None

        logger.info(f"Interaction cache hit for {key}")
        return entry.findings

    def store(self, names: Sequence[str], findings: Sequence[InteractionFinding]):
        """Replace the cached entry with findings for this medication set."""
        key = fingerprint(names)
        if not key:
            logger.debug("Empty medication set, nothing to cache")
            return

        entry = CacheEntry(fingerprint=key, timestamp=self.clock(), findings=list(findings))
        self.backend.set(self.key, entry.model_dump_json())

    def invalidate(self):
        """Drop the cached entry unconditionally."""
        self.backend.delete(self.key)
