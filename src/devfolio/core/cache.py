"""In-memory snapshot cache with a fixed TTL.

Entries are keyed by GitHub username and always hold a fully assembled
snapshot. Values are replaced whole, so no locking is needed.
"""

import time
from collections.abc import Callable

from devfolio.core.config import get_app_settings
from devfolio.schemas.stats import StatsSnapshot


class SnapshotCache:
    """Username -> StatsSnapshot store with time based expiry.

    Usage:
        cache = SnapshotCache(ttl_seconds=600)
        cache.set("octocat", snapshot)
        cache.get("octocat")  # snapshot until the TTL elapses, then None
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize cache.

        Args:
            ttl_seconds: Lifetime of every entry
            clock: Monotonic time source, injectable for tests
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[StatsSnapshot, float]] = {}

    def get(self, username: str) -> StatsSnapshot | None:
        """Return the live snapshot for a username, evicting it if expired."""
        entry = self._entries.get(username)
        if entry is None:
            return None

        snapshot, expires_at = entry
        if self._clock() >= expires_at:
            self._entries.pop(username, None)
            return None
        return snapshot

    def set(self, username: str, snapshot: StatsSnapshot) -> None:
        """Store a snapshot, replacing any previous entry."""
        self._entries[username] = (snapshot, self._clock() + self.ttl_seconds)

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


# Global cache instance
_snapshot_cache: SnapshotCache | None = None


def get_snapshot_cache() -> SnapshotCache:
    """Get the process-wide snapshot cache.

    The TTL is read from settings when the cache is first created.
    """
    global _snapshot_cache
    if _snapshot_cache is None:
        _snapshot_cache = SnapshotCache(
            ttl_seconds=get_app_settings().stats_cache_ttl_seconds
        )
    return _snapshot_cache


def reset_snapshot_cache() -> None:
    """Forget the process-wide cache so the next call rebuilds it."""
    global _snapshot_cache
    _snapshot_cache = None
