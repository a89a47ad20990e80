import pytest

from devfolio.core.cache import SnapshotCache
from devfolio.core.stats import build_snapshot


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_entry_is_served_until_ttl_elapses(user_payload):
    clock = FakeClock()
    cache = SnapshotCache(ttl_seconds=60, clock=clock)
    snapshot = build_snapshot(user_payload())

    cache.set("octocat", snapshot)
    clock.now += 59

    assert cache.get("octocat") is snapshot

    clock.now += 1

    assert cache.get("octocat") is None
    assert len(cache) == 0


def test_set_overwrites_whole_entry_and_refreshes_expiry(user_payload):
    clock = FakeClock()
    cache = SnapshotCache(ttl_seconds=10, clock=clock)
    first = build_snapshot(user_payload())
    second = build_snapshot(user_payload(login="hubot"))

    cache.set("octocat", first)
    clock.now += 8
    cache.set("octocat", second)
    clock.now += 8

    assert cache.get("octocat") is second


def test_entries_are_keyed_by_username(user_payload):
    cache = SnapshotCache(ttl_seconds=10)
    cache.set("octocat", build_snapshot(user_payload()))

    assert cache.get("hubot") is None
    cache.clear()
    assert cache.get("octocat") is None


def test_ttl_must_be_positive():
    with pytest.raises(ValueError):
        SnapshotCache(ttl_seconds=0)


def test_process_wide_cache_takes_ttl_from_settings(monkeypatch):
    from devfolio.core.cache import get_snapshot_cache, reset_snapshot_cache
    from devfolio.core.config import reload_all_settings

    monkeypatch.setenv("STATS_CACHE_TTL_SECONDS", "45")
    reload_all_settings()
    reset_snapshot_cache()
    try:
        cache = get_snapshot_cache()

        assert cache.ttl_seconds == 45
        assert get_snapshot_cache() is cache
    finally:
        reset_snapshot_cache()
        reload_all_settings()
