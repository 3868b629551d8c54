"""
backend/tests/test_cache.py

Purpose:
    TTL semantics of the URL-keyed response cache.
"""

from __future__ import annotations

from services.cache import MISSING, TTLCache


class _Clock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_fresh_entry_is_returned():
    clock = _Clock()
    cache = TTLCache(ttl_seconds=30, clock=clock)
    cache.set("https://x/a", {"a": 1})
    clock.now += 29.999
    assert cache.get("https://x/a") == {"a": 1}


def test_entry_expires_at_ttl_boundary():
    clock = _Clock()
    cache = TTLCache(ttl_seconds=30, clock=clock)
    cache.set("https://x/a", {"a": 1})
    clock.now += 30
    assert cache.get("https://x/a", MISSING) is MISSING


def test_stale_entry_is_kept_until_overwritten():
    clock = _Clock()
    cache = TTLCache(ttl_seconds=30, clock=clock)
    cache.set("https://x/a", 1)
    clock.now += 60
    assert cache.get("https://x/a") is None
    assert len(cache) == 1

    cache.set("https://x/a", 2)
    assert cache.get("https://x/a") == 2
    assert len(cache) == 1


def test_falsy_payload_is_distinguishable_from_miss():
    cache = TTLCache(ttl_seconds=30, clock=_Clock())
    cache.set("https://x/empty", [])
    assert cache.get("https://x/empty", MISSING) == []
    assert cache.get("https://x/other", MISSING) is MISSING


def test_textually_different_urls_are_separate_entries():
    cache = TTLCache(ttl_seconds=30, clock=_Clock())
    cache.set("https://x/a?k=1", "first")
    assert cache.get("https://x/a?k=1") == "first"
    assert cache.get("https://x/a?k=01") is None


def test_explicit_timestamp_sets_entry_age():
    clock = _Clock()
    cache = TTLCache(ttl_seconds=30, clock=clock)
    cache.set("https://x/a", "v", timestamp=clock.now - 25)
    assert cache.get("https://x/a") == "v"
    clock.now += 5
    assert cache.get("https://x/a") is None
