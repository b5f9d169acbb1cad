"""Tests for InMemoryCacheStore."""

from datetime import timedelta

import pytest

from cachedql.infrastructure.backends.memory import InMemoryCacheStore


class FakeTimer:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheStore:
    """Tests for InMemoryCacheStore."""

    @pytest.fixture
    def timer(self) -> FakeTimer:
        return FakeTimer()

    @pytest.fixture
    def store(self, timer: FakeTimer) -> InMemoryCacheStore:
        return InMemoryCacheStore(maxsize=100, default_ttl=300.0, timer=timer)

    @pytest.mark.asyncio
    async def test_set_and_get(self, store: InMemoryCacheStore) -> None:
        await store.set("key1", b"value1", timedelta(seconds=10))
        assert await store.get("key1") == b"value1"

    @pytest.mark.asyncio
    async def test_get_missing_key(self, store: InMemoryCacheStore) -> None:
        assert await store.get("nonexistent") is None

    @pytest.mark.asyncio
    async def test_entry_expires_after_its_ttl(
        self, store: InMemoryCacheStore, timer: FakeTimer
    ) -> None:
        """Each entry expires after the TTL it was stored with."""
        await store.set("short", b"a", timedelta(seconds=5))
        await store.set("long", b"b", timedelta(seconds=60))

        timer.now += 10

        assert await store.get("short") is None
        assert await store.get("long") == b"b"

    @pytest.mark.asyncio
    async def test_default_ttl(
        self, store: InMemoryCacheStore, timer: FakeTimer
    ) -> None:
        await store.set("key1", b"value1")

        timer.now += 299
        assert await store.get("key1") == b"value1"

        timer.now += 2
        assert await store.get("key1") is None

    @pytest.mark.asyncio
    async def test_zero_ttl_is_never_served(self, store: InMemoryCacheStore) -> None:
        await store.set("key1", b"value1", timedelta(seconds=0))
        assert await store.get("key1") is None

    @pytest.mark.asyncio
    async def test_overwrite_last_write_wins(self, store: InMemoryCacheStore) -> None:
        await store.set("key1", b"first", timedelta(seconds=10))
        await store.set("key1", b"second", timedelta(seconds=10))

        assert await store.get("key1") == b"second"

    @pytest.mark.asyncio
    async def test_lru_eviction(self, timer: FakeTimer) -> None:
        store = InMemoryCacheStore(maxsize=2, timer=timer)
        await store.set("a", b"1")
        await store.set("b", b"2")
        await store.set("c", b"3")

        assert len(store) == 2
        assert await store.get("a") is None
