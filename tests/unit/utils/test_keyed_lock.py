"""
Tests pour KeyedLock.
"""

import asyncio

import pytest

from bookstore_broker.utils.keyed_lock import KeyedLock


class TestKeyedLock:
    """Exclusion par cle et liberation des verrous."""

    @pytest.mark.asyncio
    async def test_same_key_is_serialized(self):
        locks = KeyedLock()
        events: list[str] = []

        async def worker(name: str):
            async with locks.hold("k"):
                events.append(f"{name}-in")
                await asyncio.sleep(0.01)
                events.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))

        assert events == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.asyncio
    async def test_distinct_keys_run_concurrently(self):
        locks = KeyedLock()
        inside = asyncio.Event()

        async def holder():
            async with locks.hold("a"):
                await asyncio.wait_for(inside.wait(), timeout=1)

        async def other():
            async with locks.hold("b"):
                inside.set()

        await asyncio.gather(holder(), other())

    @pytest.mark.asyncio
    async def test_released_locks_are_reclaimed(self):
        locks = KeyedLock()

        async with locks.hold("k"):
            assert locks.locked("k")
            assert len(locks) == 1

        assert not locks.locked("k")
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_released_on_error(self):
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("k"):
                raise RuntimeError("boom")

        assert len(locks) == 0
