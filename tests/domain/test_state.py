"""Tests for domain/state.py: SharedConfig and BoardStore."""

import asyncio

import pytest

from skullboard.domain.models import BoardHandle
from skullboard.domain.state import BoardStore, SharedConfig


class TestSharedConfig:
    @pytest.mark.asyncio
    async def test_defaults(self):
        config = SharedConfig()
        assert await config.get_threshold() == 4
        assert await config.get_board_channel() is None

    @pytest.mark.asyncio
    async def test_set_and_get(self):
        config = SharedConfig()
        await config.set_threshold(9)
        await config.set_board_channel(123)
        assert await config.get_threshold() == 9
        assert await config.get_board_channel() == 123

    def test_negative_initial_threshold_rejected(self):
        with pytest.raises(ValueError):
            SharedConfig(threshold=-1)

    @pytest.mark.asyncio
    async def test_negative_threshold_rejected(self):
        config = SharedConfig(threshold=2)
        with pytest.raises(ValueError):
            await config.set_threshold(-1)
        assert await config.get_threshold() == 2


class TestBoardStore:
    @pytest.mark.asyncio
    async def test_put_get_pop(self):
        store = BoardStore()
        handle = BoardHandle(channel_id=1, message_id=2)
        await store.put(10, handle)
        assert await store.get(10) == handle
        assert len(store) == 1
        assert await store.pop(10) == handle
        assert await store.pop(10) is None
        assert await store.get(10) is None

    @pytest.mark.asyncio
    async def test_put_replaces_entry(self):
        store = BoardStore()
        await store.put(10, BoardHandle(1, 2))
        await store.put(10, BoardHandle(1, 3))
        assert await store.snapshot() == {10: BoardHandle(1, 3)}

    @pytest.mark.asyncio
    async def test_hold_serializes_same_message(self):
        store = BoardStore()
        order = []

        async def worker(name):
            async with store.hold(10):
                order.append(f"{name}-in")
                await asyncio.sleep(0)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))
        assert order == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.asyncio
    async def test_hold_does_not_block_other_messages(self):
        store = BoardStore()
        release = asyncio.Event()
        entered = asyncio.Event()

        async def holder():
            async with store.hold(10):
                entered.set()
                await release.wait()

        task = asyncio.create_task(holder())
        await entered.wait()
        async with store.hold(11):
            pass
        release.set()
        await task

    @pytest.mark.asyncio
    async def test_hold_discards_idle_locks(self):
        store = BoardStore()
        async with store.hold(10):
            assert 10 in store._key_locks
        assert store._key_locks == {}

    @pytest.mark.asyncio
    async def test_hold_releases_on_error(self):
        store = BoardStore()
        with pytest.raises(RuntimeError):
            async with store.hold(10):
                raise RuntimeError("boom")
        assert store._key_locks == {}
        async with store.hold(10):
            pass
