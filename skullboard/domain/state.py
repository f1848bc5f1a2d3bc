"""Shared mutable state: board configuration and the board entry store.

Each structure guards itself with its own asyncio.Lock. None of these locks
is ever held across a platform call; per-message critical sections that do
span platform calls come from BoardStore.hold().
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from skullboard.config import DEFAULT_THRESHOLD
from skullboard.domain.models import BoardHandle


class SharedConfig:
    """Threshold and board channel, each behind its own lock."""

    def __init__(self, threshold: int = DEFAULT_THRESHOLD, board_channel_id: Optional[int] = None):
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self._threshold = threshold
        self._threshold_lock = asyncio.Lock()
        self._board_channel_id = board_channel_id
        self._channel_lock = asyncio.Lock()

    async def get_threshold(self) -> int:
        async with self._threshold_lock:
            return self._threshold

    async def set_threshold(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"threshold must be non-negative, got {value}")
        async with self._threshold_lock:
            self._threshold = value

    async def get_board_channel(self) -> Optional[int]:
        async with self._channel_lock:
            return self._board_channel_id

    async def set_board_channel(self, channel_id: int) -> None:
        async with self._channel_lock:
            self._board_channel_id = channel_id


class _KeyLock:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = asyncio.Lock()
        self.users = 0


class BoardStore:
    """Source message id -> board message handle.

    At most one entry per source message. Only the reconciler mutates it.
    """

    def __init__(self):
        self._entries: Dict[int, BoardHandle] = {}
        self._lock = asyncio.Lock()
        self._key_locks: Dict[int, _KeyLock] = {}

    async def get(self, message_id: int) -> Optional[BoardHandle]:
        async with self._lock:
            return self._entries.get(message_id)

    async def put(self, message_id: int, handle: BoardHandle) -> None:
        async with self._lock:
            self._entries[message_id] = handle

    async def pop(self, message_id: int) -> Optional[BoardHandle]:
        async with self._lock:
            return self._entries.pop(message_id, None)

    async def snapshot(self) -> Dict[int, BoardHandle]:
        async with self._lock:
            return dict(self._entries)

    @asynccontextmanager
    async def hold(self, message_id: int) -> AsyncIterator[None]:
        """Exclusive section for one source message.

        Serializes work on the same message id; other ids run in parallel.
        """
        async with self._lock:
            key_lock = self._key_locks.get(message_id)
            if key_lock is None:
                key_lock = self._key_locks[message_id] = _KeyLock()
            key_lock.users += 1
        try:
            async with key_lock.lock:
                yield
        finally:
            async with self._lock:
                key_lock.users -= 1
                if key_lock.users == 0:
                    self._key_locks.pop(message_id, None)

    def __len__(self) -> int:
        return len(self._entries)
