"""
Per-key asyncio locks.

Used by the application services to serialize the read-check-write
sequence of operations touching the same parking lot or the same plate,
while operations on different keys proceed concurrently.
"""

import asyncio
from collections.abc import AsyncIterator, Hashable
from contextlib import asynccontextmanager


class KeyedLock:
    """
    Lazily created asyncio.Lock per key.

    A key's lock is discarded once no task holds or waits for it, so the
    map only grows with the number of keys in use at the same time.
    """

    def __init__(self) -> None:
        self._locks: dict[Hashable, asyncio.Lock] = {}
        self._users: dict[Hashable, int] = {}

    def __len__(self) -> int:
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        """
        Hold the lock of ``key`` for the duration of the block.

        Example:
            async with locks.hold(parking_lot_name):
                ...
        """
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]
