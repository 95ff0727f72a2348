import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .storage import Storage


class ReadWriteLock:
    """
    asyncio reader/writer lock.

    Any number of readers may hold it together; a writer holds it alone.
    Once a writer is waiting, new readers queue behind it.
    """

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._wakeups = set()

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writer

    async def _notify_all(self) -> None:
        async with self._cond:
            self._cond.notify_all()

    async def _wake_waiters(self) -> None:
        # Called after the release is already recorded; the wakeup runs as its own
        # task so cancelling the releasing task cannot lose it.
        wakeup = asyncio.ensure_future(self._notify_all())
        self._wakeups.add(wakeup)
        wakeup.add_done_callback(self._wakeups.discard)
        await asyncio.shield(wakeup)

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._waiting_writers)
            self._readers += 1
        try:
            yield
        finally:
            self._readers -= 1
            if not self._readers:
                await self._wake_waiters()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._waiting_writers -= 1
                # a cancelled writer may have been the only thing holding readers back
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            self._writer = False
            await self._wake_waiters()


class SharedStorage:
    """Storage shared by concurrent requests; mutate only inside write()."""

    def __init__(self, storage: Storage, lock: Optional[ReadWriteLock] = None):
        self._storage = storage
        self.lock = lock or ReadWriteLock()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[Storage]:
        async with self.lock.read():
            yield self._storage

    @asynccontextmanager
    async def write(self) -> AsyncIterator[Storage]:
        async with self.lock.write():
            yield self._storage
