"""Async Reader/Writer Lock — many concurrent readers or one exclusive writer.

Invariants:
    - A writer holds the lock alone; readers share it
    - A waiting writer blocks new readers (writers are not starved)
    - Single event loop only: built on asyncio.Condition, not thread-safe

Design Decisions:
    - One lock per collection (InMemoryStore): reads of one collection never queue
      behind writes to another
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class RWLock:
    """Writer-preferring async reader/writer lock."""

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and self._writers_waiting == 0,
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and self._readers == 0,
                )
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()
