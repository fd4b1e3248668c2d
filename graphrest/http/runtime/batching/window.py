"""Manually flushed batch windows.

A ``BatchWindow`` sits in front of a loader and holds every key requested
while it is open. ``flush()`` hands them all to the loader in one tick, so
they form a single batch there regardless of when they were requested.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Generic, TypeVar

from strawberry.dataloader import DataLoader

K = TypeVar("K")
V = TypeVar("V")


class BatchWindow(Generic[K, V]):
    """Keys and futures collected until the owner calls ``flush()``."""

    def __init__(self, loader: DataLoader[K, V]) -> None:
        self._loader = loader
        self._keys: list[K] = []
        self._futures: list[asyncio.Future[V]] = []

    @property
    def loader(self) -> DataLoader[K, V]:
        return self._loader

    @property
    def keys(self) -> list[K]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def load(self, key: K) -> asyncio.Future[V]:
        """Add a key; the returned future settles after the next flush."""
        future: asyncio.Future[V] = asyncio.get_running_loop().create_future()
        self._keys.append(key)
        self._futures.append(future)
        return future

    def load_many(self, keys: Iterable[K]) -> asyncio.Future[list[V]]:
        return asyncio.gather(*(self.load(key) for key in keys))

    async def flush(self) -> None:
        """Dispatch every held key now and wait for the batch to settle."""
        keys, futures = self._keys, self._futures
        self._keys, self._futures = [], []
        if not keys:
            return
        outcomes = await asyncio.gather(
            *(self._loader.load(key) for key in keys), return_exceptions=True
        )
        for future, outcome in zip(futures, outcomes):
            if future.done():
                continue
            if isinstance(outcome, BaseException):
                future.set_exception(outcome)
            else:
                future.set_result(outcome)
