"""Batching, caching loader.

Architecture:
    ``BatchLoader`` is a strawberry ``DataLoader`` with the behaviour the
    REST facade needs on top:
    - keys requested in the same tick are dispatched as one batch
    - results are matched back to keys positionally
    - every caller awaits its own shield over the shared cached future

Design Decisions:
    - One instance per request context: the cache has no TTL and no
      invalidation beyond ``clear``/``clear_all``
    - Values that are exceptions reject only their own key
    - Keys whose load failed or was cancelled are evicted so a later
      window can retry them

See Also:
    - BatchWindow: Holds loads until an explicit flush
    - create_path_loader: Single-path GET loader
    - create_keyed_loader: Chunked bulk loader
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Hashable, Sequence
from functools import partial
from time import perf_counter
from typing import Any, TypeVar

from strawberry.dataloader import AbstractCache, DataLoader

from ...core.exceptions import BatchLoadError
from .telemetry import log_batch_dispatched, log_batch_error

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

BatchLoadFn = Callable[[list[K]], Awaitable[Sequence[Any]]]


class BatchLoader(DataLoader[K, V]):
    """Coalesces ``load`` calls into batched calls of ``load_fn``.

    ``load_fn`` receives the keys of one batch and must return a sequence of
    the same length; an item that is an exception instance rejects the
    corresponding key.
    """

    def __init__(
        self,
        load_fn: BatchLoadFn,
        *,
        cache: bool = True,
        max_batch_size: int | None = None,
        cache_map: AbstractCache[K, V] | None = None,
        name: str = "loader",
    ) -> None:
        """Initialize loader.

        Args:
            load_fn: Async batch function
            cache: Memoize futures per key
            max_batch_size: Split windows larger than this into several calls
            cache_map: Cache backend (default: strawberry's in-memory map)
            name: Name used in log records
        """
        if max_batch_size is not None and max_batch_size <= 0:
            raise ValueError("max_batch_size must be positive")
        self.name = name
        super().__init__(
            load_fn=partial(self._run_batch, load_fn),
            max_batch_size=max_batch_size,
            cache=cache,
            cache_map=cache_map,
        )

    def load(self, key: K) -> Awaitable[V]:
        """Request one key; resolves once its window has been dispatched."""
        cached = self.cache_map.get(key) if self.cache else None
        future = super().load(key)
        if self.cache and future is not cached:
            future.add_done_callback(partial(self._evict_unsettled, key))
        return asyncio.shield(future)

    def _evict_unsettled(self, key: K, future: asyncio.Future[V]) -> None:
        if not future.cancelled() and future.exception() is None:
            return
        if self.cache_map.get(key) is future:
            self.clear(key)

    async def _run_batch(self, load_fn: BatchLoadFn, keys: list[K]) -> list[Any]:
        started = perf_counter()
        try:
            values = list(await load_fn(keys))
        except Exception as e:
            log_batch_error(
                loader=self.name,
                batch_size=len(keys),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        if len(values) != len(keys):
            raise BatchLoadError(
                f"{self.name}: batch function returned {len(values)} values "
                f"for {len(keys)} keys",
                expected=len(keys),
                received=len(values),
            )

        log_batch_dispatched(
            loader=self.name,
            batch_size=len(keys),
            failed_keys=sum(isinstance(value, BaseException) for value in values),
            latency_ms=(perf_counter() - started) * 1000.0,
        )
        return values
