"""Fan-out / fan-in helpers for the streaming enrichment step.

Two patterns are exposed:

1. **throttled_gather** -- ``asyncio.gather`` with each awaitable wrapped in
   an optional semaphore acquire/release, so at most N run at once.

2. **settle_all** -- the barrier used by the search controller: run every
   awaitable, wait for all of them, and return one :class:`Settled` per
   input (value or error).  A failure never short-circuits the others.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Generic, TypeVar

_T = TypeVar("_T")


@dataclass(frozen=True)
class Settled(Generic[_T]):
    """Outcome of one awaitable: exactly one of ``value`` / ``error`` is meaningful."""

    value: _T | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: _T) -> _T:
        """Return the value on success, *default* on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


async def throttled_gather(
    coros: list[Awaitable[_T]],
    semaphore: asyncio.Semaphore | None = None,
    return_exceptions: bool = True,
) -> list[_T | BaseException]:
    """Run awaitables concurrently with optional semaphore throttling.

    Parameters
    ----------
    coros:
        Awaitable objects to execute concurrently.
    semaphore:
        Optional semaphore for concurrency control.  ``None`` runs every
        awaitable at once.
    return_exceptions:
        If ``True``, exceptions are returned in the results list rather
        than being raised.  Mirrors ``asyncio.gather`` semantics.

    Returns
    -------
    list[_T | BaseException]
        Results in the same order as the input coroutines.
    """
    if semaphore is None:
        return await asyncio.gather(*coros, return_exceptions=return_exceptions)

    async def _wrapped(coro: Awaitable[_T]) -> _T:
        async with semaphore:
            return await coro

    tasks = [_wrapped(c) for c in coros]
    return await asyncio.gather(*tasks, return_exceptions=return_exceptions)


async def settle_all(
    coros: list[Awaitable[_T]],
    semaphore: asyncio.Semaphore | None = None,
) -> list[Settled[_T]]:
    """Wait for every awaitable and wrap each result as :class:`Settled`.

    The returned list is index-aligned with *coros*.
    """
    raw_results = await throttled_gather(coros, semaphore=semaphore, return_exceptions=True)
    settled: list[Settled[_T]] = []
    for result in raw_results:
        if isinstance(result, BaseException):
            settled.append(Settled(error=result))
        else:
            settled.append(Settled(value=result))
    return settled
