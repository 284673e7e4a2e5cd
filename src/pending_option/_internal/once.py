"""Single-settlement cell used by PendingOption.

An awaitable can only be driven once (a coroutine raises RuntimeError on a
second await), but a PendingOption may be awaited many times and from
several tasks at once. OnceCell runs its initializer on the first access
and hands the stored value to every later caller.

The initializer is driven apart from the callers: cancelling one awaiter
abandons that awaiter's wait, never the initializer itself, so the other
awaiters (and later ones) still receive the value.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

import anyio

__all__ = ["OnceCell"]

T = TypeVar("T")


class OnceCell(Generic[T]):
    """A cell that is written exactly once by an async initializer.

    On asyncio the initializer runs in one shared Task and every caller
    waits on it through asyncio.shield(). On other anyio backends the first
    caller runs it inside a shielded cancel scope while the rest wait on a
    lock.

    Note:
        If the initializer raises, the cell stays unset and the next caller
        runs it again. PendingOption's initializers never raise an Exception.

    Examples:
        >>> cell: OnceCell[int] = OnceCell()
        >>> cell.is_set()
        False
        >>> async def compute() -> int:
        ...     return 42
        >>> async def example():
        ...     assert await cell.get_or_init(compute) == 42
        ...     assert await cell.get_or_init(compute) == 42  # not recomputed
    """

    __slots__ = ("_driver", "_is_set", "_lock", "_value")

    def __init__(self) -> None:
        self._driver: asyncio.Task[T] | None = None
        self._lock: anyio.Lock | None = None
        self._value: T | None = None
        self._is_set = False

    def is_set(self) -> bool:
        """Check if the value has been set."""
        return self._is_set

    def get(self) -> T | None:
        """Get the value if set, otherwise None."""
        return self._value if self._is_set else None

    def set(self, value: T) -> bool:
        """Store a value that needs no computation.

        Returns:
            True if the value was set, False if already set.
        """
        if self._is_set:
            return False
        self._value = value
        self._is_set = True
        return True

    async def get_or_init(self, init: Callable[[], Awaitable[T]]) -> T:
        """Get the value, or compute it by awaiting init().

        Only one run of init() happens; every caller shares its value. A
        caller that is cancelled while waiting gets the cancellation, and
        init() keeps running for the others.

        Args:
            init: Zero-argument coroutine function producing the value.

        Returns:
            The stored or newly computed value.
        """
        if self._is_set:
            return self._value  # type: ignore[return-value]

        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return await self._init_shielded(init)
        return await self._init_shared(init)

    async def _init_shared(self, init: Callable[[], Awaitable[T]]) -> T:
        if self._driver is None:

            async def drive() -> T:
                value = await init()
                self.set(value)
                return value

            self._driver = asyncio.create_task(drive())

        driver = self._driver
        try:
            return await asyncio.shield(driver)
        except BaseException:
            # A failed run is forgotten so the next caller retries; a caller
            # that was merely cancelled leaves the run in place.
            if driver.done() and self._driver is driver:
                self._driver = None
            raise

    async def _init_shielded(self, init: Callable[[], Awaitable[T]]) -> T:
        if self._lock is None:
            self._lock = anyio.Lock()

        async with self._lock:
            if not self._is_set:
                with anyio.CancelScope(shield=True):
                    self.set(await init())
            return self._value  # type: ignore[return-value]
