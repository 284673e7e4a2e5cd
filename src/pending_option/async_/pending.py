"""PendingOption type for async-aware Option operations.

PendingOption wraps an Option, or an Awaitable that will produce one, and
exposes the Option combinators in async-aware form. It never raises from a
combinator: any Exception raised while producing or chaining a value
(a failing source, a raising callback, a failing awaitable returned by a
callback) settles the result to Nothing.

Example:
    ```python
    async def find_user(id: int) -> Option[User]:
        ...

    # Chain async operations; nothing runs until the chain is awaited
    name = await (
        pending_option(find_user(1))
        .filter(lambda user: user.active)
        .map(lambda user: user.name)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any, Generic, TypeVar, Union

import anyio

from pending_option._internal.once import OnceCell
from pending_option._internal.settle import (
    collapse,
    drain,
    from_outcome,
    invoke,
    is_option,
    resolve,
    settle,
    to_option,
)
from pending_option.types.option import NothingType, Option, Some
from pending_option.types.result import Err, Ok, Result

__all__ = ["PendingOption", "pending_option"]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

OptionLike = Union[Option[T], Awaitable[Option[T]]]


class PendingOption(Generic[T]):
    """Async-aware Option wrapper that always settles to Some or Nothing.

    A PendingOption settles at most once: the first await drives the wrapped
    awaitable and later awaits return the same Option. Concurrent awaiters
    share that single settlement.

    Combinators never mutate self. Each one returns a new PendingOption (or,
    for terminal operations, a coroutine) whose work only starts when it is
    awaited. Every Option it hands out is a fresh container, except for
    or_(), which returns whatever the settled Option's own or_() chose.

    Callbacks may be plain functions or coroutine functions; their results
    are awaited when they are awaitable.

    Attributes:
        _cell: Holds the settled Option once known.
        _init: Zero-argument coroutine function producing the Option, or
            None when the PendingOption was built from a settled Option.

    Example:
        ```python
        async def main():
            doubled = await pending_option(Some(11)).and_then(lambda v: Some(v * 2))
            assert doubled == Some(22)

            missing = await pending_option(failing_lookup())
            assert missing.is_none()

        anyio.run(main)
        ```
    """

    __slots__ = ("_cell", "_init")

    def __init__(self, source: OptionLike[T]) -> None:
        """Create a PendingOption from an Option or an awaitable of one.

        Args:
            source: A settled Option, or an awaitable (coroutine, Task,
                Future, another PendingOption) producing one. A source that
                raises, or settles to something that is not an Option,
                settles this PendingOption to Nothing.
        """
        self._cell: OnceCell[Option[T]] = OnceCell()
        self._init: Callable[[], Awaitable[Option[T]]] | None = None
        if is_option(source):
            self._cell.set(source)  # type: ignore[arg-type]
        else:

            async def _settled() -> Option[T]:
                return await settle(source, "source")

            self._init = _settled

    @classmethod
    def _lazy(cls, init: Callable[[], Awaitable[Option[U]]]) -> PendingOption[U]:
        """Create a PendingOption settled by awaiting init() on first await."""
        pending: PendingOption[U] = cls.__new__(cls)
        pending._cell = OnceCell()
        pending._init = init
        return pending

    @classmethod
    def from_some(cls, value: T) -> PendingOption[T]:
        """Create a PendingOption already settled to Some(value)."""
        return cls(Some(value))

    @classmethod
    def from_none(cls) -> PendingOption[Any]:
        """Create a PendingOption already settled to Nothing."""
        return cls(NothingType())

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        """Support await syntax to get the settled Option.

        Returns:
            The Option this PendingOption settles to. Never raises an
            Exception; failures have already become Nothing.
        """
        return self._settle().__await__()

    async def _settle(self) -> Option[T]:
        if self._init is None:
            return self._cell.get()  # type: ignore[return-value]
        return await self._cell.get_or_init(self._init)

    def then(
        self,
        on_settled: Callable[[Option[T]], U | Awaitable[U]],
        on_error: Callable[[BaseException], Any] | None = None,  # noqa: ARG002
    ) -> Coroutine[Any, Any, U]:
        """Subscribe to settlement.

        on_settled receives the settled Option (Some or Nothing). on_error is
        accepted for callers written against promise-style APIs and is never
        called, since a PendingOption never fails.

        Returns:
            Coroutine producing the (awaited) return value of on_settled.
        """

        async def _then() -> U:
            return await drain(on_settled(await self))

        return _then()

    def and_(self, other: OptionLike[U]) -> PendingOption[U]:
        """Return other if self settles to Some, else Nothing.

        other is only awaited when self is Some. A failing other settles the
        result to Nothing.

        Args:
            other: An Option or an awaitable of one.

        Returns:
            New PendingOption with a shallow copy of other, or Nothing.
        """

        async def _and() -> Option[U]:
            option = await self
            if option.is_none():
                return NothingType()
            return (await settle(other, "and_")).clone()

        return PendingOption._lazy(_and)

    def and_then(self, f: Callable[[T], OptionLike[U]]) -> PendingOption[U]:
        """Chain with a function that returns an Option.

        If self settles to Some(value), calls f(value) and settles to the
        Option it returns (awaited if needed). If self is Nothing, f is not
        called. If f raises, or returns an awaitable that fails, the result
        is Nothing.

        Args:
            f: Sync or async function that takes T and returns Option[U].

        Returns:
            New PendingOption with the chained result.

        Example:
            ```python
            async def lookup(id: int) -> Option[str]:
                return Some(f"user-{id}")

            async def example():
                result = await pending_option(Some(1)).and_then(lookup)
                assert result == Some("user-1")
            ```
        """

        async def _chained() -> Option[U]:
            option = await self
            if option.is_none():
                return NothingType()
            return from_outcome(await invoke(f, option.unwrap()), "and_then").clone()

        return PendingOption._lazy(_chained)

    def filter(self, predicate: Callable[[T], bool | Awaitable[bool]]) -> PendingOption[T]:
        """Keep the value only if the predicate holds.

        If self is Nothing, the predicate is not called. If the predicate
        (awaited if needed) is falsy, raises, or fails, the result is Nothing.

        Args:
            predicate: Sync or async function returning a truth value.

        Returns:
            New PendingOption with a shallow copy of self, or Nothing.
        """

        async def _filtered() -> Option[T]:
            option = await self
            if option.is_none():
                return NothingType()
            outcome = await invoke(predicate, option.unwrap())
            if isinstance(outcome, Err):
                return collapse("filter", outcome.error)
            if outcome.value:
                return option.clone()
            return NothingType()

        return PendingOption._lazy(_filtered)

    def flatten(self: PendingOption[OptionLike[U]]) -> PendingOption[U]:
        """Flatten a PendingOption whose value is itself an Option.

        The inner value may be an Option or an awaitable of one, such as
        another PendingOption. It is settled with the usual failure rules.

        Returns:
            New PendingOption with a shallow copy of the inner Option.
        """

        async def _flattened() -> Option[U]:
            option = await self
            if option.is_none():
                return NothingType()
            return (await settle(option.unwrap(), "flatten")).clone()

        return PendingOption._lazy(_flattened)

    def map(self, f: Callable[[T], U | Awaitable[U]]) -> PendingOption[U]:
        """Apply a function to the Some value.

        If self settles to Some(value), the result is Some(f(value)), with
        the return value awaited if needed. If self is Nothing, f is not
        called. If f raises or its awaitable fails, the result is Nothing.

        Args:
            f: Sync or async function to apply to the value.

        Returns:
            New PendingOption with the transformed value.

        Example:
            ```python
            async def example():
                result = await pending_option(Some(5)).map(lambda x: x * 2)
                assert result == Some(10)
            ```
        """

        async def _mapped() -> Option[U]:
            option = await self
            if option.is_none():
                return NothingType()
            outcome = await invoke(f, option.unwrap())
            if isinstance(outcome, Err):
                return collapse("map", outcome.error)
            return Some(outcome.value)

        return PendingOption._lazy(_mapped)

    def inspect(self, f: Callable[[T], Any]) -> PendingOption[T]:
        """Call f with the Some value without changing it.

        Lazy: f runs when the returned PendingOption is awaited, through the
        settled Option's own inspect(). An awaitable returned by f is
        awaited. If f raises or its awaitable fails, the result is Nothing.

        Returns:
            New PendingOption settling to a clone of self's Option.
        """

        async def _inspected() -> Option[T]:
            option = await self
            returned: list[Any] = []
            outcome = await invoke(option.inspect, lambda value: returned.append(f(value)))
            if isinstance(outcome, Err):
                return collapse("inspect", outcome.error)
            for awaitable in returned:
                waited = await resolve(awaitable)
                if isinstance(waited, Err):
                    return collapse("inspect", waited.error)
            return outcome.value.clone()

        return PendingOption._lazy(_inspected)

    def clone(self) -> PendingOption[T]:
        """Return a new PendingOption settling to a shallow copy of self's Option.

        The copy is made by the settled Option's own clone(): a new
        container around the same value.
        """

        async def _cloned() -> Option[T]:
            return (await self).clone()

        return PendingOption._lazy(_cloned)

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> Coroutine[Any, Any, U]:
        """Settle, then return the settled Option's match(on_some, on_none).

        This is a direct pass-through: exceptions raised by the callbacks
        propagate, and an awaitable returned by a callback is returned as is.

        Returns:
            Coroutine that produces on_some(value) or on_none().
        """

        async def _matched() -> U:
            return (await self).match(on_some, on_none)

        return _matched()

    def ok_or(self, error: E) -> Coroutine[Any, Any, Result[T, E]]:
        """Convert to Result, using error for Nothing.

        Returns:
            Coroutine that produces Ok(value) or Err(error).
        """

        async def _converted() -> Result[T, E]:
            return (await self).ok_or(error)

        return _converted()

    def ok_or_else(self, f: Callable[[], E | Awaitable[E]]) -> Coroutine[Any, Any, Result[T, E]]:
        """Convert to Result, computing the error lazily.

        If self settles to Some(value), returns Ok(value) without calling f.
        Otherwise returns Err of f()'s (awaited) return value; exceptions
        from f propagate since there is no Option left to collapse into.

        Returns:
            Coroutine that produces Ok(value) or Err(f()).
        """

        async def _converted() -> Result[T, E]:
            option = await self
            if option.is_some():
                return Ok(option.unwrap())
            return Err(await drain(f()))

        return _converted()

    def or_(self, other: OptionLike[T]) -> PendingOption[T]:
        """Return self if it settles to Some, else other.

        other is settled before the settled Option's or_() is consulted. If
        other fails, the result is Nothing and or_() is never called.

        Args:
            other: An Option or an awaitable of one.

        Returns:
            New PendingOption settling to the Option returned by or_(), as
            is: self's settled Option when it is Some, else settled other.
        """

        async def _either() -> Option[T]:
            option = await self
            outcome = await resolve(other)
            if isinstance(outcome, Err):
                return collapse("or_", outcome.error)
            return option.or_(to_option(outcome.value, "or_"))

        return PendingOption._lazy(_either)

    def or_else(self, f: Callable[[], OptionLike[T]]) -> PendingOption[T]:
        """Recover from Nothing with a function returning an Option.

        Mirror image of and_then(): f takes no argument and is only called
        when self is Nothing. If f raises or its awaitable fails, the result
        is Nothing.

        Args:
            f: Sync or async zero-argument function returning Option[T].

        Returns:
            New PendingOption with a clone of self, or f's Option.
        """

        async def _recovered() -> Option[T]:
            option = await self
            if option.is_some():
                return option.clone()
            return from_outcome(await invoke(f), "or_else").clone()

        return PendingOption._lazy(_recovered)

    def xor(self, other: OptionLike[T]) -> PendingOption[T]:
        """Return whichever of self and other is Some, if exactly one is.

        A failing other counts as Nothing.
        """

        async def _exclusive() -> Option[T]:
            option = await self
            return option.xor(await settle(other, "xor")).clone()

        return PendingOption._lazy(_exclusive)

    def zip(self, other: OptionLike[U]) -> PendingOption[tuple[T, U]]:
        """Combine self and other into Some((a, b)) if both are Some.

        Settles self and other concurrently. A failing other counts as
        Nothing.
        """

        async def _zipped() -> Option[tuple[T, U]]:
            settled: list[Option[Any]] = [NothingType(), NothingType()]

            async def run(index: int, source: OptionLike[Any]) -> None:
                settled[index] = await settle(source, "zip")

            async with anyio.create_task_group() as tg:
                tg.start_soon(run, 0, self)
                tg.start_soon(run, 1, other)

            left, right = settled
            return left.zip(right).clone()

        return PendingOption._lazy(_zipped)

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Some value or the default.
        """

        async def _unwrap() -> T:
            return (await self).unwrap_or(default)

        return _unwrap()

    def unwrap_or_else(self, f: Callable[[], T | Awaitable[T]]) -> Coroutine[Any, Any, T]:
        """Unwrap with a function computing the default.

        Returns:
            Coroutine that produces the Some value or f()'s (awaited) result.
        """

        async def _unwrap() -> T:
            option = await self
            if option.is_some():
                return option.unwrap()
            return await drain(f())

        return _unwrap()

    def is_some(self) -> Coroutine[Any, Any, bool]:
        """Return a coroutine producing True if self settles to Some."""

        async def _check() -> bool:
            return (await self).is_some()

        return _check()

    def is_none(self) -> Coroutine[Any, Any, bool]:
        """Return a coroutine producing True if self settles to Nothing."""

        async def _check() -> bool:
            return (await self).is_none()

        return _check()

    def __repr__(self) -> str:
        if self._cell.is_set():
            return f"PendingOption({self._cell.get()!r})"
        return "PendingOption(<pending>)"


def pending_option(source: OptionLike[T]) -> PendingOption[T]:
    """Wrap an Option, or an awaitable producing one, in a PendingOption.

    Examples:
        >>> pending_option(Some(1))
        PendingOption(Some(value=1))
    """
    return PendingOption(source)
