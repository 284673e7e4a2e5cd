"""@safe and @safe_async: report exceptions as Err instead of raising.

These are the exception boundary of the package. PendingOption settles
every source and callback through `safe_async`, then turns an Err into
Nothing; `safe` is the synchronous counterpart for callers who want the
Err itself.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from pending_option.types.result import Err, Ok

__all__ = ["safe", "safe_async"]

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E", bound=BaseException)

Catchable = tuple[type[BaseException], ...]


def _catchable(exceptions: Catchable | None) -> Catchable:
    # BaseExceptions such as cancellation are only caught when asked for.
    return exceptions if exceptions is not None else (Exception,)


def _decorate(wrapper: Any, func: Callable[..., Any] | None) -> Any:
    """Support both the bare (@safe) and the called (@safe(...)) forms."""
    return wrapper if func is None else wrapper(func)


@overload
def safe(func: Callable[P, T]) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[P, T] | None = None,
    *,
    exceptions: Catchable | None = None,
) -> Any:
    """Make a function return Ok(result), or Err(exception) when it raises.

    Args:
        func: The function to wrap (bare decorator form).
        exceptions: Exception types reported as Err. Others propagate.
            Defaults to (Exception,).

    Example:
        ```python
        @safe
        def parse_port(text: str) -> int:
            return int(text)

        parse_port("8080")   # Ok(value=8080)
        parse_port("http")   # Err(error=ValueError(...))
        parse_port("80").ok()  # Some(value=80)
        ```
    """
    catch = _catchable(exceptions)

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., T], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            return Err(e)

    return _decorate(wrapper, func)


@overload
def safe_async(
    func: Callable[P, Awaitable[T] | T],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async(
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T] | T]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async(
    func: Callable[P, Awaitable[T] | T] | None = None,
    *,
    exceptions: Catchable | None = None,
) -> Any:
    """Async form of @safe that also accepts plain functions.

    The wrapped call's return value is awaited when it is awaitable, so a
    synchronous raise and a failing awaitable both come back as Err. This
    is what lets PendingOption treat sync and async callbacks alike.

    Args:
        func: The function to wrap (bare decorator form).
        exceptions: Exception types reported as Err. Others propagate,
            including cancellation. Defaults to (Exception,).

    Example:
        ```python
        @safe_async
        async def load(user_id: int) -> dict:
            return await db.fetch_user(user_id)

        outcome = await load(1)  # Ok({...}) or Err(LookupError(...))
        ```
    """
    catch = _catchable(exceptions)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        try:
            result = wrapped(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
        except catch as e:
            return Err(e)
        return Ok(result)

    return _decorate(wrapper, func)
