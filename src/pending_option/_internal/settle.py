"""Settlement normalization: reduce any source to a settled Option.

Every PendingOption combinator funnels its inputs through this module. The
contract is small: whatever the source is (an Option, an awaitable of one,
a callback that may raise or return an awaitable), the outcome is either
Ok(value) or Err(exception), and an Err becomes a fresh Nothing. Only
BaseExceptions that are not Exceptions (cancellation, KeyboardInterrupt)
get through.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from pending_option._config import get_config
from pending_option._logging import FAILURE_COLLAPSED, NON_OPTION_SETTLED, get_logger
from pending_option.decorators.safe import safe_async
from pending_option.types.option import NothingType, Option, Some
from pending_option.types.result import Err, Result

__all__ = ["collapse", "drain", "from_outcome", "invoke", "is_option", "resolve", "settle", "to_option"]


logger = get_logger(__name__)


def is_option(value: object) -> bool:
    """Check if a value is Some or Nothing."""
    return isinstance(value, (Some, NothingType))


async def drain(value: Any) -> Any:
    """Await value until it is no longer awaitable."""
    # A coroutine may return another awaitable (e.g. a PendingOption).
    while inspect.isawaitable(value):
        value = await value
    return value


@safe_async
async def resolve(value: Any) -> Any:
    """Await value until it is no longer awaitable, reporting the outcome as a Result."""
    return await drain(value)


@safe_async
async def invoke(f: Callable[..., Any], *args: Any) -> Any:
    """Call f(*args) and await its return value if needed, reporting the outcome as a Result.

    A synchronous raise and a failing awaitable both come back as Err.
    """
    return await drain(f(*args))


def collapse(stage: str, error: BaseException) -> NothingType:
    """Map a failure to a fresh Nothing, tracing it when logging is enabled."""
    if get_config().tracing:
        logger.debug(
            FAILURE_COLLAPSED,
            stage=stage,
            error=repr(error),
            error_type=type(error).__name__,
        )
    return NothingType()


def to_option(value: Any, stage: str) -> Option[Any]:
    """Return value if it is an Option, else a fresh Nothing."""
    if is_option(value):
        return value
    if get_config().log_level is not None:
        logger.warning(NON_OPTION_SETTLED, stage=stage, value_type=type(value).__name__)
    return NothingType()


def from_outcome(outcome: Result[Any, Exception], stage: str) -> Option[Any]:
    """Turn the Result of resolve()/invoke() into an Option."""
    if isinstance(outcome, Err):
        return collapse(stage, outcome.error)
    return to_option(outcome.value, stage)


async def settle(source: Any, stage: str = "settle") -> Option[Any]:
    """Reduce an Option or an awaitable of one to a settled Option.

    An Option is returned as is (no copy is made here; combinators copy on
    the way out). Anything that fails or settles to a non-Option becomes a
    fresh Nothing.
    """
    if is_option(source):
        return source
    return from_outcome(await resolve(source), stage)
