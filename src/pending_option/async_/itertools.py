"""Async iteration utilities for Option types.

Each helper settles its inputs with the same rules as PendingOption: an
input that raises, fails, or produces something other than an Option
counts as Nothing.

Examples:
    >>> async def find_items(ids: list[int]) -> list[Item]:
    ...     lookups = [find_item(id) for id in ids]
    ...     return await async_filter_some(lookups)
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Iterable
from typing import TypeVar, Union

import anyio

from pending_option._internal.settle import settle
from pending_option.types.option import NothingType, Option, Some

__all__ = [
    "async_collect",
    "async_filter_some",
    "async_first_some",
    "async_iter_some",
]

T = TypeVar("T")

OptionLike = Union[Option[T], Awaitable[Option[T]]]


async def _settle_all(sources: Iterable[OptionLike[T]]) -> list[Option[T]]:
    """Settle every source concurrently, keeping input order."""
    source_list = list(sources)
    settled: list[Option[T]] = [NothingType()] * len(source_list)

    async def run(index: int, source: OptionLike[T]) -> None:
        settled[index] = await settle(source, "collect")

    async with anyio.create_task_group() as tg:
        for index, source in enumerate(source_list):
            tg.start_soon(run, index, source)
    return settled


async def async_collect(
    sources: Iterable[OptionLike[T]],
) -> Option[list[T]]:
    """Collect Options (or awaitables of them) into an Option of list.

    Settles all sources concurrently in an anyio task group. Returns
    Some(values) only if every source settles to Some.

    Args:
        sources: Options, PendingOptions, or other awaitables of Options.

    Returns:
        Some(list[T]) if all are Some, otherwise Nothing.

    Examples:
        >>> async def get_value(n: int) -> Option[int]:
        ...     return Some(n * 2)
        >>>
        >>> async def example():
        ...     values = await async_collect([get_value(1), get_value(2)])
        ...     assert values == Some([2, 4])
    """
    values: list[T] = []
    for option in await _settle_all(sources):
        if isinstance(option, NothingType):
            return NothingType()
        values.append(option.value)
    return Some(values)


async def async_filter_some(
    sources: Iterable[OptionLike[T]],
) -> list[T]:
    """Collect only the Some values, discarding Nothing.

    Settles all sources concurrently and returns the present values in
    input order.

    Examples:
        >>> async def maybe_value(n: int) -> Option[int]:
        ...     return Some(n) if n > 0 else Nothing
        >>>
        >>> async def example():
        ...     values = await async_filter_some([maybe_value(n) for n in [-1, 2, -3, 4]])
        ...     assert values == [2, 4]
    """
    return [option.value for option in await _settle_all(sources) if isinstance(option, Some)]


async def async_first_some(
    sources: Iterable[OptionLike[T]],
) -> Option[T]:
    """Return the first source that settles to Some.

    Settles sources one after another and stops at the first Some, so later
    sources are never awaited.

    Returns:
        A fresh copy of the first Some, or Nothing if none is Some.
    """
    for source in sources:
        option = await settle(source, "first_some")
        if isinstance(option, Some):
            return option.clone()
    return NothingType()


async def async_iter_some(
    async_iterable: AsyncIterable[OptionLike[T]],
) -> AsyncIterator[T]:
    """Yield only the Some values from an async iterable.

    Items may be Options or awaitables of Options.

    Yields:
        Values from the items that settle to Some.

    Examples:
        >>> async def generate():
        ...     yield Some(1)
        ...     yield Nothing
        ...     yield Some(2)
        >>>
        >>> async def example():
        ...     values = [v async for v in async_iter_some(generate())]
        ...     assert values == [1, 2]
    """
    async for item in async_iterable:
        option = await settle(item, "iter_some")
        if isinstance(option, Some):
            yield option.value
