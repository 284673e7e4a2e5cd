"""Async utilities: PendingOption and async-aware Option helpers.

This module provides async-aware Option operations:
- PendingOption: Wrapper for composing async Option operations
- async_collect: Collect awaitables of Options into Option of list
- async_filter_some / async_first_some / async_iter_some: Option-aware iteration

Examples:
    >>> from pending_option.async_ import PendingOption, async_collect
    >>>
    >>> async def find(id: int) -> Option[dict]:
    ...     return Some({"id": id})
    >>>
    >>> async def main():
    ...     # Use PendingOption for chaining
    ...     found = await PendingOption(find(1)).map(lambda d: d["id"])
    ...
    ...     # Collect multiple async options
    ...     everything = await async_collect([find(1), find(2), find(3)])
"""

from pending_option.async_.itertools import (
    async_collect,
    async_filter_some,
    async_first_some,
    async_iter_some,
)
from pending_option.async_.pending import PendingOption, pending_option

__all__ = [
    "PendingOption",
    "async_collect",
    "async_filter_some",
    "async_first_some",
    "async_iter_some",
    "pending_option",
]
