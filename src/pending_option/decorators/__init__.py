"""Decorators: @safe and @safe_async."""

from pending_option.decorators.safe import safe, safe_async

__all__ = [
    "safe",
    "safe_async",
]
