"""Programmer-error exception raised by the synchronous types."""

__all__ = ["UnwrapError"]


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong variant.

    Unwrapping Nothing, or unwrapping an Err as if it were Ok, is a bug in
    the calling code rather than an expected absence, so it is the one case
    that surfaces as an exception.
    """
