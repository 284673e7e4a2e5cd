"""Core types: Option, Some, Nothing, Result, Ok, Err."""

from pending_option.types.errors import UnwrapError
from pending_option.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    none,
    some,
)
from pending_option.types.result import Err, Ok, Result, collect

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "collect",
    "from_nullable",
    "none",
    "some",
]
