"""pending-option: Option, Result and PendingOption types for Python 3.11+.

Flat imports (preferred):
    from pending_option import Option, Some, Nothing, Result, Ok, Err
    from pending_option import PendingOption, pending_option

Submodule imports (for organization):
    from pending_option.types import Option, Result
    from pending_option.async_ import PendingOption, async_collect
    from pending_option.decorators import safe, safe_async
"""

# Configuration
from pending_option._config import OptionConfig, get_config, init

# Async
from pending_option.async_ import (
    PendingOption,
    async_collect,
    async_filter_some,
    async_first_some,
    async_iter_some,
    pending_option,
)

# Decorators
from pending_option.decorators import safe, safe_async

# Types
from pending_option.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    UnwrapError,
    collect,
    from_nullable,
    none,
    some,
)

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "OptionConfig",
    "PendingOption",
    "Result",
    "Some",
    "UnwrapError",
    "async_collect",
    "async_filter_some",
    "async_first_some",
    "async_iter_some",
    "collect",
    "from_nullable",
    "get_config",
    "init",
    "none",
    "pending_option",
    "safe",
    "safe_async",
    "some",
]
