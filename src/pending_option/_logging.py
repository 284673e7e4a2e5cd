"""Structured logging for pending-option.

The library reports two events, both through structlog:

- ``failure_collapsed`` (debug): an Exception raised by a source, a
  callback, or an awaitable was turned into Nothing. Carries ``stage`` (the
  combinator that absorbed it), ``error`` and ``error_type``.
- ``non_option_settled`` (warning): an awaitable settled to something that
  is not an Option. Carries ``stage`` and ``value_type``.

Nothing is emitted until `pending_option.init()` or the
PENDING_OPTION_LOG_LEVEL environment variable enables logging (see
`_config`). Once enabled, records are rendered by a ProcessorFormatter on
the root handler, so stdlib records from the application render the same
way, as JSON or as console output.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    "FAILURE_COLLAPSED",
    "NON_OPTION_SETTLED",
    "LogHook",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
]

FAILURE_COLLAPSED = "failure_collapsed"
NON_OPTION_SETTLED = "non_option_settled"

LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call hook with a copy of every event dict that passes the level filter.

    Example:
        ```python
        collapsed = []

        def record(event: dict[str, Any]) -> None:
            if event["event"] == FAILURE_COLLAPSED:
                collapsed.append(event)

        add_log_hook(record)
        ```
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _log_hooks.clear()


def _run_hooks(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        # A failing hook must not turn a log call into an error.
        with contextlib.suppress(Exception):
            hook(event_dict.copy())
    return event_dict


def _pre_chain() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Loggers are not cached, so calling this again (for example through
    `init()`) takes effect for loggers created at import time.

    Args:
        level: Root level name ("DEBUG", "INFO", "WARNING", ...). Unknown
            names fall back to INFO.
        json_output: Render JSON lines (True) or colored console output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to name."""
    return structlog.get_logger(name)
