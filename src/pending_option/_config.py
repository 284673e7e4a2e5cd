"""Library configuration: OptionConfig, init, and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from pending_option._logging import configure_logging

__all__ = [
    "OptionConfig",
    "get_config",
    "init",
    "reset_config",
]

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class OptionConfig:
    """Configuration for pending-option.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log records as JSON instead of console output.
        trace_failures: Emit a debug event whenever a failure is collapsed
            to Nothing. Only effective while log_level is set.
    """

    log_level: str | None = None
    json_logs: bool = True
    trace_failures: bool = True

    @property
    def tracing(self) -> bool:
        """True when collapsed failures should be logged."""
        return self.log_level is not None and self.trace_failures


# Global configuration (set by init() or detected on first use)
_config: OptionConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def _detect_log_level() -> str | None:
    """Read PENDING_OPTION_LOG_LEVEL, ignoring unknown level names."""
    raw = os.environ.get("PENDING_OPTION_LOG_LEVEL", "").strip().upper()
    if not raw:
        return None
    if not isinstance(logging.getLevelName(raw), int):
        logging.warning("Unknown PENDING_OPTION_LOG_LEVEL value '%s', logging stays off", raw)
        return None
    return raw


def _detect_config() -> OptionConfig:
    """Build a config from the environment.

    Variables:
        PENDING_OPTION_LOG_LEVEL: level name; unset keeps the library silent.
        PENDING_OPTION_JSON_LOGS: "0"/"false" switches to console output.
        PENDING_OPTION_TRACE_FAILURES: "0"/"false" hides collapsed failures.
    """
    return OptionConfig(
        log_level=_detect_log_level(),
        json_logs=_env_flag("PENDING_OPTION_JSON_LOGS", True),
        trace_failures=_env_flag("PENDING_OPTION_TRACE_FAILURES", True),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    trace_failures: bool = True,
) -> OptionConfig:
    """Initialize pending-option with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON records (True) or console records (False).
        trace_failures: Log failures that were collapsed to Nothing.

    Returns:
        The OptionConfig that was set.

    Example:
        ```python
        import pending_option

        # Log every collapsed failure as a JSON record on stderr
        pending_option.init(log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    _config = OptionConfig(
        log_level=log_level.upper() if log_level is not None else None,
        json_logs=json_logs,
        trace_failures=trace_failures,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=json_logs)

    return _config


def get_config() -> OptionConfig:
    """Get the current configuration.

    Falls back to the environment when init() has not been called. An
    environment-provided log level configures logging on first use.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _detect_config()
        if _config.log_level is not None:
            configure_logging(_config.log_level, json_output=_config.json_logs)
    return _config


def reset_config() -> None:
    """Forget the current configuration so the next get_config() re-detects it."""
    global _config  # noqa: PLW0603
    _config = None
