"""Core module exports."""

from gostats.core.errors import (
    ConfigError,
    DecodeError,
    ErrorCode,
    GoStatsError,
    GoToolError,
    InputNotFoundError,
    OrphanSubtestError,
)
from gostats.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from gostats.core.percent import percent

__all__ = [
    # Errors
    "ConfigError",
    "DecodeError",
    "ErrorCode",
    "GoStatsError",
    "GoToolError",
    "InputNotFoundError",
    "OrphanSubtestError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Math
    "percent",
]
