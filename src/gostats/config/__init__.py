"""Config module exports."""

from gostats.config.loader import config_paths, load_config
from gostats.config.models import (
    CoverageConfig,
    GoStatsConfig,
    GoToolConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "config_paths",
    "load_config",
    "CoverageConfig",
    "GoStatsConfig",
    "GoToolConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
