"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOSTATS__SECTION__KEY)
3. Repo YAML (.gostats.yaml)
4. Global YAML (~/.config/gostats/config.yaml)
5. Built-in defaults (this file)

Examples:
    GOSTATS__LOGGING__LEVEL=DEBUG
    GOSTATS__COVERAGE__TRIM_PREFIX=github.com/acme/widgets
    GOSTATS__GO__BINARY=/usr/local/go/bin/go
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]

_STREAM_DESTINATIONS = frozenset({"stderr", "stdout"})


class LogOutputConfig(BaseModel):
    """One log sink: a console stream or an append-only file."""

    format: LogFormat = "console"
    destination: str = "stderr"
    level: LogLevel | None = None  # None: use LoggingConfig.level

    @field_validator("destination")
    @classmethod
    def resolve_file_destination(cls, v: str) -> str:
        """Keep stream names; expand "~" in file paths and require them absolute."""
        if v in _STREAM_DESTINATIONS:
            return v
        resolved = Path(v).expanduser()
        if not resolved.is_absolute():
            raise ValueError(f"log file must be an absolute path, got {v!r}")
        return str(resolved)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        GOSTATS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The CLI raises it to DEBUG with --verbose.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CoverageConfig(BaseModel):
    """Coverage aggregation options.

    Env vars:
        GOSTATS__COVERAGE__TRIM_PREFIX: Module path stripped from package names
    """

    trim_prefix: str = Field(
        default="",
        description="Module import path removed from the front of package display names. "
        "Function rows are still matched on the full import path.",
    )

    @field_validator("trim_prefix")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class GoToolConfig(BaseModel):
    """Go toolchain invocation.

    Env vars:
        GOSTATS__GO__BINARY: go executable (name on PATH or absolute path)
        GOSTATS__GO__TIMEOUT_SEC: Timeout for `go tool cover -func`
    """

    binary: str = Field(default="go", description="go executable to run.")
    timeout_sec: float = Field(
        default=60.0,
        description="Timeout for `go tool cover -func`. Large profiles need more.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class GoStatsConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    go: GoToolConfig = Field(default_factory=GoToolConfig)
