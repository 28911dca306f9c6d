"""Structured logging for gostats.

structlog events are routed through stdlib logging so that every configured
output (console stream or file) gets its own level and renderer. A run id,
set once per CLI invocation, is stamped on every event so lines from one
run can be grepped out of a shared log file.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

from gostats.core.errors import GoStatsError

if TYPE_CHECKING:
    from gostats.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

_STREAMS = ("stderr", "stdout")


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Set the run id, generating a short random one when none is given."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    rid = get_run_id()
    if rid is not None:
        event_dict.setdefault("run_id", rid)
    return event_dict


def _expand_error(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Flatten ``error=<GoStatsError>`` into its name, code and details."""
    error = event_dict.get("error")
    if isinstance(error, GoStatsError):
        event_dict["error"] = error.error_name
        event_dict["error_code"] = error.code.value
        event_dict["error_message"] = error.message
        if error.details:
            event_dict["error_details"] = error.details
    return event_dict


def _level(name: str | None, default: int = logging.INFO) -> int:
    if not name:
        return default
    return logging.getLevelNamesMapping().get(name.upper(), default)


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
        _expand_error,  # type: ignore[list-item]
    ]


def _open_handler(destination: str) -> logging.Handler:
    if destination in _STREAMS:
        # resolved per call so pytest/click stream capture is honoured
        return logging.StreamHandler(getattr(sys, destination))
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _make_formatter(
    output: LogOutputConfig, pre_chain: list[structlog.types.Processor]
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        colors = output.destination in _STREAMS and getattr(sys, output.destination).isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        foreign_pre_chain=pre_chain,
    )


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
) -> None:
    """(Re)configure structlog and the root stdlib logger.

    Args:
        config: Logging section of the loaded config. When given, ``level``
                and ``json_format`` are ignored.
        json_format: Render a single stderr output as JSON lines.
        level: Level for the single stderr output.
    """
    from gostats.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level.upper(),  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _level(config.level)
    processors = _processors()

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # reconfigured on every CLI invocation
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(root_level)

    for output in config.outputs:
        handler = _open_handler(output.destination)
        handler.setLevel(_level(output.level, root_level))
        handler.setFormatter(_make_formatter(output, processors))
        root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a lazy logger for the stdlib logger ``name``.

    Safe to call at import time: the logger resolves the active
    configuration on every call. The name is rendered as ``logger``.
    """
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
