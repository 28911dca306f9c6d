"""File-level entry points.

These read toolchain output from disk, decode it and hand the records to
the aggregators. Decoding and I/O errors surface here; the aggregators
themselves only raise OrphanSubtestError.
"""

from __future__ import annotations

from pathlib import Path

from gostats.config.models import GoStatsConfig
from gostats.core.errors import DecodeError, InputNotFoundError
from gostats.core.logging import get_logger
from gostats.coverage.aggregate import build_coverage
from gostats.coverage.gotool import run_cover_func
from gostats.coverage.models import Coverage
from gostats.coverage.parsers import decode_func_report, read_func_report, read_profile
from gostats.events.parser import decode_events
from gostats.runs.assemble import build_test_run
from gostats.runs.models import TestRun

log = get_logger("gostats.api")


def tests_from_text(content: str) -> TestRun:
    """Build a TestRun from `go test -json` output."""
    return build_test_run(decode_events(content))


def read_tests(path: Path) -> TestRun:
    """Build a TestRun from a saved `go test -json` file."""
    if not path.exists():
        raise InputNotFoundError.for_path(str(path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DecodeError.unreadable(str(path), str(e)) from e
    run = tests_from_text(content)
    log.info(
        "tests_read",
        path=str(path),
        packages=len(run.packages),
        tests=run.count(),
        failed=run.failed,
    )
    return run


def read_coverage(
    profile_path: Path,
    func_path: Path | None = None,
    *,
    trim_prefix: str | None = None,
    config: GoStatsConfig | None = None,
) -> Coverage:
    """Build a Coverage tree from a profile and its function report.

    Args:
        profile_path: `go test -coverprofile` output.
        func_path: Saved `go tool cover -func` output. When None, the report
                   is produced by running the go tool on the profile.
        trim_prefix: Module path removed from package names.
                     Defaults to config.coverage.trim_prefix.
        config: Loaded configuration (defaults if None).
    """
    config = config or GoStatsConfig()
    if trim_prefix is None:
        trim_prefix = config.coverage.trim_prefix

    profile = read_profile(profile_path)
    if func_path is not None:
        funcs = read_func_report(func_path)
    else:
        output = run_cover_func(
            profile_path, binary=config.go.binary, timeout=config.go.timeout_sec
        )
        funcs = decode_func_report(output)

    coverage = build_coverage(profile.blocks, funcs.functions, trim_prefix)
    log.info(
        "coverage_read",
        path=str(profile_path),
        mode=str(profile.mode),
        packages=len(coverage.packages),
        percent=coverage.percent,
    )
    return coverage
