"""gostats - test and coverage statistics for the Go toolchain."""

from gostats.api import read_coverage, read_tests, tests_from_text
from gostats.core.errors import (
    DecodeError,
    GoStatsError,
    GoToolError,
    InputNotFoundError,
    OrphanSubtestError,
)
from gostats.coverage import (
    Coverage,
    FileCoverage,
    FunctionCoverage,
    PackageCoverage,
    build_coverage,
)
from gostats.events import Action, Event
from gostats.runs import PackageRun, Test, TestRun, build_test_run

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "build_coverage",
    "build_test_run",
    "read_coverage",
    "read_tests",
    "tests_from_text",
    # Models
    "Action",
    "Coverage",
    "Event",
    "FileCoverage",
    "FunctionCoverage",
    "PackageCoverage",
    "PackageRun",
    "Test",
    "TestRun",
    # Errors
    "DecodeError",
    "GoStatsError",
    "GoToolError",
    "InputNotFoundError",
    "OrphanSubtestError",
]
