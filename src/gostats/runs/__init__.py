"""Test run aggregation: tree building and run assembly."""

from gostats.runs.assemble import assemble, build_test_run
from gostats.runs.models import PackageRun, Test, TestRun, find_test
from gostats.runs.report import collect_failures, summarize_test_run
from gostats.runs.tree import build_package_run, build_tests, fold_events, nest_tests

__all__ = [
    # Models
    "PackageRun",
    "Test",
    "TestRun",
    "find_test",
    # Building
    "assemble",
    "build_package_run",
    "build_test_run",
    "build_tests",
    "fold_events",
    "nest_tests",
    # Report
    "collect_failures",
    "summarize_test_run",
]
