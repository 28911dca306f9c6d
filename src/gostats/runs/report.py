"""Structured test run summaries.

Output schema for summarize_test_run:
{
    "failed": bool,
    "total_tests": int,
    "duration_seconds": float,
    "packages": [
        {
            "package": str,
            "failed": bool,
            "tests": int,
            "seed": int,              # only when run with -shuffle
            "duration_seconds": float,
            "failures": [str, ...]    # full names, depth-first
        },
        ...
    ]
}
"""

from typing import Any

from gostats.runs.models import Test, TestRun


def collect_failures(tests: list[Test]) -> list[Test]:
    """All failed tests in the forest, including subtests, depth-first."""
    failed: list[Test] = []
    for test in tests:
        if test.failed:
            failed.append(test)
        failed.extend(collect_failures(test.subtests))
    return failed


def summarize_test_run(run: TestRun) -> dict[str, Any]:
    """Build a JSON-serializable summary of a test run."""
    packages = []
    for pkg in run.packages:
        entry: dict[str, Any] = {
            "package": pkg.name,
            "failed": pkg.failed,
            "tests": pkg.count(),
            "duration_seconds": round(pkg.duration.total_seconds(), 3),
            "failures": [t.full_name for t in collect_failures(pkg.tests)],
        }
        if pkg.seed:
            entry["seed"] = pkg.seed
        packages.append(entry)

    return {
        "failed": run.failed,
        "total_tests": run.count(),
        "duration_seconds": round(run.duration.total_seconds(), 3),
        "packages": packages,
    }
