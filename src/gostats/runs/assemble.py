"""Assemble per-package runs into a whole TestRun."""

from __future__ import annotations

from collections.abc import Iterable

from gostats.core.logging import get_logger
from gostats.events.grouping import PackageEvents, group_events
from gostats.events.models import Event
from gostats.runs.models import TestRun
from gostats.runs.tree import build_package_run

log = get_logger("gostats.runs.assemble")


def assemble(buckets: Iterable[PackageEvents]) -> TestRun:
    """Build every package and fold the run-wide time bounds.

    Any OrphanSubtestError propagates; no partial run is returned.
    """
    run = TestRun()
    for bucket in buckets:
        pkg = build_package_run(bucket)
        if pkg.start is not None and (run.start is None or pkg.start < run.start):
            run.start = pkg.start
        if pkg.end is not None and (run.end is None or pkg.end > run.end):
            run.end = pkg.end
        run.packages.append(pkg)
    return run


def build_test_run(events: Iterable[Event]) -> TestRun:
    """Build the whole run model from a decoded event stream."""
    run = assemble(group_events(events))
    log.debug("test_run_built", packages=len(run.packages), tests=run.count())
    return run
