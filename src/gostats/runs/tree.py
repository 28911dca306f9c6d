"""Rebuild the test/subtest tree of one package from its flat event stream.

Two passes:
1. fold every event into a name -> Test index (no parent links yet);
2. walk the index in full-name order and attach each test to its deepest
   already-placed ancestor.

Sorting by full name guarantees a parent is placed before any of its
descendants, since a parent's name is a strict prefix of theirs.
"""

from __future__ import annotations

from collections.abc import Iterable

from gostats.core.errors import OrphanSubtestError
from gostats.core.logging import get_logger
from gostats.events.grouping import PackageEvents
from gostats.events.models import Action, Event
from gostats.runs.models import SUBTEST_DELIM, PackageRun, Test

log = get_logger("gostats.runs.tree")


def fold_events(events: Iterable[Event]) -> dict[str, Test]:
    """Index tests by full name, folding every event for that name."""
    tests: dict[str, Test] = {}
    for event in events:
        if not event.test:
            continue
        test = tests.get(event.test)
        if test is None:
            test = tests[event.test] = Test(full_name=event.test, package=event.package)
        test.record(event)
    return tests


def _attach(root: Test, sub: Test) -> None:
    node = root
    while True:
        parent = next((child for child in node.subtests if child.is_parent_of(sub.full_name)), None)
        if parent is None:
            node.subtests.append(sub)
            return
        node = parent


def nest_tests(tests: Iterable[Test]) -> list[Test]:
    """Arrange tests into a forest of root tests, in full-name order.

    Raises:
        OrphanSubtestError: A subtest's top-level test was never observed.
    """
    roots: dict[str, Test] = {}
    for test in sorted(tests, key=lambda t: t.full_name):
        segments = [s for s in test.full_name.split(SUBTEST_DELIM) if s]
        if not segments:
            continue
        if len(segments) == 1:
            roots[test.full_name] = test
            continue
        root = roots.get(segments[0])
        if root is None:
            raise OrphanSubtestError.for_test(test.full_name, test.package)
        _attach(root, test)
    return list(roots.values())


def build_tests(events: Iterable[Event]) -> list[Test]:
    return nest_tests(fold_events(events).values())


def build_package_run(bucket: PackageEvents) -> PackageRun:
    """Build one package's results. Timing and outcome come from package-level events."""
    tests = build_tests(bucket.events)

    start = bucket.start.time if bucket.start is not None else None
    end = bucket.end.time if bucket.end is not None else None
    failed = bucket.end is not None and bucket.end.action == Action.FAIL

    log.debug(
        "package_run_built",
        package=bucket.package,
        events=len(bucket.events),
        root_tests=len(tests),
        failed=failed,
    )
    return PackageRun(
        name=bucket.package,
        tests=tests,
        start=start,
        end=end,
        seed=bucket.seed,
        failed=failed,
    )
