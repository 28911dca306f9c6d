"""Test run data model.

A TestRun holds one PackageRun per package; each PackageRun owns a forest
of root Tests, and every Test owns its subtests exclusively.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from gostats.events.models import Action, Event

SUBTEST_DELIM = "/"


def _span(start: datetime | None, end: datetime | None) -> timedelta:
    if start is None or end is None:
        return timedelta(0)
    return end - start


@dataclass
class Test:
    """A single test, which may have subtests."""

    __test__ = False  # not a pytest test class

    full_name: str  # e.g. "TestParse/empty/trailing"
    package: str
    actions: list[Action] = field(default_factory=list)
    subtests: list[Test] = field(default_factory=list)
    start: datetime | None = None
    end: datetime | None = None

    @property
    def name(self) -> str:
        """Name without the parent test prefix."""
        return self.full_name.rsplit(SUBTEST_DELIM, 1)[-1]

    @property
    def failed(self) -> bool:
        return Action.FAIL in self.actions

    @property
    def skipped(self) -> bool:
        return Action.SKIP in self.actions

    @property
    def duration(self) -> timedelta:
        return _span(self.start, self.end)

    def count(self) -> int:
        """Total number of tests, including this one and all subtests."""
        return 1 + sum(sub.count() for sub in self.subtests)

    def test(self, name: str) -> Test | None:
        """Return this test if ``name`` is its full name, else search the subtests."""
        if name.casefold() == self.full_name.casefold():
            return self
        return find_test(name, self.subtests)

    def is_parent_of(self, full_name: str) -> bool:
        return full_name.startswith(self.full_name + SUBTEST_DELIM)

    def record(self, event: Event) -> None:
        """Fold one event into this test.

        Start only moves earlier and end only moves later, so events that
        arrive out of order still produce the widest observed span.
        """
        self.actions.append(event.action)
        if event.time is None:
            return
        if event.action in (Action.START, Action.RUN):
            if self.start is None or event.time < self.start:
                self.start = event.time
        elif event.action in (Action.PASS, Action.FAIL, Action.OUTPUT):
            if self.end is None or event.time > self.end:
                self.end = event.time


def find_test(name: str, tests: list[Test]) -> Test | None:
    """Depth-first search by full or short name, case-insensitive."""
    wanted = name.casefold()
    for test in tests:
        if wanted in (test.full_name.casefold(), test.name.casefold()):
            return test
        found = find_test(name, test.subtests)
        if found is not None:
            return found
    return None


@dataclass
class PackageRun:
    """Results of one package's test run.

    ``seed`` is populated when the package ran with ``-shuffle``; otherwise 0.
    ``failed`` comes from the package's own terminal event, not its tests.
    """

    name: str
    tests: list[Test] = field(default_factory=list)
    start: datetime | None = None
    end: datetime | None = None
    seed: int = 0
    failed: bool = False

    @property
    def duration(self) -> timedelta:
        return _span(self.start, self.end)

    def count(self) -> int:
        return sum(test.count() for test in self.tests)

    def test(self, name: str) -> Test | None:
        return find_test(name, self.tests)

    def failures(self) -> list[Test]:
        """Root tests that failed."""
        return [test for test in self.tests if test.failed]


@dataclass
class TestRun:
    """Results of a whole `go test` invocation, possibly spanning packages."""

    __test__ = False

    packages: list[PackageRun] = field(default_factory=list)
    start: datetime | None = None
    end: datetime | None = None

    @property
    def duration(self) -> timedelta:
        return _span(self.start, self.end)

    @property
    def failed(self) -> bool:
        return any(pkg.failed for pkg in self.packages)

    def count(self) -> int:
        return sum(pkg.count() for pkg in self.packages)

    def package(self, name: str) -> PackageRun | None:
        wanted = name.casefold()
        for pkg in self.packages:
            if pkg.name.casefold() == wanted:
                return pkg
        return None
