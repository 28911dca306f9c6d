"""Partition a flat event stream into per-package buckets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from gostats.events.models import Action, Event


@dataclass
class PackageEvents:
    """All events observed for one package, in arrival order.

    ``start`` is the first package-level START event and ``end`` the first
    package-level event with a nonzero elapsed time (the package's own
    pass/fail line). ``seed`` is the first shuffle seed announced, or 0.
    """

    package: str
    start: Event | None = None
    end: Event | None = None
    seed: int = 0
    events: list[Event] = field(default_factory=list)

    def add(self, event: Event) -> None:
        if self.start is None and event.action == Action.START and event.is_package_event:
            self.start = event

        if self.end is None and event.elapsed != 0 and event.is_package_event:
            self.end = event

        if self.seed == 0:
            seed = event.shuffle_seed()
            if seed is not None:
                self.seed = seed

        self.events.append(event)


def group_events(events: Iterable[Event]) -> list[PackageEvents]:
    """Group events by package in first-occurrence order.

    Events without a package carry no identity and are dropped.
    """
    packages: dict[str, PackageEvents] = {}
    for event in events:
        if not event.package:
            continue
        bucket = packages.get(event.package)
        if bucket is None:
            bucket = packages[event.package] = PackageEvents(package=event.package)
        bucket.add(event)
    return list(packages.values())
