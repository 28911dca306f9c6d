"""`go test -json` events: model, decoding and per-package grouping."""

from gostats.events.grouping import PackageEvents, group_events
from gostats.events.models import Action, Event
from gostats.events.parser import decode_event, decode_events

__all__ = [
    "Action",
    "Event",
    "PackageEvents",
    "decode_event",
    "decode_events",
    "group_events",
]
