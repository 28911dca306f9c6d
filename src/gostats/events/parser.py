"""Decoder for `go test -json` output (one JSON object per line)."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from gostats.core.errors import DecodeError
from gostats.events.models import Action, Event

__all__ = ["decode_event", "decode_events"]


def _str_field(obj: dict[str, Any], key: str, line_no: int) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError.event(line_no, f"{key} must be a string, got {type(value).__name__}")
    return value


def _parse_time(raw: str, line_no: int) -> datetime | None:
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as e:
        raise DecodeError.event(line_no, f"invalid Time {raw!r}") from e
    if parsed.tzinfo is None:
        raise DecodeError.event(line_no, f"Time {raw!r} has no UTC offset")
    return parsed


def decode_event(line: str, line_no: int = 1) -> Event:
    """Decode a single JSON event line."""
    try:
        obj = json.loads(line)
    except json.JSONDecodeError as e:
        raise DecodeError.event(line_no, f"couldn't unmarshal json: {e.msg}") from e
    if not isinstance(obj, dict):
        raise DecodeError.event(line_no, "expected a JSON object")

    elapsed = obj.get("Elapsed", 0)
    if elapsed is None:
        elapsed = 0
    if isinstance(elapsed, bool) or not isinstance(elapsed, int | float):
        raise DecodeError.event(line_no, "Elapsed must be a number")

    return Event(
        action=Action.parse(_str_field(obj, "Action", line_no)),
        package=_str_field(obj, "Package", line_no),
        test=_str_field(obj, "Test", line_no),
        output=_str_field(obj, "Output", line_no),
        time=_parse_time(_str_field(obj, "Time", line_no), line_no),
        elapsed=float(elapsed),
    )


def decode_events(content: str) -> list[Event]:
    """Decode a whole `go test -json` stream. Blank lines are ignored.

    Raises:
        DecodeError: On the first line that is not a valid event object.
    """
    events: list[Event] = []
    for line_no, line in enumerate(content.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        events.append(decode_event(line, line_no))
    return events
