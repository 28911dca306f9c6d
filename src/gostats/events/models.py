"""`go test -json` event model.

See https://pkg.go.dev/cmd/test2json#hdr-Output_Format for the wire format.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

SHUFFLE_FLAG = "-test.shuffle"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class Action(StrEnum):
    """Test lifecycle action.

    Tokens outside the known set decode to UNDEFINED rather than failing,
    so newer toolchains (pause, cont, bench, ...) do not break a run.
    """

    START = "start"
    RUN = "run"
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"
    OUTPUT = "output"
    UNDEFINED = "undefined"

    @classmethod
    def parse(cls, token: str) -> Action:
        try:
            return cls(token.lower())
        except ValueError:
            return cls.UNDEFINED

    @property
    def is_final(self) -> bool:
        """No further events are expected for a test after a final action."""
        return self in (Action.PASS, Action.FAIL, Action.SKIP)


@dataclass(frozen=True, slots=True)
class Event:
    """One observed action during a test run."""

    action: Action
    package: str = ""
    test: str = ""  # empty for package-level events
    output: str = ""
    time: datetime | None = None
    elapsed: float = 0.0  # seconds; set on terminal actions only

    @property
    def is_package_event(self) -> bool:
        return self.test == "" and self.package != ""

    def shuffle_seed(self) -> int | None:
        """Seed announced by ``-test.shuffle`` output, if this event carries one."""
        idx = self.output.find(SHUFFLE_FLAG)
        if idx == -1:
            return None
        remainder = self.output[idx + len(SHUFFLE_FLAG) :].strip(" \n")
        if not _INT_RE.fullmatch(remainder):
            return None
        seed = int(remainder)
        if not _INT64_MIN <= seed <= _INT64_MAX:
            return None
        return seed
