"""Root conftest.py - shared event and coverage fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from gostats.events.models import Action, Event

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)

EventFactory = Callable[..., Event]


def at(ms: int) -> datetime:
    """Timestamp ``ms`` milliseconds after T0."""
    return T0 + timedelta(milliseconds=ms)


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def make_event() -> EventFactory:
    """Build an Event with test-friendly defaults (package "pkg", time T0)."""

    def _make(
        action: Action,
        test: str = "",
        *,
        package: str = "pkg",
        ms: int | None = 0,
        output: str = "",
        elapsed: float = 0.0,
    ) -> Event:
        return Event(
            action=action,
            package=package,
            test=test,
            output=output,
            time=None if ms is None else at(ms),
            elapsed=elapsed,
        )

    return _make


GO_TEST_JSON = """\
{"Time":"2024-05-01T12:00:00Z","Action":"start","Package":"github.com/acme/widgets/parse"}
{"Time":"2024-05-01T12:00:00.010Z","Action":"output","Package":"github.com/acme/widgets/parse","Output":"-test.shuffle 1688261989310323000\\n"}
{"Time":"2024-05-01T12:00:00.020Z","Action":"run","Package":"github.com/acme/widgets/parse","Test":"TestParse"}
{"Time":"2024-05-01T12:00:00.030Z","Action":"run","Package":"github.com/acme/widgets/parse","Test":"TestParse/empty"}
{"Time":"2024-05-01T12:00:00.040Z","Action":"output","Package":"github.com/acme/widgets/parse","Test":"TestParse/empty","Output":"    parse_test.go:12: boom\\n"}
{"Time":"2024-05-01T12:00:00.050Z","Action":"fail","Package":"github.com/acme/widgets/parse","Test":"TestParse/empty","Elapsed":0.02}
{"Time":"2024-05-01T12:00:00.060Z","Action":"run","Package":"github.com/acme/widgets/parse","Test":"TestParse/full"}
{"Time":"2024-05-01T12:00:00.070Z","Action":"pass","Package":"github.com/acme/widgets/parse","Test":"TestParse/full","Elapsed":0.01}
{"Time":"2024-05-01T12:00:00.080Z","Action":"fail","Package":"github.com/acme/widgets/parse","Test":"TestParse","Elapsed":0.06}
{"Time":"2024-05-01T12:00:00.090Z","Action":"run","Package":"github.com/acme/widgets/parse","Test":"TestSkip"}
{"Time":"2024-05-01T12:00:00.095Z","Action":"skip","Package":"github.com/acme/widgets/parse","Test":"TestSkip","Elapsed":0}
{"Time":"2024-05-01T12:00:00.100Z","Action":"output","Package":"github.com/acme/widgets/parse","Output":"FAIL\\n"}
{"Time":"2024-05-01T12:00:00.500Z","Action":"fail","Package":"github.com/acme/widgets/parse","Elapsed":0.5}
{"Time":"2024-05-01T12:00:00.100Z","Action":"start","Package":"github.com/acme/widgets/util"}
{"Time":"2024-05-01T12:00:00.110Z","Action":"run","Package":"github.com/acme/widgets/util","Test":"TestAdd"}
{"Time":"2024-05-01T12:00:00.120Z","Action":"pass","Package":"github.com/acme/widgets/util","Test":"TestAdd","Elapsed":0.01}
{"Time":"2024-05-01T12:00:00.900Z","Action":"pass","Package":"github.com/acme/widgets/util","Elapsed":0.8}
"""

COVER_PROFILE = """\
mode: set
github.com/acme/widgets/prog.go:3.24,5.2 1 1
github.com/acme/widgets/prog.go:7.25,9.2 3 0
github.com/acme/widgets/util/math.go:3.20,6.2 2 1
github.com/acme/widgets/util/math.go:8.20,10.2 2 0
"""

FUNC_REPORT = """\
github.com/acme/widgets/prog.go:3:\t\tadd\t\t100.0%
github.com/acme/widgets/prog.go:7:\t\tisOdd\t\t0.0%
github.com/acme/widgets/util/math.go:3:\tDouble\t\t100.0%
github.com/acme/widgets/util/math.go:8:\tHalve\t\t0.0%
total:\t\t\t\t\t(statements)\t\t50.0%
"""


@pytest.fixture
def go_test_json() -> str:
    return GO_TEST_JSON


@pytest.fixture
def cover_profile() -> str:
    return COVER_PROFILE


@pytest.fixture
def func_report() -> str:
    return FUNC_REPORT
