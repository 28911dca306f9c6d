"""Parser for `go tool cover -func` output.

Format (whitespace separated):
github.com/user/pkg/prog.go:3:		add		100.0%
github.com/user/pkg/prog.go:7:		isOdd		0.0%
total:					(statements)	25.0%

The total row ends the report.
"""

import math
from pathlib import Path

from gostats.core.errors import DecodeError, InputNotFoundError
from gostats.coverage.models import FuncReport, FunctionRecord

_NUM_FIELDS = 3
_TOTAL_MARKER = "(statements)"


def _parse_percent(raw: str, line_no: int) -> float:
    try:
        value = float(raw.strip("%"))
    except ValueError as e:
        raise DecodeError.func_report(line_no, f"couldn't convert percent {raw!r} to float") from e
    if not math.isfinite(value):
        raise DecodeError.func_report(line_no, f"percent {raw!r} is not a number")
    return value


def decode_func_report(content: str) -> FuncReport:
    """Decode function coverage rows.

    Rows with fewer than three fields are ignored.

    Raises:
        DecodeError: On a bad percent, file location or line number.
    """
    report = FuncReport()
    for line_no, line in enumerate(content.splitlines(), start=1):
        entry = line.split()
        if len(entry) < _NUM_FIELDS:
            continue

        pct = _parse_percent(entry[2], line_no)
        if entry[1] == _TOTAL_MARKER:
            report.total_percent = pct
            break

        location = entry[0].split(":")
        if len(location) < 2:
            raise DecodeError.func_report(line_no, f"unexpected format for filename: {entry[0]}")
        file_name, raw_line = location[0], location[1]
        try:
            line_num = int(raw_line)
        except ValueError as e:
            raise DecodeError.func_report(
                line_no, f"invalid line number {raw_line!r} in row {line.strip()!r}"
            ) from e

        report.functions.append(
            FunctionRecord(file_name=file_name, line=line_num, function=entry[1], percent=pct)
        )
    return report


def read_func_report(path: Path) -> FuncReport:
    """Read and decode a saved `go tool cover -func` report."""
    if not path.exists():
        raise InputNotFoundError.for_path(str(path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DecodeError.unreadable(str(path), str(e)) from e
    return decode_func_report(content)
