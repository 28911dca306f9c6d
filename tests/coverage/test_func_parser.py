"""Tests for the `go tool cover -func` parser."""

from pathlib import Path

import pytest

from gostats.core.errors import DecodeError, ErrorCode, InputNotFoundError
from gostats.coverage.models import FunctionRecord
from gostats.coverage.parsers import decode_func_report, read_func_report


class TestDecodeFuncReport:
    def test_rows_and_total(self, func_report: str) -> None:
        report = decode_func_report(func_report)

        assert report.total_percent == 50.0
        assert len(report.functions) == 4
        assert report.functions[1] == FunctionRecord(
            file_name="github.com/acme/widgets/prog.go",
            line=7,
            function="isOdd",
            percent=0.0,
        )

    def test_rows_after_total_ignored(self) -> None:
        content = "total:\t(statements)\t10.0%\np/a.go:1:\tF\t5.0%\n"

        report = decode_func_report(content)

        assert report.total_percent == 10.0
        assert report.functions == []

    def test_short_rows_ignored(self) -> None:
        content = "\nok\texample.com/p\n p/a.go:3:\tF\t12.5%\n"

        report = decode_func_report(content)

        assert [f.function for f in report.functions] == ["F"]
        assert report.functions[0].percent == 12.5

    def test_line_number_parsed(self) -> None:
        report = decode_func_report("p/a.go:9:\tString\t\t75.0%\n")
        assert report.functions[0].line == 9

    @pytest.mark.parametrize(
        ("content", "reason"),
        [
            ("p/a.go:3:\tF\tmany%\n", "percent"),
            ("p/a.go:3:\tF\tNaN%\n", "not a number"),
            ("p/a.go\tF\t10.0%\n", "filename"),
            ("p/a.go:x:\tF\t10.0%\n", "line number"),
        ],
    )
    def test_malformed_rows(self, content: str, reason: str) -> None:
        with pytest.raises(DecodeError, match=reason) as exc_info:
            decode_func_report(content)

        assert exc_info.value.code == ErrorCode.DECODE_FUNC_REPORT

    def test_empty(self) -> None:
        report = decode_func_report("")
        assert report.functions == []
        assert report.total_percent == 0.0


class TestReadFuncReport:
    def test_reads_file(self, tmp_path: Path, func_report: str) -> None:
        path = tmp_path / "func.out"
        path.write_text(func_report)

        assert read_func_report(path).total_percent == 50.0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputNotFoundError):
            read_func_report(tmp_path / "func.out")

    def test_non_utf8_file_is_decode_error(self, tmp_path: Path) -> None:
        path = tmp_path / "func.out"
        path.write_bytes(b"p/a.go:3:\t\xc3\x28\t50.0%\n")

        with pytest.raises(DecodeError) as exc_info:
            read_func_report(path)

        assert exc_info.value.code == ErrorCode.DECODE_UNREADABLE
