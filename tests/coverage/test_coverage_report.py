"""Tests for coverage report generation."""

import pytest

from gostats.coverage.aggregate import build_coverage
from gostats.coverage.models import Coverage
from gostats.coverage.parsers import decode_func_report, decode_profile
from gostats.coverage.report import build_text_summary, summarize_coverage, uncovered_functions


@pytest.fixture
def coverage(cover_profile: str, func_report: str) -> Coverage:
    return build_coverage(
        decode_profile(cover_profile).blocks,
        decode_func_report(func_report).functions,
        trim_prefix="github.com/acme/widgets",
    )


class TestUncoveredFunctions:
    def test_includes_internal_by_default(self, coverage: Coverage) -> None:
        assert [f.name for f in uncovered_functions(coverage)] == ["isOdd", "Halve"]

    def test_exported_only(self, coverage: Coverage) -> None:
        assert [f.name for f in uncovered_functions(coverage, include_internal=False)] == ["Halve"]


class TestSummarizeCoverage:
    def test_summary_totals(self, coverage: Coverage) -> None:
        result = summarize_coverage(coverage)

        assert result["summary"] == {
            "total_packages": 2,
            "total_files": 2,
            "total_statements": 8,
            "covered_statements": 3,
            "coverage_percent": 37.5,
            "total_functions": 4,
            "uncovered_functions": 2,
        }

    def test_package_entries(self, coverage: Coverage) -> None:
        root, util = summarize_coverage(coverage)["packages"]

        assert root["package"] == "github.com/acme/widgets"
        assert util["package"] == "util"
        assert util["import_path"] == "github.com/acme/widgets/util"
        assert util["files"] == [
            {
                "file": "github.com/acme/widgets/util/math.go",
                "statements": 4,
                "covered_statements": 2,
                "coverage_percent": 50.0,
                "uncovered_functions": ["Halve"],
            }
        ]

    def test_without_files(self, coverage: Coverage) -> None:
        for entry in summarize_coverage(coverage, include_files=False)["packages"]:
            assert "files" not in entry


class TestBuildTextSummary:
    def test_with_data(self, coverage: Coverage) -> None:
        assert build_text_summary(coverage) == "Coverage: 37.5% (3/8 statements)"

    def test_empty(self) -> None:
        assert build_text_summary(Coverage()) == "No coverage data"
