"""Tests for coverage grouping and aggregation."""

import pytest

from gostats.coverage.aggregate import build_coverage, display_name, fold_file
from gostats.coverage.grouping import group_blocks, package_of
from gostats.coverage.models import FunctionRecord, StatementBlock, is_internal
from gostats.coverage.parsers import decode_func_report, decode_profile


def _block(file_name: str, num_stmt: int, count: int, line: int = 1) -> StatementBlock:
    return StatementBlock(
        file_name=file_name,
        start_line=line,
        start_col=1,
        end_line=line + 1,
        end_col=2,
        num_stmt=num_stmt,
        count=count,
    )


class TestPackageOf:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("github.com/acme/widgets/util/math.go", "github.com/acme/widgets/util"),
            ("example.com/a.go", "example.com"),
            ("main.go", ""),
        ],
    )
    def test_directory_part(self, path: str, expected: str) -> None:
        assert package_of(path) == expected


class TestGroupBlocks:
    def test_groups_by_package_then_file(self) -> None:
        blocks = [
            _block("m/b/x.go", 1, 0),
            _block("m/a/y.go", 1, 1),
            _block("m/b/z.go", 1, 1),
            _block("m/b/x.go", 2, 1, line=5),
        ]

        groups = group_blocks(blocks)

        assert [g.package for g in groups] == ["m/b", "m/a"]
        assert list(groups[0].files) == ["m/b/x.go", "m/b/z.go"]
        assert len(groups[0].files["m/b/x.go"]) == 2

    def test_root_files_land_in_empty_package(self) -> None:
        (group,) = group_blocks([_block("main.go", 1, 1)])
        assert group.package == ""


class TestFoldFile:
    def test_covered_block_counts_all_statements(self) -> None:
        file_cov = fold_file("f", [_block("f", num_stmt=5, count=2)])

        assert file_cov.stmts == 5
        assert file_cov.covered_stmts == 5
        assert file_cov.percent == 100.0

    def test_zero_statement_blocks_skipped(self) -> None:
        file_cov = fold_file("f", [_block("f", 0, 3), _block("f", 2, 0), _block("f", 2, 1)])

        assert file_cov.stmts == 4
        assert file_cov.covered_stmts == 2
        assert file_cov.percent == 50.0

    def test_no_blocks(self) -> None:
        file_cov = fold_file("f", [])
        assert file_cov.stmts == 0
        assert file_cov.percent == 0.0


class TestIsInternal:
    @pytest.mark.parametrize(
        ("name", "internal"),
        [("add", True), ("Add", False), ("_helper", False), ("", False), ("émoji", False)],
    )
    def test_lowercase_ascii_first_letter(self, name: str, internal: bool) -> None:
        assert is_internal(name) is internal


class TestDisplayName:
    def test_prefix_stripped(self) -> None:
        assert display_name("github.com/acme/widgets/util", "github.com/acme/widgets") == "util"

    def test_module_root_keeps_full_path(self) -> None:
        assert display_name("github.com/acme/widgets", "github.com/acme/widgets") == (
            "github.com/acme/widgets"
        )

    def test_prefix_must_end_at_segment(self) -> None:
        assert display_name("github.com/acme/widgetsx/a", "github.com/acme/widgets") == (
            "github.com/acme/widgetsx/a"
        )

    def test_no_prefix(self) -> None:
        assert display_name("a/b", "") == "a/b"


class TestBuildCoverage:
    def test_full_tree(self, cover_profile: str, func_report: str) -> None:
        coverage = build_coverage(
            decode_profile(cover_profile).blocks,
            decode_func_report(func_report).functions,
        )

        assert coverage.stmts == 8
        assert coverage.covered_stmts == 3
        assert coverage.percent == 37.5

        root, util = coverage.packages
        assert root.import_path == "github.com/acme/widgets"
        assert root.percent == 25.0
        assert util.percent == 50.0

        prog = root.file("github.com/acme/widgets/prog.go")
        assert prog is not None
        assert [(f.name, f.percent, f.internal) for f in prog.functions] == [
            ("add", 100.0, True),
            ("isOdd", 0.0, True),
        ]
        assert [f.name for f in util.functions()] == ["Double", "Halve"]
        assert not util.functions()[0].internal

    def test_unmatched_function_rows_dropped(self) -> None:
        blocks = [_block("m/p/a.go", 2, 1)]
        functions = [
            FunctionRecord(file_name="m/p/a.go", line=1, function="A", percent=100.0),
            FunctionRecord(file_name="m/p/gone.go", line=1, function="Gone", percent=0.0),
            FunctionRecord(file_name="m/q/a.go", line=1, function="Elsewhere", percent=0.0),
        ]

        coverage = build_coverage(blocks, functions)

        assert sum(len(p.functions()) for p in coverage.packages) == 1
        assert coverage.packages[0].functions()[0].name == "A"

    def test_trim_prefix_is_display_only(self, cover_profile: str, func_report: str) -> None:
        coverage = build_coverage(
            decode_profile(cover_profile).blocks,
            decode_func_report(func_report).functions,
            trim_prefix="github.com/acme/widgets/",
        )

        assert [p.name for p in coverage.packages] == ["github.com/acme/widgets", "util"]
        util = coverage.package("util")
        assert util is not None
        assert util is coverage.package("github.com/acme/widgets/util")
        assert len(util.functions()) == 2

    def test_package_percent_from_summed_counts(self) -> None:
        # 1/1 and 0/9: the average of file percents would be 50.0
        blocks = [_block("m/p/a.go", 1, 1), _block("m/p/b.go", 9, 0)]

        (pkg,) = build_coverage(blocks, []).packages

        assert pkg.percent == 10.0

    def test_empty(self) -> None:
        coverage = build_coverage([], [])
        assert coverage.packages == []
        assert coverage.percent == 0.0
        assert coverage.package("anything") is None
