"""Go coverage parsing, aggregation, and reporting.

Usage:
    from gostats.coverage import build_coverage, decode_profile, decode_func_report

    profile = decode_profile(Path("cover.out").read_text())
    funcs = decode_func_report(run_cover_func(Path("cover.out")))
    coverage = build_coverage(profile.blocks, funcs.functions)
"""

from gostats.coverage.aggregate import build_coverage, display_name, fold_file
from gostats.coverage.gotool import run_cover_func
from gostats.coverage.grouping import PackageBlocks, group_blocks, package_of
from gostats.coverage.models import (
    Coverage,
    CoverageMode,
    FileCoverage,
    FuncReport,
    FunctionCoverage,
    FunctionRecord,
    PackageCoverage,
    Profile,
    StatementBlock,
    is_internal,
)
from gostats.coverage.parsers import (
    decode_func_report,
    decode_profile,
    read_func_report,
    read_profile,
)
from gostats.coverage.report import build_text_summary, summarize_coverage, uncovered_functions

__all__ = [
    # Models
    "Coverage",
    "CoverageMode",
    "FileCoverage",
    "FuncReport",
    "FunctionCoverage",
    "FunctionRecord",
    "PackageCoverage",
    "Profile",
    "StatementBlock",
    "is_internal",
    # Parsers
    "decode_func_report",
    "decode_profile",
    "read_func_report",
    "read_profile",
    # Aggregation
    "PackageBlocks",
    "build_coverage",
    "display_name",
    "fold_file",
    "group_blocks",
    "package_of",
    # Tooling
    "run_cover_func",
    # Report
    "build_text_summary",
    "summarize_coverage",
    "uncovered_functions",
]
