"""Merge statement blocks and function rows into one coverage tree.

The two inputs come from different tools (`go test -coverprofile` and
`go tool cover -func`) and may disagree. Function rows that name a file
absent from the profile are dropped, never raised.
"""

from collections.abc import Iterable

from gostats.core.logging import get_logger
from gostats.coverage.grouping import group_blocks, package_of
from gostats.coverage.models import (
    Coverage,
    FileCoverage,
    FunctionCoverage,
    FunctionRecord,
    PackageCoverage,
    StatementBlock,
    is_internal,
)

log = get_logger("gostats.coverage.aggregate")


def fold_file(name: str, blocks: Iterable[StatementBlock]) -> FileCoverage:
    """Sum statement counts for one file.

    Every statement of a block with a nonzero count is covered. Blocks that
    declare no statements carry no information and are skipped.
    """
    stmts = covered = 0
    for block in blocks:
        if block.num_stmt == 0:
            continue
        stmts += block.num_stmt
        if block.count > 0:
            covered += block.num_stmt
    return FileCoverage(name=name, stmts=stmts, covered_stmts=covered)


def display_name(import_path: str, trim_prefix: str) -> str:
    """Strip ``trim_prefix/`` from a package path; the module root keeps its full path."""
    if trim_prefix and import_path.startswith(trim_prefix + "/"):
        return import_path[len(trim_prefix) + 1 :]
    return import_path


def build_coverage(
    blocks: Iterable[StatementBlock],
    functions: Iterable[FunctionRecord],
    trim_prefix: str = "",
) -> Coverage:
    """Build the package -> file -> function coverage tree.

    Args:
        blocks: Statement blocks from a coverage profile.
        functions: Rows from `go tool cover -func`.
        trim_prefix: Module path removed from package display names.

    Returns:
        Coverage tree; packages and files in first-seen profile order.
    """
    trim_prefix = trim_prefix.rstrip("/")
    packages: dict[str, PackageCoverage] = {}
    files: dict[tuple[str, str], FileCoverage] = {}

    for group in group_blocks(blocks):
        pkg = PackageCoverage(
            name=display_name(group.package, trim_prefix),
            import_path=group.package,
        )
        for file_name, file_blocks in group.files.items():
            file_cov = fold_file(file_name, file_blocks)
            pkg.files.append(file_cov)
            files[(group.package, file_name)] = file_cov
        packages[group.package] = pkg

    dropped = 0
    for record in functions:
        file_cov = files.get((package_of(record.file_name), record.file_name))
        if file_cov is None:
            dropped += 1
            continue
        file_cov.functions.append(
            FunctionCoverage(
                name=record.function,
                percent=record.percent,
                file=record.file_name,
                line=record.line,
                internal=is_internal(record.function),
            )
        )

    coverage = Coverage(packages=list(packages.values()))
    log.debug(
        "coverage_built",
        packages=len(coverage.packages),
        files=len(files),
        stmts=coverage.stmts,
        covered_stmts=coverage.covered_stmts,
        dropped_functions=dropped,
    )
    return coverage
