"""Structured coverage report generation.

Output schema for summarize_coverage:
{
    "summary": {
        "total_packages": int,
        "total_files": int,
        "total_statements": int,
        "covered_statements": int,
        "coverage_percent": float,
        "total_functions": int,
        "uncovered_functions": int
    },
    "packages": [
        {
            "package": str,
            "import_path": str,
            "statements": int,
            "covered_statements": int,
            "coverage_percent": float,
            "files": [
                {
                    "file": str,
                    "statements": int,
                    "covered_statements": int,
                    "coverage_percent": float,
                    "uncovered_functions": [str, ...]
                },
                ...
            ]
        },
        ...
    ]
}
"""

from typing import Any

from gostats.coverage.models import Coverage, FunctionCoverage


def uncovered_functions(
    coverage: Coverage, *, include_internal: bool = True
) -> list[FunctionCoverage]:
    """Functions with zero coverage, in package/file order."""
    return [
        fn
        for pkg in coverage.packages
        for fn in pkg.functions()
        if fn.percent == 0 and (include_internal or not fn.internal)
    ]


def summarize_coverage(coverage: Coverage, *, include_files: bool = True) -> dict[str, Any]:
    """Build a JSON-serializable coverage summary.

    Args:
        coverage: The coverage tree to summarize.
        include_files: Whether to include per-file details.
    """
    total_functions = sum(len(pkg.functions()) for pkg in coverage.packages)

    packages = []
    for pkg in coverage.packages:
        entry: dict[str, Any] = {
            "package": pkg.name,
            "import_path": pkg.import_path,
            "statements": pkg.stmts,
            "covered_statements": pkg.covered_stmts,
            "coverage_percent": pkg.percent,
        }
        if include_files:
            entry["files"] = [
                {
                    "file": f.name,
                    "statements": f.stmts,
                    "covered_statements": f.covered_stmts,
                    "coverage_percent": f.percent,
                    "uncovered_functions": [fn.name for fn in f.functions if fn.percent == 0],
                }
                for f in pkg.files
            ]
        packages.append(entry)

    return {
        "summary": {
            "total_packages": len(coverage.packages),
            "total_files": sum(len(pkg.files) for pkg in coverage.packages),
            "total_statements": coverage.stmts,
            "covered_statements": coverage.covered_stmts,
            "coverage_percent": coverage.percent,
            "total_functions": total_functions,
            "uncovered_functions": len(uncovered_functions(coverage)),
        },
        "packages": packages,
    }


def build_text_summary(coverage: Coverage) -> str:
    """One-line summary for display contexts."""
    if coverage.stmts == 0:
        return "No coverage data"
    return (
        f"Coverage: {coverage.percent:.1f}% "
        f"({coverage.covered_stmts}/{coverage.stmts} statements)"
    )
