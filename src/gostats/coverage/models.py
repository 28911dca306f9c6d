"""Go coverage data model.

Two layers:
- raw records produced by the decoders (StatementBlock, FunctionRecord);
- the aggregated package -> file -> function tree (Coverage).

Percentages in the tree are derived from statement counts on access, so
they always agree with the counts they summarize.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from gostats.core.percent import percent


class CoverageMode(StrEnum):
    """Profile mode from the ``mode:`` header line."""

    SET = "set"  # 0/1
    COUNT = "count"  # hit count
    ATOMIC = "atomic"  # hit count, thread-safe counters


# =============================================================================
# Raw records
# =============================================================================


@dataclass(frozen=True, slots=True)
class StatementBlock:
    """One source block of a coverage profile."""

    file_name: str  # import-path qualified, e.g. github.com/acme/pkg/file.go
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_stmt: int
    count: int  # execution count (0 = not covered)


@dataclass(slots=True)
class Profile:
    """Decoded coverage profile."""

    mode: CoverageMode
    blocks: list[StatementBlock] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FunctionRecord:
    """One row of `go tool cover -func` output."""

    file_name: str
    line: int
    function: str
    percent: float


@dataclass(slots=True)
class FuncReport:
    """Decoded `go tool cover -func` output."""

    functions: list[FunctionRecord] = field(default_factory=list)
    total_percent: float = 0.0  # from the trailing "total: (statements)" row


# =============================================================================
# Aggregated tree
# =============================================================================


def is_internal(name: str) -> bool:
    """Go's unexported-name convention: a lowercase first letter.

    Best-effort visibility signal only.
    """
    return bool(name) and "a" <= name[0] <= "z"


@dataclass(frozen=True, slots=True)
class FunctionCoverage:
    """Coverage of a single function."""

    name: str
    percent: float
    file: str
    line: int
    internal: bool


@dataclass(slots=True)
class FileCoverage:
    """Statement coverage of a single file."""

    name: str
    stmts: int = 0
    covered_stmts: int = 0
    functions: list[FunctionCoverage] = field(default_factory=list)

    @property
    def percent(self) -> float:
        return percent(self.covered_stmts, self.stmts)


@dataclass(slots=True)
class PackageCoverage:
    """Statement coverage of a package, with per-file detail.

    ``import_path`` is the package as it appears in the profile; ``name`` is
    the same path with any configured module prefix removed.
    """

    name: str
    import_path: str
    files: list[FileCoverage] = field(default_factory=list)

    @property
    def stmts(self) -> int:
        return sum(f.stmts for f in self.files)

    @property
    def covered_stmts(self) -> int:
        return sum(f.covered_stmts for f in self.files)

    @property
    def percent(self) -> float:
        """Computed from summed counts, not averaged over files."""
        return percent(self.covered_stmts, self.stmts)

    def file(self, name: str) -> FileCoverage | None:
        for f in self.files:
            if f.name == name:
                return f
        return None

    def functions(self) -> list[FunctionCoverage]:
        """All functions in the package, file by file."""
        return [fn for f in self.files for fn in f.functions]


@dataclass(slots=True)
class Coverage:
    """Coverage statistics for a whole profile."""

    packages: list[PackageCoverage] = field(default_factory=list)

    @property
    def stmts(self) -> int:
        return sum(p.stmts for p in self.packages)

    @property
    def covered_stmts(self) -> int:
        return sum(p.covered_stmts for p in self.packages)

    @property
    def percent(self) -> float:
        """Computed from grand totals, not averaged over packages."""
        return percent(self.covered_stmts, self.stmts)

    def package(self, name: str) -> PackageCoverage | None:
        """Find a package by display name or full import path."""
        for pkg in self.packages:
            if name in (pkg.name, pkg.import_path):
                return pkg
        return None
