"""Go coverage profile parser.

Go test produces coverage profiles with format:
mode: set|count|atomic
<package>/<file>:<startline>.<startcol>,<endline>.<endcol> <numstmt> <count>

Example:
mode: set
github.com/user/pkg/main.go:10.2,12.16 3 1
github.com/user/pkg/main.go:15.2,20.16 5 0

- numstmt: number of statements in block
- count: execution count (0 = not covered)

Profiles concatenated from several test binaries repeat blocks; repeats are
merged here (summed counts, or OR-ed in set mode) so every block is counted
once downstream.
"""

import re
from dataclasses import replace
from pathlib import Path

from gostats.core.errors import DecodeError, InputNotFoundError
from gostats.coverage.models import CoverageMode, Profile, StatementBlock

_BLOCK_RE = re.compile(r"^(.+):(\d+)\.(\d+),(\d+)\.(\d+) (\d+) (\d+)$")
_MODE_PREFIX = "mode:"

_BlockKey = tuple[str, int, int, int, int]


def _parse_mode(line: str, line_no: int) -> CoverageMode:
    if not line.startswith(_MODE_PREFIX):
        raise DecodeError.profile(line_no, "missing mode line")
    raw = line[len(_MODE_PREFIX) :].strip()
    try:
        return CoverageMode(raw)
    except ValueError as e:
        raise DecodeError.profile(line_no, f"unknown mode {raw!r}") from e


def _parse_block(line: str, line_no: int) -> StatementBlock:
    match = _BLOCK_RE.match(line)
    if match is None:
        raise DecodeError.profile(line_no, f"line {line!r} doesn't match expected format")
    file_name, *numbers = match.groups()
    start_line, start_col, end_line, end_col, num_stmt, count = (int(n) for n in numbers)
    return StatementBlock(
        file_name=file_name,
        start_line=start_line,
        start_col=start_col,
        end_line=end_line,
        end_col=end_col,
        num_stmt=num_stmt,
        count=count,
    )


def _merge(
    existing: StatementBlock, block: StatementBlock, mode: CoverageMode, line_no: int
) -> StatementBlock:
    if existing.num_stmt != block.num_stmt:
        raise DecodeError.profile(
            line_no,
            f"inconsistent NumStmt for {block.file_name}:{block.start_line}.{block.start_col}: "
            f"{existing.num_stmt} != {block.num_stmt}",
        )
    if mode == CoverageMode.SET:
        count = 1 if existing.count or block.count else 0
    else:
        count = existing.count + block.count
    return replace(existing, count=count)


def decode_profile(content: str) -> Profile:
    """Decode coverage profile text.

    Raises:
        DecodeError: On a missing/unknown mode line or a malformed block.
    """
    lines = [(n, line.strip()) for n, line in enumerate(content.splitlines(), start=1)]
    lines = [(n, line) for n, line in lines if line]
    if not lines:
        return Profile(mode=CoverageMode.SET)

    first_no, first = lines[0]
    mode = _parse_mode(first, first_no)

    blocks: dict[_BlockKey, StatementBlock] = {}
    for line_no, line in lines[1:]:
        # concatenated profiles repeat the mode line
        if line.startswith(_MODE_PREFIX):
            continue
        block = _parse_block(line, line_no)
        key = (block.file_name, block.start_line, block.start_col, block.end_line, block.end_col)
        existing = blocks.get(key)
        blocks[key] = block if existing is None else _merge(existing, block, mode, line_no)

    return Profile(mode=mode, blocks=list(blocks.values()))


def read_profile(path: Path) -> Profile:
    """Read and decode a coverage profile file."""
    if not path.exists():
        raise InputNotFoundError.for_path(str(path))
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DecodeError.unreadable(str(path), str(e)) from e
    return decode_profile(content)
