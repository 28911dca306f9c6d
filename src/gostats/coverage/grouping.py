"""Partition statement blocks into per-package, per-file buckets."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from gostats.coverage.models import StatementBlock


def package_of(path: str) -> str:
    """Package import path of a profile file name; "" when it has no directory."""
    idx = path.rfind("/")
    return path[:idx] if idx != -1 else ""


@dataclass
class PackageBlocks:
    """Blocks of one package, keyed by file name in first-seen order."""

    package: str
    files: dict[str, list[StatementBlock]] = field(default_factory=dict)


def group_blocks(blocks: Iterable[StatementBlock]) -> list[PackageBlocks]:
    """Group blocks by package, then file, preserving first-occurrence order.

    Files without a directory land in the "" package.
    """
    packages: dict[str, PackageBlocks] = {}
    for block in blocks:
        key = package_of(block.file_name)
        bucket = packages.get(key)
        if bucket is None:
            bucket = packages[key] = PackageBlocks(package=key)
        bucket.files.setdefault(block.file_name, []).append(block)
    return list(packages.values())
