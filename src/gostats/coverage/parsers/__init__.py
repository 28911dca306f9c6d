"""Decoders for Go coverage text formats.

- profile: `go test -coverprofile` statement blocks
- funcs: `go tool cover -func` per-function rows
"""

from .funcs import decode_func_report, read_func_report
from .profile import decode_profile, read_profile

__all__ = [
    "decode_func_report",
    "decode_profile",
    "read_func_report",
    "read_profile",
]
