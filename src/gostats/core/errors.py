"""gostats error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Decode
- 4xxx: Structure
- 5xxx: Tooling / input
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Decode (3xxx)
    DECODE_EVENT = 3001
    DECODE_PROFILE = 3002
    DECODE_FUNC_REPORT = 3003
    DECODE_UNREADABLE = 3004

    # Structure (4xxx)
    ORPHAN_SUBTEST = 4001

    # Tooling / input (5xxx)
    INPUT_NOT_FOUND = 5001
    GO_TOOL_MISSING = 5002
    GO_TOOL_FAILED = 5003
    GO_TOOL_TIMEOUT = 5004


@dataclass(frozen=True, slots=True)
class GoStatsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'ORPHAN_SUBTEST')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GoStatsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DecodeError(GoStatsError):
    """A raw input record could not be decoded.

    Raised by the text decoders only. Aggregators never see malformed input.
    """

    @classmethod
    def event(cls, line_no: int, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_EVENT,
            message=f"Invalid test event on line {line_no}: {reason}",
            details={"line": line_no, "reason": reason},
        )

    @classmethod
    def profile(cls, line_no: int, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_PROFILE,
            message=f"Invalid coverage profile line {line_no}: {reason}",
            details={"line": line_no, "reason": reason},
        )

    @classmethod
    def func_report(cls, line_no: int, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_FUNC_REPORT,
            message=f"Invalid function report line {line_no}: {reason}",
            details={"line": line_no, "reason": reason},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "DecodeError":
        return cls(
            code=ErrorCode.DECODE_UNREADABLE,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class OrphanSubtestError(GoStatsError):
    """A subtest name implies a parent test that was never observed."""

    @classmethod
    def for_test(cls, full_name: str, package: str) -> "OrphanSubtestError":
        return cls(
            code=ErrorCode.ORPHAN_SUBTEST,
            message=f"subtest found without corresponding parent: {full_name}",
            details={"test": full_name, "package": package},
        )


class InputNotFoundError(GoStatsError):
    """An input file does not exist."""

    @classmethod
    def for_path(cls, path: str) -> "InputNotFoundError":
        return cls(
            code=ErrorCode.INPUT_NOT_FOUND,
            message=f"Input file not found: {path}",
            details={"path": path},
        )


class GoToolError(GoStatsError):
    """Running the go toolchain failed."""

    @classmethod
    def missing(cls, binary: str) -> "GoToolError":
        return cls(
            code=ErrorCode.GO_TOOL_MISSING,
            message=f"Go binary not found: {binary}",
            details={"binary": binary},
        )

    @classmethod
    def failed(cls, command: list[str], returncode: int, stderr: str) -> "GoToolError":
        return cls(
            code=ErrorCode.GO_TOOL_FAILED,
            message=f"{' '.join(command)} exited with status {returncode}: {stderr.strip()}",
            details={"command": command, "returncode": returncode, "stderr": stderr},
        )

    @classmethod
    def timeout(cls, command: list[str], seconds: float) -> "GoToolError":
        return cls(
            code=ErrorCode.GO_TOOL_TIMEOUT,
            message=f"{' '.join(command)} timed out after {seconds}s",
            retryable=True,
            details={"command": command, "timeout_sec": seconds},
        )

