"""Run `go tool cover -func` to derive per-function coverage from a profile."""

import subprocess
from pathlib import Path

from gostats.core.errors import GoToolError, InputNotFoundError
from gostats.core.logging import get_logger

log = get_logger("gostats.coverage.gotool")


def run_cover_func(profile: Path, *, binary: str = "go", timeout: float = 60.0) -> str:
    """Return the stdout of `go tool cover -func=<profile>`.

    Raises:
        InputNotFoundError: The profile does not exist.
        GoToolError: go is missing, exits non-zero, or times out.
    """
    if not profile.exists():
        raise InputNotFoundError.for_path(str(profile))

    cmd = [binary, "tool", "cover", f"-func={profile}"]
    log.debug("go_tool_start", command=cmd)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            timeout=timeout,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise GoToolError.missing(binary) from e
    except subprocess.TimeoutExpired as e:
        raise GoToolError.timeout(cmd, timeout) from e

    if result.returncode != 0:
        raise GoToolError.failed(cmd, result.returncode, result.stderr)
    return result.stdout
