"""Subprocess helpers that enrich failures with operation context."""

import logging
import subprocess
import time
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

# gh api calls should never hang a workflow run indefinitely
_GH_COMMAND_TIMEOUT = 60.0


def _build_timing_description(cmd: Sequence[str], input: str | None = None) -> str:
    """Render a command for debug logs without dumping its stdin payload.

    Request bodies sent on stdin are replaced with a character count.
    """
    description = " ".join(cmd)
    if input is not None:
        description += f" <stdin: {len(input)} chars>"
    return description


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    timeout: float | None = None,
    input: str | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, raising RuntimeError with context if it fails.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of what was attempted
        cwd: Working directory for the command
        timeout: Seconds before the command is abandoned
        input: Text written to the command's stdin

    Returns:
        CompletedProcess with captured text output

    Raises:
        RuntimeError: If the command exits non-zero or times out
        FileNotFoundError: If the executable is not installed
    """
    description = _build_timing_description(cmd, input)
    start = time.monotonic()
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
            input=input,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        msg = f"Failed to {operation_context}: {stderr or f'exit code {e.returncode}'}"
        raise RuntimeError(msg) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Failed to {operation_context}: timed out after {timeout}s"
        raise RuntimeError(msg) from e
    finally:
        logger.debug("%s took %.2fs", description, time.monotonic() - start)
    return result


def execute_gh_command(
    cmd: list[str], cwd: Path | None = None, *, input: str | None = None
) -> str:
    """Execute a gh CLI command and return stdout.

    Request bodies go through `input` (with `--input -` in `cmd`) so payload size
    is not bounded by the OS argument length limit.

    Raises:
        RuntimeError: If command fails with enriched error context
        FileNotFoundError: If gh is not installed
    """
    result = run_subprocess_with_context(
        cmd,
        operation_context="execute gh command",
        cwd=cwd,
        timeout=_GH_COMMAND_TIMEOUT,
        input=input,
    )
    return result.stdout
