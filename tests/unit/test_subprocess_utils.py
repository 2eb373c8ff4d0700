"""Tests for subprocess_utils module."""

import subprocess
from pathlib import Path
from subprocess import CompletedProcess
from unittest.mock import Mock, patch

import pytest
from pytest import MonkeyPatch

from appsubmit.subprocess_utils import (
    _GH_COMMAND_TIMEOUT,
    _build_timing_description,
    execute_gh_command,
    run_subprocess_with_context,
)


def test_build_timing_description_regular_command() -> None:
    """Commands without payload fields are passed through unchanged."""
    cmd = ["gh", "api", "repos/acme/catalog/git/refs/heads/main", "--jq", ".object.sha"]
    assert _build_timing_description(cmd) == " ".join(cmd)


def test_build_timing_description_elides_stdin_payload() -> None:
    """Request bodies sent on stdin are replaced with a character count."""
    body = '{"content": "' + "YWJj" * 100 + '"}'
    result = _build_timing_description(["gh", "api", "x", "--input", "-"], body)
    assert "YWJj" not in result
    assert result == f"gh api x --input - <stdin: {len(body)} chars>"


def test_run_subprocess_with_context_passes_input(monkeypatch: MonkeyPatch) -> None:
    received: dict[str, object] = {}

    def fake_run(cmd: list[str], **kwargs) -> CompletedProcess:
        received.update(kwargs)
        return CompletedProcess(args=cmd, returncode=0, stdout="{}", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    run_subprocess_with_context(["gh", "api", "x"], operation_context="send x", input='{"a": 1}')

    assert received["input"] == '{"a": 1}'
    assert received["text"] is True


def test_run_subprocess_with_context_wraps_failure(monkeypatch: MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs) -> CompletedProcess:
        raise subprocess.CalledProcessError(1, cmd, stderr="gh: Not Found (HTTP 404)\n")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(RuntimeError) as exc_info:
        run_subprocess_with_context(["gh", "api", "x"], operation_context="fetch x")

    assert str(exc_info.value) == "Failed to fetch x: gh: Not Found (HTTP 404)"
    assert isinstance(exc_info.value.__cause__, subprocess.CalledProcessError)


def test_run_subprocess_with_context_reports_exit_code_without_stderr(
    monkeypatch: MonkeyPatch,
) -> None:
    def fake_run(cmd: list[str], **kwargs) -> CompletedProcess:
        raise subprocess.CalledProcessError(2, cmd, stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(RuntimeError, match="exit code 2"):
        run_subprocess_with_context(["gh"], operation_context="run gh")


def test_run_subprocess_with_context_timeout(monkeypatch: MonkeyPatch) -> None:
    def fake_run(cmd: list[str], **kwargs) -> CompletedProcess:
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", fake_run)

    with pytest.raises(RuntimeError, match="timed out after 5"):
        run_subprocess_with_context(["gh"], operation_context="run gh", timeout=5)


def test_execute_gh_command_forwards_timeout() -> None:
    """execute_gh_command passes _GH_COMMAND_TIMEOUT to run_subprocess_with_context."""
    with patch("appsubmit.subprocess_utils.run_subprocess_with_context") as mock_run:
        mock_run.return_value = Mock(spec=CompletedProcess, stdout="output")

        result = execute_gh_command(["gh", "api", "x"], Path("/repo"))

        assert result == "output"
        call_kwargs = mock_run.call_args.kwargs
        assert call_kwargs["timeout"] == _GH_COMMAND_TIMEOUT
        assert call_kwargs["cwd"] == Path("/repo")


def test_execute_gh_command_forwards_input() -> None:
    with patch("appsubmit.subprocess_utils.run_subprocess_with_context") as mock_run:
        mock_run.return_value = Mock(spec=CompletedProcess, stdout="{}")

        execute_gh_command(["gh", "api", "x", "--input", "-"], input='{"body": "hi"}')

        assert mock_run.call_args.kwargs["input"] == '{"body": "hi"}'
