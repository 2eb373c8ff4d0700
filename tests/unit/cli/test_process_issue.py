"""Unit tests for the process-issue command."""

import json
from pathlib import Path

from click.testing import CliRunner

from appsubmit.cli.cli import cli
from appsubmit.cli.commands.process_issue import process_issue
from appsubmit.context import AppContext
from appsubmit.gateway.host.fake import FakeRepositoryHost
from tests.test_utils.issue_bodies import build_issue_body


def _write_event(path: Path, body: str, number: int = 42) -> Path:
    event_path = path / "event.json"
    payload = {
        "issue": {"number": number, "body": body, "user": {"login": "octocat"}},
        "repository": {"full_name": "acme/catalog", "default_branch": "main"},
    }
    event_path.write_text(json.dumps(payload), encoding="utf-8")
    return event_path


def test_process_issue_submitted(tmp_path: Path) -> None:
    """Well-formed issue opens a PR and reports it as JSON."""
    host = FakeRepositoryHost(next_pr_number=101)
    event_path = _write_event(tmp_path, build_issue_body())
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path)],
        obj=AppContext.for_test(host=host),
    )

    assert result.exit_code == 0, f"Failed: {result.output}"
    output = json.loads(result.stdout)
    assert output["success"] is True
    assert output["outcome"] == "submitted"
    assert output["issue_number"] == 42
    assert output["pr_number"] == 101
    assert output["branch"] == "add-app-sample-1705329000000"
    assert output["stages"][-1] == "done"
    assert host.added_labels == [(42, ["processed", "pending-review"])]


def test_process_issue_rejected_exits_zero(tmp_path: Path) -> None:
    """Validation errors are a handled outcome, not a command failure."""
    host = FakeRepositoryHost()
    event_path = _write_event(tmp_path, build_issue_body(app_name=None))
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path)],
        obj=AppContext.for_test(host=host),
    )

    assert result.exit_code == 0, f"Failed: {result.output}"
    output = json.loads(result.stdout)
    assert output["outcome"] == "rejected"
    assert output["errors"] == ["App Name is missing"]
    assert host.created_branches == []


def test_process_issue_duplicate(tmp_path: Path) -> None:
    host = FakeRepositoryHost(files={"apps.yaml": "sample:\n  git: x\n"})
    event_path = _write_event(tmp_path, build_issue_body())
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path)],
        obj=AppContext.for_test(host=host),
    )

    assert result.exit_code == 0, f"Failed: {result.output}"
    output = json.loads(result.stdout)
    assert output["outcome"] == "duplicate"
    assert output["app_id"] == "sample"


def test_process_issue_failed_exits_one(tmp_path: Path) -> None:
    host = FakeRepositoryHost(fail_on={"create_branch": RuntimeError("HTTP 403")})
    event_path = _write_event(tmp_path, build_issue_body())
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path)],
        obj=AppContext.for_test(host=host),
    )

    assert result.exit_code == 1
    output = json.loads(result.stdout)
    assert output["success"] is False
    assert output["outcome"] == "failed"
    assert output["stage"] == "submitting"
    assert output["error"] == "HTTP 403"


def test_process_issue_invalid_payload(tmp_path: Path) -> None:
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"action": "opened"}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path)],
        obj=AppContext.for_test(),
    )

    assert result.exit_code == 1
    output = json.loads(result.stdout)
    assert output["success"] is False
    assert "no 'issue' object" in output["error"]


def test_process_issue_bad_repo_option(tmp_path: Path) -> None:
    """Without an injected context, the target repository must be OWNER/NAME."""
    event_path = _write_event(tmp_path, build_issue_body())
    runner = CliRunner()

    result = runner.invoke(
        process_issue,
        ["--event-path", str(event_path), "--repo", "not-a-repo"],
    )

    assert result.exit_code == 1
    output = json.loads(result.stdout)
    assert "OWNER/NAME" in output["error"]


def test_process_issue_via_group(tmp_path: Path) -> None:
    """The command is registered on the top-level group."""
    event_path = _write_event(tmp_path, build_issue_body())
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["process-issue", "--event-path", str(event_path)],
        obj=AppContext.for_test(),
    )

    assert result.exit_code == 0, f"Failed: {result.output}"
    assert json.loads(result.stdout)["outcome"] == "submitted"
