"""Unit tests for the preview command."""

from pathlib import Path

from click.testing import CliRunner

from appsubmit.cli.commands.preview import preview
from tests.test_utils.issue_bodies import build_issue_body


def test_preview_prints_entry(tmp_path: Path) -> None:
    body_file = tmp_path / "body.md"
    body_file.write_text(build_issue_body(description="Tracks things."), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(preview, [str(body_file)])

    assert result.exit_code == 0, f"Failed: {result.output}"
    assert result.stdout == (
        "sample:\n"
        "  git: https://github.com/acme/sample\n"
        '  name: "Sample App"\n'
        "  description: |\n"
        "    Tracks things.\n"
        "  categories:\n"
        "    - Utilities\n"
    )


def test_preview_reports_errors(tmp_path: Path) -> None:
    body_file = tmp_path / "body.md"
    body_file.write_text(build_issue_body(git_url="https://github.com/foo"), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(preview, [str(body_file)])

    assert result.exit_code == 1
    assert 'Invalid GitHub URL format: "https://github.com/foo"' in result.stderr
    assert result.stdout == ""
