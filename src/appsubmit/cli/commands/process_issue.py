"""Process an app submission issue into a pull request.

Usage:
    appsubmit process-issue --event-path "$GITHUB_EVENT_PATH"

Output:
    JSON with {success, outcome, issue_number, ...outcome details}

Exit Codes:
    0: Submission handled (pull request opened, or the submitter was told what to fix)
    1: Error - unreadable event payload or an unexpected failure while processing
"""

import json
from pathlib import Path
from typing import Any, NoReturn

import click

from appsubmit.cli.event import load_issue_event
from appsubmit.config import DEFAULT_CONFIG_PATH
from appsubmit.context import AppContext, create_context
from appsubmit.gateway.host.types import GitHubRepoId
from appsubmit.submission.workflow import (
    DuplicateRejected,
    Failed,
    Rejected,
    Submitted,
    SubmissionOutcome,
)


def _output_error(message: str) -> NoReturn:
    """Output error JSON and exit."""
    click.echo(json.dumps({"success": False, "error": message}, indent=2))
    raise SystemExit(1)


def outcome_to_json(outcome: SubmissionOutcome, issue_number: int) -> dict[str, Any]:
    """Serialize a workflow outcome for the command's JSON output."""
    stages = [stage.value for stage in outcome.stages]
    if isinstance(outcome, Submitted):
        return {
            "success": True,
            "outcome": "submitted",
            "issue_number": issue_number,
            "pr_number": outcome.pr_number,
            "pr_url": outcome.pr_url,
            "branch": outcome.branch_name,
            "stages": stages,
        }
    if isinstance(outcome, Rejected):
        return {
            "success": True,
            "outcome": "rejected",
            "issue_number": issue_number,
            "errors": list(outcome.errors),
            "stages": stages,
        }
    if isinstance(outcome, DuplicateRejected):
        return {
            "success": True,
            "outcome": "duplicate",
            "issue_number": issue_number,
            "app_id": outcome.app_id,
            "stages": stages,
        }
    return {
        "success": False,
        "outcome": "failed",
        "issue_number": issue_number,
        "stage": outcome.stage.value,
        "error": outcome.message,
        "stages": stages,
    }


@click.command(name="process-issue")
@click.option(
    "--event-path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="GITHUB_EVENT_PATH",
    required=True,
    help="GitHub event payload JSON (defaults to $GITHUB_EVENT_PATH)",
)
@click.option(
    "--repo",
    "repo_name",
    envvar="GITHUB_REPOSITORY",
    default=None,
    help="Target repository as OWNER/NAME (defaults to the payload's repository)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Submission config TOML",
)
@click.pass_context
def process_issue(
    ctx: click.Context,
    event_path: Path,
    repo_name: str | None,
    config_path: Path,
) -> None:
    """Validate an app submission issue and open a pull request for it."""
    try:
        event = load_issue_event(event_path)
    except ValueError as e:
        _output_error(str(e))

    if ctx.obj is None:
        full_name = repo_name or event.repo_full_name
        if not full_name:
            _output_error("No target repository: pass --repo or set GITHUB_REPOSITORY")
        try:
            repo_id = GitHubRepoId.parse(full_name)
            ctx.obj = create_context(
                repo_id, default_branch=event.default_branch, config_path=config_path
            )
        except ValueError as e:
            _output_error(str(e))

    app_ctx: AppContext = ctx.obj
    outcome = app_ctx.workflow().run(event.body, event.context)
    result = outcome_to_json(outcome, event.context.issue_number)
    click.echo(json.dumps(result, indent=2))
    if isinstance(outcome, Failed):
        raise SystemExit(1)
