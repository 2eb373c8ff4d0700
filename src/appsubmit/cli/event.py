"""Read the GitHub Actions event payload for an issue-triggered run."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from appsubmit.submission.types import SubmissionContext


@dataclass(frozen=True)
class IssueEvent:
    """The parts of an `issues` event payload a submission run needs."""

    body: str
    context: SubmissionContext
    repo_full_name: str | None
    default_branch: str | None


def parse_issue_event(payload: dict[str, Any]) -> IssueEvent:
    """Extract issue and repository details from an event payload.

    Raises:
        ValueError: If the payload has no issue, or the issue lacks a number
            or author
    """
    issue = payload.get("issue")
    if not isinstance(issue, dict):
        msg = "Event payload has no 'issue' object"
        raise ValueError(msg)
    number = issue.get("number")
    login = (issue.get("user") or {}).get("login")
    if not isinstance(number, int) or not login:
        msg = "Event payload issue is missing 'number' or 'user.login'"
        raise ValueError(msg)

    repository = payload.get("repository") or {}
    return IssueEvent(
        body=issue.get("body") or "",
        context=SubmissionContext(issue_number=number, submitter=login),
        repo_full_name=repository.get("full_name"),
        default_branch=repository.get("default_branch"),
    )


def load_issue_event(event_path: Path) -> IssueEvent:
    """Load and parse an event payload file.

    Raises:
        ValueError: If the file is not JSON or not an issue event
    """
    try:
        payload = json.loads(event_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Event payload {event_path} is not valid JSON: {e}"
        raise ValueError(msg) from e
    return parse_issue_event(payload)
