"""Turn an app submission issue into a pull request against apps.yaml.

The workflow is linear: parse -> validate -> duplicate check -> submit ->
notify. Rejections are returned as outcome values; only unexpected host or
programming errors take the Failed path, and they are caught once, at the top
of `SubmissionWorkflow.run`. Nothing is retried or rolled back: a branch
created before a later step fails is left in place.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from appsubmit.config import SubmissionConfig
from appsubmit.gateway.host.abc import RepositoryHost
from appsubmit.gateway.host.types import FileContents, FileNotFound
from appsubmit.gateway.time.abc import Time
from appsubmit.naming import generate_submission_branch_name
from appsubmit.submission import notifications
from appsubmit.submission.parser import parse_submission
from appsubmit.submission.render import (
    change_request_title,
    render_change_description,
    render_commit_message,
    render_entry,
)
from appsubmit.submission.types import SubmissionContext, SubmissionRecord
from appsubmit.submission.validation import validate_submission

logger = logging.getLogger(__name__)

SUBMISSION_LABELS = ("processed", "pending-review")


class WorkflowStage(Enum):
    PARSING = "parsing"
    VALIDATING = "validating"
    DUPLICATE_CHECK = "duplicate_check"
    SUBMITTING = "submitting"
    NOTIFYING = "notifying"
    DONE = "done"


@dataclass(frozen=True)
class Rejected:
    """The submission had missing or malformed fields."""

    errors: tuple[str, ...]
    stages: tuple[WorkflowStage, ...]


@dataclass(frozen=True)
class DuplicateRejected:
    """An entry keyed by the app ID already exists in the apps file."""

    app_id: str
    stages: tuple[WorkflowStage, ...]


@dataclass(frozen=True)
class Submitted:
    """A pull request adding the entry was opened."""

    pr_number: int
    pr_url: str
    branch_name: str
    stages: tuple[WorkflowStage, ...]


@dataclass(frozen=True)
class Failed:
    """An unexpected error ended the run."""

    stage: WorkflowStage
    message: str
    stages: tuple[WorkflowStage, ...]


SubmissionOutcome = Rejected | DuplicateRejected | Submitted | Failed


def contains_app_key(content: str, app_id: str) -> bool:
    """Whether apps file content already holds the `<app_id>:` key token."""
    return f"{app_id}:" in content


def append_entry(existing: FileContents | FileNotFound, entry: str) -> str:
    """New apps file content with the entry appended after a blank line."""
    current = existing.content if isinstance(existing, FileContents) else ""
    return current + "\n" + entry


class SubmissionWorkflow:
    """Processes one submission issue start to finish.

    All collaborators are injected; the workflow never reads ambient state.
    """

    def __init__(
        self,
        *,
        host: RepositoryHost,
        time: Time,
        config: SubmissionConfig,
    ) -> None:
        self._host = host
        self._time = time
        self._config = config
        self._stages: list[WorkflowStage] = []

    def _enter(self, stage: WorkflowStage) -> None:
        logger.debug("Submission workflow entering %s", stage.value)
        self._stages.append(stage)

    def run(self, raw_text: str, context: SubmissionContext) -> SubmissionOutcome:
        """Process an issue body, reporting the result on the issue."""
        self._stages = []
        try:
            return self._process(raw_text, context)
        except Exception as e:
            stage = self._stages[-1] if self._stages else WorkflowStage.PARSING
            logger.exception(
                "Error processing submission from issue #%d during %s",
                context.issue_number,
                stage.value,
            )
            self._report_failure(context, str(e))
            return Failed(stage=stage, message=str(e), stages=tuple(self._stages))

    def _report_failure(self, context: SubmissionContext, message: str) -> None:
        try:
            self._host.post_comment(
                context.issue_number, notifications.format_processing_error(message)
            )
        except Exception:
            logger.exception("Could not report failure on issue #%d", context.issue_number)

    def _process(self, raw_text: str, context: SubmissionContext) -> SubmissionOutcome:
        self._enter(WorkflowStage.PARSING)
        record = parse_submission(raw_text)

        self._enter(WorkflowStage.VALIDATING)
        validation = validate_submission(record)
        if not validation.is_valid:
            logger.info(
                "Rejecting issue #%d: %d validation error(s)",
                context.issue_number,
                len(validation.errors),
            )
            self._host.post_comment(
                context.issue_number, notifications.format_validation_errors(validation.errors)
            )
            return Rejected(errors=validation.errors, stages=tuple(self._stages))

        self._enter(WorkflowStage.DUPLICATE_CHECK)
        existing = self._host.get_file(self._config.apps_file)
        if isinstance(existing, FileNotFound):
            logger.info("%s does not exist yet; it will be created", existing.path)
        elif contains_app_key(existing.content, record.app_id):
            logger.info(
                "Rejecting issue #%d: %s already listed", context.issue_number, record.app_id
            )
            self._host.post_comment(
                context.issue_number, notifications.format_duplicate(record.app_id)
            )
            return DuplicateRejected(app_id=record.app_id, stages=tuple(self._stages))

        self._enter(WorkflowStage.SUBMITTING)
        branch_name, pr_number, pr_url = self._submit(record, context, existing)

        self._enter(WorkflowStage.NOTIFYING)
        self._host.post_comment(
            context.issue_number,
            notifications.format_success(
                pr_number,
                catalog_name=self._config.catalog_name,
                community_name=self._config.community_name,
            ),
        )
        self._host.add_labels(context.issue_number, list(SUBMISSION_LABELS))

        self._enter(WorkflowStage.DONE)
        return Submitted(
            pr_number=pr_number,
            pr_url=pr_url,
            branch_name=branch_name,
            stages=tuple(self._stages),
        )

    def _submit(
        self,
        record: SubmissionRecord,
        context: SubmissionContext,
        existing: FileContents | FileNotFound,
    ) -> tuple[str, int, str]:
        """Create the branch, commit the updated apps file and open the PR.

        Returns:
            (branch name, PR number, PR URL)
        """
        new_content = append_entry(existing, render_entry(record))
        expected_sha = existing.sha if isinstance(existing, FileContents) else None

        branch_name = generate_submission_branch_name(
            record.app_id, self._time.now(), prefix=self._config.branch_prefix
        )
        base_branch = self._host.get_default_branch()
        tip = self._host.get_default_branch_tip()
        self._host.create_branch(branch_name, tip)
        logger.info("Created branch %s from %s (%s)", branch_name, base_branch, tip)

        self._host.write_file(
            self._config.apps_file,
            new_content,
            branch=branch_name,
            message=render_commit_message(
                record, context, catalog_name=self._config.catalog_name
            ),
            expected_sha=expected_sha,
        )

        pr = self._host.open_change_request(
            title=change_request_title(record, catalog_name=self._config.catalog_name),
            body=render_change_description(record, context),
            head=branch_name,
            base=base_branch,
        )
        logger.info("Opened PR #%d for %s", pr.number, record.app_id)
        return branch_name, pr.number, pr.url
