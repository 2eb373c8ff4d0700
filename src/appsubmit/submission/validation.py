"""Completeness and format checks for parsed submissions."""

import re
from dataclasses import dataclass

from appsubmit.submission.render import resolves_to_non_string
from appsubmit.submission.types import SubmissionRecord

# One owner segment, one repo segment, optional trailing slash; no query or fragment
GITHUB_REPO_URL_RE = re.compile(r"^https://github\.com/[^/?#\s]+/[^/?#\s]+/?$")

# App IDs become bare YAML mapping keys
APP_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

# The description is written as a literal block, which cannot carry escapes
_BLOCK_UNSAFE_RE = re.compile(
    r"[^\t\n\x20-\x7e\xa0-\u2027\u202a-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


@dataclass(frozen=True)
class ValidationResult:
    """All problems found in a submission, in check order."""

    errors: tuple[str, ...]

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_submission(record: SubmissionRecord) -> ValidationResult:
    """Check a record for missing required fields and malformed values.

    Every check runs; no error suppresses the ones after it. Missing fields are
    reported in the order app ID, repository URL, name, description, categories,
    followed by format errors.
    """
    errors: list[str] = []

    if not record.app_id:
        errors.append("App ID is missing")
    if not record.git_url:
        errors.append("GitHub Repository URL is missing")
    if not record.app_name:
        errors.append("App Name is missing")
    if not record.description:
        errors.append("Description is missing")
    if not record.categories:
        errors.append("At least one category must be selected")

    if record.git_url and GITHUB_REPO_URL_RE.fullmatch(record.git_url) is None:
        errors.append(f'Invalid GitHub URL format: "{record.git_url}"')
    if record.app_id and (
        APP_ID_RE.fullmatch(record.app_id) is None or resolves_to_non_string(record.app_id)
    ):
        errors.append(f'Invalid App ID format: "{record.app_id}"')
    if _BLOCK_UNSAFE_RE.search(record.description) is not None:
        errors.append("Description contains unsupported control characters")

    return ValidationResult(errors=tuple(errors))
