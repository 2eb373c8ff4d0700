"""Branch naming for submission pull requests."""

import re
from datetime import UTC, datetime, timedelta

_UNSAFE_REF_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def generate_submission_branch_name(app_id: str, timestamp: datetime, *, prefix: str) -> str:
    """Generate a branch name unique per submission attempt.

    Format: {prefix}-{app_id}-{epoch milliseconds}. The millisecond suffix keeps
    resubmissions of the same app ID from colliding; a true collision surfaces
    as a branch-creation failure from the host. The timestamp must be
    timezone-aware.

    Examples:
        >>> generate_submission_branch_name("org.example", dt, prefix="add-app")
        'add-app-org.example-1705329000000'
    """
    safe_id = _UNSAFE_REF_CHARS_RE.sub("-", app_id).strip("-.")
    millis = (timestamp - _EPOCH) // timedelta(milliseconds=1)
    return f"{prefix}-{safe_id}-{millis}"
