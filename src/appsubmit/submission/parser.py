"""Build a SubmissionRecord from an app submission issue body."""

import re

from appsubmit.submission.fields import FieldExtractor
from appsubmit.submission.types import (
    CATEGORY_PLACEHOLDER,
    NO_RESPONSE_SENTINEL,
    OptionalField,
    SubmissionRecord,
)

APP_ID_FIELD = "App ID"
GIT_URL_FIELD = "GitHub Repository URL"
APP_NAME_FIELD = "App Name"
DESCRIPTION_FIELD = "App Description"
CATEGORIES_FIELD = "Categories"
AUTHOR_FIELD = "Author Name (Optional)"
LICENSE_FIELD = "License (Optional)"
WEBSITE_FIELD = "Website (Optional)"
TRACKER_FIELD = "Issue Tracker (Optional)"
ANTI_FEATURES_FIELD = "Anti-Features (Optional)"

_LIST_MARKER_RE = re.compile(r"^[-*]\s*")


def parse_categories(section: str) -> tuple[str, ...]:
    """Parse the categories answer into names, in submitted order.

    Blank lines, sentinel lines and the form's placeholder text are dropped; a
    single leading `-` or `*` list marker is stripped from each line.
    """
    categories: list[str] = []
    for line in section.splitlines():
        trimmed = line.strip()
        if not trimmed or NO_RESPONSE_SENTINEL in trimmed or CATEGORY_PLACEHOLDER in trimmed:
            continue
        category = _LIST_MARKER_RE.sub("", trimmed, count=1).strip()
        if category:
            categories.append(category)
    return tuple(categories)


def parse_anti_features(section: str) -> tuple[str, ...]:
    """Parse the anti-features answer into one entry per non-blank line.

    Unlike categories, list markers are kept as written.
    """
    if not section or section == NO_RESPONSE_SENTINEL:
        return ()
    return tuple(
        line.strip()
        for line in section.splitlines()
        if line.strip() and NO_RESPONSE_SENTINEL not in line
    )


def _required(value: str) -> str:
    """Treat a sentinel answer to a required field as no answer."""
    return "" if value == NO_RESPONSE_SENTINEL else value


def parse_submission(raw_text: str) -> SubmissionRecord:
    """Parse an issue form body into a SubmissionRecord.

    Never fails: missing headings parse to empty values and are reported by
    validation instead.
    """
    fields = FieldExtractor(raw_text)
    return SubmissionRecord(
        app_id=_required(fields.extract_single_line(APP_ID_FIELD)),
        git_url=_required(fields.extract_single_line(GIT_URL_FIELD)),
        app_name=_required(fields.extract_single_line(APP_NAME_FIELD)),
        description=_required(fields.extract_multi_line(DESCRIPTION_FIELD)),
        categories=parse_categories(fields.extract_multi_line(CATEGORIES_FIELD)),
        author=OptionalField.from_raw(fields.extract_single_line(AUTHOR_FIELD)),
        license=OptionalField.from_raw(fields.extract_single_line(LICENSE_FIELD)),
        website=OptionalField.from_raw(fields.extract_single_line(WEBSITE_FIELD)),
        tracker=OptionalField.from_raw(fields.extract_single_line(TRACKER_FIELD)),
        anti_features=parse_anti_features(fields.extract_multi_line(ANTI_FEATURES_FIELD)),
    )
