"""Render a validated submission as an apps.yaml entry and pull request text."""

import re

from appsubmit.submission.types import SubmissionContext, SubmissionRecord

DESCRIPTION_INDENT = "    "

# Characters that change meaning at the start of a YAML plain scalar
_YAML_INDICATORS = frozenset("-?:,[]{}#&*!|>'\"%@`")

# Anything outside YAML's printable set, plus line breaks a quoted scalar would fold
_NEEDS_ESCAPE_RE = re.compile(
    r"[^\t\x20-\x7e\xa0-\u2027\u202a-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)

# Plain scalars that YAML 1.1 or 1.2 resolvers read as bool, null, number or timestamp
_IMPLICIT_FORMS = (
    r"y|Y|yes|Yes|YES|n|N|no|No|NO|true|True|TRUE|false|False|FALSE|on|On|ON|off|Off|OFF",
    r"~|null|Null|NULL",
    r"[-+]?0b[0-1_]+|[-+]?0o?[0-7_]+|[-+]?0x[0-9a-fA-F_]+",
    r"[-+]?[0-9][0-9_]*(?::[0-5]?[0-9])*",
    r"[-+]?(?:\.[0-9_]+|[0-9][0-9_]*(?:\.[0-9_]*)?)(?:[eE][-+]?[0-9]+)?",
    r"[-+]?[0-9][0-9_]*(?::[0-5]?[0-9])+\.[0-9_]*",
    r"[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN)",
    r"[0-9]{4}-[0-9]{1,2}-[0-9]{1,2}(?:(?:[Tt]|[ \t]+).*)?",
    r"<<|=",
)
_IMPLICIT_TYPE_RE = re.compile("|".join(f"(?:{form})" for form in _IMPLICIT_FORMS))

REVIEW_CHECKLIST = (
    "App is FOSS",
    "GitHub repository has releases with APK files",
    "App metadata is accurate",
    "Categories are appropriate",
    "No duplicate app ID",
)


def resolves_to_non_string(value: str) -> bool:
    """Whether YAML reads `value`, written bare, as something other than a string."""
    return _IMPLICIT_TYPE_RE.fullmatch(value) is not None


def _escape_char(match: re.Match[str]) -> str:
    code = ord(match.group())
    if code <= 0xFF:
        return f"\\x{code:02x}"
    return f"\\u{code:04x}"


def quote_scalar(value: str) -> str:
    """Render a YAML double-quoted scalar.

    Non-printable characters and line breaks are written as `\\xNN` or `\\uNNNN`
    escapes.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{_NEEDS_ESCAPE_RE.sub(_escape_char, escaped)}"'


def plain_scalar(value: str) -> str:
    """Render a value bare when YAML reads it back unchanged, quoted otherwise."""
    needs_quotes = (
        not value
        or value != value.strip()
        or value[0] in _YAML_INDICATORS
        or value.endswith(":")
        or ": " in value
        or " #" in value
        or "\t" in value
        or _NEEDS_ESCAPE_RE.search(value) is not None
        or resolves_to_non_string(value)
    )
    return quote_scalar(value) if needs_quotes else value


def render_entry(record: SubmissionRecord) -> str:
    """Render the apps.yaml block for a submission.

    Field order is fixed: git, name, description, categories, author, license,
    website, tracker, anti_features. Absent optional fields and empty lists are
    omitted. The result ends with a newline.
    """
    lines = [
        f"{record.app_id}:",
        f"  git: {plain_scalar(record.git_url)}",
        f"  name: {quote_scalar(record.app_name)}",
        "  description: |",
    ]
    lines.extend(f"{DESCRIPTION_INDENT}{line}" for line in record.description.split("\n"))

    if record.categories:
        lines.append("  categories:")
        lines.extend(f"    - {plain_scalar(category)}" for category in record.categories)

    if record.author.value is not None:
        lines.append(f"  author: {quote_scalar(record.author.value)}")
    if record.license.value is not None:
        lines.append(f"  license: {quote_scalar(record.license.value)}")
    if record.website.value is not None:
        lines.append(f"  website: {plain_scalar(record.website.value)}")
    if record.tracker.value is not None:
        lines.append(f"  tracker: {plain_scalar(record.tracker.value)}")

    if record.anti_features:
        lines.append("  anti_features:")
        lines.extend(f"    - {plain_scalar(feature)}" for feature in record.anti_features)

    return "\n".join(lines) + "\n"


def change_request_title(record: SubmissionRecord, *, catalog_name: str) -> str:
    return f"Add {record.app_name} to {catalog_name}"


def render_commit_message(
    record: SubmissionRecord, context: SubmissionContext, *, catalog_name: str
) -> str:
    """Commit message for the apps.yaml update."""
    return (
        f"Add {record.app_name} ({record.app_id}) to {catalog_name}\n"
        "\n"
        f"Automatically generated from issue #{context.issue_number}\n"
        "\n"
        "App details:\n"
        f"- Name: {record.app_name}\n"
        f"- Repository: {record.git_url}\n"
        f"- Categories: {', '.join(record.categories)}"
    )


def render_change_description(record: SubmissionRecord, context: SubmissionContext) -> str:
    """Pull request body summarizing the submission for reviewers."""
    details = [
        f"- **App ID:** `{record.app_id}`",
        f"- **Name:** {record.app_name}",
        f"- **Repository:** {record.git_url}",
        f"- **Categories:** {', '.join(record.categories)}",
    ]
    optional_details = (
        ("Author", record.author.value),
        ("License", record.license.value),
        ("Website", record.website.value),
        ("Issue Tracker", record.tracker.value),
    )
    for label, value in optional_details:
        if value is not None:
            details.append(f"- **{label}:** {value}")

    parts = [
        f"## New App Submission: {record.app_name}",
        f"This PR was automatically generated from issue #{context.issue_number}.",
        "### App Details\n" + "\n".join(details),
        f"### Description\n{record.description}",
    ]
    if record.anti_features:
        features = "\n".join(f"- {feature}" for feature in record.anti_features)
        parts.append(f"### Anti-Features\n{features}")

    checklist = "\n".join(f"- [ ] {item}" for item in REVIEW_CHECKLIST)
    parts.append(
        "---\n"
        "\n"
        f"**Submitted by:** @{context.submitter}\n"
        f"**Original Issue:** #{context.issue_number}"
    )
    parts.append(f"### Review Checklist\n{checklist}")
    parts.append(f"/cc @{context.submitter}")
    return "\n\n".join(parts)
