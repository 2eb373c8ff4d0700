"""Types for app submissions parsed from issue form bodies."""

from dataclasses import dataclass

# Issue forms write this into every optional field left blank
NO_RESPONSE_SENTINEL = "_No response_"

# Instruction text that can leak into the categories section
CATEGORY_PLACEHOLDER = "Select the categories"


@dataclass(frozen=True)
class OptionalField:
    """An optional form answer with its presence decided once, at parse time.

    Attributes:
        raw: The extracted text, verbatim
        value: The answer, or None when the submitter left the field blank
    """

    raw: str
    value: str | None

    @classmethod
    def from_raw(cls, raw: str) -> "OptionalField":
        stripped = raw.strip()
        if not stripped or stripped == NO_RESPONSE_SENTINEL:
            return cls(raw=raw, value=None)
        return cls(raw=raw, value=stripped)

    @property
    def is_present(self) -> bool:
        return self.value is not None


ABSENT = OptionalField(raw="", value=None)


@dataclass(frozen=True)
class SubmissionRecord:
    """A submission parsed from one issue body.

    Required fields hold "" when the submitter omitted them; the validator
    reports them. Optional fields never need sentinel checks downstream.
    """

    app_id: str
    git_url: str
    app_name: str
    description: str
    categories: tuple[str, ...]
    author: OptionalField = ABSENT
    license: OptionalField = ABSENT
    website: OptionalField = ABSENT
    tracker: OptionalField = ABSENT
    anti_features: tuple[str, ...] = ()


@dataclass(frozen=True)
class SubmissionContext:
    """Where a submission came from, passed explicitly to the workflow.

    Attributes:
        issue_number: Number of the issue the submission was filed as
        submitter: Login of the issue author
    """

    issue_number: int
    submitter: str
