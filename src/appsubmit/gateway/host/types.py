"""Value types returned by repository host operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubRepoId:
    """Owner and name of a GitHub repository."""

    owner: str
    repo: str

    @classmethod
    def parse(cls, full_name: str) -> "GitHubRepoId":
        """Parse an `owner/repo` string.

        Raises:
            ValueError: If the string is not exactly two non-empty segments
        """
        owner, sep, repo = full_name.strip().partition("/")
        if not sep or not owner or not repo or "/" in repo:
            msg = f"Expected repository as OWNER/NAME, got: {full_name!r}"
            raise ValueError(msg)
        return cls(owner=owner, repo=repo)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class FileContents:
    """Decoded file content plus the blob SHA used for optimistic writes."""

    path: str
    content: str
    sha: str


@dataclass(frozen=True)
class FileNotFound:
    """Sentinel returned when a file does not exist on the default branch."""

    path: str


@dataclass(frozen=True)
class CreatedChangeRequest:
    """A pull request opened by the host."""

    number: int
    url: str
