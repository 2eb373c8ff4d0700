"""Abstract base class for the repository host a submission is proposed against."""

from abc import ABC, abstractmethod

from appsubmit.gateway.host.types import CreatedChangeRequest, FileContents, FileNotFound


class RepositoryHost(ABC):
    """Abstract interface for the remote repository operations a submission needs.

    All implementations (real and fake) must implement this interface. Every
    method other than get_file raises on failure; callers do not retry.
    """

    @abstractmethod
    def get_file(self, path: str) -> FileContents | FileNotFound:
        """Read a file from the default branch.

        Args:
            path: Repository-relative file path

        Returns:
            FileContents with decoded text and blob SHA, or FileNotFound if the
            file does not exist
        """
        ...

    @abstractmethod
    def get_default_branch(self) -> str:
        """Return the name of the repository's default branch."""
        ...

    @abstractmethod
    def get_default_branch_tip(self) -> str:
        """Return the commit SHA at the tip of the default branch."""
        ...

    @abstractmethod
    def create_branch(self, name: str, from_sha: str) -> None:
        """Create a branch pointing at a commit.

        Raises:
            RuntimeError: If the branch already exists or the call fails
        """
        ...

    @abstractmethod
    def write_file(
        self,
        path: str,
        content: str,
        *,
        branch: str,
        message: str,
        expected_sha: str | None,
    ) -> None:
        """Create or update a file on a branch as a single commit.

        Args:
            path: Repository-relative file path
            content: Full new file content
            branch: Branch to commit to
            message: Commit message
            expected_sha: Blob SHA the update is based on, or None when creating.
                The host rejects the write if the SHA is stale.
        """
        ...

    @abstractmethod
    def open_change_request(
        self, *, title: str, body: str, head: str, base: str
    ) -> CreatedChangeRequest:
        """Open a pull request from head into base."""
        ...

    @abstractmethod
    def post_comment(self, issue_number: int, body: str) -> None:
        """Add a comment to an issue."""
        ...

    @abstractmethod
    def add_labels(self, issue_number: int, labels: list[str]) -> None:
        """Add labels to an issue."""
        ...
