"""Fake repository host for testing."""

from appsubmit.gateway.host.abc import RepositoryHost
from appsubmit.gateway.host.types import CreatedChangeRequest, FileContents, FileNotFound


class FakeRepositoryHost(RepositoryHost):
    """In-memory fake implementation of repository host operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Failures are injected with
    `fail_on`, a mapping of method name -> exception to raise.
    """

    def __init__(
        self,
        *,
        files: dict[str, str] | None = None,
        default_branch: str = "main",
        default_branch_sha: str = "abc123",
        existing_branches: set[str] | None = None,
        next_pr_number: int = 999,
        fail_on: dict[str, Exception] | None = None,
    ) -> None:
        """Create FakeRepositoryHost with pre-configured state.

        Args:
            files: Mapping of path -> content on the default branch
            default_branch: Name of the default branch (default: "main")
            default_branch_sha: Commit SHA at the default branch tip
            existing_branches: Branch names that already exist
            next_pr_number: Number assigned to the next opened pull request
            fail_on: Mapping of method name -> exception raised when it is called
        """
        self._files = dict(files or {})
        self._default_branch = default_branch
        self._default_branch_sha = default_branch_sha
        self._branches = {default_branch} | set(existing_branches or set())
        self._next_pr_number = next_pr_number
        self._fail_on = fail_on or {}

        # Mutation tracking
        self._get_file_calls: list[str] = []
        self._created_branches: list[tuple[str, str]] = []
        self._written_files: list[tuple[str, str, str, str, str | None]] = []
        self._opened_change_requests: list[tuple[str, str, str, str]] = []
        self._posted_comments: list[tuple[int, str]] = []
        self._added_labels: list[tuple[int, list[str]]] = []

    def _maybe_fail(self, method: str) -> None:
        if method in self._fail_on:
            raise self._fail_on[method]

    @staticmethod
    def sha_for(content: str) -> str:
        """Deterministic fake blob SHA for a file's content."""
        return f"sha-{len(content)}"

    def get_file(self, path: str) -> FileContents | FileNotFound:
        self._get_file_calls.append(path)
        self._maybe_fail("get_file")
        if path not in self._files:
            return FileNotFound(path=path)
        content = self._files[path]
        return FileContents(path=path, content=content, sha=self.sha_for(content))

    def get_default_branch(self) -> str:
        self._maybe_fail("get_default_branch")
        return self._default_branch

    def get_default_branch_tip(self) -> str:
        self._maybe_fail("get_default_branch_tip")
        return self._default_branch_sha

    def create_branch(self, name: str, from_sha: str) -> None:
        self._maybe_fail("create_branch")
        if name in self._branches:
            msg = f"Failed to create branch {name}: Reference already exists"
            raise RuntimeError(msg)
        self._branches.add(name)
        self._created_branches.append((name, from_sha))

    def write_file(
        self,
        path: str,
        content: str,
        *,
        branch: str,
        message: str,
        expected_sha: str | None,
    ) -> None:
        self._maybe_fail("write_file")
        if branch not in self._branches:
            msg = f"Failed to write {path}: branch {branch} does not exist"
            raise RuntimeError(msg)
        current = self._files.get(path)
        current_sha = self.sha_for(current) if current is not None else None
        if expected_sha != current_sha:
            msg = f"Failed to write {path}: {path} does not match {expected_sha}"
            raise RuntimeError(msg)
        self._written_files.append((path, content, branch, message, expected_sha))

    def open_change_request(
        self, *, title: str, body: str, head: str, base: str
    ) -> CreatedChangeRequest:
        self._maybe_fail("open_change_request")
        self._opened_change_requests.append((title, body, head, base))
        number = self._next_pr_number
        self._next_pr_number += 1
        return CreatedChangeRequest(
            number=number, url=f"https://github.com/test-owner/test-repo/pull/{number}"
        )

    def post_comment(self, issue_number: int, body: str) -> None:
        self._maybe_fail("post_comment")
        self._posted_comments.append((issue_number, body))

    def add_labels(self, issue_number: int, labels: list[str]) -> None:
        self._maybe_fail("add_labels")
        self._added_labels.append((issue_number, list(labels)))

    @property
    def get_file_calls(self) -> list[str]:
        """Paths passed to get_file, in call order."""
        return list(self._get_file_calls)

    @property
    def created_branches(self) -> list[tuple[str, str]]:
        """(branch name, from SHA) for each created branch."""
        return list(self._created_branches)

    @property
    def written_files(self) -> list[tuple[str, str, str, str, str | None]]:
        """(path, content, branch, message, expected SHA) for each write."""
        return list(self._written_files)

    @property
    def opened_change_requests(self) -> list[tuple[str, str, str, str]]:
        """(title, body, head, base) for each opened pull request."""
        return list(self._opened_change_requests)

    @property
    def posted_comments(self) -> list[tuple[int, str]]:
        """(issue number, body) for each posted comment."""
        return list(self._posted_comments)

    @property
    def added_labels(self) -> list[tuple[int, list[str]]]:
        """(issue number, labels) for each add_labels call."""
        return list(self._added_labels)
