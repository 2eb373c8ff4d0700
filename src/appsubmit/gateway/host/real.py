"""Production implementation of repository host operations."""

import base64
import json
import logging
from pathlib import Path
from typing import Any

from appsubmit.gateway.host.abc import RepositoryHost
from appsubmit.gateway.host.types import (
    CreatedChangeRequest,
    FileContents,
    FileNotFound,
    GitHubRepoId,
)
from appsubmit.subprocess_utils import execute_gh_command

logger = logging.getLogger(__name__)

_RAW_MEDIA_TYPE = "application/vnd.github.raw"


class RealRepositoryHost(RepositoryHost):
    """Production implementation using the gh CLI's REST passthrough.

    All operations execute `gh api` via subprocess, so no local checkout of the
    target repository is needed.
    """

    def __init__(
        self,
        repo_id: GitHubRepoId,
        *,
        default_branch: str | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Create a host bound to one repository.

        Args:
            repo_id: Repository the submission is proposed against
            default_branch: Default branch name if already known (e.g. from the
                event payload); looked up lazily otherwise
            cwd: Working directory for gh invocations
        """
        self._repo_id = repo_id
        self._default_branch = default_branch
        self._cwd = cwd

    @property
    def _api_prefix(self) -> str:
        return f"repos/{self._repo_id.full_name}"

    def _gh_api(self, endpoint: str, *args: str) -> str:
        return execute_gh_command(["gh", "api", f"{self._api_prefix}/{endpoint}", *args], self._cwd)

    def _gh_api_send(self, endpoint: str, method: str, payload: dict[str, Any]) -> str:
        """Send a JSON request body on stdin via `--input -`."""
        return execute_gh_command(
            ["gh", "api", f"{self._api_prefix}/{endpoint}", "-X", method, "--input", "-"],
            self._cwd,
            input=json.dumps(payload),
        )

    def get_file(self, path: str) -> FileContents | FileNotFound:
        """Fetch a file via the contents API.

        Note: a 404 from gh is reported as FileNotFound; every other failure
        propagates as RuntimeError. Files too large for an inline body (encoding
        other than base64) are re-read with the raw media type.
        """
        try:
            stdout = self._gh_api(f"contents/{path}")
        except RuntimeError as e:
            if "404" in str(e) or "not found" in str(e).lower():
                logger.debug("%s not found in %s", path, self._repo_id.full_name)
                return FileNotFound(path=path)
            raise
        data = json.loads(stdout)
        if data.get("encoding") == "base64":
            content = base64.b64decode(data["content"]).decode("utf-8")
        else:
            logger.debug("%s has no inline content, fetching raw", path)
            content = self._gh_api(f"contents/{path}", "-H", f"Accept: {_RAW_MEDIA_TYPE}")
        return FileContents(path=path, content=content, sha=data["sha"])

    def get_default_branch(self) -> str:
        if self._default_branch is None:
            stdout = execute_gh_command(
                ["gh", "api", self._api_prefix, "--jq", ".default_branch"], self._cwd
            )
            self._default_branch = stdout.strip()
        return self._default_branch

    def get_default_branch_tip(self) -> str:
        branch = self.get_default_branch()
        stdout = self._gh_api(f"git/refs/heads/{branch}", "--jq", ".object.sha")
        sha = stdout.strip()
        if not sha:
            msg = f"Could not resolve tip of {branch} in {self._repo_id.full_name}"
            raise RuntimeError(msg)
        return sha

    def create_branch(self, name: str, from_sha: str) -> None:
        self._gh_api_send("git/refs", "POST", {"ref": f"refs/heads/{name}", "sha": from_sha})

    def write_file(
        self,
        path: str,
        content: str,
        *,
        branch: str,
        message: str,
        expected_sha: str | None,
    ) -> None:
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        if expected_sha is not None:
            payload["sha"] = expected_sha
        self._gh_api_send(f"contents/{path}", "PUT", payload)

    def open_change_request(
        self, *, title: str, body: str, head: str, base: str
    ) -> CreatedChangeRequest:
        stdout = self._gh_api_send(
            "pulls", "POST", {"title": title, "body": body, "head": head, "base": base}
        )
        data = json.loads(stdout)
        return CreatedChangeRequest(number=data["number"], url=data["html_url"])

    def post_comment(self, issue_number: int, body: str) -> None:
        self._gh_api_send(f"issues/{issue_number}/comments", "POST", {"body": body})

    def add_labels(self, issue_number: int, labels: list[str]) -> None:
        self._gh_api_send(f"issues/{issue_number}/labels", "POST", {"labels": labels})
