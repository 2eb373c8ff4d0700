"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from appsubmit.config import SubmissionConfig, load_config
from appsubmit.gateway.host.abc import RepositoryHost
from appsubmit.gateway.host.real import RealRepositoryHost
from appsubmit.gateway.host.types import GitHubRepoId
from appsubmit.gateway.time.abc import Time
from appsubmit.gateway.time.real import RealTime
from appsubmit.submission.workflow import SubmissionWorkflow


@dataclass(frozen=True)
class AppContext:
    """Immutable context holding all dependencies for a submission run.

    Created at the CLI entry point (or by tests via `for_test`) and threaded
    through the command.
    """

    host: RepositoryHost
    time: Time
    config: SubmissionConfig

    def workflow(self) -> SubmissionWorkflow:
        return SubmissionWorkflow(host=self.host, time=self.time, config=self.config)

    @staticmethod
    def for_test(
        *,
        host: RepositoryHost | None = None,
        time: Time | None = None,
        config: SubmissionConfig | None = None,
    ) -> "AppContext":
        """Create an AppContext backed by fakes unless overridden."""
        from appsubmit.gateway.host.fake import FakeRepositoryHost
        from appsubmit.gateway.time.fake import FakeTime

        return AppContext(
            host=host or FakeRepositoryHost(),
            time=time or FakeTime(),
            config=config or SubmissionConfig(),
        )


def create_context(
    repo_id: GitHubRepoId,
    *,
    default_branch: str | None,
    config_path: Path,
) -> AppContext:
    """Create the production context for one repository."""
    return AppContext(
        host=RealRepositoryHost(repo_id, default_branch=default_branch),
        time=RealTime(),
        config=load_config(config_path),
    )
