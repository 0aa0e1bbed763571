"""Maven-backed collaborators: staging release, chart push, version bump, site."""

from __future__ import annotations

import shlex

from relsteps.core.result import Err, Ok, Result
from relsteps.infra.shell import CommandRunner
from relsteps.steps.errors import StepError
from relsteps.steps.promote_artifacts import release_branch

NEXUS_STAGING_PLUGIN = "org.sonatype.plugins:nexus-staging-maven-plugin:1.6.13"
DEFAULT_NEXUS_URL = "https://oss.sonatype.org"
DEFAULT_NEXUS_SERVER_ID = "oss-sonatype-staging"
DEFAULT_CHART_PUSH_GOAL = "fabric8:helm-push"
NEXT_DEV_COMMIT_MESSAGE = "[CD] prepare for next development iteration"


class NexusStagingRepositories:
    def __init__(
        self,
        runner: CommandRunner,
        *,
        nexus_url: str = DEFAULT_NEXUS_URL,
        server_id: str = DEFAULT_NEXUS_SERVER_ID,
    ) -> None:
        self.runner = runner
        self.nexus_url = nexus_url
        self.server_id = server_id

    def release(self, repo_id: str) -> Result[None, StepError]:
        cmd = [
            "mvn",
            "-B",
            f"{NEXUS_STAGING_PLUGIN}:rc-release",
            f"-DserverId={self.server_id}",
            f"-DnexusUrl={self.nexus_url}",
            f"-DstagingRepositoryId={repo_id}",
            "-Ddescription=Next release is ready",
            "-DstagingProgressTimeoutMinutes=60",
        ]
        return self.runner.stream(
            cmd,
            kind="repo_release_failed",
            message=f"failed to release staging repository {repo_id}",
        )


class MavenChartPublisher:
    def __init__(self, runner: CommandRunner, *, goal: str = DEFAULT_CHART_PUSH_GOAL) -> None:
        self.runner = runner
        self.goal = goal

    def push(self) -> Result[None, StepError]:
        return self.runner.stream(
            ["mvn", "-B", self.goal],
            kind="chart_push_failed",
            message="failed to push the chart",
        )


class MavenVersionBumper:
    """Bumps to the next -SNAPSHOT on `release-v<version>` and pushes the branch."""

    def __init__(self, runner: CommandRunner, *, remote: str = "origin") -> None:
        self.runner = runner
        self.remote = remote

    def update_next_development_version(
        self, version: str, arguments: str
    ) -> Result[None, StepError]:
        branch = release_branch(version)
        try:
            extra = shlex.split(arguments)
        except ValueError as e:
            return Err(
                StepError(
                    kind="invalid_config",
                    message=f"invalid next development version arguments: {e}",
                    hint=arguments,
                )
            )

        steps: list[tuple[list[str], str]] = [
            (["git", "checkout", "-B", branch], f"failed to create branch {branch}"),
            (
                [
                    "mvn",
                    "-B",
                    "-U",
                    "versions:set",
                    "-DnextSnapshot=true",
                    "-DgenerateBackupPoms=false",
                    *extra,
                ],
                f"failed to set the next development version after {version}",
            ),
            (
                ["git", "commit", "-a", "-m", NEXT_DEV_COMMIT_MESSAGE],
                "failed to commit the next development version",
            ),
            (["git", "push", self.remote, branch], f"failed to push {branch}"),
        ]
        for cmd, message in steps:
            ok = self.runner.stream(cmd, kind="version_bump_failed", message=message)
            if isinstance(ok, Err):
                return ok
        return Ok(None)


class MavenSiteBuilder:
    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def build_and_deploy(self) -> Result[None, StepError]:
        return self.runner.stream(
            ["mvn", "-B", "site", "site:deploy"],
            kind="command_failed",
            message="mvn site site:deploy failed",
        )
