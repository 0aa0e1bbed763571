from __future__ import annotations

from pathlib import Path

from relsteps.infra.central import CentralSyncWaiter
from relsteps.infra.docker import DockerImagePromoter, DockerImageTagger
from relsteps.infra.github import GhPullRequests, GhPullRequestWaiter
from relsteps.infra.http import HttpClient, RealHttpClient
from relsteps.infra.kube import KubectlServiceDiscovery
from relsteps.infra.maven import (
    MavenChartPublisher,
    MavenSiteBuilder,
    MavenVersionBumper,
    NexusStagingRepositories,
)
from relsteps.infra.shell import CommandRunner
from relsteps.output.console import ConsoleProtocol
from relsteps.steps.capabilities import ReleaseCollaborators


def build_collaborators(
    *,
    workspace_root: Path,
    console: ConsoleProtocol,
    dry_run: bool,
    http: HttpClient | None = None,
) -> ReleaseCollaborators:
    runner = CommandRunner(workspace_root=workspace_root, console=console, dry_run=dry_run)
    return ReleaseCollaborators(
        staging=NexusStagingRepositories(runner),
        charts=MavenChartPublisher(runner),
        versions=MavenVersionBumper(runner),
        pull_requests=GhPullRequests(runner),
        pull_request_waiter=GhPullRequestWaiter(runner),
        image_promoter=DockerImagePromoter(runner),
        image_tagger=DockerImageTagger(runner),
        sync_waiter=CentralSyncWaiter(http or RealHttpClient(), console=console, dry_run=dry_run),
    )


def build_site_collaborators(
    *,
    workspace_root: Path,
    console: ConsoleProtocol,
    dry_run: bool,
) -> tuple[KubectlServiceDiscovery, MavenSiteBuilder]:
    runner = CommandRunner(workspace_root=workspace_root, console=console, dry_run=dry_run)
    return KubectlServiceDiscovery(runner), MavenSiteBuilder(runner)
