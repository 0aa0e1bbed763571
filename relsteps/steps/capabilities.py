"""Collaborator capabilities injected into the release steps.

Each protocol exposes a single operation backed by an external system
(Nexus staging, GitHub, a container registry, a central repository, the
cluster's service registry). Steps only sequence these calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from relsteps.core.result import Result
from relsteps.steps.errors import StepError
from relsteps.steps.model import (
    PromoteImagesArgs,
    PullRequestHandle,
    TagImagesArgs,
    WaitUntilArtifactSyncedArgs,
    WaitUntilPullRequestMergedArgs,
)

__all__ = [
    "StagingRepositories",
    "ChartPublisher",
    "VersionBumper",
    "PullRequests",
    "PullRequestWaiter",
    "ImagePromoter",
    "ImageTagger",
    "ArtifactSyncWaiter",
    "ServiceDiscovery",
    "SiteBuilder",
    "ReleaseCollaborators",
]


class StagingRepositories(Protocol):
    def release(self, repo_id: str) -> Result[None, StepError]:
        """Release (close and promote) one staged repository.

        Releasing the same repository twice must fail.
        """
        ...


class ChartPublisher(Protocol):
    def push(self) -> Result[None, StepError]: ...


class VersionBumper(Protocol):
    def update_next_development_version(
        self, version: str, arguments: str
    ) -> Result[None, StepError]:
        """Move the project to the development version following `version`."""
        ...


class PullRequests(Protocol):
    def create(self, title: str, project: str, branch: str) -> Result[PullRequestHandle, StepError]:
        ...


class PullRequestWaiter(Protocol):
    def wait_until_merged(self, args: WaitUntilPullRequestMergedArgs) -> Result[None, StepError]:
        """Block until the pull request is merged, or fail."""
        ...


class ImagePromoter(Protocol):
    def promote(self, args: PromoteImagesArgs) -> Result[None, StepError]: ...


class ImageTagger(Protocol):
    def tag(self, args: TagImagesArgs) -> Result[None, StepError]: ...


class ArtifactSyncWaiter(Protocol):
    def wait_until_synced(self, args: WaitUntilArtifactSyncedArgs) -> Result[None, StepError]:
        """Block until the artifact is visible in the target repository, or fail."""
        ...


class ServiceDiscovery(Protocol):
    def has_service(self, name: str) -> Result[bool, StepError]: ...


class SiteBuilder(Protocol):
    def build_and_deploy(self) -> Result[None, StepError]: ...


@dataclass(frozen=True, slots=True)
class ReleaseCollaborators:
    """Everything the release steps delegate to."""

    staging: StagingRepositories
    charts: ChartPublisher
    versions: VersionBumper
    pull_requests: PullRequests
    pull_request_waiter: PullRequestWaiter
    image_promoter: ImagePromoter
    image_tagger: ImageTagger
    sync_waiter: ArtifactSyncWaiter
