from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

MAVEN_CENTRAL = "maven central"
DEFAULT_CONTAINER = "maven"
DEFAULT_CONTENT_REPOSITORY = "content-repository"
DEFAULT_ARTIFACT_EXTENSION = "jar"

_SEQUENCE_FIELDS = ("repo_ids", "promote_docker_images", "extra_images_to_tag")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Everything needed to release one staged project.

    Empty image lists and blank docker/central fields are valid: they turn the
    matching stages off instead of failing the release.
    """

    project: str
    release_version: str
    repo_ids: tuple[str, ...] = ()
    container_name: str = DEFAULT_CONTAINER
    docker_organisation: str = ""
    promote_to_docker_registry: str = ""
    promote_docker_images: tuple[str, ...] = ()
    extra_images_to_tag: tuple[str, ...] = ()
    repository_to_wait_for: str = MAVEN_CENTRAL
    group_id: str = ""
    artifact_id_to_wait_for: str = ""
    artifact_extension_to_wait_for: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.project, str) or not self.project.strip():
            raise ValueError("project must not be empty")
        if not isinstance(self.release_version, str) or not self.release_version.strip():
            raise ValueError("releaseVersion must not be empty")
        for name in _SEQUENCE_FIELDS:
            value: object = getattr(self, name)
            if isinstance(value, str) or not isinstance(value, Iterable):
                raise ValueError(f"{_camel(name)} must be a sequence of strings")
            object.__setattr__(self, name, tuple(value))

    def describe(self) -> str:
        return (
            f"project={self.project}, releaseVersion={self.release_version}, "
            f"repoIds={list(self.repo_ids)}, containerName={self.container_name}, "
            f"dockerOrganisation={self.docker_organisation!r}, "
            f"promoteToDockerRegistry={self.promote_to_docker_registry!r}, "
            f"promoteDockerImages={list(self.promote_docker_images)}, "
            f"extraImagesToTag={list(self.extra_images_to_tag)}, "
            f"repositoryToWaitFor={self.repository_to_wait_for!r}, "
            f"groupId={self.group_id!r}, "
            f"artifactIdToWaitFor={self.artifact_id_to_wait_for!r}, "
            f"artifactExtensionToWaitFor={self.artifact_extension_to_wait_for!r}"
        )


@dataclass(frozen=True, slots=True)
class PromoteOptions:
    helm_push: bool = False
    update_next_development_version: bool = False
    update_next_development_version_arguments: str | None = ""


@dataclass(frozen=True, slots=True)
class PromoteArtifactsArgs:
    project: str
    version: str
    repo_ids: tuple[str, ...] = ()
    container_name: str = DEFAULT_CONTAINER
    options: PromoteOptions = field(default_factory=PromoteOptions)


@dataclass(frozen=True, slots=True)
class PromoteImagesArgs:
    tag: str
    org: str
    to_registry: str
    images: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TagImagesArgs:
    tag: str
    images: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class WaitUntilPullRequestMergedArgs:
    id: str
    project: str


@dataclass(frozen=True, slots=True)
class WaitUntilArtifactSyncedArgs:
    group_id: str
    artifact_id: str
    version: str
    ext: str = DEFAULT_ARTIFACT_EXTENSION
    repo: str = MAVEN_CENTRAL


@dataclass(frozen=True, slots=True)
class PullRequestHandle:
    """A pull request opened by the promotion stage."""

    id: str
    project: str
    url: str | None = None


@dataclass(frozen=True, slots=True)
class DerivedStageArgs:
    """Stage arguments computed once per release; None disables a stage."""

    promote_artifacts: PromoteArtifactsArgs
    promote_images: PromoteImagesArgs | None
    tag_images: TagImagesArgs | None
    wait_for_sync: WaitUntilArtifactSyncedArgs | None


@dataclass(frozen=True, slots=True)
class ContentRepositoryArgs:
    service_name: str = DEFAULT_CONTENT_REPOSITORY
    use_content_repository: bool = True


SiteDeployStatus = Literal["disabled", "no_service", "published", "failed"]


@dataclass(frozen=True, slots=True)
class SiteDeployOutcome:
    """Outcome of the best-effort site deploy.

    A failed publication is status "failed", never a StepError.
    """

    status: SiteDeployStatus
    detail: str = ""

    @property
    def is_soft_failure(self) -> bool:
        return self.status == "failed"
