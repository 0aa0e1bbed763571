"""Derive per-stage arguments from a ReleaseConfig.

A stage whose arguments derive to None is skipped. Missing docker or central
coordinates produce a warning on the console; an empty list is silent.
"""

from __future__ import annotations

from dataclasses import replace

from relsteps.output.console import ConsoleProtocol
from relsteps.steps.model import (
    DerivedStageArgs,
    PromoteArtifactsArgs,
    PromoteImagesArgs,
    PromoteOptions,
    PullRequestHandle,
    ReleaseConfig,
    TagImagesArgs,
    WaitUntilArtifactSyncedArgs,
    WaitUntilPullRequestMergedArgs,
)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def promote_artifacts_args(
    config: ReleaseConfig, options: PromoteOptions | None = None
) -> PromoteArtifactsArgs:
    return PromoteArtifactsArgs(
        project=config.project,
        version=config.release_version,
        repo_ids=config.repo_ids,
        container_name=config.container_name,
        options=options or PromoteOptions(),
    )


def promote_images_args(
    config: ReleaseConfig, console: ConsoleProtocol
) -> PromoteImagesArgs | None:
    images = config.promote_docker_images
    if not images:
        return None

    if _blank(config.docker_organisation):
        console.warning(
            f"Cannot promote images {list(images)} as missing the dockerOrganisation argument: "
            f"{config.describe()}"
        )
        return None
    if _blank(config.promote_to_docker_registry):
        console.warning(
            f"Cannot promote images {list(images)} as missing the promoteToDockerRegistry "
            f"argument: {config.describe()}"
        )
        return None

    return PromoteImagesArgs(
        tag=config.release_version,
        org=config.docker_organisation,
        to_registry=config.promote_to_docker_registry,
        images=images,
    )


def tag_images_args(config: ReleaseConfig) -> TagImagesArgs | None:
    if not config.extra_images_to_tag:
        return None
    return TagImagesArgs(tag=config.release_version, images=config.extra_images_to_tag)


def wait_until_pull_request_merged_args(
    config: ReleaseConfig, pull_request: PullRequestHandle
) -> WaitUntilPullRequestMergedArgs:
    return WaitUntilPullRequestMergedArgs(id=pull_request.id, project=config.project)


def wait_until_artifact_synced_args(
    config: ReleaseConfig, console: ConsoleProtocol
) -> WaitUntilArtifactSyncedArgs | None:
    if _blank(config.group_id) or _blank(config.artifact_id_to_wait_for):
        console.warning(
            "Cannot wait for artifacts to be synced to central repository as require groupId "
            f"and artifactIdToWaitFor properties. Was given {config.describe()}"
        )
        return None

    args = WaitUntilArtifactSyncedArgs(
        group_id=config.group_id,
        artifact_id=config.artifact_id_to_wait_for,
        version=config.release_version,
    )
    if not _blank(config.artifact_extension_to_wait_for):
        args = replace(args, ext=config.artifact_extension_to_wait_for.strip())
    if not _blank(config.repository_to_wait_for):
        args = replace(args, repo=config.repository_to_wait_for.strip())
    return args


def derive_stage_args(
    config: ReleaseConfig,
    options: PromoteOptions | None,
    console: ConsoleProtocol,
) -> DerivedStageArgs:
    return DerivedStageArgs(
        promote_artifacts=promote_artifacts_args(config, options),
        promote_images=promote_images_args(config, console),
        tag_images=tag_images_args(config),
        wait_for_sync=wait_until_artifact_synced_args(config, console),
    )
