"""Merge the release file with command line overrides.

Command line values win field by field; lists replace rather than extend.
Validation happens exactly once, when the ReleaseConfig is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from relsteps.core.config import ReleaseFile
from relsteps.core.result import Err, Ok, Result
from relsteps.steps.errors import StepError
from relsteps.steps.model import (
    DEFAULT_CONTAINER,
    DEFAULT_CONTENT_REPOSITORY,
    MAVEN_CENTRAL,
    ContentRepositoryArgs,
    PromoteOptions,
    ReleaseConfig,
)


@dataclass(frozen=True, slots=True)
class ReleaseOverrides:
    """Values given on the command line; None/empty means not given."""

    project: str | None = None
    release_version: str | None = None
    repo_ids: tuple[str, ...] = ()
    container_name: str | None = None
    docker_organisation: str | None = None
    promote_to_docker_registry: str | None = None
    promote_docker_images: tuple[str, ...] = ()
    extra_images_to_tag: tuple[str, ...] = ()
    repository_to_wait_for: str | None = None
    group_id: str | None = None
    artifact_id_to_wait_for: str | None = None
    artifact_extension_to_wait_for: str | None = None
    helm_push: bool | None = None
    update_next_development_version: bool | None = None
    update_next_development_version_arguments: str | None = None


def _pick(override: str | None, from_file: str | None, default: str = "") -> str:
    if override is not None and override.strip():
        return override.strip()
    if from_file is not None:
        return from_file
    return default


def _pick_list(override: tuple[str, ...], from_file: tuple[str, ...] | None) -> tuple[str, ...]:
    cleaned = tuple(s.strip() for s in override if s.strip())
    if cleaned:
        return cleaned
    return from_file or ()


def _pick_bool(override: bool | None, from_file: bool | None) -> bool:
    if override is not None:
        return override
    return bool(from_file)


def resolve_release_config(
    release_file: ReleaseFile, overrides: ReleaseOverrides
) -> Result[ReleaseConfig, StepError]:
    rel = release_file.release
    docker = release_file.docker
    central = release_file.central

    try:
        config = ReleaseConfig(
            project=_pick(overrides.project, rel.project),
            release_version=_pick(overrides.release_version, rel.version),
            repo_ids=_pick_list(overrides.repo_ids, rel.repo_ids),
            container_name=_pick(overrides.container_name, rel.container, DEFAULT_CONTAINER),
            docker_organisation=_pick(overrides.docker_organisation, docker.organisation),
            promote_to_docker_registry=_pick(overrides.promote_to_docker_registry, docker.registry),
            promote_docker_images=_pick_list(overrides.promote_docker_images, docker.images),
            extra_images_to_tag=_pick_list(
                overrides.extra_images_to_tag, docker.extra_images_to_tag
            ),
            repository_to_wait_for=_pick(
                overrides.repository_to_wait_for, central.repository, MAVEN_CENTRAL
            ),
            group_id=_pick(overrides.group_id, central.group_id),
            artifact_id_to_wait_for=_pick(overrides.artifact_id_to_wait_for, central.artifact_id),
            artifact_extension_to_wait_for=_pick(
                overrides.artifact_extension_to_wait_for, central.extension
            ),
        )
    except ValueError as e:
        return Err(
            StepError(
                kind="invalid_config",
                message=f"invalid release configuration: {e}",
                hint="Pass --project/--release-version or set them in [release] of release.toml.",
            )
        )
    return Ok(config)


def resolve_promote_options(
    release_file: ReleaseFile, overrides: ReleaseOverrides
) -> PromoteOptions:
    promote = release_file.promote
    return PromoteOptions(
        helm_push=_pick_bool(overrides.helm_push, promote.helm_push),
        update_next_development_version=_pick_bool(
            overrides.update_next_development_version,
            promote.update_next_development_version,
        ),
        update_next_development_version_arguments=_pick(
            overrides.update_next_development_version_arguments,
            promote.update_next_development_version_arguments,
        ),
    )


def resolve_content_repository_args(
    release_file: ReleaseFile,
    *,
    service_name: str | None,
    enabled: bool | None,
) -> ContentRepositoryArgs:
    site = release_file.site
    return ContentRepositoryArgs(
        service_name=_pick(service_name, site.service, DEFAULT_CONTENT_REPOSITORY),
        use_content_repository=enabled if enabled is not None else site.enabled is not False,
    )
