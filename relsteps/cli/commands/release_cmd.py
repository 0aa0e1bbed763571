from __future__ import annotations

from pathlib import Path

import typer

from relsteps.cli.commands._helpers import exit_on_error
from relsteps.cli.context import build_context
from relsteps.infra.wiring import build_collaborators
from relsteps.output.console import Style
from relsteps.steps.derive import promote_artifacts_args
from relsteps.steps.promote_artifacts import promote_artifacts
from relsteps.steps.release_project import release_project
from relsteps.steps.resolve import (
    ReleaseOverrides,
    resolve_promote_options,
    resolve_release_config,
)


def release(
    project: str | None = typer.Option(None, "--project", help="Project (owner/name)"),
    release_version: str | None = typer.Option(
        None, "--release-version", help="Version being released"
    ),
    repo_id: list[str] = typer.Option([], "--repo-id", help="Staging repository id (repeat)"),
    container: str | None = typer.Option(None, "--container", help="Build container name"),
    docker_org: str | None = typer.Option(None, "--docker-org", help="Docker organisation"),
    docker_registry: str | None = typer.Option(
        None, "--docker-registry", help="Registry to promote images to"
    ),
    image: list[str] = typer.Option([], "--image", help="Docker image to promote (repeat)"),
    tag_image: list[str] = typer.Option([], "--tag-image", help="Extra image to tag (repeat)"),
    group_id: str | None = typer.Option(None, "--group-id", help="groupId to wait for"),
    artifact_id: str | None = typer.Option(None, "--artifact-id", help="artifactId to wait for"),
    extension: str | None = typer.Option(None, "--extension", help="Artifact extension"),
    wait_for_repo: str | None = typer.Option(
        None, "--wait-for-repo", help="Repository to wait for (default: maven central)"
    ),
    helm_push: bool | None = typer.Option(
        None, "--helm-push/--no-helm-push", help="Push the chart after releasing"
    ),
    next_dev_version: bool | None = typer.Option(
        None,
        "--next-dev-version/--no-next-dev-version",
        help="Bump to the next development version and open a PR",
    ),
    next_dev_args: str | None = typer.Option(
        None, "--next-dev-args", help="Extra arguments for the version bump"
    ),
    file: Path | None = typer.Option(None, "--file", help="Release file (default: release.toml)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print actions without mutating"),
) -> None:
    """Release a staged project: artifacts, images, PR merge and central sync."""
    ctx = build_context(release_file=file)
    overrides = ReleaseOverrides(
        project=project,
        release_version=release_version,
        repo_ids=tuple(repo_id),
        container_name=container,
        docker_organisation=docker_org,
        promote_to_docker_registry=docker_registry,
        promote_docker_images=tuple(image),
        extra_images_to_tag=tuple(tag_image),
        repository_to_wait_for=wait_for_repo,
        group_id=group_id,
        artifact_id_to_wait_for=artifact_id,
        artifact_extension_to_wait_for=extension,
        helm_push=helm_push,
        update_next_development_version=next_dev_version,
        update_next_development_version_arguments=next_dev_args,
    )

    resolved = resolve_release_config(ctx.release_file, overrides)
    exit_on_error(resolved, ctx)
    config = resolved.unwrap()
    options = resolve_promote_options(ctx.release_file, overrides)

    if dry_run:
        ctx.console.print("dry-run: commands are printed, not executed", Style.DIM)

    collaborators = build_collaborators(
        workspace_root=ctx.workspace_root, console=ctx.console, dry_run=dry_run
    )
    result = release_project(
        config,
        options=options,
        collaborators=collaborators,
        console=ctx.console,
    )
    exit_on_error(result, ctx)


def promote(
    project: str | None = typer.Option(None, "--project", help="Project (owner/name)"),
    release_version: str | None = typer.Option(
        None, "--release-version", help="Version being released"
    ),
    repo_id: list[str] = typer.Option([], "--repo-id", help="Staging repository id (repeat)"),
    container: str | None = typer.Option(None, "--container", help="Build container name"),
    helm_push: bool | None = typer.Option(
        None, "--helm-push/--no-helm-push", help="Push the chart after releasing"
    ),
    next_dev_version: bool | None = typer.Option(
        None,
        "--next-dev-version/--no-next-dev-version",
        help="Bump to the next development version and open a PR",
    ),
    next_dev_args: str | None = typer.Option(
        None, "--next-dev-args", help="Extra arguments for the version bump"
    ),
    file: Path | None = typer.Option(None, "--file", help="Release file (default: release.toml)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print actions without mutating"),
) -> None:
    """Release staged repositories without the image and sync stages."""
    ctx = build_context(release_file=file)
    overrides = ReleaseOverrides(
        project=project,
        release_version=release_version,
        repo_ids=tuple(repo_id),
        container_name=container,
        helm_push=helm_push,
        update_next_development_version=next_dev_version,
        update_next_development_version_arguments=next_dev_args,
    )

    resolved = resolve_release_config(ctx.release_file, overrides)
    exit_on_error(resolved, ctx)
    config = resolved.unwrap()
    options = resolve_promote_options(ctx.release_file, overrides)

    collaborators = build_collaborators(
        workspace_root=ctx.workspace_root, console=ctx.console, dry_run=dry_run
    )
    result = promote_artifacts(
        promote_artifacts_args(config, options),
        collaborators=collaborators,
        console=ctx.console,
    )
    exit_on_error(result, ctx)

    pull_request = result.unwrap()
    if pull_request is not None:
        typer.echo(pull_request.url or pull_request.id)
