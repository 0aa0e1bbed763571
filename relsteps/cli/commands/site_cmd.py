from __future__ import annotations

from pathlib import Path

import typer

from relsteps.cli.context import build_context
from relsteps.infra.wiring import build_site_collaborators
from relsteps.steps.content_repository import deploy_site
from relsteps.steps.resolve import resolve_content_repository_args


def site(
    service: str | None = typer.Option(
        None, "--service", help="Content repository service (default: content-repository)"
    ),
    enabled: bool | None = typer.Option(
        None, "--enable/--disable", help="Deploy the maven site if the service exists"
    ),
    file: Path | None = typer.Option(None, "--file", help="Release file (default: release.toml)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print actions without mutating"),
) -> None:
    """Deploy the maven site to the content repository (best effort)."""
    ctx = build_context(release_file=file)
    args = resolve_content_repository_args(ctx.release_file, service_name=service, enabled=enabled)

    discovery, builder = build_site_collaborators(
        workspace_root=ctx.workspace_root, console=ctx.console, dry_run=dry_run
    )
    outcome = deploy_site(args, discovery=discovery, site=builder, console=ctx.console)
    if outcome.status == "disabled":
        ctx.console.print("content repository disabled; nothing to do")
    # A soft failure has already been reported and never fails the command.
