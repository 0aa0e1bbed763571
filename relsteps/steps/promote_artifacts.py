from __future__ import annotations

from relsteps.core.result import Err, Ok, Result
from relsteps.output.console import ConsoleProtocol, Style
from relsteps.steps.capabilities import ReleaseCollaborators
from relsteps.steps.errors import StepError
from relsteps.steps.model import PromoteArtifactsArgs, PullRequestHandle


def release_branch(version: str) -> str:
    return f"release-v{version}"


def release_pr_title(version: str) -> str:
    return f"[CD] Release {version}"


def promote_artifacts(
    args: PromoteArtifactsArgs,
    *,
    collaborators: ReleaseCollaborators,
    console: ConsoleProtocol,
) -> Result[PullRequestHandle | None, StepError]:
    """Release the staged repositories of a project.

    Repositories are released one at a time in the given order; the first
    failure is returned and the remaining ids are never attempted. When the
    next development version is requested, the bump is pushed on
    `release-v<version>` and the pull request opened for it is returned.
    """
    console.header(f"Promote artifacts: {args.project} {args.version}")
    console.print(f"container: {args.container_name}", Style.DIM)
    console.print(f"About to release {args.project} repo ids {list(args.repo_ids)}")

    for repo_id in args.repo_ids:
        released = collaborators.staging.release(repo_id)
        if isinstance(released, Err):
            return released
        console.success(f"released {repo_id}")

    options = args.options
    if options.helm_push:
        pushed = collaborators.charts.push()
        if isinstance(pushed, Err):
            return pushed

    if not options.update_next_development_version:
        return Ok(None)

    extra = options.update_next_development_version_arguments or ""
    bumped = collaborators.versions.update_next_development_version(args.version, extra)
    if isinstance(bumped, Err):
        return bumped

    created = collaborators.pull_requests.create(
        release_pr_title(args.version),
        args.project,
        release_branch(args.version),
    )
    if isinstance(created, Err):
        return created

    pr = created.value
    console.print(f"opened pull request {pr.url or pr.id}")
    return Ok(pr)
