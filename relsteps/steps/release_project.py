from __future__ import annotations

from relsteps.core.result import Err, Ok, Result
from relsteps.output.console import ConsoleProtocol, Style
from relsteps.steps.capabilities import (
    ArtifactSyncWaiter,
    ImagePromoter,
    ImageTagger,
    PullRequestWaiter,
    ReleaseCollaborators,
)
from relsteps.steps.derive import derive_stage_args, wait_until_pull_request_merged_args
from relsteps.steps.errors import StepError
from relsteps.steps.model import (
    PromoteImagesArgs,
    PromoteOptions,
    ReleaseConfig,
    TagImagesArgs,
    WaitUntilArtifactSyncedArgs,
    WaitUntilPullRequestMergedArgs,
)
from relsteps.steps.promote_artifacts import promote_artifacts


def promote_images(
    args: PromoteImagesArgs,
    *,
    promoter: ImagePromoter,
    console: ConsoleProtocol,
) -> Result[None, StepError]:
    console.header(f"Promote images to {args.to_registry}")
    console.print(f"{args.org}: {', '.join(args.images)} @ {args.tag}", Style.DIM)
    return promoter.promote(args)


def tag_images(
    args: TagImagesArgs,
    *,
    tagger: ImageTagger,
    console: ConsoleProtocol,
) -> Result[None, StepError]:
    console.header(f"Tag images {args.tag}")
    console.print(", ".join(args.images), Style.DIM)
    return tagger.tag(args)


def wait_until_pull_request_merged(
    args: WaitUntilPullRequestMergedArgs,
    *,
    waiter: PullRequestWaiter,
    console: ConsoleProtocol,
) -> Result[None, StepError]:
    console.header(f"Wait for pull request {args.id} on {args.project}")
    return waiter.wait_until_merged(args)


def wait_until_artifact_synced_with_central(
    args: WaitUntilArtifactSyncedArgs,
    *,
    waiter: ArtifactSyncWaiter,
    console: ConsoleProtocol,
) -> Result[None, StepError]:
    console.header(f"Wait for {args.group_id}:{args.artifact_id}:{args.version} in {args.repo}")
    return waiter.wait_until_synced(args)


def release_project(
    config: ReleaseConfig,
    *,
    options: PromoteOptions | None = None,
    collaborators: ReleaseCollaborators,
    console: ConsoleProtocol,
) -> Result[bool, StepError]:
    """Release a staged project.

    Stages run strictly in this order, each one only after the previous one
    finished:

    1. promote artifacts (always)
    2. promote docker images (needs images, organisation and registry)
    3. tag extra images (needs extra images)
    4. wait for the version-bump pull request (only if one was opened)
    5. wait for the artifact in the central repository (needs groupId and
       artifactId)

    The first failing stage aborts the release and its error is returned.
    """
    derived = derive_stage_args(config, options, console)

    promoted = promote_artifacts(
        derived.promote_artifacts, collaborators=collaborators, console=console
    )
    if isinstance(promoted, Err):
        return promoted
    pull_request = promoted.value

    if derived.promote_images is not None:
        ok = promote_images(
            derived.promote_images, promoter=collaborators.image_promoter, console=console
        )
        if isinstance(ok, Err):
            return ok

    if derived.tag_images is not None:
        ok = tag_images(derived.tag_images, tagger=collaborators.image_tagger, console=console)
        if isinstance(ok, Err):
            return ok

    if pull_request is not None:
        ok = wait_until_pull_request_merged(
            wait_until_pull_request_merged_args(config, pull_request),
            waiter=collaborators.pull_request_waiter,
            console=console,
        )
        if isinstance(ok, Err):
            return ok

    if derived.wait_for_sync is not None:
        ok = wait_until_artifact_synced_with_central(
            derived.wait_for_sync, waiter=collaborators.sync_waiter, console=console
        )
        if isinstance(ok, Err):
            return ok

    console.success(f"released {config.project} {config.release_version}")
    return Ok(True)
