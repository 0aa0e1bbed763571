"""Container image collaborators backed by the docker CLI."""

from __future__ import annotations

from relsteps.core.result import Err, Ok, Result
from relsteps.infra.shell import CommandRunner
from relsteps.steps.errors import StepError, StepErrorKind
from relsteps.steps.model import PromoteImagesArgs, TagImagesArgs

LATEST_TAG = "latest"


def _retag(
    runner: CommandRunner,
    source: str,
    target: str,
    *,
    kind: StepErrorKind,
) -> Result[None, StepError]:
    for cmd, message in (
        (["docker", "pull", source], f"failed to pull {source}"),
        (["docker", "tag", source, target], f"failed to tag {source} as {target}"),
        (["docker", "push", target], f"failed to push {target}"),
    ):
        ok = runner.stream(cmd, kind=kind, message=message)
        if isinstance(ok, Err):
            return ok
    return Ok(None)


class DockerImagePromoter:
    """Copies `<org>/<image>:<tag>` to `<registry>/<org>/<image>:<tag>`."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def promote(self, args: PromoteImagesArgs) -> Result[None, StepError]:
        for image in args.images:
            source = f"{args.org}/{image}:{args.tag}"
            target = f"{args.to_registry}/{args.org}/{image}:{args.tag}"
            ok = _retag(self.runner, source, target, kind="image_promotion_failed")
            if isinstance(ok, Err):
                return ok
        return Ok(None)


class DockerImageTagger:
    """Points `<image>:latest` at `<image>:<tag>`."""

    def __init__(self, runner: CommandRunner, *, tag: str = LATEST_TAG) -> None:
        self.runner = runner
        self.tag_name = tag

    def tag(self, args: TagImagesArgs) -> Result[None, StepError]:
        for image in args.images:
            source = f"{image}:{args.tag}"
            target = f"{image}:{self.tag_name}"
            ok = _retag(self.runner, source, target, kind="image_tag_failed")
            if isinstance(ok, Err):
                return ok
        return Ok(None)
