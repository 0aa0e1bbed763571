from __future__ import annotations

from dataclasses import dataclass, field

from relsteps.core.result import Err, Ok, Result
from relsteps.steps.capabilities import ReleaseCollaborators
from relsteps.steps.errors import StepError
from relsteps.steps.model import (
    PromoteImagesArgs,
    PullRequestHandle,
    TagImagesArgs,
    WaitUntilArtifactSyncedArgs,
    WaitUntilPullRequestMergedArgs,
)


def _calls() -> list[tuple[str, object]]:
    return []


def _fail() -> dict[str, StepError]:
    return {}


@dataclass
class FakeCollaborators:
    """Records every collaborator call in order; `fail` maps a call key to an error.

    Call keys are the operation name, or `release:<repo_id>` for staging
    releases.
    """

    calls: list[tuple[str, object]] = field(default_factory=_calls)
    fail: dict[str, StepError] = field(default_factory=_fail)
    pr_id: str = "42"

    def _record(self, key: str, payload: object) -> Result[None, StepError]:
        self.calls.append((key.split(":", 1)[0], payload))
        error = self.fail.get(key)
        if error is not None:
            return Err(error)
        return Ok(None)

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def payloads(self, name: str) -> list[object]:
        return [payload for n, payload in self.calls if n == name]

    # Capabilities

    def release(self, repo_id: str) -> Result[None, StepError]:
        return self._record(f"release:{repo_id}", repo_id)

    def push(self) -> Result[None, StepError]:
        return self._record("push", None)

    def update_next_development_version(
        self, version: str, arguments: str
    ) -> Result[None, StepError]:
        return self._record("bump", (version, arguments))

    def create(self, title: str, project: str, branch: str) -> Result[PullRequestHandle, StepError]:
        recorded = self._record("create_pr", (title, project, branch))
        if isinstance(recorded, Err):
            return recorded
        return Ok(
            PullRequestHandle(
                id=self.pr_id,
                project=project,
                url=f"https://github.com/{project}/pull/{self.pr_id}",
            )
        )

    def wait_until_merged(self, args: WaitUntilPullRequestMergedArgs) -> Result[None, StepError]:
        return self._record("wait_pr", args)

    def promote(self, args: PromoteImagesArgs) -> Result[None, StepError]:
        return self._record("promote_images", args)

    def tag(self, args: TagImagesArgs) -> Result[None, StepError]:
        return self._record("tag_images", args)

    def wait_until_synced(self, args: WaitUntilArtifactSyncedArgs) -> Result[None, StepError]:
        return self._record("wait_sync", args)

    def bundle(self) -> ReleaseCollaborators:
        return ReleaseCollaborators(
            staging=self,
            charts=self,
            versions=self,
            pull_requests=self,
            pull_request_waiter=self,
            image_promoter=self,
            image_tagger=self,
            sync_waiter=self,
        )


def step_error(message: str = "boom") -> StepError:
    return StepError(kind="command_failed", message=message)
