"""GitHub collaborators backed by the gh CLI."""

from __future__ import annotations

import json
from time import monotonic, sleep

from relsteps.core.result import Err, Ok, Result
from relsteps.core.structured import StrDict, as_str_dict
from relsteps.infra.shell import CommandRunner
from relsteps.output.console import Style
from relsteps.steps.errors import StepError
from relsteps.steps.model import PullRequestHandle, WaitUntilPullRequestMergedArgs
from relsteps.steps.timeouts import GH_TIMEOUT_SECONDS, PR_MERGE_WAIT_SECONDS, PR_POLL_SECONDS

_DRY_RUN_PR_URL = "https://github.com/dry-run/dry-run/pull/0"


def pull_request_id_from_url(url: str) -> str | None:
    """Return the PR number from a `.../pull/<n>` URL."""
    parts = url.strip().rstrip("/").split("/")
    if len(parts) < 2 or parts[-2] != "pull" or not parts[-1].isdigit():
        return None
    return parts[-1]


class GhPullRequests:
    def __init__(self, runner: CommandRunner, *, body: str = "") -> None:
        self.runner = runner
        self.body = body

    def create(self, title: str, project: str, branch: str) -> Result[PullRequestHandle, StepError]:
        cmd = [
            "gh",
            "pr",
            "create",
            "--repo",
            project,
            "--head",
            branch,
            "--title",
            title,
            "--body",
            self.body or title,
        ]
        result = self.runner.capture(
            cmd,
            kind="pr_create_failed",
            message=f"failed to create pull request on {project}",
            timeout=GH_TIMEOUT_SECONDS,
            dry_run_output=_DRY_RUN_PR_URL,
        )
        if isinstance(result, Err):
            return result

        url = result.value.strip().splitlines()[-1] if result.value.strip() else ""
        pr_id = pull_request_id_from_url(url)
        if pr_id is None:
            return Err(
                StepError(
                    kind="pr_create_failed",
                    message="unexpected gh pr create output",
                    hint=url or None,
                )
            )
        return Ok(PullRequestHandle(id=pr_id, project=project, url=url))


def _parse_view_payload(payload: str, *, pr: str) -> Result[StrDict, StepError]:
    try:
        obj: object = json.loads(payload)
    except json.JSONDecodeError as e:
        return Err(
            StepError(kind="pr_not_merged", message=f"invalid JSON from gh pr view: {e}", hint=pr)
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            StepError(kind="pr_not_merged", message="unexpected gh pr view payload", hint=pr)
        )
    return Ok(data)


class GhPullRequestWaiter:
    """Polls a pull request until it is merged."""

    def __init__(
        self,
        runner: CommandRunner,
        *,
        timeout_seconds: float = PR_MERGE_WAIT_SECONDS,
        poll_seconds: float = PR_POLL_SECONDS,
    ) -> None:
        self.runner = runner
        self.timeout_seconds = timeout_seconds
        self.poll_seconds = poll_seconds

    def wait_until_merged(self, args: WaitUntilPullRequestMergedArgs) -> Result[None, StepError]:
        pr = f"{args.project}#{args.id}"
        if self.runner.dry_run:
            self.runner.console.print(f"would wait for {pr} to merge", Style.DIM)
            return Ok(None)

        cmd = ["gh", "pr", "view", args.id, "--repo", args.project, "--json", "state,mergedAt"]
        deadline = monotonic() + self.timeout_seconds
        while True:
            view = self.runner.capture(
                cmd,
                kind="pr_not_merged",
                message=f"failed to query pull request {pr}",
                timeout=GH_TIMEOUT_SECONDS,
            )
            if isinstance(view, Err):
                return view

            parsed = _parse_view_payload(view.value, pr=pr)
            if isinstance(parsed, Err):
                return parsed

            state = parsed.value.get("state")
            merged_at = parsed.value.get("mergedAt")
            merged = (isinstance(state, str) and state == "MERGED") or (
                isinstance(merged_at, str) and merged_at.strip() != ""
            )
            if merged:
                self.runner.console.success(f"{pr} merged")
                return Ok(None)

            if isinstance(state, str) and state != "OPEN":
                return Err(
                    StepError(
                        kind="pr_not_merged",
                        message=f"pull request {pr} is {state.lower()} without merge",
                    )
                )

            if monotonic() >= deadline:
                return Err(
                    StepError(
                        kind="pr_not_merged",
                        message=f"timed out waiting for pull request {pr} to merge",
                    )
                )
            sleep(self.poll_seconds)
