"""Wait for a released artifact to reach a central repository."""

from __future__ import annotations

from time import monotonic, sleep

from relsteps.core.result import Err, Ok, Result
from relsteps.infra.http import HttpClient
from relsteps.output.console import ConsoleProtocol, Style
from relsteps.steps.errors import StepError
from relsteps.steps.model import MAVEN_CENTRAL, WaitUntilArtifactSyncedArgs
from relsteps.steps.timeouts import CENTRAL_POLL_SECONDS, CENTRAL_SYNC_WAIT_SECONDS

MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2"

# Statuses that mean "not there yet" rather than "broken".
_PENDING_STATUSES = frozenset({404, 403})


def repository_base_url(repo: str) -> str:
    """Map a repository name to the base URL artifacts are served from."""
    name = repo.strip()
    if not name or name.lower() == MAVEN_CENTRAL:
        return MAVEN_CENTRAL_URL
    return name.rstrip("/")


def artifact_url(args: WaitUntilArtifactSyncedArgs) -> str:
    group_path = args.group_id.replace(".", "/")
    file_name = f"{args.artifact_id}-{args.version}.{args.ext}"
    return (
        f"{repository_base_url(args.repo)}/{group_path}/{args.artifact_id}/"
        f"{args.version}/{file_name}"
    )


class CentralSyncWaiter:
    def __init__(
        self,
        http: HttpClient,
        *,
        console: ConsoleProtocol,
        dry_run: bool = False,
        timeout_seconds: float = CENTRAL_SYNC_WAIT_SECONDS,
        poll_seconds: float = CENTRAL_POLL_SECONDS,
    ) -> None:
        self.http = http
        self.console = console
        self.dry_run = dry_run
        self.timeout_seconds = timeout_seconds
        self.poll_seconds = poll_seconds

    def wait_until_synced(self, args: WaitUntilArtifactSyncedArgs) -> Result[None, StepError]:
        url = artifact_url(args)
        self.console.print(f"polling {url}", Style.DIM)
        if self.dry_run:
            return Ok(None)

        deadline = monotonic() + self.timeout_seconds
        attempts = 0
        while True:
            attempts += 1
            probed = self.http.probe(url)
            if isinstance(probed, Ok):
                self.console.success(
                    f"{args.artifact_id} {args.version} is available in {args.repo}"
                )
                return Ok(None)

            error = probed.error
            if error.status not in _PENDING_STATUSES:
                return Err(
                    StepError(
                        kind="sync_failed",
                        message=(
                            f"failed to check {args.repo} for {args.artifact_id} {args.version}"
                        ),
                        hint=str(error),
                    )
                )

            if monotonic() >= deadline:
                return Err(
                    StepError(
                        kind="sync_timeout",
                        message=(
                            f"timed out waiting for {args.group_id}:{args.artifact_id}:"
                            f"{args.version} in {args.repo}"
                        ),
                        hint=f"{attempts} attempts against {url}",
                    )
                )
            sleep(self.poll_seconds)
