from __future__ import annotations

from relsteps.core.result import Err, Ok, Result
from relsteps.infra.shell import CommandRunner
from relsteps.output.console import Style
from relsteps.platform.process import run as run_process
from relsteps.steps.errors import StepError
from relsteps.steps.timeouts import KUBECTL_TIMEOUT_SECONDS


class KubectlServiceDiscovery:
    """Looks services up in the current kubectl namespace."""

    def __init__(self, runner: CommandRunner, *, namespace: str | None = None) -> None:
        self.runner = runner
        self.namespace = namespace

    def has_service(self, name: str) -> Result[bool, StepError]:
        cmd = ["kubectl", "get", "service", name, "-o", "name"]
        if self.namespace:
            cmd.extend(["--namespace", self.namespace])

        # Lookups are read-only, so they run even in dry-run mode.
        self.runner.console.print("$ " + " ".join(cmd), Style.DIM)
        result = run_process(cmd, cwd=self.runner.workspace_root, timeout=KUBECTL_TIMEOUT_SECONDS)
        if isinstance(result, Ok):
            return Ok(True)

        e = result.error
        if "NotFound" in e.stderr:
            return Ok(False)
        return Err(
            StepError(
                kind="discovery_failed",
                message=f"failed to look up service {name}",
                hint=e.stderr.strip() or str(e),
            )
        )
