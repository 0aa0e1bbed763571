"""Command execution shared by the collaborator adapters."""

from __future__ import annotations

from pathlib import Path

from relsteps.core.result import Err, Ok, Result
from relsteps.output.console import ConsoleProtocol, Style
from relsteps.platform.process import run as run_process
from relsteps.platform.process import run_silent
from relsteps.steps.errors import StepError, StepErrorKind


def _echo(cmd: list[str]) -> str:
    return "$ " + " ".join(cmd)


class CommandRunner:
    """Runs collaborator commands in the workspace.

    In dry-run mode commands are only echoed and reported as successful.
    """

    def __init__(self, *, workspace_root: Path, console: ConsoleProtocol, dry_run: bool) -> None:
        self.workspace_root = workspace_root
        self.console = console
        self.dry_run = dry_run

    def stream(
        self, cmd: list[str], *, kind: StepErrorKind, message: str
    ) -> Result[None, StepError]:
        """Run a command with its output going straight to the terminal."""
        self.console.print(_echo(cmd), Style.DIM)
        if self.dry_run:
            return Ok(None)

        result = run_silent(cmd, cwd=self.workspace_root)
        if isinstance(result, Err):
            e = result.error
            return Err(StepError(kind=kind, message=message, hint=e.stderr.strip() or str(e)))
        return Ok(None)

    def capture(
        self,
        cmd: list[str],
        *,
        kind: StepErrorKind,
        message: str,
        timeout: float | None = None,
        dry_run_output: str = "",
    ) -> Result[str, StepError]:
        """Run a command and return its stdout."""
        self.console.print(_echo(cmd), Style.DIM)
        if self.dry_run:
            return Ok(dry_run_output)

        result = run_process(cmd, cwd=self.workspace_root, timeout=timeout)
        if isinstance(result, Err):
            e = result.error
            return Err(StepError(kind=kind, message=message, hint=e.stderr.strip() or str(e)))
        return Ok(result.value)
