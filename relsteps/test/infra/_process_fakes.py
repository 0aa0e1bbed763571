from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from relsteps.core.result import Err, Ok, Result
from relsteps.infra import shell as shell_mod
from relsteps.infra.shell import CommandRunner
from relsteps.output.console import MockConsole
from relsteps.platform.process import ProcessError


def process_error(cmd: list[str], *, stderr: str = "", returncode: int = 1) -> Err[ProcessError]:
    return Err(ProcessError(command=tuple(cmd), returncode=returncode, stdout="", stderr=stderr))


def _commands() -> list[list[str]]:
    return []


@dataclass
class FakeProcesses:
    """Stands in for run/run_silent; `fail_on` picks commands that fail."""

    outputs: list[str] = field(default_factory=list)
    fail_on: Callable[[list[str]], str | None] = lambda cmd: None
    commands: list[list[str]] = field(default_factory=_commands)

    def run(
        self, cmd: list[str], cwd: Path, env: object = None, *, timeout: float | None = None
    ) -> Result[str, ProcessError]:
        del cwd, env, timeout
        self.commands.append(cmd)
        stderr = self.fail_on(cmd)
        if stderr is not None:
            return process_error(cmd, stderr=stderr)
        return Ok(self.outputs.pop(0) if self.outputs else "")

    def run_silent(
        self, cmd: list[str], cwd: Path, env: object = None
    ) -> Result[None, ProcessError]:
        del cwd, env
        self.commands.append(cmd)
        stderr = self.fail_on(cmd)
        if stderr is not None:
            return process_error(cmd, stderr=stderr)
        return Ok(None)


def patched_runner(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    *,
    dry_run: bool = False,
    fake: FakeProcesses | None = None,
) -> tuple[CommandRunner, MockConsole, FakeProcesses]:
    fake = fake or FakeProcesses()
    monkeypatch.setattr(shell_mod, "run_process", fake.run)
    monkeypatch.setattr(shell_mod, "run_silent", fake.run_silent)
    console = MockConsole()
    return CommandRunner(workspace_root=tmp_path, console=console, dry_run=dry_run), console, fake
