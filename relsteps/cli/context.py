from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relsteps.core.config import RELEASE_FILE_NAME, ReleaseFile, load_release_file
from relsteps.core.errors import ErrorCode
from relsteps.core.result import Err
from relsteps.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace_root: Path
    release_file: ReleaseFile
    console: ConsoleProtocol


def build_context(*, release_file: Path | None = None) -> CLIContext:
    """Resolve the workspace and load the release file.

    An explicit --file must exist and parse; the implicit release.toml in the
    working directory is optional.
    """
    workspace_root = Path.cwd().resolve()
    console = RichConsole()

    path = release_file if release_file is not None else workspace_root / RELEASE_FILE_NAME
    loaded = ReleaseFile()
    if release_file is not None or path.exists():
        result = load_release_file(path)
        if isinstance(result, Err):
            typer.echo(f"error: {result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        loaded = result.value

    return CLIContext(workspace_root=workspace_root, release_file=loaded, console=console)
